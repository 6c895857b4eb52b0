"""Python interface extraction"""

from typing import List

from ..architecture.models import Module
from .base import LanguageAnalyzer
from .models import InterfaceMember


class PythonAnalyzer(LanguageAnalyzer):
    """Anything not prefixed with an underscore is public"""

    name = "python"
    aliases = ("py", "python3")

    def extract_public_api(self, module: Module) -> List[InterfaceMember]:
        return [
            InterfaceMember(name=fn.name, kind="function", parameters=fn.parameters)
            for fn in module.functions
            if not fn.name.startswith("_")
        ]

    def extract_types(self, module: Module) -> List[InterfaceMember]:
        return [
            InterfaceMember(name=cls.name, kind="class", properties=cls.properties)
            for cls in module.classes
            if not cls.name.startswith("_")
        ]

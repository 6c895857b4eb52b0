"""Java interface extraction"""

from typing import List

from ..architecture.models import Module
from .base import LanguageAnalyzer
from .models import InterfaceMember


class JavaAnalyzer(LanguageAnalyzer):
    """Public methods qualified by class; every class is a type"""

    name = "java"
    aliases = ("kotlin",)

    def extract_public_api(self, module: Module) -> List[InterfaceMember]:
        api = []
        for cls in module.classes:
            for method in cls.methods:
                if method.visibility == "public":
                    api.append(
                        InterfaceMember(
                            name=f"{cls.name}.{method.name}",
                            kind="method",
                            parameters=method.parameters,
                        )
                    )
        return api

    def extract_types(self, module: Module) -> List[InterfaceMember]:
        return [
            InterfaceMember(name=cls.name, kind="class", properties=cls.properties)
            for cls in module.classes
        ]

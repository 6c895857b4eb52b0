"""JavaScript / TypeScript interface extraction"""

from typing import List

from ..architecture.models import Module
from .base import LanguageAnalyzer
from .models import InterfaceMember


class JavaScriptAnalyzer(LanguageAnalyzer):
    """Exports plus public functions; classes become types for TypeScript"""

    name = "javascript"
    aliases = ("js", "node", "nodejs", "typescript", "ts", "jsx", "tsx")

    def extract_public_api(self, module: Module) -> List[InterfaceMember]:
        api = [InterfaceMember(name=exp, kind="export") for exp in module.exports]
        api.extend(self._public_functions(module))
        return api

    def extract_types(self, module: Module) -> List[InterfaceMember]:
        exported = set(module.exports)
        return [
            InterfaceMember(name=cls.name, kind="class", properties=cls.properties)
            for cls in module.classes
            if cls.name in exported
        ]

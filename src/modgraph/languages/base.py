"""Base class for per-language interface extraction."""

import re
from abc import ABC, abstractmethod
from typing import List

from ..architecture.models import Module
from .models import InterfaceMember, ModuleInterface

_CONSTANT_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")


class LanguageAnalyzer(ABC):
    """Extracts a module's public interface for one language family.

    Subclasses set ``name`` and ``aliases`` and implement the two extract
    methods; ``analyze`` assembles the ModuleInterface.
    """

    name: str = ""
    aliases: tuple[str, ...] = ()

    @abstractmethod
    def extract_public_api(self, module: Module) -> List[InterfaceMember]:
        """Functions, methods and exports callable from other modules"""
        pass

    def extract_types(self, module: Module) -> List[InterfaceMember]:
        """Type declarations exposed by the module (none by default)"""
        return []

    def extract_constants(self, module: Module) -> List[str]:
        """UPPER_CASE exported names"""
        seen: list[str] = []
        for name in module.exports:
            if _CONSTANT_RE.match(name) and name not in seen:
                seen.append(name)
        return seen

    def analyze(self, module: Module) -> ModuleInterface:
        return ModuleInterface(
            module_id=module.id,
            module_name=module.name,
            public_api=self.extract_public_api(module),
            types=self.extract_types(module),
            constants=self.extract_constants(module),
        )

    def _public_functions(self, module: Module) -> List[InterfaceMember]:
        return [
            InterfaceMember(name=fn.name, kind="function", parameters=fn.parameters)
            for fn in module.functions
            if fn.visibility == "public"
        ]

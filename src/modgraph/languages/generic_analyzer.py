"""Fallback interface extraction for languages without a dedicated analyzer"""

from typing import List

from ..architecture.models import Module
from .base import LanguageAnalyzer
from .models import InterfaceMember


class GenericAnalyzer(LanguageAnalyzer):
    name = "generic"

    def extract_public_api(self, module: Module) -> List[InterfaceMember]:
        return [
            InterfaceMember(
                name=fn.name, kind="function", visibility=fn.visibility, parameters=fn.parameters
            )
            for fn in module.functions
        ]

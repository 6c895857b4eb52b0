"""Language analyzers for module interface extraction.

Adding a language:
  1. Subclass LanguageAnalyzer with a ``name`` and ``aliases``.
  2. Call register_analyzer(MyAnalyzer()).
Lookup is case-insensitive; unknown languages get the GenericAnalyzer.
"""

from typing import Dict, List, Sequence

from ..architecture.models import Module
from .base import LanguageAnalyzer
from .generic_analyzer import GenericAnalyzer
from .java_analyzer import JavaAnalyzer
from .javascript_analyzer import JavaScriptAnalyzer
from .models import InterfaceMember, ModuleInterface
from .python_analyzer import PythonAnalyzer

_REGISTRY: Dict[str, LanguageAnalyzer] = {}
_FALLBACK = GenericAnalyzer()


def register_analyzer(analyzer: LanguageAnalyzer) -> None:
    """Register an analyzer under its name and every alias."""
    for key in (analyzer.name, *analyzer.aliases):
        _REGISTRY[key.lower()] = analyzer


def get_language_analyzer(language: str) -> LanguageAnalyzer:
    return _REGISTRY.get((language or "").strip().lower(), _FALLBACK)


def supported_languages() -> List[str]:
    return sorted({a.name for a in _REGISTRY.values()})


def extract_interfaces(modules: Sequence[Module], language: str) -> List[ModuleInterface]:
    """Interfaces of every module that exposes something, in module order."""
    analyzer = get_language_analyzer(language)
    interfaces = [analyzer.analyze(module) for module in modules]
    return [iface for iface in interfaces if not iface.is_empty]


for _analyzer in (JavaScriptAnalyzer(), PythonAnalyzer(), JavaAnalyzer()):
    register_analyzer(_analyzer)


__all__ = [
    "LanguageAnalyzer",
    "GenericAnalyzer",
    "JavaScriptAnalyzer",
    "PythonAnalyzer",
    "JavaAnalyzer",
    "InterfaceMember",
    "ModuleInterface",
    "register_analyzer",
    "get_language_analyzer",
    "supported_languages",
    "extract_interfaces",
]

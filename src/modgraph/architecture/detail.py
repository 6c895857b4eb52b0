"""Per-module detail report for a finished analysis.

Look a module up by id, name or path and collect its metrics, quality
indicators, related modules and graph neighborhood.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

from ..config import ScoringConfig
from ..exceptions import ModuleLookupError
from ..graph.models import DependencyEdge
from ..languages.models import ModuleInterface
from ..math import Statistics
from ..report.recommendations import ADD_DOCUMENTATION, ADD_TESTS, REFACTOR
from .metrics import COMPLEXITY_CEILING
from .models import Module

if TYPE_CHECKING:
    from ..analysis.models import AnalysisResult

HIGH_COMPLEXITY = 10
MANY_FILES = 20
LOW_COVERAGE = 50


@dataclass(frozen=True)
class CodeSmell:
    type: str
    severity: str  # warning | info
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "severity": self.severity, "message": self.message}


@dataclass(frozen=True)
class RelatedModule:
    id: str
    name: str
    type: str
    relationship: str  # depends_on | used_by

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "type": self.type, "relationship": self.relationship}


@dataclass
class ModuleDetail:
    module: Module
    maintainability_index: int
    code_smells: list[CodeSmell] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    related_modules: list[RelatedModule] = field(default_factory=list)
    incoming: list[DependencyEdge] = field(default_factory=list)
    outgoing: list[DependencyEdge] = field(default_factory=list)
    interface: Optional[ModuleInterface] = None

    @property
    def metrics(self) -> dict[str, Any]:
        m = self.module
        return {
            "files": m.file_count,
            "functions": len(m.functions),
            "classes": len(m.classes),
            "linesOfCode": m.total_lines,
            "complexity": m.complexity,
            "testCoverage": m.test_coverage,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "module": self.module.to_dict(),
            "metrics": self.metrics,
            "quality": {
                "maintainabilityIndex": self.maintainability_index,
                "codeSmells": [s.to_dict() for s in self.code_smells],
                "recommendations": list(self.recommendations),
            },
            "relatedModules": [r.to_dict() for r in self.related_modules],
            "dependencies": {
                "incoming": [e.to_dict() for e in self.incoming],
                "outgoing": [e.to_dict() for e in self.outgoing],
            },
            "interface": self.interface.to_dict() if self.interface else None,
        }


def find_module(modules: List[Module], key: str) -> Module:
    """Match by id first, then name, then path."""
    for attr in ("id", "name", "path"):
        for module in modules:
            if getattr(module, attr) == key:
                return module
    raise ModuleLookupError(key, [m.name for m in modules])


def module_maintainability(module: Module) -> int:
    """0-100 maintainability of a single module."""
    coverage = min(1.0, module.test_coverage / 100)
    doc = 1.0 if module.documentation.present else 0.5
    complexity_term = max(0.0, (COMPLEXITY_CEILING - module.complexity) / COMPLEXITY_CEILING)
    value = coverage * 0.4 + doc * 0.3 + complexity_term * 0.3
    return int(Statistics.round_half_up(value * 100))


def code_smells(module: Module) -> List[CodeSmell]:
    smells: List[CodeSmell] = []
    if module.complexity > HIGH_COMPLEXITY:
        smells.append(CodeSmell("high_complexity", "warning", "Module complexity is too high"))
    if module.file_count > MANY_FILES:
        smells.append(
            CodeSmell("too_many_files", "info", "Module has many files; consider splitting it")
        )
    if module.test_coverage < LOW_COVERAGE:
        smells.append(CodeSmell("low_test_coverage", "warning", "Test coverage is insufficient"))
    return smells


def module_recommendations(module: Module, scoring: Optional[ScoringConfig] = None) -> List[str]:
    scoring = scoring or ScoringConfig()
    recommendations: List[str] = []
    if module.complexity > scoring.refactor_complexity_threshold:
        recommendations.append(REFACTOR)
    if module.test_coverage < scoring.test_coverage_target:
        recommendations.append(ADD_TESTS)
    if not module.documentation.present:
        recommendations.append(ADD_DOCUMENTATION)
    return recommendations


def module_detail(
    result: "AnalysisResult",
    key: str,
    scoring: Optional[ScoringConfig] = None,
) -> ModuleDetail:
    """Build the detail report for one module of ``result``.

    Args:
        result: A finished analysis
        key: Module id, name or path
        scoring: Thresholds for module recommendations

    Raises:
        ModuleLookupError: If no module matches ``key``
    """
    module = find_module(result.modules, key)
    by_id = {m.id: m for m in result.modules}
    outgoing = result.graph.outgoing(module.id)
    incoming = result.graph.incoming(module.id)

    related: List[RelatedModule] = []
    seen: set[str] = set()
    for edges, attr, relationship in (
        (outgoing, "target", "depends_on"),
        (incoming, "source", "used_by"),
    ):
        for edge in edges:
            other = by_id[getattr(edge, attr)]
            if other.id in seen:
                continue
            seen.add(other.id)
            related.append(RelatedModule(other.id, other.name, other.type.value, relationship))

    interface = next((i for i in result.interfaces if i.module_id == module.id), None)

    return ModuleDetail(
        module=module,
        maintainability_index=module_maintainability(module),
        code_smells=code_smells(module),
        recommendations=module_recommendations(module, scoring),
        related_modules=related,
        incoming=incoming,
        outgoing=outgoing,
        interface=interface,
    )

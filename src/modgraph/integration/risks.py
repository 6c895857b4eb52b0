"""Structural risk analysis: circular dependencies and single points of failure."""

from typing import List, Optional, Sequence

from ..architecture.models import Module
from ..config import ScoringConfig
from ..graph.algorithms import find_cycles
from ..graph.models import DependencyGraph
from ..logging_config import get_logger
from .models import Risk, RiskType, Severity

logger = get_logger(__name__)


def cycle_severity(length: int) -> Severity:
    """Shorter cycles are tighter violations."""
    if length <= 2:
        return Severity.CRITICAL
    if length == 3:
        return Severity.HIGH
    if length <= 5:
        return Severity.MEDIUM
    return Severity.LOW


def circular_dependency_risks(modules: Sequence[Module], graph: DependencyGraph) -> List[Risk]:
    by_id = {m.id: m for m in modules}
    risks: List[Risk] = []
    for cycle in find_cycles(graph.adjacency()):
        members = [by_id[graph.nodes[i].id] for i in cycle]
        names = [m.name for m in members] + [members[0].name]
        risks.append(
            Risk(
                type=RiskType.CIRCULAR_DEPENDENCY,
                severity=cycle_severity(len(cycle)),
                title="Circular dependency",
                description=f"{len(cycle)} modules depend on each other: {' -> '.join(names)}",
                modules=tuple(m.id for m in members),
                path=tuple(names),
                mitigation="Extract the shared contract into a lower-level module "
                "or invert one of the dependencies",
            )
        )
    return risks


def single_point_of_failure_risks(
    modules: Sequence[Module],
    graph: DependencyGraph,
    min_dependents: int = 3,
) -> List[Risk]:
    """Modules that at least ``min_dependents`` and half of all other modules import."""
    risks: List[Risk] = []
    in_degree = graph.in_degree()
    others = len(modules) - 1
    for module in modules:
        dependents = in_degree.get(module.id, 0)
        if dependents < min_dependents or dependents * 2 < others:
            continue
        risks.append(
            Risk(
                type=RiskType.SINGLE_POINT_OF_FAILURE,
                severity=Severity.MEDIUM,
                title="Single point of failure",
                description=f"{module.name} is imported by {dependents} of {others} other modules",
                modules=(module.id,),
                path=(module.name,),
                mitigation="Keep the module's interface small and stable, "
                "or split it by consumer",
            )
        )
    return risks


def analyze_risks(
    modules: Sequence[Module],
    graph: DependencyGraph,
    scoring: Optional[ScoringConfig] = None,
) -> List[Risk]:
    """All structural risks: cycles first (in discovery order), then hubs."""
    scoring = scoring or ScoringConfig()
    risks = circular_dependency_risks(modules, graph)
    risks.extend(single_point_of_failure_risks(modules, graph, scoring.hub_min_dependents))
    if risks:
        logger.debug(f"Found {len(risks)} structural risks")
    return risks

"""Integration point detection.

An edge becomes an integration point when it is strong (strength at or
above the configured threshold) or when the relation classifier says it
crosses an architectural boundary (controller -> service, core -> service,
...). Points are ranked by a complexity that grows with edge strength and
with the complexity of both modules.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..architecture.models import Module, ModuleType
from ..config import ScoringConfig
from ..graph.models import DependencyEdge, DependencyGraph
from ..math import Statistics
from .models import IntegrationPoint, ModuleRef, RelationStatistics

GENERAL_RELATION = "general"

# Ordered: first match wins. None matches any module type.
RELATION_RULES: list[tuple[Optional[ModuleType], Optional[ModuleType], str]] = [
    (ModuleType.CONTROLLER, ModuleType.SERVICE, "controller-service"),
    (ModuleType.CORE, ModuleType.SERVICE, "core-service"),
    (ModuleType.CORE, ModuleType.BUSINESS, "core-business"),
    (ModuleType.BUSINESS, ModuleType.SERVICE, "business-service"),
    (ModuleType.VIEW, ModuleType.CONTROLLER, "view-controller"),
    (ModuleType.SERVICE, ModuleType.MODEL, "service-data"),
    (None, ModuleType.SERVICE, "service-integration"),
    (None, ModuleType.MIDDLEWARE, "middleware-chain"),
]


def classify_relation(source: Module, target: Module) -> str:
    """Name the architectural boundary a dependency crosses, or 'general'."""
    for source_type, target_type, relation in RELATION_RULES:
        if source_type is not None and source.type is not source_type:
            continue
        if target_type is not None and target.type is not target_type:
            continue
        return relation
    return GENERAL_RELATION


def classify_integration(relation_type: str, source: Module, target: Module) -> str:
    names = f"{source.name} {target.name}".lower()
    if "api" in relation_type or "api" in names:
        return "api"
    if "service" in relation_type:
        return "service"
    if "controller" in relation_type or "view" in relation_type:
        return "mvc"
    return "module"


def integration_complexity(
    strength: int, source: Module, target: Module, scale: float = 20.0
) -> float:
    weight = 1 + (source.complexity + target.complexity) / scale
    return Statistics.round_half_up(strength * weight, 2)


def is_integration_point(edge: DependencyEdge, relation_type: str, scoring: ScoringConfig) -> bool:
    return edge.strength >= scoring.strong_edge_threshold or relation_type != GENERAL_RELATION


def _ref(module: Module) -> ModuleRef:
    return ModuleRef(
        module_id=module.id, module_name=module.name, path=module.path, type=module.type.value
    )


def detect_integration_points(
    modules: Sequence[Module],
    graph: DependencyGraph,
    scoring: Optional[ScoringConfig] = None,
) -> List[IntegrationPoint]:
    """Promote significant edges to integration points.

    Returns:
        Points sorted by descending complexity; ties keep edge order.
    """
    scoring = scoring or ScoringConfig()
    by_id: Dict[str, Module] = {m.id: m for m in modules}

    points: List[IntegrationPoint] = []
    for edge in graph.edges:
        source, target = by_id[edge.source], by_id[edge.target]
        relation = classify_relation(source, target)
        if not is_integration_point(edge, relation, scoring):
            continue
        points.append(
            IntegrationPoint(
                id=f"integration_{edge.source}-{edge.target}",
                type=classify_integration(relation, source, target),
                relation_type=relation,
                source=_ref(source),
                target=_ref(target),
                strength=edge.strength,
                complexity=integration_complexity(
                    edge.strength, source, target, scoring.integration_complexity_scale
                ),
                import_path=edge.import_path,
                description=f"{source.name} -> {target.name} ({relation} integration)",
            )
        )

    points.sort(key=lambda p: -p.complexity)
    return points


def relation_statistics(
    modules: Sequence[Module],
    graph: DependencyGraph,
    scoring: Optional[ScoringConfig] = None,
) -> RelationStatistics:
    """Counts of relations per type and by strength band."""
    scoring = scoring or ScoringConfig()
    by_id: Dict[str, Module] = {m.id: m for m in modules}

    types: Counter[str] = Counter()
    for edge in graph.edges:
        types[classify_relation(by_id[edge.source], by_id[edge.target])] += 1

    return RelationStatistics(
        total_relations=graph.edge_count,
        relation_types=dict(types),
        strong_relations=sum(1 for e in graph.edges if e.strength >= scoring.strong_edge_threshold),
        weak_relations=sum(1 for e in graph.edges if e.strength <= scoring.base_edge_strength),
    )

"""Assemble the final AnalysisResult from the pipeline's stage outputs."""

from typing import Dict, List, Sequence

from ..analysis.models import AnalysisResult, ExternalDependency
from ..architecture.models import Metrics, Module
from ..graph.models import DependencyGraph
from ..integration.models import IntegrationPoint, RelationStatistics, Risk
from ..languages.models import ModuleInterface
from ..models import AnalysisInput
from .contract import render_contract


def collect_external_dependencies(
    modules: Sequence[Module], graph: DependencyGraph
) -> List[ExternalDependency]:
    """Group unresolved imports by name, in first-seen module order."""
    names = {m.id: m.name for m in modules}
    users: Dict[str, List[str]] = {}
    for module in modules:
        for imp in graph.unresolved.get(module.id, []):
            bucket = users.setdefault(imp, [])
            if names[module.id] not in bucket:
                bucket.append(names[module.id])
    return [ExternalDependency(name=name, modules=tuple(mods)) for name, mods in users.items()]


def assemble_result(
    snapshot: AnalysisInput,
    modules: Sequence[Module],
    graph: DependencyGraph,
    interfaces: Sequence[ModuleInterface],
    metrics: Metrics,
    integration_points: Sequence[IntegrationPoint],
    relation_stats: RelationStatistics,
    risks: Sequence[Risk],
    recommendations: Sequence[str],
) -> AnalysisResult:
    result = AnalysisResult(
        project_path=snapshot.project_path,
        project_name=snapshot.project_name,
        primary_language=snapshot.primary_language,
        framework=snapshot.framework,
        modules=list(modules),
        graph=graph,
        interfaces=list(interfaces),
        integration_points=list(integration_points),
        relation_stats=relation_stats,
        metrics=metrics,
        risks=list(risks),
        recommendations=list(recommendations),
        external_dependencies=collect_external_dependencies(modules, graph),
    )
    result.contract_document = render_contract(result)
    return result

"""Markdown integration-contract document.

Fixed sections, in order: Overview, Architecture Diagram, Modules,
Relationship Statistics, Integration Points, Risks, Recommendations.
The document carries no timestamps, so identical results render to
identical bytes.
"""

from typing import List

from ..analysis.models import AnalysisResult

SECTION_TITLES = (
    "Overview",
    "Architecture Diagram",
    "Modules",
    "Relationship Statistics",
    "Integration Points",
    "Risks",
    "Recommendations",
)


def _cell(value: object) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def _label(value: str) -> str:
    return value.replace('"', "'")


def _overview(result: AnalysisResult) -> List[str]:
    m = result.metrics
    lines = [
        f"{result.project_name} is a {result.primary_language} project ({result.framework}) "
        f"with {m.total_modules} modules, {m.total_relations} dependency relations and "
        f"{len(result.integration_points)} integration points.",
        "",
        "| Metric | Value |",
        "|---|---|",
        f"| Modules | {m.total_modules} |",
        f"| Files | {m.total_files} |",
        f"| Lines | {m.total_lines} |",
        f"| Relations | {m.total_relations} |",
        f"| Interfaces | {m.total_interfaces} |",
        f"| Cohesion | {m.cohesion:.2f} |",
        f"| Coupling | {m.coupling:.2f} |",
        f"| Maintainability index | {m.maintainability_index:.2f} |",
        f"| Quality score | {m.quality_score}/100 |",
        f"| Complexity score | {m.complexity_score} |",
    ]
    return lines


def _diagram(result: AnalysisResult) -> List[str]:
    if not result.modules:
        return ["_No modules detected._"]
    node_ids = {m.id: f"m{i}" for i, m in enumerate(result.modules)}
    lines = ["```mermaid", "flowchart LR"]
    for module in result.modules:
        lines.append(f'    {node_ids[module.id]}["{_label(module.name)} ({module.type.value})"]')
    for edge in result.graph.edges:
        lines.append(f"    {node_ids[edge.source]} -->|{edge.strength}| {node_ids[edge.target]}")
    lines.append("```")
    return lines


def _modules(result: AnalysisResult) -> List[str]:
    if not result.modules:
        return ["_No modules detected._"]
    lines = [
        "| Module | Type | Files | Complexity | Test coverage | Responsibility |",
        "|---|---|---|---|---|---|",
    ]
    for m in result.modules:
        lines.append(
            f"| {_cell(m.name)} | {m.type.value} | {m.file_count} | {m.complexity:g} | "
            f"{m.test_coverage}% | {_cell(m.responsibility)} |"
        )
    return lines


def _relations(result: AnalysisResult) -> List[str]:
    stats = result.relation_stats
    lines = [
        f"- Total relations: {stats.total_relations}",
        f"- Strong relations: {stats.strong_relations}",
        f"- Weak relations: {stats.weak_relations}",
    ]
    if stats.relation_types:
        by_type = ", ".join(f"{name} ({count})" for name, count in stats.relation_types.items())
        lines.append(f"- By type: {by_type}")
    if result.external_dependencies:
        names = ", ".join(d.name for d in result.external_dependencies)
        lines.append(f"- External dependencies: {names}")
    return lines


def _integration_points(result: AnalysisResult) -> List[str]:
    if not result.integration_points:
        return ["_No integration points detected._"]
    lines = [
        "| # | Source | Target | Type | Relation | Strength | Complexity |",
        "|---|---|---|---|---|---|---|",
    ]
    for i, point in enumerate(result.integration_points, 1):
        lines.append(
            f"| {i} | {_cell(point.source.module_name)} | {_cell(point.target.module_name)} | "
            f"{point.type} | {point.relation_type} | {point.strength} | {point.complexity:g} |"
        )
    return lines


def _risks(result: AnalysisResult) -> List[str]:
    if not result.risks:
        return ["_No structural risks detected._"]
    return [
        f"- **[{risk.severity.value.upper()}] {risk.title}**: {risk.description}. "
        f"Mitigation: {risk.mitigation}."
        for risk in result.risks
    ]


def _recommendations(result: AnalysisResult) -> List[str]:
    if not result.recommendations:
        return ["_No recommendations._"]
    return [f"- {text}" for text in result.recommendations]


def render_contract(result: AnalysisResult) -> str:
    """Render the integration contract for a finished analysis."""
    builders = (
        _overview,
        _diagram,
        _modules,
        _relations,
        _integration_points,
        _risks,
        _recommendations,
    )
    lines = [f"# {result.project_name} - Integration Contract", ""]
    for number, (title, build) in enumerate(zip(SECTION_TITLES, builders), 1):
        lines.append(f"## {number}. {title}")
        lines.append("")
        lines.extend(build(result))
        lines.append("")
    return "\n".join(lines)

"""Rich terminal formatter for modgraph."""

from typing import List, Optional

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..analysis.models import AnalysisResult
from .base import BaseFormatter

_SEVERITY_STYLES = {
    "critical": "red bold",
    "high": "red",
    "medium": "yellow",
    "low": "dim",
}


def _score_style(score: int) -> str:
    if score >= 70:
        return "green"
    elif score >= 40:
        return "yellow"
    else:
        return "red"


class RichFormatter(BaseFormatter):
    """Summary panel, module table, integration points, risks, recommendations."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        for renderable in self._build(result):
            self.console.print(renderable)

    def format(self, result: AnalysisResult) -> str:
        with self.console.capture() as capture:
            self.render(result)
        return capture.get()

    def _build(self, result: AnalysisResult) -> List[RenderableType]:
        parts: List[RenderableType] = [self._summary(result)]
        if result.modules:
            parts.append(self._modules_table(result))
        if result.integration_points:
            parts.append(self._integration_table(result))
        if result.risks:
            parts.append(self._risks_table(result))
        if result.recommendations:
            lines = "\n".join(f"  - {escape(r)}" for r in result.recommendations)
            parts.append(Panel(lines, title="[bold]Recommendations[/bold]", expand=False))
        return parts

    def _summary(self, result: AnalysisResult) -> Panel:
        m = result.metrics
        style = _score_style(m.quality_score)
        body = (
            f"[bold]{escape(result.project_name)}[/bold]  "
            f"{escape(result.primary_language)} / {escape(result.framework)}\n\n"
            f"  Modules: [cyan]{m.total_modules}[/cyan]   Files: {m.total_files}   "
            f"Relations: {m.total_relations}   Interfaces: {m.total_interfaces}\n"
            f"  Cohesion: {m.cohesion:.2f}   Coupling: {m.coupling:.2f}   "
            f"Maintainability: {m.maintainability_index:.2f}\n"
            f"  Quality score: [{style}]{m.quality_score}/100[/{style}]   "
            f"Complexity score: {m.complexity_score}"
        )
        return Panel(body, title="[bold cyan]MODGRAPH[/bold cyan]", expand=False)

    def _modules_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Modules", show_lines=False)
        table.add_column("Module", style="cyan")
        table.add_column("Type")
        table.add_column("Files", justify="right")
        table.add_column("Complexity", justify="right")
        table.add_column("Coverage", justify="right")
        table.add_column("Responsibility")
        for module in result.modules:
            table.add_row(
                escape(module.name),
                module.type.value,
                str(module.file_count),
                f"{module.complexity:g}",
                f"{module.test_coverage}%",
                escape(module.responsibility),
            )
        return table

    def _integration_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Integration Points")
        table.add_column("Source", style="cyan")
        table.add_column("Target", style="cyan")
        table.add_column("Type")
        table.add_column("Relation")
        table.add_column("Strength", justify="right")
        table.add_column("Complexity", justify="right")
        for point in result.integration_points:
            table.add_row(
                escape(point.source.module_name),
                escape(point.target.module_name),
                point.type,
                point.relation_type,
                str(point.strength),
                f"{point.complexity:g}",
            )
        return table

    def _risks_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Risks")
        table.add_column("Severity")
        table.add_column("Risk")
        table.add_column("Path")
        for risk in result.risks:
            severity = risk.severity.value
            style = _SEVERITY_STYLES.get(severity, "")
            table.add_row(
                f"[{style}]{severity}[/{style}]",
                escape(risk.title),
                escape(" -> ".join(risk.path)),
            )
        return table

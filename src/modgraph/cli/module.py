"""Module command: detail report for a single module."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..analysis.engine import AnalysisEngine
from ..architecture.detail import ModuleDetail, module_detail
from ..exceptions import ModGraphError
from ..logging_config import setup_logging
from . import app
from ._common import console, print_error, read_snapshot, resolve_config

DETAIL_FORMATS = ("rich", "json")


@app.command()
def module(
    snapshot: Path = typer.Argument(
        ...,
        help="Workflow-results JSON",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    name: str = typer.Argument(..., help="Module id, name or path"),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich or json",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    module_depth: Optional[int] = typer.Option(
        None,
        "--module-depth",
        "-d",
        help="Directory levels that make up a module",
        min=1,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Show metrics, code smells and neighbors of one module.

    [bold cyan]Examples:[/bold cyan]

      modgraph module snapshot.json auth

      modgraph module snapshot.json src/services --format json
    """
    logger = setup_logging(verbose=verbose, quiet=not verbose)

    try:
        if fmt not in DETAIL_FORMATS:
            raise ValueError(f"Unknown format: {fmt!r}. Choose from: {', '.join(DETAIL_FORMATS)}")
        settings = resolve_config(config=config, module_depth=module_depth)
        result = AnalysisEngine(read_snapshot(snapshot), settings).run()
        detail = module_detail(result, name, settings.scoring)

        if fmt == "json":
            print(json.dumps(detail.to_dict(), indent=2))
        else:
            _output_rich(detail)

    except typer.Exit:
        raise
    except (ModGraphError, ValueError) as e:
        print_error(e)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


def _output_rich(detail: ModuleDetail) -> None:
    m = detail.module
    metrics = detail.metrics
    console.print(
        Panel(
            f"[bold]{escape(m.name)}[/bold] ({m.type.value})  {escape(m.path)}\n"
            f"{escape(m.responsibility)}\n\n"
            f"  Files: {metrics['files']}   Functions: {metrics['functions']}   "
            f"Classes: {metrics['classes']}   Lines: {metrics['linesOfCode']}\n"
            f"  Complexity: {m.complexity:g}   Test coverage: {m.test_coverage}%   "
            f"Maintainability: {detail.maintainability_index}/100",
            title=f"[bold cyan]Module {escape(m.id)}[/bold cyan]",
            expand=False,
        )
    )

    if detail.code_smells:
        console.print("[bold]Code smells[/bold]")
        for smell in detail.code_smells:
            style = "yellow" if smell.severity == "warning" else "dim"
            console.print(f"  [{style}]{smell.type}[/{style}]  {escape(smell.message)}")

    if detail.related_modules:
        table = Table(title="Related Modules")
        table.add_column("Module", style="cyan")
        table.add_column("Type")
        table.add_column("Relationship")
        for related in detail.related_modules:
            table.add_row(escape(related.name), related.type, related.relationship)
        console.print(table)

    if detail.recommendations:
        console.print("[bold]Recommendations[/bold]")
        for text in detail.recommendations:
            console.print(f"  - {escape(text)}")

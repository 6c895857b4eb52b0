"""Analyze command: full module dependency analysis of a snapshot."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis.engine import AnalysisEngine
from ..exceptions import ModGraphError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, print_error, read_snapshot, resolve_config


@app.command()
def analyze(
    snapshot: Path = typer.Argument(
        ...,
        help="Workflow-results JSON (structure, language, files, architecture)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich, json or markdown (the integration contract)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of stdout",
        dir_okay=False,
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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging and status messages",
    ),
):
    """
    Group files into modules and analyze their dependencies.

    [bold cyan]Examples:[/bold cyan]

      modgraph analyze snapshot.json

      modgraph analyze snapshot.json --format json --output result.json

      modgraph analyze snapshot.json --format markdown --module-depth 2
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        formatter = get_formatter(fmt)
        settings = resolve_config(config=config, module_depth=module_depth)
        result = AnalysisEngine(read_snapshot(snapshot), settings).run()

        if output is not None:
            output.write_text(formatter.format(result), encoding="utf-8")
            if not quiet:
                console.print(f"Report written to [green]{output}[/green]")
        else:
            formatter.render(result)

    except typer.Exit:
        raise
    except (ModGraphError, ValueError) as e:
        print_error(e)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="modgraph",
    help="modgraph - Module Dependency & Integration Analysis",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"modgraph {__version__}")
        raise typer.Exit()


@app.callback()
def _callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Analyze module dependencies and integration points of a project snapshot."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .module import module as _module  # noqa: F401, E402


def main() -> None:
    app()

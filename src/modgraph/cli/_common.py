"""Shared CLI helpers."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape

from ..config import AnalysisConfig, load_config
from ..exceptions import AnalysisError

console = Console()


def read_snapshot(path: Path) -> Dict[str, Any]:
    """Load a workflow-results JSON file.

    Raises:
        AnalysisError: If the file is not valid JSON or not an object
    """
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise AnalysisError("Invalid snapshot file", details={"path": str(path), "reason": str(e)})
    if not isinstance(data, dict):
        raise AnalysisError(
            "Invalid snapshot file",
            details={"path": str(path), "reason": "top-level value must be an object"},
        )
    return data


def resolve_config(
    config: Optional[Path] = None,
    module_depth: Optional[int] = None,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if module_depth is not None:
        overrides["module_depth"] = module_depth
    return load_config(config_file=config, **overrides)


def print_error(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")

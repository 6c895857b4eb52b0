"""Public API for modgraph.

Example:
    >>> import json
    >>> from modgraph import analyze
    >>>
    >>> with open("snapshot.json") as fh:
    ...     result = analyze(json.load(fh), module_depth=2)
    >>> result.metrics.quality_score
    64
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .analysis import AnalysisEngine, AnalysisResult
from .config import load_config
from .logging_config import get_logger
from .models import AnalysisInput

logger = get_logger(__name__)


def analyze(
    snapshot: Union[AnalysisInput, Mapping[str, Any]],
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Run the module dependency analysis on one snapshot.

    Args:
        snapshot: Workflow-results mapping (structure, language, files,
            optionally architecture) or an already loaded AnalysisInput
        config_file: Optional explicit TOML config file
        **overrides: Configuration overrides (e.g. module_depth=2)

    Returns:
        The complete AnalysisResult

    Raises:
        MissingPrerequisiteError: If a required data set is absent
        ConfigurationError: If the configuration is invalid
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Configuration loaded: module depth {config.module_depth}")
    return AnalysisEngine(snapshot, config).run()

"""Exception hierarchy for modgraph."""

from .analysis import (
    AnalysisError,
    MalformedRecordError,
    MissingPrerequisiteError,
    ModuleLookupError,
)
from .base import ModGraphError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "ModGraphError",
    "AnalysisError",
    "MissingPrerequisiteError",
    "MalformedRecordError",
    "ModuleLookupError",
    "ConfigurationError",
    "InvalidConfigError",
]

"""Configuration loading and management for modgraph.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.modgraph.toml)
    3. Project config (./modgraph.toml)
    4. Explicit config file
    5. Environment variables (MODGRAPH_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(module_depth=2)
    >>> config.module_depth
    2
    >>> config.scoring.wildcard_import_bonus
    2
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

DEFAULT_IGNORED_DIRECTORIES: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    "coverage",
    "__pycache__",
    "target",
    "bin",
    "obj",
    ".vscode",
    ".idea",
    "logs",
    "tmp",
    "temp",
    ".pytest_cache",
    "packages",
)


@dataclass(frozen=True)
class ScoringConfig:
    """Heuristic constants behind edge strength, metrics and recommendations.

    Attributes:
        Edge strength:
            base_edge_strength: Strength of a plain import edge
            wildcard_import_bonus: Added when the import string contains ``*``
            multi_file_reference_bonus: Added when more than one file of the
                source module imports the target module
            strong_edge_threshold: Edges at or above this are "strong" and
                always promoted to integration points

        Integration points:
            integration_complexity_scale: Divisor applied to the summed module
                complexities when weighting an integration point

        Aggregation and metrics:
            lines_per_complexity_point: Fallback complexity estimate when a
                file carries no complexity score
            cohesion_functions_per_file: Functions per file that count as
                fully cohesive

        Risks:
            hub_min_dependents: Dependents needed before a module is flagged
                as a single point of failure

        Recommendations:
            refactor_complexity_threshold: Average complexity above which a
                refactor is recommended
            test_coverage_target: Coverage percentage below which more tests
                are recommended
            coupling_warning: Coupling above which decoupling is recommended
            cohesion_warning: Cohesion below which regrouping is recommended
    """

    # === Edge strength ===
    base_edge_strength: int = 1
    wildcard_import_bonus: int = 2
    multi_file_reference_bonus: int = 1
    strong_edge_threshold: int = 2

    # === Integration points ===
    integration_complexity_scale: float = 20.0

    # === Aggregation / metrics ===
    lines_per_complexity_point: int = 50
    cohesion_functions_per_file: int = 5

    # === Risks ===
    hub_min_dependents: int = 3

    # === Recommendations ===
    refactor_complexity_threshold: float = 8.0
    test_coverage_target: float = 70.0
    coupling_warning: float = 0.5
    cohesion_warning: float = 0.3

    def __post_init__(self) -> None:
        """Validate scoring configuration."""
        if self.base_edge_strength < 1:
            raise ValueError("base_edge_strength must be at least 1")
        if self.wildcard_import_bonus < 0 or self.multi_file_reference_bonus < 0:
            raise ValueError("strength bonuses must be non-negative")
        if self.strong_edge_threshold < self.base_edge_strength:
            raise ValueError("strong_edge_threshold must be >= base_edge_strength")
        if self.integration_complexity_scale <= 0:
            raise ValueError("integration_complexity_scale must be positive")
        if self.lines_per_complexity_point < 1:
            raise ValueError("lines_per_complexity_point must be at least 1")
        if self.cohesion_functions_per_file < 1:
            raise ValueError("cohesion_functions_per_file must be at least 1")
        if self.hub_min_dependents < 1:
            raise ValueError("hub_min_dependents must be at least 1")
        if not 0.0 <= self.test_coverage_target <= 100.0:
            raise ValueError("test_coverage_target must be between 0 and 100")
        for name in ("coupling_warning", "cohesion_warning"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0")


DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        module_depth: Directory components that make up a module key
            (1 = top-level directory)
        ignored_directories: Directory names never turned into modules
            (matched case-insensitively against every directory component)
        require_architecture: Treat the prior architecture summary as a
            required prerequisite
        scoring: Heuristic constants (nested config)
    """

    module_depth: int = 1
    ignored_directories: tuple[str, ...] = DEFAULT_IGNORED_DIRECTORIES
    require_architecture: bool = False
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def __post_init__(self) -> None:
        if self.module_depth < 1:
            raise ValueError("module_depth must be at least 1")
        # TOML and env values arrive as lists
        if not isinstance(self.ignored_directories, tuple):
            object.__setattr__(self, "ignored_directories", tuple(self.ignored_directories))

    @property
    def ignored_lookup(self) -> frozenset[str]:
        """Lower-cased ignore list for case-insensitive matching."""
        return frozenset(name.lower() for name in self.ignored_directories)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".modgraph.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "modgraph.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    scoring = merged.pop("scoring", None)
    if isinstance(scoring, dict):
        try:
            merged["scoring"] = ScoringConfig(**scoring)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [scoring] config: {e}")
        except ValueError as e:
            raise InvalidConfigError("scoring", scoring, str(e))
    elif isinstance(scoring, ScoringConfig):
        merged["scoring"] = scoring

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("analysis", merged, str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from MODGRAPH_* environment variables.

    Supported environment variables:
        MODGRAPH_MODULE_DEPTH: int
        MODGRAPH_REQUIRE_ARCHITECTURE: bool (true/false/1/0)
        MODGRAPH_IGNORED_DIRECTORIES: comma-separated names

    Returns:
        Dict of field_name -> parsed_value for any MODGRAPH_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)
    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        if field_name == "scoring":
            continue
        env_key = f"MODGRAPH_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if getattr(type_hint, "__origin__", None) is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    return value


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If TOML support is unavailable or parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

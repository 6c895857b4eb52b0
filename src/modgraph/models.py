"""Input data models: the per-file snapshot produced by the upstream scanner.

Everything here is frozen. The engine treats a snapshot as read-only; all
derived structures live in the ``architecture``, ``graph``, ``integration``
and ``analysis`` packages.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class FunctionInfo:
    """A function extracted from a file by the text-pattern scanner."""

    name: str
    parameters: tuple[str, ...] = ()
    visibility: Optional[str] = None  # None = infer from naming convention
    complexity: float = 1.0


@dataclass(frozen=True)
class MethodInfo:
    """A method of an extracted class."""

    name: str
    parameters: tuple[str, ...] = ()
    visibility: str = "public"


@dataclass(frozen=True)
class ClassInfo:
    """A class extracted from a file."""

    name: str
    methods: tuple[MethodInfo, ...] = ()
    properties: tuple[str, ...] = ()


@dataclass(frozen=True)
class FileRecord:
    """Lightweight per-file profile: names, import strings, line counts.

    ``complexity`` is None when the scanner did not compute one; aggregation
    then falls back to a line-based estimate.
    """

    path: str
    category: str = "unknown"
    functions: tuple[FunctionInfo, ...] = ()
    classes: tuple[ClassInfo, ...] = ()
    imports: tuple[str, ...] = ()
    exports: tuple[str, ...] = ()
    lines: int = 0
    complexity: Optional[float] = None
    size: int = 0

    @property
    def directory_parts(self) -> tuple[str, ...]:
        """Directory components of the path (filename excluded)."""
        return tuple(self.path.split("/")[:-1])


@dataclass(frozen=True)
class AnalysisInput:
    """The four upstream data sets the engine runs on.

    A data set that was never produced is ``None``; an empty file list is a
    valid (present) data set.
    """

    project_path: str = ""
    structure: Optional[dict[str, Any]] = None
    language: Optional[dict[str, Any]] = None
    files: Optional[tuple[FileRecord, ...]] = None
    architecture: Optional[dict[str, Any]] = None
    directories: tuple[str, ...] = field(default=())

    def _language_info(self) -> list[dict[str, Any]]:
        """Flat language mapping first, then the detector's nested ``detection`` block."""
        if not self.language:
            return []
        sources = [self.language]
        detection = self.language.get("detection")
        if isinstance(detection, dict):
            sources.append(detection)
        return sources

    @property
    def primary_language(self) -> str:
        for info in self._language_info():
            value = (
                info.get("primaryLanguage")
                or info.get("mainLanguage")
                or info.get("primary_language")
            )
            if value:
                return str(value)
        return "Unknown"

    @property
    def framework(self) -> str:
        for info in self._language_info():
            if info.get("framework"):
                return str(info["framework"])
        return "Generic"

    @property
    def project_name(self) -> str:
        name = self.project_path.rstrip("/\\").replace("\\", "/").split("/")[-1]
        return name or "project"

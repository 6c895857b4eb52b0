"""Snapshot loading: upstream workflow results -> AnalysisInput.

Accepts both the flat record shape::

    {"path": "auth/login.js", "category": "source", "imports": ["db"], "lines": 120}

and the scanner's nested shape::

    {"relativePath": "auth/login.js", "type": "source",
     "analysis": {"imports": ["db"], "metrics": {"lines": 120, "complexity": 4}}}

Missing optional fields are replaced by safe defaults. A record that has no
path at all cannot be repaired; it is logged and skipped.
"""

from __future__ import annotations

import posixpath
from typing import Any, Iterable, Mapping, Optional

from .exceptions import MalformedRecordError
from .logging_config import get_logger
from .models import AnalysisInput, ClassInfo, FileRecord, FunctionInfo, MethodInfo

logger = get_logger(__name__)

PREREQUISITE_KEYS = ("structure", "language", "files", "architecture")


def normalize_path(path: str) -> str:
    """Posix separators, no leading ``./``, no trailing slash."""
    normalized = path.replace("\\", "/").strip()
    if not normalized:
        return ""
    normalized = posixpath.normpath(normalized)
    if normalized == ".":
        return ""
    return normalized.lstrip("/")


def load_snapshot(data: Mapping[str, Any]) -> AnalysisInput:
    """Build an AnalysisInput from a workflow-results mapping.

    Absent data sets stay ``None`` so the engine can name them in a
    MissingPrerequisiteError; nothing is validated here.
    """
    structure = data.get("structure")
    language = data.get("language")
    architecture = data.get("architecture")

    project_path = str(data.get("projectPath") or "")
    if not project_path and isinstance(structure, Mapping):
        project_path = str(structure.get("projectPath") or "")

    raw_files = _unwrap_files(data.get("files"))
    files: Optional[tuple[FileRecord, ...]] = None
    if raw_files is not None:
        files = tuple(_load_records(raw_files))

    directories: tuple[str, ...] = ()
    if isinstance(structure, Mapping):
        directories = tuple(_extract_directories(structure))

    return AnalysisInput(
        project_path=project_path,
        structure=dict(structure) if isinstance(structure, Mapping) else None,
        language=dict(language) if isinstance(language, Mapping) else None,
        files=files,
        architecture=dict(architecture) if isinstance(architecture, Mapping) else None,
        directories=directories,
    )


def _unwrap_files(files: Any) -> Optional[list]:
    if files is None:
        return None
    if isinstance(files, Mapping):
        if "files" in files:
            return _unwrap_files(files["files"])
        if "analysis" in files:
            return _unwrap_files(files["analysis"])
        return None
    return list(files)


def _load_records(raw_files: Iterable[Any]) -> list[FileRecord]:
    records: list[FileRecord] = []
    for index, raw in enumerate(raw_files):
        try:
            records.append(file_record_from_dict(raw, index))
        except MalformedRecordError as e:
            logger.warning("Skipping file record: %s", e)
    return records


def _extract_directories(structure: Mapping[str, Any]) -> list[str]:
    entries = structure.get("directories")
    if entries is None:
        nested = structure.get("projectStructure", {}).get("structure", {})
        entries = nested.get("directories", []) if isinstance(nested, Mapping) else []

    directories: list[str] = []
    for entry in entries or []:
        if isinstance(entry, Mapping):
            entry = entry.get("path") or entry.get("name") or ""
        name = normalize_path(str(entry))
        if name and name not in directories:
            directories.append(name)
    return directories


def file_record_from_dict(raw: Any, index: Optional[int] = None) -> FileRecord:
    """Convert one upstream record to a FileRecord, filling safe defaults.

    Raises:
        MalformedRecordError: If the record is not a mapping or has no path
    """
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(f"expected a mapping, got {type(raw).__name__}", index)

    path = raw.get("path") or raw.get("relativePath")
    if not path:
        raise MalformedRecordError("record has no path", index)

    analysis = raw.get("analysis") if isinstance(raw.get("analysis"), Mapping) else {}
    metrics = raw.get("metrics") or analysis.get("metrics") or {}
    if not isinstance(metrics, Mapping):
        metrics = {}

    def pick(key: str) -> Any:
        value = raw.get(key)
        return value if value is not None else analysis.get(key)

    complexity = raw.get("complexity", metrics.get("complexity"))
    return FileRecord(
        path=normalize_path(str(path)),
        category=str(raw.get("category") or raw.get("type") or analysis.get("type") or "unknown"),
        functions=tuple(_function(f) for f in pick("functions") or () if _has_name(f)),
        classes=tuple(_class(c) for c in pick("classes") or () if _has_name(c)),
        imports=tuple(str(i) for i in pick("imports") or () if i),
        exports=tuple(str(e) for e in pick("exports") or () if e),
        lines=_as_int(raw.get("lines", metrics.get("lines"))),
        complexity=_as_float(complexity),
        size=_as_int(raw.get("size")),
    )


def _has_name(item: Any) -> bool:
    if isinstance(item, Mapping):
        return bool(item.get("name"))
    return bool(item)


def _names(items: Any) -> tuple[str, ...]:
    names = []
    for item in items or ():
        if isinstance(item, Mapping):
            item = item.get("name")
        if item:
            names.append(str(item))
    return tuple(names)


def _function(raw: Any) -> FunctionInfo:
    if not isinstance(raw, Mapping):
        return FunctionInfo(name=str(raw))
    return FunctionInfo(
        name=str(raw["name"]),
        parameters=_names(raw.get("parameters") or raw.get("params")),
        visibility=raw.get("visibility"),
        complexity=_as_float(raw.get("complexity")) or 1.0,
    )


def _class(raw: Any) -> ClassInfo:
    if not isinstance(raw, Mapping):
        return ClassInfo(name=str(raw))
    methods = []
    for method in raw.get("methods") or ():
        if isinstance(method, Mapping) and method.get("name"):
            methods.append(
                MethodInfo(
                    name=str(method["name"]),
                    parameters=_names(method.get("parameters") or method.get("params")),
                    visibility=str(method.get("visibility") or "public"),
                )
            )
        elif method and not isinstance(method, Mapping):
            methods.append(MethodInfo(name=str(method)))
    return ClassInfo(
        name=str(raw["name"]),
        methods=tuple(methods),
        properties=_names(raw.get("properties")),
    )


def _as_int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None

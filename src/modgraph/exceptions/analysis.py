"""Analysis-related exceptions: prerequisites, input records, lookups."""

from typing import List, Optional

from .base import ModGraphError


class AnalysisError(ModGraphError):
    """Base class for analysis-related errors."""
    pass


class MissingPrerequisiteError(AnalysisError):
    """Raised when a required input data set is absent from the snapshot.

    Fatal: the pipeline aborts and the message is surfaced to the caller as-is.
    """

    def __init__(self, missing: List[str]):
        super().__init__(f"Missing prerequisite: {', '.join(missing)}")
        self.missing = list(missing)

    def __str__(self) -> str:
        return self.message


class MalformedRecordError(AnalysisError):
    """Raised when a file record cannot be turned into a FileRecord."""

    def __init__(self, reason: str, record_index: Optional[int] = None):
        details = {"reason": reason}
        if record_index is not None:
            details["index"] = str(record_index)
        super().__init__("Malformed file record", details=details)
        self.reason = reason
        self.record_index = record_index


class ModuleLookupError(AnalysisError):
    """Raised when a module id, name or path matches nothing in a result."""

    def __init__(self, key: str, available: List[str]):
        super().__init__(
            f"Module not found: {key}",
            details={"available": ", ".join(available) or "none"},
        )
        self.key = key
        self.available = available

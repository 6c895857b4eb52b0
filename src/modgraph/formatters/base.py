"""Base formatter interface for modgraph output rendering."""

from abc import ABC, abstractmethod

from ..analysis.models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult) -> None:
        """Render the result to stdout."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return the formatted result as a string."""

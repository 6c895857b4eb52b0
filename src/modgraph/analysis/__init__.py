"""Analysis pipeline and its result model."""

from .engine import AnalysisEngine, check_prerequisites
from .models import AnalysisResult, ExternalDependency

__all__ = ["AnalysisEngine", "AnalysisResult", "ExternalDependency", "check_prerequisites"]

"""
modgraph - Module Dependency & Integration Analysis

Groups the files of a project snapshot into logical modules, builds a
weighted dependency graph between them, scores its structure, finds
integration points and structural risks, and writes an integration
contract in Markdown.
"""

__version__ = "0.1.0"

from .analysis import AnalysisEngine, AnalysisResult
from .api import analyze
from .architecture.detail import ModuleDetail, module_detail
from .config import AnalysisConfig, ScoringConfig, load_config
from .records import load_snapshot

__all__ = [
    "analyze",  # Main entry point
    "AnalysisEngine",
    "AnalysisResult",
    "AnalysisConfig",
    "ScoringConfig",
    "ModuleDetail",
    "load_config",
    "load_snapshot",
    "module_detail",
]

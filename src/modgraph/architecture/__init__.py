"""Architecture analysis: module identification, feature aggregation, metrics."""

from .aggregation import aggregate_features, infer_visibility
from .metrics import compute_metrics
from .models import Documentation, Metrics, Module, ModuleClass, ModuleFunction, ModuleType
from .modules import identify_modules, module_id

__all__ = [
    "Documentation",
    "Metrics",
    "Module",
    "ModuleClass",
    "ModuleFunction",
    "ModuleType",
    "aggregate_features",
    "compute_metrics",
    "identify_modules",
    "infer_visibility",
    "module_id",
]

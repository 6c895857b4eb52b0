"""Integration analysis: integration points and structural risks."""

from .models import IntegrationPoint, ModuleRef, RelationStatistics, Risk, RiskType, Severity
from .points import classify_relation, detect_integration_points, relation_statistics
from .risks import analyze_risks

__all__ = [
    "IntegrationPoint",
    "ModuleRef",
    "RelationStatistics",
    "Risk",
    "RiskType",
    "Severity",
    "analyze_risks",
    "classify_relation",
    "detect_integration_points",
    "relation_statistics",
]

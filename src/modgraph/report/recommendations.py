"""Recommendations derived from metrics alone.

Pure and deterministic: the same Metrics and ScoringConfig always produce
the same list in the same order.
"""

from typing import List, Optional

from ..architecture.models import Metrics
from ..config import ScoringConfig

REFACTOR = "Refactor complex modules: split large functions and reduce branching to improve readability"
ADD_TESTS = "Add unit tests to raise the estimated test coverage"
ADD_DOCUMENTATION = "Add module documentation (README or doc comments) to improve maintainability"
REDUCE_COUPLING = "Reduce inter-module coupling: depend on narrow interfaces instead of concrete modules"
IMPROVE_COHESION = "Regroup related functionality so each module has a single, focused responsibility"


def generate_recommendations(metrics: Metrics, scoring: Optional[ScoringConfig] = None) -> List[str]:
    """Improvement suggestions for an analysis; empty for an empty project."""
    scoring = scoring or ScoringConfig()
    if metrics.total_modules == 0:
        return []

    recommendations: List[str] = []
    if metrics.avg_complexity > scoring.refactor_complexity_threshold:
        recommendations.append(REFACTOR)
    if metrics.avg_test_coverage < scoring.test_coverage_target:
        recommendations.append(ADD_TESTS)
    if metrics.documentation_ratio < 1.0:
        recommendations.append(ADD_DOCUMENTATION)
    if metrics.coupling > scoring.coupling_warning:
        recommendations.append(REDUCE_COUPLING)
    if metrics.cohesion < scoring.cohesion_warning:
        recommendations.append(IMPROVE_COHESION)
    return recommendations

"""Structural-quality metrics over the module set and its dependency graph.

- Coupling (C): edges / (n * (n - 1)), 0 when n <= 1
- Cohesion (H): mean over modules of min(1, functions / max(1, files) / 5)
- Maintainability index: H*0.4 + (1 - C)*0.3 + ((10 - avgComplexity) / 10)*0.3,
  clamped to [0, 1] and rounded to 2 decimals
- Quality score: 100 * (complexity term*0.3 + coverage term*0.4 +
  interface term*0.3), in [0, 100]; coverage above 100% counts as 100%
- Complexity score: avgComplexity + edges / n

Every ratio special-cases a zero denominator; an empty module set yields
all-zero metrics.
"""

from typing import Optional, Sequence

from ..config import ScoringConfig
from ..graph.models import DependencyGraph
from ..math import Statistics
from .models import Metrics, Module

COMPLEXITY_CEILING = 10.0


def compute_coupling(module_count: int, edge_count: int) -> float:
    """Share of possible directed module pairs that have an edge."""
    possible = module_count * (module_count - 1)
    return Statistics.round_half_up(Statistics.ratio(edge_count, possible), 2)


def module_cohesion(module: Module, functions_per_file: int = 5) -> float:
    """Function density of one module, normalized to [0, 1]."""
    per_file = len(module.functions) / max(1, module.file_count)
    return min(1.0, per_file / functions_per_file)


def compute_cohesion(modules: Sequence[Module], functions_per_file: int = 5) -> float:
    if not modules:
        return 0.0
    values = [module_cohesion(m, functions_per_file) for m in modules]
    return Statistics.round_half_up(Statistics.mean(values), 2)


def compute_maintainability_index(cohesion: float, coupling: float, avg_complexity: float) -> float:
    complexity_term = (COMPLEXITY_CEILING - avg_complexity) / COMPLEXITY_CEILING
    value = cohesion * 0.4 + (1 - coupling) * 0.3 + complexity_term * 0.3
    return Statistics.round_half_up(Statistics.clamp(value), 2)


def compute_quality_score(
    avg_complexity: float,
    avg_test_coverage: float,
    interface_count: int,
    module_count: int,
) -> int:
    """Composite 0-100 score; 0 for an empty module set."""
    if module_count == 0:
        return 0
    complexity_term = max(0.0, COMPLEXITY_CEILING - avg_complexity) / COMPLEXITY_CEILING
    coverage_term = min(1.0, avg_test_coverage / 100)
    interface_term = min(1.0, Statistics.ratio(interface_count, module_count))
    score = (complexity_term * 0.3 + coverage_term * 0.4 + interface_term * 0.3) * 100
    return int(Statistics.round_half_up(score))


def compute_complexity_score(avg_complexity: float, edge_count: int, module_count: int) -> float:
    if module_count == 0:
        return 0.0
    return Statistics.round_half_up(avg_complexity + Statistics.ratio(edge_count, module_count), 1)


def compute_metrics(
    modules: Sequence[Module],
    graph: DependencyGraph,
    interface_count: int = 0,
    scoring: Optional[ScoringConfig] = None,
) -> Metrics:
    """Compute every analysis-level metric.

    Args:
        modules: Aggregated modules of the run
        graph: Dependency graph over those modules
        interface_count: Number of modules exposing a public interface
        scoring: Heuristic constants

    Returns:
        Metrics; all ratios are 0 for an empty module set
    """
    scoring = scoring or ScoringConfig()
    n = len(modules)
    edges = graph.edge_count

    if n == 0:
        return Metrics(total_relations=edges, total_interfaces=interface_count)

    avg_complexity = Statistics.mean([m.complexity for m in modules])
    avg_test_coverage = Statistics.mean([m.test_coverage for m in modules])
    cohesion = compute_cohesion(modules, scoring.cohesion_functions_per_file)
    coupling = compute_coupling(n, edges)
    documented = sum(1 for m in modules if m.documentation.present)

    return Metrics(
        total_modules=n,
        total_relations=edges,
        total_files=sum(m.file_count for m in modules),
        total_lines=sum(m.total_lines for m in modules),
        total_functions=sum(len(m.functions) for m in modules),
        total_classes=sum(len(m.classes) for m in modules),
        total_interfaces=interface_count,
        cohesion=cohesion,
        coupling=coupling,
        maintainability_index=compute_maintainability_index(cohesion, coupling, avg_complexity),
        quality_score=compute_quality_score(avg_complexity, avg_test_coverage, interface_count, n),
        complexity_score=compute_complexity_score(avg_complexity, edges, n),
        avg_complexity=Statistics.round_half_up(avg_complexity, 2),
        avg_test_coverage=Statistics.round_half_up(avg_test_coverage, 2),
        documentation_ratio=Statistics.round_half_up(Statistics.ratio(documented, n), 2),
    )

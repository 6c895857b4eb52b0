"""Analysis engine: runs the module dependency pipeline over one snapshot."""

from typing import Any, List, Mapping, Optional, Union

from ..architecture import aggregate_features, compute_metrics, identify_modules
from ..config import AnalysisConfig
from ..exceptions import MissingPrerequisiteError
from ..graph.builder import build_dependency_graph
from ..integration import analyze_risks, detect_integration_points, relation_statistics
from ..languages import extract_interfaces
from ..logging_config import get_logger
from ..models import AnalysisInput
from ..records import load_snapshot
from ..report import assemble_result, generate_recommendations
from .models import AnalysisResult

logger = get_logger(__name__)


def check_prerequisites(snapshot: AnalysisInput, require_architecture: bool = False) -> None:
    """Raise one MissingPrerequisiteError naming every absent data set."""
    missing: List[str] = []
    if snapshot.structure is None:
        missing.append("structure")
    if snapshot.language is None:
        missing.append("language")
    if snapshot.files is None:
        missing.append("files")
    if require_architecture and snapshot.architecture is None:
        missing.append("architecture")
    if missing:
        raise MissingPrerequisiteError(missing)


class AnalysisEngine:
    """Executes the full pipeline on a snapshot.

    Load -> prerequisites -> identify -> aggregate -> interfaces -> graph ->
    metrics -> integration points -> risks -> recommendations -> contract.
    Every stage is a pure function of the previous stages' output, so the
    same snapshot and configuration always produce the same result.
    """

    def __init__(
        self,
        snapshot: Union[AnalysisInput, Mapping[str, Any]],
        config: Optional[AnalysisConfig] = None,
    ):
        """Initialize the engine.

        Args:
            snapshot: An AnalysisInput or a raw workflow-results mapping
            config: Analysis configuration (defaults when omitted)
        """
        if not isinstance(snapshot, AnalysisInput):
            snapshot = load_snapshot(snapshot)
        self.snapshot = snapshot
        self.config = config or AnalysisConfig()

    def run(self) -> AnalysisResult:
        """Run every stage and return the assembled result.

        Raises:
            MissingPrerequisiteError: If a required upstream data set is absent
        """
        check_prerequisites(self.snapshot, self.config.require_architecture)
        scoring = self.config.scoring
        language = self.snapshot.primary_language

        logger.info(
            f"Analyzing {self.snapshot.project_name}: {len(self.snapshot.files)} files "
            f"({language})"
        )

        modules = identify_modules(self.snapshot.files, self.snapshot.directories, self.config)
        for module in modules:
            aggregate_features(module, scoring)
        logger.debug(f"Identified {len(modules)} modules")

        interfaces = extract_interfaces(modules, language)
        logger.debug(f"Extracted {len(interfaces)} module interfaces")

        graph = build_dependency_graph(modules, scoring)
        metrics = compute_metrics(modules, graph, len(interfaces), scoring)

        points = detect_integration_points(modules, graph, scoring)
        stats = relation_statistics(modules, graph, scoring)
        risks = analyze_risks(modules, graph, scoring)
        logger.debug(f"Found {len(points)} integration points and {len(risks)} risks")

        recommendations = generate_recommendations(metrics, scoring)

        result = assemble_result(
            self.snapshot,
            modules,
            graph,
            interfaces,
            metrics,
            points,
            stats,
            risks,
            recommendations,
        )
        logger.info(
            f"Analysis complete: {metrics.total_modules} modules, "
            f"{metrics.total_relations} relations, quality score {metrics.quality_score}"
        )
        return result

"""Top-level analysis result."""

import json
from dataclasses import dataclass, field
from typing import Any

from ..architecture.models import Metrics, Module
from ..graph.models import DependencyGraph
from ..integration.models import IntegrationPoint, RelationStatistics, Risk
from ..languages.models import ModuleInterface


@dataclass(frozen=True)
class ExternalDependency:
    """An import that matched no module, and the modules that use it."""

    name: str
    modules: tuple[str, ...] = ()  # module names

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "modules": list(self.modules)}


@dataclass
class AnalysisResult:
    """Everything one pipeline run produces. Complete or not returned at all."""

    project_path: str
    project_name: str
    primary_language: str
    framework: str
    modules: list[Module] = field(default_factory=list)
    graph: DependencyGraph = field(default_factory=DependencyGraph)
    interfaces: list[ModuleInterface] = field(default_factory=list)
    integration_points: list[IntegrationPoint] = field(default_factory=list)
    relation_stats: RelationStatistics = field(default_factory=RelationStatistics)
    metrics: Metrics = field(default_factory=Metrics)
    risks: list[Risk] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    external_dependencies: list[ExternalDependency] = field(default_factory=list)
    contract_document: str = ""

    @property
    def summary(self) -> dict[str, Any]:
        return {
            "totalModules": self.metrics.total_modules,
            "totalDependencies": self.graph.edge_count,
            "totalInterfaces": len(self.interfaces),
            "integrationPoints": len(self.integration_points),
            "risks": len(self.risks),
            "externalDependencies": len(self.external_dependencies),
            "complexityScore": self.metrics.complexity_score,
            "mainLanguage": self.primary_language,
            "framework": self.framework,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "projectPath": self.project_path,
            "projectName": self.project_name,
            "primaryLanguage": self.primary_language,
            "framework": self.framework,
            "modules": [m.to_dict() for m in self.modules],
            "dependencies": self.graph.to_dict(),
            "interfaces": [i.to_dict() for i in self.interfaces],
            "integrationPoints": [p.to_dict() for p in self.integration_points],
            "relationStatistics": self.relation_stats.to_dict(),
            "metrics": self.metrics.to_dict(),
            "risks": [r.to_dict() for r in self.risks],
            "recommendations": list(self.recommendations),
            "externalDependencies": [d.to_dict() for d in self.external_dependencies],
            "contractDocument": self.contract_document,
            "summary": self.summary,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

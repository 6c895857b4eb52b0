"""Integration models: relations, integration points and structural risks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RiskType(Enum):
    CIRCULAR_DEPENDENCY = "circular_dependency"
    SINGLE_POINT_OF_FAILURE = "single_point_of_failure"


class Severity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ModuleRef:
    """Lightweight pointer to a module inside a derived record."""

    module_id: str
    module_name: str
    path: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "moduleId": self.module_id,
            "moduleName": self.module_name,
            "path": self.path,
            "type": self.type,
        }


@dataclass(frozen=True)
class IntegrationPoint:
    """A dependency edge judged architecturally significant."""

    id: str
    type: str  # api | service | mvc | module
    relation_type: str
    source: ModuleRef
    target: ModuleRef
    strength: int
    complexity: float
    import_path: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "relationType": self.relation_type,
            "source": self.source.to_dict(),
            "target": self.target.to_dict(),
            "strength": self.strength,
            "complexity": self.complexity,
            "importPath": self.import_path,
            "description": self.description,
        }


@dataclass
class RelationStatistics:
    total_relations: int = 0
    relation_types: dict[str, int] = field(default_factory=dict)
    strong_relations: int = 0
    weak_relations: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalRelations": self.total_relations,
            "relationTypes": dict(self.relation_types),
            "strongRelations": self.strong_relations,
            "weakRelations": self.weak_relations,
        }


@dataclass(frozen=True)
class Risk:
    """A structural risk found in the module graph.

    ``path`` lists module names along the risk; for cycles it is closed by
    repeating the first module (a -> b -> a).
    """

    type: RiskType
    severity: Severity
    title: str
    description: str
    modules: tuple[str, ...] = ()  # module ids
    path: tuple[str, ...] = ()  # module names
    mitigation: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "modules": list(self.modules),
            "path": list(self.path),
            "mitigation": self.mitigation,
        }

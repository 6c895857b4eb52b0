"""Architecture models: modules and their aggregated features.

A Module is created by the identifier, filled in once by the feature
aggregator, and read-only afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models import FileRecord


class ModuleType(Enum):
    """Architectural role inferred from a module's directory name."""

    CORE = "core"
    SERVICE = "service"
    UTILITY = "utility"
    MODEL = "model"
    VIEW = "view"
    CONTROLLER = "controller"
    MIDDLEWARE = "middleware"
    TEST = "test"
    CONFIG = "config"
    BUSINESS = "business"
    ROOT = "root"


@dataclass(frozen=True)
class ModuleFunction:
    name: str
    file: str
    visibility: str  # public | private | test
    parameters: tuple[str, ...] = ()
    complexity: float = 1.0


@dataclass(frozen=True)
class ModuleClass:
    name: str
    file: str
    methods: tuple[Any, ...] = ()  # MethodInfo
    properties: tuple[str, ...] = ()


@dataclass(frozen=True)
class Documentation:
    """Documentation presence for a module."""

    has_readme: bool = False
    doc_files: int = 0

    @property
    def present(self) -> bool:
        return self.doc_files > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasReadme": self.has_readme,
            "docFiles": self.doc_files,
            "coverage": "good" if self.present else "poor",
        }


@dataclass
class Module:
    """A logical grouping of files (usually one directory).

    ``id`` is derived from the root path, so repeated runs over the same
    snapshot produce the same ids.
    """

    id: str
    name: str
    path: str
    type: ModuleType
    files: list[FileRecord] = field(default_factory=list)
    responsibility: str = ""

    # Filled by the feature aggregator
    functions: list[ModuleFunction] = field(default_factory=list)
    classes: list[ModuleClass] = field(default_factory=list)
    exports: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    file_imports: dict[str, tuple[str, ...]] = field(default_factory=dict)
    complexity: float = 1
    test_coverage: int = 0
    documentation: Documentation = field(default_factory=Documentation)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def total_lines(self) -> int:
        return sum(f.lines for f in self.files)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "path": self.path,
            "type": self.type.value,
            "files": [
                {"path": f.path, "type": f.category, "size": f.size, "lines": f.lines}
                for f in self.files
            ],
            "functions": [
                {
                    "name": fn.name,
                    "file": fn.file,
                    "visibility": fn.visibility,
                    "parameters": list(fn.parameters),
                    "complexity": fn.complexity,
                }
                for fn in self.functions
            ],
            "classes": [
                {
                    "name": cls.name,
                    "file": cls.file,
                    "methods": [m.name for m in cls.methods],
                    "properties": list(cls.properties),
                }
                for cls in self.classes
            ],
            "exports": list(self.exports),
            "imports": list(self.imports),
            "responsibility": self.responsibility,
            "complexity": self.complexity,
            "testCoverage": self.test_coverage,
            "documentation": self.documentation.to_dict(),
        }


@dataclass(frozen=True)
class Metrics:
    """Analysis-level structural metrics. Recomputed in full on every run."""

    total_modules: int = 0
    total_relations: int = 0
    total_files: int = 0
    total_lines: int = 0
    total_functions: int = 0
    total_classes: int = 0
    total_interfaces: int = 0
    cohesion: float = 0.0  # [0, 1]
    coupling: float = 0.0  # [0, 1]
    maintainability_index: float = 0.0  # [0, 1]
    quality_score: int = 0  # [0, 100]
    complexity_score: float = 0.0
    avg_complexity: float = 0.0
    avg_test_coverage: float = 0.0  # percentage
    documentation_ratio: float = 0.0  # documented modules / modules

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalModules": self.total_modules,
            "totalRelations": self.total_relations,
            "totalFiles": self.total_files,
            "totalLines": self.total_lines,
            "totalFunctions": self.total_functions,
            "totalClasses": self.total_classes,
            "totalInterfaces": self.total_interfaces,
            "cohesion": self.cohesion,
            "coupling": self.coupling,
            "maintainabilityIndex": self.maintainability_index,
            "qualityScore": self.quality_score,
            "complexityScore": self.complexity_score,
            "avgComplexity": self.avg_complexity,
            "avgTestCoverage": self.avg_test_coverage,
            "documentationRatio": self.documentation_ratio,
        }

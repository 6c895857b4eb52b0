"""Feature aggregation: roll per-file features up to their module.

Computes per module:
- functions (with inferred visibility), classes, exports
- imports, de-duplicated in first-seen order, plus the per-file import map
- complexity: sum of file scores, line-based fallback, floored at 1
- test coverage estimate: test files / source files, as a percentage
- documentation presence
"""

import math
from typing import Optional

from ..config import ScoringConfig
from ..math import Statistics
from ..models import FileRecord
from .models import Documentation, Module, ModuleClass, ModuleFunction

TEST_MARKERS = ("test", "spec")
DOC_MARKERS = ("readme", "doc")


def infer_visibility(name: str) -> str:
    """Visibility from naming convention: private, test or public."""
    if name.startswith("_") or name.startswith("#"):
        return "private"
    if "test" in name.lower():
        return "test"
    return "public"


def is_test_file(record: FileRecord) -> bool:
    path = record.path.lower()
    return record.category == "test" or any(marker in path for marker in TEST_MARKERS)


def is_source_file(record: FileRecord) -> bool:
    return record.category == "source"


def file_complexity(record: FileRecord, lines_per_point: int) -> float:
    """The scanner's score if it has one, else one point per N lines."""
    if record.complexity:
        return record.complexity
    return math.ceil(record.lines / lines_per_point)


def estimate_test_coverage(files: list[FileRecord]) -> int:
    """Rounded percentage of test files per source file; 0 without sources."""
    source_count = sum(1 for f in files if is_source_file(f))
    if source_count == 0:
        return 0
    test_count = sum(1 for f in files if is_test_file(f))
    return int(Statistics.round_half_up(test_count / source_count * 100))


def analyze_documentation(files: list[FileRecord]) -> Documentation:
    doc_files = [
        f for f in files
        if f.path.lower().endswith(".md") or any(m in f.path.lower() for m in DOC_MARKERS)
    ]
    return Documentation(
        has_readme=any("readme" in f.path.lower() for f in doc_files),
        doc_files=len(doc_files),
    )


def aggregate_features(module: Module, scoring: Optional[ScoringConfig] = None) -> Module:
    """Fill a module's aggregate fields from its files (in place).

    Returns the module for chaining.
    """
    scoring = scoring or ScoringConfig()

    functions: list[ModuleFunction] = []
    classes: list[ModuleClass] = []
    exports: list[str] = []
    imports: list[str] = []
    seen_imports: set[str] = set()
    complexity = 0.0

    for record in module.files:
        for fn in record.functions:
            functions.append(
                ModuleFunction(
                    name=fn.name,
                    file=record.path,
                    visibility=fn.visibility or infer_visibility(fn.name),
                    parameters=fn.parameters,
                    complexity=fn.complexity,
                )
            )
        for cls in record.classes:
            classes.append(
                ModuleClass(
                    name=cls.name,
                    file=record.path,
                    methods=cls.methods,
                    properties=cls.properties,
                )
            )
        exports.extend(record.exports)
        for imp in record.imports:
            if imp not in seen_imports:
                seen_imports.add(imp)
                imports.append(imp)
        module.file_imports[record.path] = record.imports
        complexity += file_complexity(record, scoring.lines_per_complexity_point)

    module.functions = functions
    module.classes = classes
    module.exports = exports
    module.imports = imports
    module.complexity = max(1, complexity)
    module.test_coverage = estimate_test_coverage(module.files)
    module.documentation = analyze_documentation(module.files)
    return module

"""Build the module dependency graph from aggregated import strings.

Resolution order for one import string:
1. Relative (``./`` or ``../``): normalize, drop leading ``..`` segments, then
   match a module whose path components appear in the import, else a module
   owning a file at the normalized fragment (whole path components, extension
   ignored). For ``./`` imports the importing module's own files are tried
   first, so local imports resolve to itself; ``../`` imports never do.
2. Otherwise: exact module-name match, then substring containment.

The synthetic root module is only reachable through its file paths.
"""

from __future__ import annotations

import posixpath
from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..architecture.models import Module
from ..architecture.modules import ROOT_MODULE_PATH
from ..config import ScoringConfig
from ..logging_config import get_logger
from .models import DependencyEdge, DependencyGraph, GraphNode

logger = get_logger(__name__)

WILDCARD_MARKER = "*"


def is_relative_import(import_path: str) -> bool:
    return import_path.startswith("./") or import_path.startswith("../")


def relative_fragment(import_path: str) -> str:
    """``../db/./models`` -> ``db/models``; empty if nothing is left."""
    parts = posixpath.normpath(import_path.replace("\\", "/")).split("/")
    while parts and parts[0] in ("..", "."):
        parts.pop(0)
    return "/".join(parts)


def _contains_run(haystack: List[str], needle: List[str]) -> bool:
    n = len(needle)
    return any(haystack[i : i + n] == needle for i in range(len(haystack) - n + 1))


def _path_parts(path: str) -> List[str]:
    """Path components with the extension dropped from the last one."""
    parts = path.split("/")
    parts[-1] = posixpath.splitext(parts[-1])[0]
    return parts


def _owns_fragment(module: Module, fragment: str) -> bool:
    """True if a file of ``module`` sits at ``fragment`` (matched on whole components)."""
    needle = _path_parts(fragment)
    return any(_contains_run(_path_parts(record.path), needle) for record in module.files)


def resolve_import(
    import_path: str,
    modules: Sequence[Module],
    source: Optional[Module] = None,
) -> Optional[Module]:
    """Find the module an import string refers to, or None if external."""
    candidates = [m for m in modules if m.path != ROOT_MODULE_PATH]

    if is_relative_import(import_path):
        fragment = relative_fragment(import_path)
        if not fragment:
            return None
        if source is not None and import_path.startswith("./") and _owns_fragment(source, fragment):
            return source
        parts = fragment.split("/")
        for module in candidates:
            if _contains_run(parts, module.path.split("/")):
                return module
        for module in modules:
            if _owns_fragment(module, fragment):
                return module
        return None

    for module in candidates:
        if module.name == import_path:
            return module
    for module in candidates:
        if module.name in import_path:
            return module
    return None


def edge_strength(import_path: str, referencing_files: int, scoring: ScoringConfig) -> int:
    """Base strength plus wildcard and multi-file bonuses."""
    strength = scoring.base_edge_strength
    if WILDCARD_MARKER in import_path:
        strength += scoring.wildcard_import_bonus
    if referencing_files > 1:
        strength += scoring.multi_file_reference_bonus
    return strength


def collapse_edges(edges: Sequence[DependencyEdge]) -> List[DependencyEdge]:
    """Merge edges with the same (source, target) into the first occurrence.

    The merged edge keeps the highest strength seen (and that edge's import
    path) and counts every raw import it absorbed.
    """
    kept: Dict[tuple[str, str], DependencyEdge] = {}
    for edge in edges:
        key = (edge.source, edge.target)
        existing = kept.get(key)
        if existing is None:
            kept[key] = DependencyEdge(
                source=edge.source,
                target=edge.target,
                import_path=edge.import_path,
                strength=edge.strength,
                type=edge.type,
                import_count=edge.import_count,
            )
            continue
        existing.import_count += edge.import_count
        if edge.strength > existing.strength:
            existing.strength = edge.strength
            existing.import_path = edge.import_path
    return list(kept.values())


def build_dependency_graph(
    modules: Sequence[Module],
    scoring: Optional[ScoringConfig] = None,
) -> DependencyGraph:
    """Resolve every module's imports into weighted, de-duplicated edges.

    Returns:
        DependencyGraph whose edges are sorted by descending strength; ties
        keep insertion order (module order, then import order).
    """
    scoring = scoring or ScoringConfig()
    graph = DependencyGraph(
        nodes=[GraphNode(id=m.id, name=m.name, type=m.type.value) for m in modules]
    )

    raw_edges: List[DependencyEdge] = []
    for module in modules:
        resolved = {imp: resolve_import(imp, modules, source=module) for imp in module.imports}

        # How many of this module's files import each target
        referencing: Counter[str] = Counter()
        for file_imports in module.file_imports.values():
            targets = {resolved[imp].id for imp in file_imports if resolved.get(imp) is not None}
            referencing.update(targets)

        for imp in module.imports:
            target = resolved[imp]
            if target is None:
                graph.unresolved.setdefault(module.id, []).append(imp)
                continue
            if target.id == module.id:
                continue
            raw_edges.append(
                DependencyEdge(
                    source=module.id,
                    target=target.id,
                    import_path=imp,
                    strength=edge_strength(imp, referencing[target.id], scoring),
                )
            )

    edges = collapse_edges(raw_edges)
    edges.sort(key=lambda e: -e.strength)
    graph.edges = edges

    logger.debug(
        f"Dependency graph: {len(graph.nodes)} modules, {len(raw_edges)} raw imports "
        f"-> {len(edges)} edges"
    )
    return graph

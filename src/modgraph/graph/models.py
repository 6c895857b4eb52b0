"""Module-level dependency graph models.

Edges are directed: an edge source -> target means the source module
imports/uses the target module. Both ends are module ids of the current run.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DependencyEdge:
    source: str
    target: str
    import_path: str
    strength: int = 1
    type: str = "import"
    import_count: int = 1  # raw imports collapsed into this edge

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "type": self.type,
            "importPath": self.import_path,
            "strength": self.strength,
            "importCount": self.import_count,
        }


@dataclass(frozen=True)
class GraphNode:
    id: str
    name: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "type": self.type}


@dataclass
class DependencyGraph:
    """Nodes in module order, edges sorted by descending strength.

    ``unresolved`` maps module id -> imports that matched no module
    (external packages); they produce no edges.
    """

    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[DependencyEdge] = field(default_factory=list)
    unresolved: dict[str, list[str]] = field(default_factory=dict)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def index(self) -> dict[str, int]:
        """Module id -> position in ``nodes``."""
        return {node.id: i for i, node in enumerate(self.nodes)}

    def adjacency(self) -> list[list[int]]:
        """Index-based adjacency lists; neighbor order follows edge order."""
        position = self.index()
        adj: list[list[int]] = [[] for _ in self.nodes]
        for edge in self.edges:
            adj[position[edge.source]].append(position[edge.target])
        return adj

    def in_degree(self) -> dict[str, int]:
        degree = {node.id: 0 for node in self.nodes}
        for edge in self.edges:
            degree[edge.target] += 1
        return degree

    def outgoing(self, module_id: str) -> list[DependencyEdge]:
        return [e for e in self.edges if e.source == module_id]

    def incoming(self, module_id: str) -> list[DependencyEdge]:
        return [e for e in self.edges if e.target == module_id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

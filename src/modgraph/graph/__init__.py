"""Module dependency graph: models, builder, algorithms."""

from .models import DependencyEdge, DependencyGraph, GraphNode

__all__ = ["DependencyEdge", "DependencyGraph", "GraphNode"]

"""
Graph module.

Provides adjacency-list storage and pathfinding:
- Graph / Vertex / Edge / EdgeType: Graph store
- Heap: Binary heap with a live priority predicate
- PathTracker: How each vertex was reached during one search
- breadth_first_search: Fewest-edges path
- dijkstra: Cheapest path, optionally bounded by a number of stops
"""

from routegraph.graph.heap import Heap
from routegraph.graph.search import (
    Admission,
    admit_any,
    breadth_first_search,
    dijkstra,
    relaxation_search,
    within_stops,
)
from routegraph.graph.store import Edge, EdgeType, Graph, Vertex
from routegraph.graph.tracker import IsSource, PathTracker, ReachedVia, path_cost

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "EdgeType",
    "Heap",
    "PathTracker",
    "IsSource",
    "ReachedVia",
    "path_cost",
    "Admission",
    "admit_any",
    "within_stops",
    "relaxation_search",
    "breadth_first_search",
    "dijkstra",
]

"""
Adjacency-list graph store.

Usage:
    from routegraph.graph import EdgeType, Graph

    graph = Graph[str]()
    singapore = graph.create_vertex("Singapore")
    tokyo = graph.create_vertex("Tokyo")
    graph.add_edge(EdgeType.UNDIRECTED, singapore, tokyo, 500)

    graph.get_edges(singapore)
    graph.dijkstra(singapore, tokyo)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

K = TypeVar("K", bound=Hashable)

logger = logging.getLogger(__name__)


class EdgeType(Enum):
    """Whether an added edge is one-way or mirrored."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def parse(cls, value: EdgeType | str) -> EdgeType:
        """
        Coerce a name such as "directed" to an EdgeType.

        Raises:
            ValueError: If value names no edge type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown edge type '{value}'. Available: {available}") from None


@dataclass(frozen=True)
class Vertex(Generic[K]):
    """
    Handle for a graph node.

    Attributes:
        key: Hashable value identifying the vertex (title, id, ...)
    """

    key: K

    def __str__(self) -> str:
        return str(self.key)


@dataclass(frozen=True)
class Edge(Generic[K]):
    """
    A directed link between two vertices.

    Attributes:
        source: Vertex the edge leaves from
        destination: Vertex the edge arrives at
        weight: Non-negative cost of the edge, or None if unweighted
    """

    source: Vertex[K]
    destination: Vertex[K]
    weight: float | None = None

    @property
    def reverse(self) -> Edge[K]:
        """The same edge travelled the other way."""
        return Edge(self.destination, self.source, self.weight)

    def __str__(self) -> str:
        if self.weight is None:
            return f"{self.source} -> {self.destination}"
        return f"{self.source} -({self.weight})-> {self.destination}"


class Graph(Generic[K]):
    """
    Graph stored as a mapping from vertex to its ordered outgoing edges.

    Vertices must be registered with create_vertex() before edges can leave
    them; add_edge() never creates a vertex. Adding the same edge twice
    stores two parallel edges.

    Lookups for unknown vertices return empty results rather than raising.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Vertex[K], list[Edge[K]]] = {}

    # =========================================================================
    # Mutation
    # =========================================================================

    def create_vertex(self, key: K) -> Vertex[K]:
        """Register key (if new) and return its canonical vertex."""
        vertex = Vertex(key)
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []
        return vertex

    def add_edge(
        self,
        edge_type: EdgeType | str,
        source: Vertex[K],
        destination: Vertex[K],
        weight: float | None = None,
    ) -> None:
        """
        Add an edge from source to destination.

        Undirected edges are stored twice: once in each endpoint's list,
        with the same weight.

        Args:
            edge_type: EdgeType or its name ("directed", "undirected")
            source: Start vertex
            destination: End vertex
            weight: Optional non-negative cost
        """
        edge_type = EdgeType.parse(edge_type)
        edge = Edge(source, destination, weight)
        self._append(edge)
        if edge_type is EdgeType.UNDIRECTED:
            self._append(edge.reverse)

    def _append(self, edge: Edge[K]) -> None:
        edges = self._adjacency.get(edge.source)
        if edges is None:
            logger.warning(
                f"Dropping edge {edge}: vertex '{edge.source}' was never created"
            )
            return
        edges.append(edge)

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_vertex(self, key: K) -> Vertex[K] | None:
        """Get the vertex for key, or None if it was never created."""
        vertex = Vertex(key)
        return vertex if vertex in self._adjacency else None

    def has_vertex(self, vertex: Vertex[K]) -> bool:
        return vertex in self._adjacency

    @property
    def vertices(self) -> list[Vertex[K]]:
        """All vertices in creation order."""
        return list(self._adjacency)

    def get_edges(self, vertex: Vertex[K]) -> list[Edge[K]]:
        """Outgoing edges of vertex in insertion order (empty if unknown)."""
        return self._adjacency.get(vertex, [])

    def get_weight(self, source: Vertex[K], destination: Vertex[K]) -> float | None:
        """Weight of the first source -> destination edge, or None."""
        for edge in self.get_edges(source):
            if edge.destination == destination:
                return edge.weight
        return None

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of stored edges (undirected edges count twice)."""
        return sum(len(edges) for edges in self._adjacency.values())

    def stats(self) -> dict:
        """Get summary statistics about the graph."""
        weighted = sum(
            1
            for edges in self._adjacency.values()
            for edge in edges
            if edge.weight is not None
        )
        return {
            "vertices": self.vertex_count(),
            "edges": self.edge_count(),
            "weighted_edges": weighted,
            "isolated_vertices": sum(1 for edges in self._adjacency.values() if not edges),
        }

    def describe(self) -> str:
        """Render the adjacency list, one vertex per line."""
        lines = []
        for vertex, edges in self._adjacency.items():
            targets = ", ".join(str(edge.destination) for edge in edges)
            lines.append(f"{vertex} ---> [ {targets} ]")
        return "\n".join(lines)

    # =========================================================================
    # Search
    # =========================================================================

    def breadth_first_search(
        self, source: Vertex[K], destination: Vertex[K]
    ) -> list[Edge[K]] | None:
        """Fewest-edges path, see routegraph.graph.search.breadth_first_search."""
        from routegraph.graph.search import breadth_first_search

        return breadth_first_search(self, source, destination)

    def dijkstra(
        self,
        source: Vertex[K],
        destination: Vertex[K],
        max_stops: int | None = None,
    ) -> list[Edge[K]] | None:
        """Cheapest path, see routegraph.graph.search.dijkstra."""
        from routegraph.graph.search import dijkstra

        return dijkstra(self, source, destination, max_stops=max_stops)

    # =========================================================================
    # Dunder helpers
    # =========================================================================

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[Vertex[K]]:
        return iter(self._adjacency)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"

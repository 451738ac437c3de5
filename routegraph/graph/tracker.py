"""
Per-traversal record of how each visited vertex was reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Union

from routegraph.config import MISSING_WEIGHT
from routegraph.graph.store import Edge, K, Vertex

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class IsSource:
    """Marks the vertex a traversal started from."""


@dataclass(frozen=True)
class ReachedVia(Generic[K]):
    """
    Marks a vertex reached through edge.

    Attributes:
        edge: Edge whose destination is the marked vertex
    """

    edge: Edge[K]


Visit = Union[IsSource, ReachedVia]


def path_cost(edges: Iterable[Edge]) -> float:
    """Sum of edge weights, counting unweighted edges as MISSING_WEIGHT."""
    return sum(MISSING_WEIGHT if edge.weight is None else edge.weight for edge in edges)


class PathTracker(Generic[K]):
    """
    Maps each visited vertex to exactly one IsSource or ReachedVia entry.

    Costs and stop counts are not stored. Every query walks the ReachedVia
    chain back to the source, so an overwritten entry is reflected by all
    later queries for vertices downstream of it.
    """

    def __init__(self, source: Vertex[K]) -> None:
        self._visits: dict[Vertex[K], Visit] = {source: IsSource()}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._visits

    def __len__(self) -> int:
        return len(self._visits)

    def get(self, vertex: Vertex[K]) -> Visit | None:
        return self._visits.get(vertex)

    def record(self, edge: Edge[K]) -> None:
        """Mark edge.destination as reached via edge, replacing any entry."""
        self._visits[edge.destination] = ReachedVia(edge)

    def path_to(self, vertex: Vertex[K]) -> list[Edge[K]]:
        """
        Reconstruct the recorded path ending at vertex.

        Returns:
            Edges in source -> vertex order. Empty for the source itself and
            for vertices that were never visited.
        """
        path: list[Edge[K]] = []
        visit = self._visits.get(vertex)
        while isinstance(visit, ReachedVia):
            path.append(visit.edge)
            visit = self._visits.get(visit.edge.source)
        path.reverse()
        return path

    def cost_of(self, vertex: Vertex[K]) -> float:
        """Total weight of the recorded path to vertex (walks the chain)."""
        return path_cost(self.path_to(vertex))

    def stops_to(self, vertex: Vertex[K]) -> int:
        """Number of edges on the recorded path to vertex."""
        return len(self.path_to(vertex))

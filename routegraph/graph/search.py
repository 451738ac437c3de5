"""
Shortest-path search over a Graph.

- breadth_first_search: fewest edges
- dijkstra: lowest total weight, optionally limited to max_stops
  intermediate vertices
- relaxation_search: the heap-driven loop shared by dijkstra and the
  flight solver, parameterised by an admission rule

Every call builds its own PathTracker and Heap and drops them on return.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from routegraph.graph.heap import Heap
from routegraph.graph.store import Edge, Graph, K, Vertex
from routegraph.graph.tracker import PathTracker

logger = logging.getLogger(__name__)

# admit(stops_so_far, is_destination, first_visit) -> bool
# stops_so_far is the edge count of the recorded path to the vertex being
# relaxed from.
Admission = Callable[[int, bool, bool], bool]


def breadth_first_search(
    graph: Graph[K], source: Vertex[K], destination: Vertex[K]
) -> list[Edge[K]] | None:
    """
    Find a path from source to destination with the fewest edges.

    Vertices are marked when discovered, so each one enters the queue at
    most once.

    Returns:
        Edges from source to destination (empty if they are the same
        vertex), or None if destination is unreachable
    """
    tracker = PathTracker(source)
    queue = deque([source])

    while queue:
        vertex = queue.popleft()
        logger.debug(f"BFS visiting {vertex}")

        if vertex == destination:
            return tracker.path_to(destination)

        for edge in graph.get_edges(vertex):
            if edge.destination not in tracker:
                tracker.record(edge)
                queue.append(edge.destination)

    logger.debug(f"BFS: no path from {source} to {destination}")
    return None


def admit_any(stops_so_far: int, is_destination: bool, first_visit: bool) -> bool:
    return True


def within_stops(max_stops: int) -> Admission:
    """
    Admission rule allowing at most max_stops intermediate vertices.

    A hop into the destination may use the last of max_stops + 1 edges.
    A hop into any other vertex must leave room for at least one more.
    """

    def admit(stops_so_far: int, is_destination: bool, first_visit: bool) -> bool:
        if is_destination:
            return stops_so_far + 1 <= max_stops + 1
        return stops_so_far + 1 <= max_stops

    return admit


def relaxation_search(
    graph: Graph[K],
    source: Vertex[K],
    destination: Vertex[K],
    admit: Admission = admit_any,
) -> list[Edge[K]] | None:
    """
    Heap-driven cheapest-path search with recomputed costs.

    The heap orders vertices by the cost of their recorded path, walked
    fresh on every comparison. A vertex is re-enqueued whenever a cheaper
    admitted route to it is found; older heap copies stay and are harmless.
    Unweighted edges are skipped.

    The bound expressed by admit is only checked while relaxing. Popping
    destination returns its recorded path as-is.

    Args:
        graph: Graph to search
        source: Start vertex
        destination: Target vertex
        admit: Decides whether a relaxation may be recorded

    Returns:
        Edges from source to destination, or None if it was never reached
    """
    tracker = PathTracker(source)
    queue: Heap[Vertex[K]] = Heap(
        lambda first, second: tracker.cost_of(first) < tracker.cost_of(second)
    )
    queue.enqueue(source)

    while queue:
        vertex = queue.dequeue_highest_priority()
        logger.debug(f"Visiting {vertex}")

        if vertex == destination:
            return tracker.path_to(destination)

        for edge in graph.get_edges(vertex):
            if edge.weight is None:
                continue
            neighbor = edge.destination
            is_destination = neighbor == destination

            if neighbor not in tracker:
                if admit(tracker.stops_to(vertex), is_destination, True):
                    tracker.record(edge)
                    queue.enqueue(neighbor)
                continue

            new_cost = tracker.cost_of(vertex) + edge.weight
            old_cost = tracker.cost_of(neighbor)
            if new_cost < old_cost and admit(tracker.stops_to(vertex), is_destination, False):
                logger.debug(f"Relaxing {neighbor}: {old_cost} -> {new_cost} via {vertex}")
                tracker.record(edge)
                queue.enqueue(neighbor)

    logger.debug(f"No admissible path from {source} to {destination}")
    return None


def dijkstra(
    graph: Graph[K],
    source: Vertex[K],
    destination: Vertex[K],
    max_stops: int | None = None,
) -> list[Edge[K]] | None:
    """
    Find the cheapest path from source to destination.

    Args:
        graph: Graph with non-negative edge weights
        source: Start vertex
        destination: Target vertex
        max_stops: If given, the path may pass through at most this many
            intermediate vertices (max_stops + 1 edges). The limit applies
            to every relaxation, including the first time a vertex is seen.

    Returns:
        Edges from source to destination, or None if no (admissible) path
        exists
    """
    admit = admit_any if max_stops is None else within_stops(max_stops)
    return relaxation_search(graph, source, destination, admit)

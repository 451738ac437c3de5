"""
Cheapest flight within K stops.

Cities are integer ids and each flight is a (from, to, price) triple.
The solver builds its own graph from the flight list and runs the shared
relaxation search with its own admission rule:

- a city seen for the first time is always recorded, whatever the number
  of stops on the route to it;
- a cheaper route to an already-seen city is recorded only if the route to
  the city being left has at most max_stops edges.

The first rule means the returned route can pass through more than
max_stops intermediate cities when the over-long route is the first one
to reach a city.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from routegraph.config import UNREACHABLE_PRICE
from routegraph.graph.search import Admission, relaxation_search
from routegraph.graph.store import Edge, EdgeType, Graph
from routegraph.graph.tracker import path_cost

logger = logging.getLogger(__name__)

Flight = Sequence[int]


def build_flight_graph(num_vertices: int, flights: Iterable[Flight]) -> Graph[int]:
    """
    Build a directed graph with one edge per flight, in list order.

    Cities 0..num_vertices-1 are always present; any other id that appears in
    a flight is added as well.

    Raises:
        ValueError: If a flight is not a (from, to, price) triple
    """
    graph: Graph[int] = Graph()
    for city in range(num_vertices):
        graph.create_vertex(city)

    for flight in flights:
        if len(flight) != 3:
            raise ValueError(f"Flight must be (from, to, price), got {flight!r}")
        origin, target, price = flight
        graph.add_edge(
            EdgeType.DIRECTED,
            graph.create_vertex(origin),
            graph.create_vertex(target),
            price,
        )

    logger.debug(f"Built flight graph: {graph.stats()}")
    return graph


def stop_limited(max_stops: int) -> Admission:
    """Admission rule that only bounds re-routing of already-seen cities."""

    def admit(stops_so_far: int, is_destination: bool, first_visit: bool) -> bool:
        return first_visit or stops_so_far <= max_stops

    return admit


def cheapest_route(
    num_vertices: int,
    flights: Iterable[Flight],
    source: int,
    destination: int,
    max_stops: int,
) -> list[Edge[int]] | None:
    """
    Find the route priced by cheapest_price().

    Returns:
        Flights (as edges) from source to destination, or None if the
        destination was never reached
    """
    graph = build_flight_graph(num_vertices, flights)
    origin = graph.create_vertex(source)
    target = graph.create_vertex(destination)
    return relaxation_search(graph, origin, target, stop_limited(max_stops))


def cheapest_price(
    num_vertices: int,
    flights: Iterable[Flight],
    source: int,
    destination: int,
    max_stops: int,
) -> int:
    """
    Price of the cheapest route from source to destination.

    Args:
        num_vertices: Number of cities (ids 0..num_vertices-1)
        flights: (from, to, price) triples
        source: Departure city
        destination: Arrival city
        max_stops: Maximum number of intermediate cities

    Returns:
        Total price, or UNREACHABLE_PRICE (-1) if no route was found
    """
    route = cheapest_route(num_vertices, flights, source, destination, max_stops)
    if route is None:
        return UNREACHABLE_PRICE
    return path_cost(route)

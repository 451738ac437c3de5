"""
Flight routing module.

Provides the cheapest-flight-within-K-stops solver over integer city ids:
- cheapest_price: Price of the cheapest route, or -1
- cheapest_route: The route that price belongs to
"""

from routegraph.flights.cheapest import (
    build_flight_graph,
    cheapest_price,
    cheapest_route,
    stop_limited,
)

__all__ = [
    "build_flight_graph",
    "cheapest_price",
    "cheapest_route",
    "stop_limited",
]

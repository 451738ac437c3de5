"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from routegraph.graph import EdgeType, Graph, Vertex

AIRLINE_CITIES = [
    "Singapore",
    "Hong Kong",
    "Tokyo",
    "Detroit",
    "Austin Texas",
    "Washington DC",
    "San Francisco",
    "Seattle",
]

AIRLINE_ROUTES = [
    ("Singapore", "Hong Kong", 200),
    ("Singapore", "Tokyo", 500),
    ("Hong Kong", "San Francisco", 300),
    ("Hong Kong", "Tokyo", 250),
    ("Tokyo", "Detroit", 450),
    ("Tokyo", "Washington DC", 300),
    ("San Francisco", "Washington DC", 237),
    ("San Francisco", "Seattle", 218),
    ("San Francisco", "Austin Texas", 297),
    ("Detroit", "Austin Texas", 50),
    ("Austin Texas", "Washington DC", 292),
    ("Washington DC", "Seattle", 277),
]


@pytest.fixture
def graph() -> Graph[str]:
    """Return an empty string-keyed graph."""
    return Graph()


@pytest.fixture
def airline() -> tuple[Graph[str], dict[str, Vertex[str]]]:
    """Return the sample airline network (undirected, weighted) and its cities."""
    network: Graph[str] = Graph()
    cities = {name: network.create_vertex(name) for name in AIRLINE_CITIES}
    for origin, target, price in AIRLINE_ROUTES:
        network.add_edge(EdgeType.UNDIRECTED, cities[origin], cities[target], price)
    return network, cities


@pytest.fixture
def sample_flights() -> list[tuple[int, int, int]]:
    """Return the four-city flight list used by the K-stops examples."""
    return [(0, 1, 1), (0, 2, 5), (1, 2, 1), (2, 3, 1)]

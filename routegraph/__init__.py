"""
routegraph: adjacency-list graphs and shortest-path search.

A small generic graph library providing breadth-first search,
Dijkstra-style cheapest paths (optionally bounded by a number of stops)
and a standalone cheapest-flights-within-K-stops solver.
"""

__version__ = "0.1.0"

"""Algorithms and data structures for number theory, geometry, graphs, range queries and trees."""

__version__ = "0.1.0"
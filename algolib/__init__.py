"""Data structures and algorithms: ranges, sets, graphs, trees, number theory and strings."""

__version__ = "0.1.0"
"""
Graph module for adjgraph.

This module provides the NetworkX-backed Graph container and helpers
for building populated graphs.
"""

from adjgraph.graph.core import Graph, VALUE_ATTR
from adjgraph.graph.builder import (
    SAMPLE_KEYS,
    build_graph,
    build_sample_graph,
)

__all__ = [
    "Graph",
    "VALUE_ATTR",
    "SAMPLE_KEYS",
    "build_graph",
    "build_sample_graph",
]

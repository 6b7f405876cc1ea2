"""
adjgraph

An in-memory graph of keyed nodes and valued edges, in directed or
undirected mode, with value lookup, neighbor enumeration and a
single-root connectivity check.
"""

from adjgraph.errors import GraphError, NodeNotFound, EdgeNotFound, InvalidNodeKey
from adjgraph.models import GraphSummary
from adjgraph.graph import Graph, build_graph, build_sample_graph

__all__ = [
    "Graph",
    "GraphError",
    "NodeNotFound",
    "EdgeNotFound",
    "InvalidNodeKey",
    "GraphSummary",
    "build_graph",
    "build_sample_graph",
]
__version__ = "0.1.0"

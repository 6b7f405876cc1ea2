"""
Data Models for adjgraph

This module defines the value objects returned by Graph inspection:
- GraphSummary: A point-in-time description of a graph's size and shape
"""

from dataclasses import dataclass, field
from typing import Hashable


@dataclass
class GraphSummary:
    """
    Summary of a graph at the moment it was taken.

    Attributes:
        directed: Whether the summarized graph is directed
        node_count: Number of nodes
        edge_count: Number of edges (undirected pairs count once)
        self_loop_count: How many of those edges join a node to itself
        connected: Result of Graph.is_connected_graph()
        isolated_nodes: Keys of nodes with an empty adjacency map
    """

    directed: bool
    node_count: int = 0
    edge_count: int = 0
    self_loop_count: int = 0
    connected: bool = False
    isolated_nodes: list[Hashable] = field(default_factory=list)

    @property
    def isolated_count(self) -> int:
        """Number of nodes without neighbors."""
        return len(self.isolated_nodes)

    @property
    def density(self) -> float:
        """Ratio of edges between distinct nodes to the possible number of such edges."""
        if self.node_count < 2:
            return 0.0
        possible = self.node_count * (self.node_count - 1)
        if not self.directed:
            possible //= 2
        return (self.edge_count - self.self_loop_count) / possible

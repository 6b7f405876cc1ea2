"""
Graph Core for adjgraph

This module implements a labeled-node, labeled-edge adjacency container on
top of a NetworkX graph. Nodes are uniquely keyed and carry an arbitrary
value; edges connect two existing nodes and carry an arbitrary value.

Design Decisions:
    - Uses NetworkX Graph for undirected and DiGraph for directed mode
    - Mode is fixed at construction time
    - Node and edge values are stored under a single attribute (VALUE_ATTR)
    - Undirected edges share one attribute dict, so both directions always
      hold the identical value object
    - Lookups are strict (NodeNotFound / EdgeNotFound); edge insertion
      between unknown nodes is a silent no-op

Graph Properties:
    - Node keys are any hashable (typically strings)
    - Neighbor order is insertion order
    - Self-loops are allowed
    - Connectivity is reachability from a single root along stored
      adjacency, so a directed graph is checked for out-reachability only
"""

import logging
from typing import Any, Hashable

import networkx as nx

from adjgraph.errors import EdgeNotFound, InvalidNodeKey, NodeNotFound
from adjgraph.models import GraphSummary

logger = logging.getLogger(__name__)

# Attribute name holding node and edge values on the NetworkX graph
VALUE_ATTR = "value"


class Graph:
    """
    An in-memory graph of keyed nodes and valued edges.

    Wraps a NetworkX graph to provide a small, strict interface for:
    - Adding, overwriting and deleting nodes
    - Adding and deleting edges between existing nodes
    - Looking up node and edge values
    - Enumerating neighbors and checking connectivity

    Attributes:
        directed: True if edges are one-way, fixed at construction
        nodes: Snapshot mapping of node key to node value
        edges: Snapshot mapping of node key to {neighbor key: edge value}
        graph: The underlying NetworkX graph

    Usage:
        graph = Graph()
        graph.add_node("a", {"label": "start"})
        graph.add_node("b")
        graph.add_edge("a", "b", 3)
        graph.edge_val("b", "a")  # 3, edges are symmetric when undirected
        graph.is_connected_graph()  # True
    """

    def __init__(self, directed: bool = False) -> None:
        """
        Initialize an empty graph.

        Args:
            directed: Create a directed graph if True
        """
        self._directed = bool(directed)
        self._graph: nx.Graph = nx.DiGraph() if self._directed else nx.Graph()

    @property
    def directed(self) -> bool:
        """Whether this graph is directed."""
        return self._directed

    @property
    def graph(self) -> nx.Graph:
        """Access the underlying NetworkX graph."""
        return self._graph

    @property
    def nodes(self) -> dict[Hashable, Any]:
        """Return a snapshot mapping each node key to its value."""
        return {key: data.get(VALUE_ATTR) for key, data in self._graph.nodes(data=True)}

    @property
    def edges(self) -> dict[Hashable, dict[Hashable, Any]]:
        """
        Return a snapshot of the adjacency structure.

        Every node has an entry, empty if it has no (outgoing) neighbors.
        Undirected edges appear under both endpoints.
        """
        return {
            key: {neighbor: data.get(VALUE_ATTR) for neighbor, data in neighbors.items()}
            for key, neighbors in self._graph.adj.items()
        }

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return self._graph.number_of_edges()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._graph

    def __len__(self) -> int:
        return self.node_count

    def add_node(self, key: Hashable, value: Any = None) -> None:
        """
        Add a node to the graph, or update its value if it exists.

        Re-adding an existing node only replaces its value; its edges
        are kept.

        Args:
            key: Unique identifier of the node
            value: Arbitrary value attached to the node

        Raises:
            InvalidNodeKey: If key is None or unhashable
        """
        if key is None:
            raise InvalidNodeKey(key)
        try:
            hash(key)
        except TypeError:
            raise InvalidNodeKey(key) from None
        self._graph.add_node(key, **{VALUE_ATTR: value})

    def add_edge(self, key1: Hashable, key2: Hashable, value: Any = None) -> None:
        """
        Add an edge between two existing nodes, or update its value.

        If either node does not exist, nothing happens and no error is
        raised. On an undirected graph the edge is visible from both
        endpoints with the same value.

        Args:
            key1: Node key (start node if directed)
            key2: Node key (end node if directed)
            value: Arbitrary value attached to the edge
        """
        for key in (key1, key2):
            if key not in self._graph:
                logger.debug("Dropping edge %r -> %r: unknown node %r", key1, key2, key)
                return

        self._graph.add_edge(key1, key2, **{VALUE_ATTR: value})

    def node_val(self, key: Hashable) -> Any:
        """
        Get the value of a node.

        Args:
            key: The node key

        Returns:
            The value stored for the node

        Raises:
            NodeNotFound: If the node does not exist
        """
        if key not in self._graph:
            raise NodeNotFound(key)
        return self._graph.nodes[key].get(VALUE_ATTR)

    def edge_val(self, key1: Hashable, key2: Hashable) -> Any:
        """
        Get the value of an edge.

        Args:
            key1: Node key (start node if directed)
            key2: Node key (end node if directed)

        Returns:
            The value stored for the edge

        Raises:
            EdgeNotFound: If key1 is unknown or has no edge to key2
        """
        try:
            data = self._graph.adj[key1][key2]
        except (KeyError, TypeError):
            raise EdgeNotFound(key1, key2, self._directed) from None
        return data.get(VALUE_ATTR)

    def nodes_connected(self, key1: Hashable, key2: Hashable) -> bool:
        """Check whether key1 has an edge to key2. Never raises, even for unhashable keys."""
        # has_edge lets TypeError escape for unhashable keys; membership tests do not
        if key1 not in self._graph or key2 not in self._graph:
            return False
        return self._graph.has_edge(key1, key2)

    def del_node(self, key: Hashable) -> None:
        """
        Delete a node and every edge incident to it.

        In a directed graph this includes edges pointing into the node
        from elsewhere. Deleting an unknown node does nothing.

        Args:
            key: The node key
        """
        if key not in self._graph:
            logger.debug("Ignoring deletion of unknown node %r", key)
            return
        self._graph.remove_node(key)

    def del_edge(self, key1: Hashable, key2: Hashable) -> None:
        """
        Delete an edge.

        On an undirected graph the reverse side is removed as well; both
        sides share one adjacency record, so they cannot go out of step.

        Args:
            key1: Node key (start node if directed)
            key2: Node key (end node if directed)

        Raises:
            EdgeNotFound: If the edge does not exist
        """
        if not self.nodes_connected(key1, key2):
            raise EdgeNotFound(key1, key2, self._directed)

        self._graph.remove_edge(key1, key2)

    def get_neighbors(self, key: Hashable) -> list[Hashable]:
        """
        Get the neighbors of a node, in insertion order.

        For a directed graph these are the targets of outgoing edges.

        Args:
            key: The node key

        Returns:
            List of neighbor keys

        Raises:
            NodeNotFound: If the node does not exist
        """
        if key not in self._graph:
            raise NodeNotFound(key)
        return list(self._graph.adj[key])

    def reachable_from(self, key: Hashable) -> set[Hashable]:
        """
        Collect every node reachable from a start node, the start included.

        Traverses depth-first with an explicit stack, following stored
        adjacency only (outgoing edges on a directed graph).

        Args:
            key: The start node key

        Returns:
            Set of visited node keys

        Raises:
            NodeNotFound: If the start node does not exist
        """
        if key not in self._graph:
            raise NodeNotFound(key)

        adjacency = self._graph.adj
        visited: set[Hashable] = set()
        stack = [key]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            stack.extend(n for n in adjacency[current] if n not in visited)

        return visited

    def is_connected_graph(self) -> bool:
        """
        Check whether every node is reachable from a single root.

        The root is the first node in insertion order. An empty graph is
        not connected; a single node is.

        Returns:
            True if the traversal visits every node
        """
        if self.node_count == 0:
            return False

        root = next(iter(self._graph))
        seen = len(self.reachable_from(root))
        logger.debug("Visited %d of %d nodes from root %r", seen, self.node_count, root)
        return seen == self.node_count

    def summary(self) -> GraphSummary:
        """Return a GraphSummary describing the current state."""
        return GraphSummary(
            directed=self._directed,
            node_count=self.node_count,
            edge_count=self.edge_count,
            self_loop_count=nx.number_of_selfloops(self._graph),
            connected=self.is_connected_graph(),
            isolated_nodes=[key for key, nbrs in self._graph.adj.items() if not nbrs],
        )

    def clear(self) -> None:
        """Remove all nodes and edges from the graph."""
        self._graph.clear()


"""
Error Types for adjgraph

Two lookup failures are distinguished so callers can branch on what was
missing:

- NodeNotFound: a referenced node key is absent
- EdgeNotFound: a referenced edge (or one side of an undirected pair) is absent

Both derive from GraphError, and from LookupError so that generic
``except LookupError`` handlers keep working. InvalidNodeKey (a GraphError
and ValueError) rejects keys that cannot name a node at all.
"""

from typing import Hashable


class GraphError(Exception):
    """Base class for errors raised by Graph operations."""


class NodeNotFound(GraphError, LookupError):
    """
    Raised when an operation requires a node that does not exist.

    Attributes:
        key: The missing node key
    """

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f"Node does not exist: {key!r}")


class EdgeNotFound(GraphError, LookupError):
    """
    Raised when an operation requires an edge that does not exist.

    Attributes:
        key1: Start node of the missing edge
        key2: End node of the missing edge
        directed: Whether the lookup was made on a directed graph
    """

    def __init__(self, key1: Hashable, key2: Hashable, directed: bool = True) -> None:
        self.key1 = key1
        self.key2 = key2
        self.directed = directed
        arrow = "->" if directed else "<->"
        super().__init__(f"Edge does not exist: {key1!r} {arrow} {key2!r}")


class InvalidNodeKey(GraphError, ValueError):
    """
    Raised when a node key cannot be stored.

    Keys must be hashable and must not be None.

    Attributes:
        key: The rejected key
    """

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Invalid node key: {key!r} (keys must be hashable and not None)")

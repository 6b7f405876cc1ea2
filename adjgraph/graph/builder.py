"""
Graph Builder for adjgraph

Helpers that construct a populated Graph in one call, either from plain
Python collections or from the bundled sample scenario.

Input:
    nodes: mapping of key -> value, or iterable of (key, value) pairs
    edges: iterable of (key1, key2) or (key1, key2, value) tuples
Output:
    A Graph populated through add_node / add_edge, so the usual rules
    apply (edges naming unknown nodes are dropped silently)
"""

from typing import Any, Hashable, Iterable, Mapping, Union

from adjgraph.graph.core import Graph

NodeSpec = Union[Mapping[Hashable, Any], Iterable[tuple[Hashable, Any]]]

# Keys of the sample scenario; "eee" is referenced by an edge but never added
SAMPLE_KEYS = ("aaa", "bbb", "ccc", "ddd", "eee", "fff")


def build_graph(
    nodes: NodeSpec,
    edges: Iterable[tuple] = (),
    directed: bool = False,
) -> Graph:
    """
    Build a Graph from node and edge collections.

    Args:
        nodes: Mapping of key to value, or iterable of (key, value) pairs
        edges: Iterable of (key1, key2) or (key1, key2, value) tuples
        directed: Create a directed graph if True

    Returns:
        The populated Graph

    Raises:
        ValueError: If an edge tuple does not have two or three items

    Example:
        >>> graph = build_graph({"a": 1, "b": 2}, [("a", "b", "ab")])
        >>> graph.edge_val("b", "a")
        'ab'
    """
    graph = Graph(directed=directed)

    items = nodes.items() if isinstance(nodes, Mapping) else nodes
    for key, value in items:
        graph.add_node(key, value)

    for edge in edges:
        if len(edge) not in (2, 3):
            raise ValueError(f"Edge must be (key1, key2) or (key1, key2, value), got {edge!r}")
        graph.add_edge(*edge)

    return graph


def build_sample_graph(directed: bool = False) -> Graph:
    """
    Build the six-key sample graph used by the demo command.

    Nodes aaa, bbb, ccc, ddd and fff are added with assorted values
    (ccc holds None, fff has no value). The edge eee -> aaa is dropped
    because eee is never added.
    """
    aaa, bbb, ccc, ddd, eee, fff = SAMPLE_KEYS

    return build_graph(
        nodes=[
            (aaa, {"something": "arbitrary"}),
            (bbb, ["Value", "Really", "Doesn't", "Matter"]),
            (ccc, None),
            (ddd, 4),
            (fff, None),
        ],
        edges=[
            (aaa, bbb, "Another Value"),
            (aaa, ddd, 242),
            (fff, bbb),
            (eee, aaa),
        ],
        directed=directed,
    )

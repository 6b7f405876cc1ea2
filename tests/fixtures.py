"""
Test fixtures for adjgraph.

This module provides the keys and values of the sample scenario
shared by the graph and CLI tests.
"""

KEY1 = "aaa"
KEY2 = "bbb"
KEY3 = "ccc"
KEY4 = "ddd"
KEY5 = "eee"  # referenced by an edge, never added as a node
KEY6 = "fff"

VALUE1 = {"something": "arbitrary"}
VALUE2 = ["Value", "Really", "Doesn't", "Matter"]
VALUE3 = "Another Value"

# Node and edge input for build_graph, matching build_sample_graph
SAMPLE_NODES = [
    (KEY1, VALUE1),
    (KEY2, VALUE2),
    (KEY3, None),
    (KEY4, 4),
    (KEY6, None),
]

SAMPLE_EDGES = [
    (KEY1, KEY2, VALUE3),
    (KEY1, KEY4, 242),
    (KEY6, KEY2),
    (KEY5, KEY1),
]

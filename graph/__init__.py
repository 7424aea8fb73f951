"""
graph/
-----
Core data layer.  Public API:

    from graph import parse, ParseConfig, InputMode, ParseError
    from graph import GraphModel, Node, Edge
"""

from graph.node   import Node
from graph.edge   import Edge, edge_key
from graph.graph  import GraphModel, GraphBuilder, AdjacencyEntry
from graph.parser import parse, ParseConfig, InputMode, ParseError
from graph.tokens import parse_number_token, to_number_if_possible

__all__ = [
    "Node",
    "Edge",          "edge_key",
    "GraphModel",    "GraphBuilder",   "AdjacencyEntry",
    "parse",         "ParseConfig",    "InputMode",   "ParseError",
    "parse_number_token", "to_number_if_possible",
]

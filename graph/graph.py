"""
graph.py — Graph Model & Builder
=================================
The parser's output and the only thing the algorithms read.

Responsibilities:
  1. GraphBuilder — the single edge-creation path shared by every input
     format (ids, weights, keys, adjacency, node registration)
  2. GraphModel   — the frozen result: nodes, edges, adjacency, key index
  3. Serialisation for the JSON API (to_dict)

Design decisions:
  - Adjacency is `{node_id: [AdjacencyEntry(to, weight, edge_id), …]}` so a
    neighbour query is O(degree).  Undirected edges appear twice (once per
    direction) with the SAME edge id.
  - `edge_key_to_id` maps edge_key(u, v) → id.  Parallel edges share a key
    and the later one wins; path reconstruction only needs *an* edge per
    hop.
  - A model is never updated in place.  A new parse builds a new model.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Union

from graph.node import Node
from graph.edge import Edge, edge_key

Number = Union[int, float]


class AdjacencyEntry(NamedTuple):
    to:      str
    weight:  Number
    edge_id: int


@dataclass(frozen=True)
class GraphModel:
    """
    Attributes:
        nodes          : [Node] in first-seen order.
        edges          : [Edge] in creation order (index == edge id).
        adjacency      : {node_id: [AdjacencyEntry]}
        edge_key_to_id : {edge_key: edge_id}
        directed       : graph-level directedness
        weighted       : whether weights are shown
    """

    nodes:          List[Node]                        = field(default_factory=list)
    edges:          List[Edge]                        = field(default_factory=list)
    adjacency:      Dict[str, List[AdjacencyEntry]]   = field(default_factory=dict)
    edge_key_to_id: Dict[str, int]                    = field(default_factory=dict)
    directed:       bool                              = False
    weighted:       bool                              = False

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        if 0 <= edge_id < len(self.edges):
            return self.edges[edge_id]
        return None

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "nodes":       [n.to_dict() for n in self.nodes],
            "edges":       [e.to_dict() for e in self.edges],
            "adjacency":   {
                nid: [{"to": a.to, "weight": a.weight, "edgeId": a.edge_id} for a in entries]
                for nid, entries in self.adjacency.items()
            },
            "edgeKeyToId": dict(self.edge_key_to_id),
            "isDirected":  self.directed,
            "isWeighted":  self.weighted,
        }

    def __repr__(self) -> str:
        return f"GraphModel(nodes={self.node_count()}, edges={self.edge_count()}, directed={self.directed})"


class GraphBuilder:
    """Accumulates nodes and edges during one parse, then freezes into a GraphModel."""

    def __init__(self, directed: bool = False, weighted: bool = False):
        self.directed = directed
        self.weighted = weighted
        self._nodes:     Dict[str, None]                  = {}   # insertion-ordered set
        self._edges:     List[Edge]                       = []
        self._adj:       Dict[str, List[AdjacencyEntry]]  = {}
        self._key_to_id: Dict[str, int]                   = {}

    def add_node(self, node_id: str) -> None:
        self._nodes.setdefault(str(node_id), None)

    def add_edge(self, source: str, target: str, weight: Optional[Number] = None) -> Edge:
        source, target = str(source), str(target)
        if weight is None or (isinstance(weight, float) and not math.isfinite(weight)):
            weight = 1

        edge = Edge(
            edge_id=len(self._edges),
            source=source,
            target=target,
            weight=weight,
            directed=self.directed,
            weighted=self.weighted,
        )
        self._edges.append(edge)

        # last write wins for parallel edges
        self._key_to_id[edge_key(source, target, self.directed)] = edge.id

        self._adj.setdefault(source, []).append(AdjacencyEntry(target, weight, edge.id))
        if not self.directed:
            self._adj.setdefault(target, []).append(AdjacencyEntry(source, weight, edge.id))

        self.add_node(source)
        self.add_node(target)
        return edge

    def build(self) -> GraphModel:
        return GraphModel(
            nodes=[Node(nid) for nid in self._nodes],
            edges=list(self._edges),
            adjacency={nid: list(entries) for nid, entries in self._adj.items()},
            edge_key_to_id=dict(self._key_to_id),
            directed=self.directed,
            weighted=self.weighted,
        )

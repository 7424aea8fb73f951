"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows a tree from one start node, always taking the cheapest frontier edge
that reaches a node not yet in the tree.

The frontier is a plain list that is re-sorted on every iteration.  Sorting
is stable, so among equal weights the candidate that was added first wins.
Stale candidates (whose far end has since joined the tree) are left in the
list and skipped by the membership check.

Disconnected input yields the tree of the start node's component only, with
`complete=False`.  On a directed model only forward edges are followed.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

import structlog

from graph import GraphModel
from graph.graph import AdjacencyEntry

logger = structlog.get_logger(__name__)


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                           # 0
    "    tree ← {start}",                                # 1
    "    candidates ← edges(start)",                     # 2
    "    while |tree| < |V| and candidates:",            # 3
    "        sort candidates by weight",                 # 4
    "        e ← first c in candidates with c.to ∉ tree", # 5
    "        if no such e: break",                       # 6
    "        remove e from candidates",                  # 7
    "        tree ← tree ∪ {e.to}; total += e.weight",   # 8
    "        for f in edges(e.to) with f.to ∉ tree:",    # 9
    "            candidates.append(f)",                  # 10
    "    return chosen edges, total",                    # 11
]


class _Candidate(NamedTuple):
    source:  str
    target:  str
    weight:  float
    edge_id: int


@dataclass
class MSTResult:
    total_weight: float     = 0
    edge_ids:     List[int] = field(default_factory=list)
    complete:     bool      = True

    def to_dict(self) -> dict:
        return {
            "totalWeight": self.total_weight if math.isfinite(self.total_weight) else None,
            "edgeIds":     list(self.edge_ids),
            "complete":    self.complete,
        }


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _candidates_from(node: str, adjacency: Dict[str, List[AdjacencyEntry]], tree: set) -> List[_Candidate]:
    return [
        _Candidate(node, entry.to, _as_number(entry.weight), entry.edge_id)
        for entry in adjacency.get(node, [])
        if entry.to not in tree
    ]


def prim_mst(
    adjacency: Dict[str, List[AdjacencyEntry]],
    all_nodes: Iterable[str],
    start_node: Optional[str] = None,
) -> MSTResult:
    nodes = list(all_nodes)
    if not nodes:
        return MSTResult(total_weight=0, edge_ids=[], complete=True)

    start = start_node if start_node and start_node in nodes else nodes[0]

    tree                        = {start}
    candidates: List[_Candidate] = _candidates_from(start, adjacency, set())
    chosen:     List[int]        = []
    total                        = 0.0

    while len(tree) < len(nodes) and candidates:
        candidates.sort(key=lambda c: c.weight)
        idx = next((i for i, c in enumerate(candidates) if c.target not in tree), -1)
        if idx == -1:
            break

        pick = candidates.pop(idx)
        tree.add(pick.target)
        chosen.append(pick.edge_id)
        total += pick.weight
        candidates.extend(_candidates_from(pick.target, adjacency, tree))

    return MSTResult(total_weight=total, edge_ids=chosen, complete=len(tree) >= len(nodes))


def minimum_spanning_tree(model: GraphModel, start_node: Any = None) -> MSTResult:
    start  = None if start_node is None else (str(start_node).strip() or None)
    result = prim_mst(model.adjacency, model.node_ids(), start)
    logger.debug(
        "minimum_spanning_tree",
        start=start,
        edges=len(result.edge_ids),
        total_weight=result.total_weight,
        complete=result.complete,
    )
    return result

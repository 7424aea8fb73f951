"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source, single-target shortest path over a GraphModel using the
MinHeap with lazy deletion.

Returns a PathResult:
  • distance – total cost (inf when unreachable)
  • path     – [source, …, target] node ids (empty when unreachable)
  • edge_ids – ids of the edges along the path, for highlighting

Correctness note: Dijkstra requires non-negative weights.  Weights are
coerced with float(); a weight that cannot be coerced becomes NaN, and
since NaN is never "<" anything, relaxation through that edge never
happens.  That is accepted behaviour, not an error.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import structlog

from graph import GraphModel, edge_key
from graph.graph import AdjacencyEntry
from algorithms.heap import MinHeap, HeapItem

logger = structlog.get_logger(__name__)

INF = float("inf")


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",        # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    pq ← [(source, 0)]",                      # 3
    "    prev ← {v: None for v in V}",             # 4
    "    while pq is not empty:",                  # 5
    "        (node, d) ← pq.pop_min()",            # 6
    "        if d > dist[node]: continue",         # 7
    "        if node == target: break",            # 8
    "        for (neighbour, w) in adj(node):",    # 9
    "            alt ← dist[node] + w",            # 10
    "            if alt < dist[neighbour]:",       # 11
    "                dist[neighbour] ← alt",       # 12
    "                prev[neighbour] ← node",      # 13
    "                pq.push((neighbour, alt))",   # 14
    "    return walk prev back from target",       # 15
]


@dataclass
class PathResult:
    distance: float     = INF
    path:     List[str] = field(default_factory=list)
    edge_ids: List[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict:
        return {
            "distance": self.distance if math.isfinite(self.distance) else None,
            "path":     list(self.path),
            "edgeIds":  list(self.edge_ids),
        }


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


# ---------------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------------
def dijkstra_pq(
    adjacency: Optional[Dict[str, List[AdjacencyEntry]]],
    edge_key_to_id: Dict[str, int],
    directed: bool,
    source: str,
    target: str,
    all_nodes: Iterable[str],
) -> PathResult:
    if adjacency is None or not source or not target:
        return PathResult()

    dist: Dict[str, float]         = {}
    prev: Dict[str, Optional[str]] = {}
    for nid in all_nodes:
        dist[nid] = INF
        prev[nid] = None
    dist[source] = 0.0

    pq = MinHeap()
    pq.push(HeapItem(source, 0.0))

    while not pq.is_empty():
        node, d = pq.pop()
        # stale entry
        if d > dist.get(node, INF):
            continue
        if node == target:
            break

        for nbr, weight, _ in adjacency.get(node, []):
            alt = dist[node] + _as_number(weight)
            if alt < dist.get(nbr, INF):
                dist[nbr] = alt
                prev[nbr] = node
                pq.push(HeapItem(nbr, alt))

    if not math.isfinite(dist.get(target, INF)):
        return PathResult()

    path     = _reconstruct(prev, target)
    edge_ids = _path_edge_ids(path, edge_key_to_id, directed)
    return PathResult(distance=dist[target], path=path, edge_ids=edge_ids)


def shortest_path(model: GraphModel, source: Any, target: Any) -> PathResult:
    """Shortest path between two node ids of a parsed model."""
    source = "" if source is None else str(source).strip()
    target = "" if target is None else str(target).strip()
    result = dijkstra_pq(
        model.adjacency,
        model.edge_key_to_id,
        model.directed,
        source,
        target,
        model.node_ids(),
    )
    logger.debug(
        "shortest_path",
        source=source,
        target=target,
        found=result.found,
        distance=result.distance,
    )
    return result


# ---------------------------------------------------------------------------
def _reconstruct(prev: Dict[str, Optional[str]], target: str) -> List[str]:
    path: List[str] = []
    cur: Optional[str] = target
    # a negative cycle can loop prev back on itself
    while cur is not None and cur not in path:
        path.append(cur)
        cur = prev.get(cur)
    path.reverse()
    return path


def _path_edge_ids(path: List[str], edge_key_to_id: Dict[str, int], directed: bool) -> List[int]:
    """Natural-order key first, reversed key second; unresolvable hops are skipped."""
    edge_ids: List[int] = []
    for a, b in zip(path, path[1:]):
        eid = edge_key_to_id.get(edge_key(a, b, directed))
        if eid is None:
            eid = edge_key_to_id.get(edge_key(b, a, directed))
        if eid is not None:
            edge_ids.append(eid)
    return edge_ids

"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the playground knows about.

    from algorithms import REGISTRY, get_algorithm
    from algorithms import shortest_path, minimum_spanning_tree

AlgoInfo is a lightweight dataclass.  The UI renders one card per entry
(label, complexity, pseudocode), so adding an algorithm is: write the
function, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

from algorithms.heap     import MinHeap, HeapItem
from algorithms.dijkstra import dijkstra_pq, shortest_path, PathResult, PSEUDOCODE as _dij_pc
from algorithms.prim     import prim_mst, minimum_spanning_tree, MSTResult, PSEUDOCODE as _prim_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "dijkstra"
    label:             str                    # human label, e.g. "Dijkstra's Algorithm"
    fn:                Callable               # takes a GraphModel first
    pseudocode:        List[str]              # lines for the side-panel
    needs_target:      bool     = False       # source + target vs optional start
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=shortest_path, pseudocode=_dij_pc,
        needs_target=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal for non-negative weights.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=minimum_spanning_tree, pseudocode=_prim_pc,
        complexity_time="O(E² log E)", complexity_space="O(E)",
        description="Grows a tree from one node by always adding the cheapest edge out of it.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "MinHeap",
    "HeapItem",
    "dijkstra_pq",
    "shortest_path",
    "PathResult",
    "prim_mst",
    "minimum_spanning_tree",
    "MSTResult",
]

"""
edge.py — Graph Edge
====================
Connects two nodes.  Ids are small integers handed out in creation order
by the builder, so the renderer can address an edge by the same number the
algorithms report.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Weight defaults to 1 — the builder resolves missing / unparseable
    weights before an Edge is ever constructed.
  - `label` is only produced for weighted graphs; unweighted graphs draw
    bare lines even if the input happened to carry numbers.
"""

from typing import Union

Number = Union[int, float]


def edge_key(u: str, v: str, directed: bool) -> str:
    """
    Normalised lookup key for an edge.

    Directed  → "u->v"
    Undirected → endpoints sorted and joined with "--", so (u, v) and (v, u)
                 land on the same key.
    """
    if directed:
        return f"{u}->{v}"
    return "--".join(sorted((u, v)))


def format_weight(weight: Number) -> str:
    """4.0 → "4", 2.5 → "2.5" — the way a browser would print it."""
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


class Edge:
    """
    Attributes:
        id       : 0-based creation index, unique within one parse.
        source   : ID of the tail node.
        target   : ID of the head node.
        weight   : Numeric cost (default 1).
        directed : Drawn with an arrow when True.
        weighted : Drawn with a weight label when True.
    """

    __slots__ = ("id", "source", "target", "weight", "directed", "weighted")

    def __init__(
        self,
        edge_id: int,
        source: str,
        target: str,
        weight: Number = 1,
        directed: bool = False,
        weighted: bool = False,
    ):
        self.id:       int    = edge_id
        self.source:   str    = source
        self.target:   str    = target
        self.weight:   Number = weight
        self.directed: bool   = directed
        self.weighted: bool   = weighted

    @property
    def key(self) -> str:
        return edge_key(self.source, self.target, self.directed)

    @property
    def label(self) -> str:
        return format_weight(self.weight) if self.weighted else ""

    # ------------------------------------------------------------------
    # Serialisation (shape the renderer consumes)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {
            "id":   self.id,
            "from": self.source,
            "to":   self.target,
        }
        if self.weighted:
            data["label"] = self.label
        if self.directed:
            data["arrows"] = "to"
        return data

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.id}: {self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and (self.id, self.source, self.target, self.weight, self.directed)
            == (other.id, other.source, other.target, other.weight, other.directed)
        )

    def __hash__(self) -> int:
        return hash(self.id)

"""
node.py — Graph Node
====================
A node is just an identity plus something to print on the canvas.

Design decisions:
  - The id is ALWAYS a string.  "1" typed in an edge list and 1 read from a
    JSON array must be the same node, so the parser stringifies before it
    gets here.
  - Positions are NOT stored on the node.  Layout belongs to the renderer
    (ui/canvas.py); the parsed model stays a pure description of the input.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Unique string identifier.
        label : Human-readable name shown on the canvas (defaults to id).
    """

    __slots__ = ("id", "label")

    def __init__(self, node_id: str, label: Optional[str] = None):
        self.id:    str = str(node_id)
        self.label: str = self.id if label is None else str(label)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label}

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, label={self.label!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id and self.label == other.label

    def __hash__(self) -> int:
        return hash(self.id)

"""
canvas.py — SVG Graph Renderer
================================
render(model) lays the graph out and returns a CanvasHandle.  The handle
is what later highlight calls go through:

    handle = render(model)
    handle.highlight_path(result.path, result.edge_ids)
    svg = handle.to_svg()

Design decisions:
  - No module-level "current network".  Every render returns its own
    handle; two handles never share highlight state.
  - Layout is a circle in node order, computed once per render.
  - Highlights are just id → style-key dicts; to_svg() is a pure read.
  - Ids the handle does not know about are ignored, so stale results from
    a previous graph cannot crash the renderer.
"""

import math
from html import escape
from typing import Dict, Iterable, Tuple

from graph import GraphModel, Edge, Node


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 600
    bg:     str = "#0d1117"

    # node colors (style key → (fill, stroke, label))
    node_colors: Dict[str, Tuple[str, str, str]] = {
        "default": ("#007bff", "#0056b3", "#ffffff"),
        "path":    ("#ffcc00", "#cc9900", "#000000"),
    }

    # edge colors (style key → stroke)
    edge_colors: Dict[str, str] = {
        "default": "#888888",
        "path":    "#ff0000",
        "mst":     "#00a000",
    }

    # node
    node_radius:        int = 22
    node_radius_path:   int = 26
    node_stroke_width:  int = 2
    node_label_size:    int = 13
    node_label_weight:  str = "600"

    # edge
    edge_width:         int = 1
    edge_width_marked:  int = 4
    edge_arrow_size:    int = 10
    edge_weight_color:  str = "#c9d1d9"
    edge_weight_size:   int = 12
    edge_weight_bg:     str = "#161b22"
    self_loop_radius:   int = 14


CONFIG = CanvasConfig()


def circle_layout(node_ids: Iterable[str], width: float, height: float) -> Dict[str, Tuple[float, float]]:
    """Evenly spaced on a circle, first node at 3 o'clock.  A lone node sits in the centre."""
    ids    = list(node_ids)
    cx, cy = width / 2, height / 2
    if len(ids) == 1:
        return {ids[0]: (cx, cy)}
    radius = min(width, height) * 0.38
    return {
        nid: (
            round(cx + radius * math.cos(2 * math.pi * i / len(ids)), 2),
            round(cy + radius * math.sin(2 * math.pi * i / len(ids)), 2),
        )
        for i, nid in enumerate(ids)
    }


# ---------------------------------------------------------------------------
# Handle
# ---------------------------------------------------------------------------
class CanvasHandle:
    """
    Attributes:
        model       : The GraphModel this handle draws.
        positions   : {node_id: (x, y)}
        node_styles : {node_id: style key}  — only highlighted nodes
        edge_styles : {edge_id: style key}  — only highlighted edges
    """

    def __init__(self, model: GraphModel, config: CanvasConfig = CONFIG):
        self.model     = model
        self.config    = config
        self.positions = circle_layout(model.node_ids(), config.width, config.height)
        self.node_styles: Dict[str, str] = {}
        self.edge_styles: Dict[int, str] = {}

    def reset_highlights(self) -> None:
        self.node_styles.clear()
        self.edge_styles.clear()

    def highlight_path(self, node_path: Iterable[str], edge_ids: Iterable[int]) -> None:
        self.reset_highlights()
        for nid in node_path:
            if nid in self.positions:
                self.node_styles[nid] = "path"
        for eid in edge_ids:
            if self.model.get_edge(eid) is not None:
                self.edge_styles[eid] = "path"

    def highlight_mst(self, edge_ids: Iterable[int]) -> None:
        self.reset_highlights()
        for eid in edge_ids:
            if self.model.get_edge(eid) is not None:
                self.edge_styles[eid] = "mst"

    # ------------------------------------------------------------------
    def to_svg(self) -> str:
        config = self.config
        svg_parts = [
            f'<svg width="{config.width}" height="{config.height}" '
            f'viewBox="0 0 {config.width} {config.height}" '
            f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
            f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
        ]

        # edges first so nodes sit on top
        for edge in self.model.edges:
            svg_parts.append(self._render_edge(edge))
        for node in self.model.nodes:
            svg_parts.append(self._render_node(node))

        svg_parts.append("</svg>")
        return "\n".join(part for part in svg_parts if part)

    # ------------------------------------------------------------------
    # Node Rendering
    # ------------------------------------------------------------------
    def _render_node(self, node: Node) -> str:
        config = self.config
        style  = self.node_styles.get(node.id, "default")
        fill, stroke, label_color = config.node_colors[style]
        r      = config.node_radius_path if style == "path" else config.node_radius
        cx, cy = self.positions[node.id]

        return "\n".join([
            f'<g class="node {style}" data-id="{escape(node.id)}">',
            f'  <circle cx="{cx}" cy="{cy}" r="{r}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{config.node_stroke_width}"/>',
            f'  <text x="{cx}" y="{cy + 5}" text-anchor="middle" '
            f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
            f'fill="{label_color}" font-weight="{config.node_label_weight}">{escape(node.label)}</text>',
            '</g>',
        ])

    # ------------------------------------------------------------------
    # Edge Rendering
    # ------------------------------------------------------------------
    def _render_edge(self, edge: Edge) -> str:
        config = self.config
        if edge.source not in self.positions or edge.target not in self.positions:
            return ""

        style  = self.edge_styles.get(edge.id, "default")
        stroke = config.edge_colors[style]
        width  = config.edge_width if style == "default" else config.edge_width_marked

        x1, y1 = self.positions[edge.source]
        x2, y2 = self.positions[edge.target]
        parts  = [f'<g class="edge {style}" data-id="{edge.id}">']

        dx, dy = x2 - x1, y2 - y1
        dist   = math.sqrt(dx * dx + dy * dy)
        if dist < 0.001:
            # self-loop: small circle sitting on top of the node
            lr = config.self_loop_radius
            ly = y1 - config.node_radius - lr + 4
            parts.append(
                f'  <circle cx="{x1}" cy="{ly}" r="{lr}" fill="none" '
                f'stroke="{stroke}" stroke-width="{width}"/>'
            )
            if edge.weighted:
                parts.append(self._render_weight(x1, ly - lr - 6, edge.label))
            parts.append('</g>')
            return "\n".join(parts)

        # shorten the line by node_radius on both ends
        ux, uy = dx / dist, dy / dist
        r      = config.node_radius
        x1_adj, y1_adj = x1 + ux * r, y1 + uy * r
        x2_adj, y2_adj = x2 - ux * r, y2 - uy * r

        parts.append(
            f'  <line x1="{x1_adj:.2f}" y1="{y1_adj:.2f}" x2="{x2_adj:.2f}" y2="{y2_adj:.2f}" '
            f'stroke="{stroke}" stroke-width="{width}"/>'
        )
        if edge.directed:
            parts.append(_render_arrow(x2_adj, y2_adj, ux, uy, stroke, config))
        if edge.weighted:
            # offset label perpendicular to edge
            mx, my = (x1 + x2) / 2 - uy * 12, (y1 + y2) / 2 + ux * 12
            parts.append(self._render_weight(mx, my, edge.label))

        parts.append('</g>')
        return "\n".join(parts)

    def _render_weight(self, x: float, y: float, label: str) -> str:
        config = self.config
        return (
            f'  <circle cx="{x:.2f}" cy="{y:.2f}" r="12" fill="{config.edge_weight_bg}" opacity="0.9"/>\n'
            f'  <text x="{x:.2f}" y="{y + 4:.2f}" text-anchor="middle" '
            f'font-size="{config.edge_weight_size}" font-family="\'DM Sans\', sans-serif" '
            f'fill="{config.edge_weight_color}" font-weight="600">{escape(label)}</text>'
        )


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    px, py = -uy, ux
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'  <polygon points="{x:.2f},{y:.2f} {p1_x:.2f},{p1_y:.2f} {p2_x:.2f},{p2_y:.2f}" fill="{color}"/>'


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render(model: GraphModel, config: CanvasConfig = CONFIG) -> CanvasHandle:
    """Lay out `model` and return a handle for highlighting and SVG output."""
    return CanvasHandle(model, config)

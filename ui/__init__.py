"""
ui/
---
Presentation layer.

    from ui import render, CanvasHandle
    from ui import graph_input_panel, shortest_path_panel, …
"""

from ui.canvas import render, CanvasHandle, CanvasConfig, circle_layout

from ui.controls import (
    graph_input_panel,
    shortest_path_panel,
    mst_panel,
    calculator_panel,
    algorithm_cards,
    pseudocode_viewer,
)

__all__ = [
    "render",
    "CanvasHandle",
    "CanvasConfig",
    "circle_layout",
    "graph_input_panel",
    "shortest_path_panel",
    "mst_panel",
    "calculator_panel",
    "algorithm_cards",
    "pseudocode_viewer",
]

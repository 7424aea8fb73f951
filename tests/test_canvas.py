"""Tests for the SVG renderer and its highlight handles."""

import pytest

from graph import ParseConfig, parse
from ui import algorithm_cards, circle_layout, render
from algorithms import list_algorithms


def test_layout_places_every_node():
    positions = circle_layout(["a", "b", "c", "d"], 800, 600)
    assert set(positions) == {"a", "b", "c", "d"}
    assert positions["a"] == pytest.approx((628, 300))
    assert positions["c"] == pytest.approx((172, 300))


def test_single_node_is_centred():
    assert circle_layout(["only"], 800, 600) == {"only": (400, 300)}


def test_svg_contains_nodes_and_edges(triangle):
    svg = render(triangle).to_svg()
    assert svg.startswith("<svg")
    assert svg.count('class="node default"') == 3
    assert svg.count('class="edge default"') == 3
    assert ">4</text>" in svg


def test_directed_edges_draw_arrows():
    model = parse("A B", ParseConfig(directed=True))
    assert "<polygon" in render(model).to_svg()
    assert "<polygon" not in render(parse("A B", ParseConfig())).to_svg()


def test_self_loop_is_drawn():
    model = parse("A A 3", ParseConfig(weighted=True))
    svg = render(model).to_svg()
    assert 'class="edge default" data-id="0"' in svg
    assert ">3</text>" in svg


def test_highlight_path(triangle):
    handle = render(triangle)
    handle.highlight_path(["A", "B", "C"], [0, 1])

    assert handle.node_styles == {"A": "path", "B": "path", "C": "path"}
    assert handle.edge_styles == {0: "path", 1: "path"}
    svg = handle.to_svg()
    assert svg.count('class="edge path"') == 2
    assert svg.count('class="node path"') == 3


def test_highlight_mst_replaces_previous_highlight(triangle):
    handle = render(triangle)
    handle.highlight_path(["A", "B"], [0])
    handle.highlight_mst([0, 1])

    assert handle.node_styles == {}
    assert handle.edge_styles == {0: "mst", 1: "mst"}


def test_reset_highlights(triangle):
    handle = render(triangle)
    handle.highlight_mst([2])
    handle.reset_highlights()
    assert 'class="edge mst"' not in handle.to_svg()


def test_unknown_ids_are_ignored(triangle):
    handle = render(triangle)
    handle.highlight_path(["A", "ghost"], [0, 99])
    assert handle.node_styles == {"A": "path"}
    assert handle.edge_styles == {0: "path"}


def test_handles_are_independent(triangle):
    first, second = render(triangle), render(triangle)
    first.highlight_mst([0])
    assert second.edge_styles == {}


def test_labels_are_escaped():
    model = parse("<b> x", ParseConfig())
    assert "&lt;b&gt;" in render(model).to_svg()


def test_algorithm_cards_list_registry():
    html = algorithm_cards(list_algorithms())
    assert "Dijkstra" in html
    assert "Prim" in html
    assert "dist[source] ← 0" in html

"""Tests for the algorithm registry and settings."""

from algorithms import get_algorithm, list_algorithms, minimum_spanning_tree, shortest_path
from settings import Settings
from ui import algorithm_cards


def test_registry_entries():
    assert [a.key for a in list_algorithms()] == ["dijkstra", "prim"]
    assert get_algorithm("dijkstra").fn is shortest_path
    assert get_algorithm("prim").fn is minimum_spanning_tree
    assert get_algorithm("bfs") is None


def test_needs_target_flag_reaches_the_cards():
    assert get_algorithm("dijkstra").needs_target
    assert not get_algorithm("prim").needs_target

    html = algorithm_cards(list_algorithms())
    assert "Needs a source and a target node." in html
    assert "Start node is optional." in html


def test_registered_functions_take_a_model(triangle):
    assert get_algorithm("dijkstra").fn(triangle, "A", "C").distance == 5
    assert get_algorithm("prim").fn(triangle).total_weight == 5


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GRAPH_PLAYGROUND_PORT", "8080")
    monkeypatch.setenv("GRAPH_PLAYGROUND_DEFAULT_DIRECTED", "true")
    config = Settings()
    assert config.port == 8080
    assert config.default_directed is True
    assert config.canvas_width == 900
    assert config.max_input_chars == 2000

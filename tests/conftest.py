"""Shared fixtures for the graph playground test suite."""

import pytest

from graph import InputMode, ParseConfig, parse

WEIGHTED_UNDIRECTED = ParseConfig(weighted=True, directed=False)
WEIGHTED_DIRECTED   = ParseConfig(weighted=True, directed=True)
ARRAY_WEIGHTED      = ParseConfig(weighted=True, input_mode=InputMode.ARRAY)


@pytest.fixture
def triangle():
    """A–B (4), B–C (1), A–C (7): shortest A→C goes through B."""
    return parse("A B 4\nB C 1\nA C 7", WEIGHTED_UNDIRECTED)


@pytest.fixture
def classic():
    """Textbook 6-node weighted undirected graph."""
    text = "\n".join([
        "A B 7",
        "A C 9",
        "A F 14",
        "B C 10",
        "B D 15",
        "C D 11",
        "C F 2",
        "D E 6",
        "E F 9",
    ])
    return parse(text, WEIGHTED_UNDIRECTED)


@pytest.fixture
def disconnected():
    return parse("A B 1\nC D 2", WEIGHTED_UNDIRECTED)


@pytest.fixture
def client():
    from main import app

    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client

"""
parser.py — Text → GraphModel
==============================
Accepts whatever a student pastes into the input box and turns it into a
GraphModel.

Plain mode (one statement per line):
    A B 4               → edge A–B, weight 4
    A B                 → edge A–B, weight 1
    A: B-3 C D-0x10     → A–B (3), A–C (1), A–D (16)
    E:                  → isolated node E

Array mode (JSON-ish):
    [[1,2,5],[2,3,3]]           → edge list  [u, v, w?]
    [[1,2],[0],[]]              → adjacency list, row i = neighbours of node i
    {"edges": [[...], ...]}     → object wrapper (edges / graph / first array)
    edges = [[0,1],[1,2]];      → copied straight out of source code

Anything else in array mode raises ParseError with a message that names
the shapes we understand.
"""

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

import structlog

from graph.graph import GraphBuilder, GraphModel
from graph.tokens import to_number_if_possible

logger = structlog.get_logger(__name__)

_EDGES_ASSIGNMENT_RE = re.compile(r"edges\s*=\s*(\[.*)", re.DOTALL)


class ParseError(ValueError):
    """Malformed or unrecognised graph input.  `message` is shown to the user verbatim."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputMode(str, Enum):
    PLAIN = "plain"
    ARRAY = "array"


@dataclass(frozen=True)
class ParseConfig:
    weighted:   bool      = False
    directed:   bool      = False
    input_mode: InputMode = InputMode.PLAIN

    @classmethod
    def from_dict(cls, data: dict) -> "ParseConfig":
        raw_mode = data.get("inputMode", data.get("input_mode")) or InputMode.PLAIN.value
        try:
            mode = InputMode(raw_mode)
        except ValueError:
            raise ParseError(f"Unknown input mode {raw_mode!r}. Expected 'plain' or 'array'.") from None
        return cls(
            weighted=bool(data.get("weighted", False)),
            directed=bool(data.get("directed", False)),
            input_mode=mode,
        )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def parse(raw_text: str, config: Optional[ParseConfig] = None) -> GraphModel:
    config  = config or ParseConfig()
    builder = GraphBuilder(directed=config.directed, weighted=config.weighted)
    text    = "" if raw_text is None else str(raw_text)

    if config.input_mode == InputMode.ARRAY:
        _parse_array(text, builder)
    else:
        _parse_plain(text, builder)

    model = builder.build()
    logger.debug(
        "graph_parsed",
        mode=config.input_mode.value,
        nodes=model.node_count(),
        edges=model.edge_count(),
        directed=model.directed,
    )
    return model


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------
def _parse_plain(text: str, builder: GraphBuilder) -> None:
    lines = [line.strip() for line in text.split("\n")]
    for line in lines:
        if not line:
            continue
        if ":" in line:
            _parse_adjacency_line(line, builder)
        else:
            _parse_edge_line(line, builder)


def _parse_adjacency_line(line: str, builder: GraphBuilder) -> None:
    # only the text between the first and second ':' lists neighbours
    parts  = line.split(":")
    source = parts[0].strip()
    neighbours_part = parts[1]
    builder.add_node(source)

    for token in neighbours_part.split():
        if "-" in token:
            # "B-3" → neighbour B, weight 3
            parts  = token.split("-")
            weight = to_number_if_possible(parts[1])
            builder.add_edge(source, parts[0].strip(), 1 if weight is None else weight)
        else:
            builder.add_edge(source, token, None)


def _parse_edge_line(line: str, builder: GraphBuilder) -> None:
    parts = line.split()
    if len(parts) < 2:
        return
    weight = to_number_if_possible(parts[2]) if len(parts) >= 3 else None
    builder.add_edge(parts[0], parts[1], weight)


# ---------------------------------------------------------------------------
# Array / JSON
# ---------------------------------------------------------------------------
def _parse_array(text: str, builder: GraphBuilder) -> None:
    parsed = _load_array_text(text)
    items  = _unwrap(parsed)

    is_edge_list = bool(items) and all(isinstance(el, list) and len(el) >= 2 for el in items)
    is_adj_list  = bool(items) and all(isinstance(el, list) for el in items)

    if is_edge_list:
        for entry in items:
            weight = to_number_if_possible(entry[2]) if len(entry) >= 3 else None
            builder.add_edge(_node_id(entry[0]), _node_id(entry[1]), weight)
    elif is_adj_list:
        for index, neighbours in enumerate(items):
            for v in neighbours:
                builder.add_edge(str(index), _node_id(v), None)
    else:
        raise ParseError(
            "Unrecognized array structure. Expected array of edges "
            "(e.g. [[u,v],[u,v,w],...]) or adjacency-list (e.g. [[1,2],[2],[0]])."
        )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


# NaN / Infinity are not JSON; the browser's parser rejects them too
_JSON = json.JSONDecoder(parse_constant=_reject_constant)


def _load_array_text(text: str) -> Any:
    """Direct JSON → first balanced [...] → `edges = [...]`.  First success wins.

    RecursionError counts as a failed attempt: absurdly nested arrays are
    still valid JSON but blow the decoder's stack.
    """
    try:
        parsed = _JSON.decode(text)
    except (ValueError, RecursionError):
        parsed = None
        try:
            parsed = _JSON.decode(_first_bracketed(text))
            logger.debug("array_fallback", strategy="first_bracketed")
        except (ValueError, RecursionError):
            match = _EDGES_ASSIGNMENT_RE.search(text)
            if match:
                try:
                    # raw_decode stops at the end of the array and ignores trailing code
                    parsed, _ = _JSON.raw_decode(match.group(1))
                    logger.debug("array_fallback", strategy="edges_assignment")
                except (ValueError, RecursionError):
                    parsed = None

    if parsed is None:
        raise ParseError(
            "Failed to parse array-style input. Ensure it's valid JSON array-like text "
            "(e.g. [[1,2],[2,3]])."
        )
    return parsed


def _first_bracketed(text: str) -> str:
    start = text.find("[")
    if start == -1:
        raise ValueError("No '[' found")

    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    raise ValueError("No matching closing bracket found for '['")


def _unwrap(parsed: Any) -> List[Any]:
    if isinstance(parsed, dict):
        if isinstance(parsed.get("edges"), list):
            return parsed["edges"]
        if isinstance(parsed.get("graph"), list):
            return parsed["graph"]
        for value in parsed.values():
            if isinstance(value, list):
                return value
        raise ParseError(
            "Parsed JSON is an object but no array-property found to interpret as edges or adjacency."
        )
    if not isinstance(parsed, list):
        raise ParseError("Array-mode parsing did not result in an array.")
    return parsed


def _node_id(value: Any) -> str:
    """Stringify a JSON scalar the way it would be displayed: 1.0 → "1", true → "true"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

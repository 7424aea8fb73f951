"""
main.py — Graph Playground Flask App
=====================================
The web server behind the playground page.

Routes:
  GET  /                       – main UI
  POST /api/graph/parse        – parse text into a graph, draw it
  POST /api/shortest-path      – Dijkstra between two nodes
  POST /api/mst                – Prim's MST from an optional start node
  POST /api/reset              – redraw without highlights
  POST /api/calc/<op>          – and / or / xor / dec-to-bin / bin-to-dec

State management:
  The Flask session keeps only the last parse INPUT (text + options).
  Parsing is a pure function of that input, so each request re-parses
  instead of storing a serialised graph.
"""

from typing import Optional, Tuple

import structlog
from flask import Flask, jsonify, render_template_string, request, session

from algorithms import get_algorithm, list_algorithms
from app_logging import setup_logging
from calculators import OPERATIONS, CalculatorError
from graph import GraphModel, ParseConfig, ParseError, parse
from settings import settings
from ui import (
    CanvasConfig,
    algorithm_cards,
    calculator_panel,
    graph_input_panel,
    mst_panel,
    render,
    shortest_path_panel,
)

setup_logging(settings.log_level)
logger = structlog.get_logger(__name__)

app = Flask(__name__)
app.secret_key = settings.secret_key

# room left in the cookie for its name and attributes (Path, HttpOnly, ...)
COOKIE_HEADROOM = 200


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def canvas_config() -> CanvasConfig:
    config = CanvasConfig()
    config.width  = settings.canvas_width
    config.height = settings.canvas_height
    return config


def payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def check_length(text: str, error_cls) -> None:
    if len(text) > settings.max_input_chars:
        raise error_cls(
            f"Input too long ({len(text)} characters, limit is {settings.max_input_chars})."
        )


def parse_request(data: dict) -> Tuple[str, ParseConfig, GraphModel]:
    text   = str(data.get("text") or "")
    check_length(text, ParseError)
    config = ParseConfig.from_dict(data)
    return text, config, parse(text, config)


def get_model() -> Optional[GraphModel]:
    """Re-parse the session's last graph input, or None if there is none."""
    stored = session.get("graph_input")
    if not stored:
        return None
    return parse(stored["text"], ParseConfig.from_dict(stored))


def save_graph_input(text: str, config: ParseConfig) -> None:
    """Store the parse input in the session cookie, refusing inputs the browser would drop."""
    stored = {
        "text":      text,
        "weighted":  config.weighted,
        "directed":  config.directed,
        "inputMode": config.input_mode.value,
    }
    serializer = app.session_interface.get_signing_serializer(app)
    size       = len(serializer.dumps({**session, "graph_input": stored}))
    if size > app.config["MAX_COOKIE_SIZE"] - COOKIE_HEADROOM:
        raise ParseError(
            f"Graph input is too large to keep between requests ({size} bytes once encoded). "
            "Shorten the input."
        )
    session["graph_input"] = stored


def request_id(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value).strip()


def no_graph_response():
    return jsonify({"error": "Generate a graph first."}), 400


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(ParseError)
def handle_parse_error(err: ParseError):
    logger.info("parse_rejected", reason=err.message)
    return jsonify({"error": err.message}), 400


@app.errorhandler(CalculatorError)
def handle_calculator_error(err: CalculatorError):
    logger.info("calculator_rejected", reason=err.message)
    return jsonify({"error": err.message}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    stored = session.get("graph_input") or {}
    model  = get_model()
    svg    = render(model, canvas_config()).to_svg() if model else ""

    html = render_template_string(INDEX_TEMPLATE,
        app_name=settings.app_name,
        svg=svg,
        graph_input=graph_input_panel(
            text=stored.get("text", ""),
            weighted=stored.get("weighted", settings.default_weighted),
            directed=stored.get("directed", settings.default_directed),
            input_mode=stored.get("inputMode", settings.default_input_mode),
        ),
        shortest_path=shortest_path_panel(model.node_ids() if model else []),
        mst=mst_panel(),
        calculators=calculator_panel(),
        algorithms=algorithm_cards(list_algorithms()),
    )
    return html


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph/parse", methods=["POST"])
def api_graph_parse():
    text, config, model = parse_request(payload())
    save_graph_input(text, config)

    logger.info(
        "graph_loaded",
        mode=config.input_mode.value,
        nodes=model.node_count(),
        edges=model.edge_count(),
    )

    response = {
        "graph":    model.to_dict(),
        "svg":      render(model, canvas_config()).to_svg(),
        "node_ids": model.node_ids(),
    }
    if model.is_empty():
        response["message"] = "No nodes parsed. Check input format."
    return jsonify(response)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    model = get_model()
    if model is None:
        return no_graph_response()
    return jsonify({"svg": render(model, canvas_config()).to_svg()})


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/shortest-path", methods=["POST"])
def api_shortest_path():
    model = get_model()
    if model is None:
        return no_graph_response()

    data   = payload()
    source = request_id(data, "source")
    target = request_id(data, "target")
    if not source or not target:
        return jsonify({"error": "Provide both source and target node ids."}), 400

    result = get_algorithm("dijkstra").fn(model, source, target)
    handle = render(model, canvas_config())
    response = result.to_dict()

    if result.found:
        handle.highlight_path(result.path, result.edge_ids)
        response["message"] = f"Distance {_fmt(result.distance)}: {' → '.join(result.path)}"
    else:
        response["message"] = f"No path found from {source} to {target}."

    response["svg"] = handle.to_svg()
    return jsonify(response)


@app.route("/api/mst", methods=["POST"])
def api_mst():
    model = get_model()
    if model is None:
        return no_graph_response()

    start  = request_id(payload(), "start") or None
    result = get_algorithm("prim").fn(model, start)
    handle = render(model, canvas_config())
    response = result.to_dict()

    if result.edge_ids:
        handle.highlight_mst(result.edge_ids)
        response["message"] = (
            f"Total weight {_fmt(result.total_weight)} over {len(result.edge_ids)} edges"
            + ("" if result.complete else " (graph is disconnected; partial tree)")
            + "."
        )
    else:
        response["message"] = "No spanning edges found."

    response["svg"] = handle.to_svg()
    return jsonify(response)


# ---------------------------------------------------------------------------
# API: Calculators
# ---------------------------------------------------------------------------
@app.route("/api/calc/<op>", methods=["POST"])
def api_calc(op: str):
    fn = OPERATIONS.get(op)
    if fn is None:
        return jsonify({"error": f"Unknown operation {op!r}"}), 404

    raw = payload().get("text")
    if raw is not None:
        raw = str(raw)
        check_length(raw, CalculatorError)
    return jsonify(fn(raw).to_dict())


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ app_name }}</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-rose: #f43f5e;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 360px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
      overflow-y: auto;
    }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
      min-height: 420px;
    }

    #canvas-svg svg { max-width: 100%; max-height: 100%; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 10px;
      padding: 16px;
      margin-bottom: 16px;
    }

    .panel h3 { font-size: 14px; margin-bottom: 12px; }

    button {
      padding: 8px 14px;
      margin: 4px 4px 4px 0;
      border: none;
      border-radius: 8px;
      color: #fff;
      background: var(--bg-dark);
      cursor: pointer;
      font-weight: 600;
    }

    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { border: 1px solid var(--border); }

    input[type="text"], textarea {
      width: 100%;
      padding: 10px 12px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
      font-size: 13px;
    }

    input:focus, textarea:focus {
      outline: none;
      border-color: var(--accent-cyan);
      box-shadow: 0 0 0 3px var(--glow-cyan);
    }

    textarea { font-family: 'JetBrains Mono', monospace; resize: vertical; min-height: 120px; }

    label {
      display: block;
      margin: 8px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
    }

    .radio-row label { display: inline-block; margin-right: 12px; }

    .hint { font-size: 11px; color: var(--text-muted); margin-top: 8px; }

    .result { margin-top: 8px; font-family: 'JetBrains Mono', monospace; font-size: 13px; }
    .result.error { color: var(--accent-rose); }

    #bottom { display: flex; gap: 16px; padding: 16px; }
    #bottom > div { flex: 1; }

    .code-block {
      font-family: 'JetBrains Mono', monospace;
      font-size: 12px;
      background: var(--bg-darker);
      padding: 10px;
      border-radius: 6px;
      margin-top: 8px;
      white-space: pre;
    }

    .complexity { color: var(--accent-cyan); font-size: 11px; margin-left: 6px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <h2 style="margin-bottom: 16px;">{{ app_name }}</h2>
    <div id="graph-input-panel">{{ graph_input|safe }}</div>
    <div id="shortest-path-panel">{{ shortest_path|safe }}</div>
    <div id="mst-panel">{{ mst|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="bottom">
      <div>{{ calculators|safe }}</div>
      <div>{{ algorithms|safe }}</div>
    </div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    function show(id, data, text) {
      const el = document.getElementById(id);
      el.classList.toggle('error', Boolean(data.error));
      el.textContent = data.error || text || '';
    }

    function setSvg(data) {
      if (data.svg !== undefined) document.getElementById('canvas-svg').innerHTML = data.svg;
    }

    function setNodeIds(ids) {
      const list = document.getElementById('node-ids');
      list.innerHTML = '';
      (ids || []).forEach(id => {
        const opt = document.createElement('option');
        opt.value = id;
        list.appendChild(opt);
      });
    }

    // Graph generation
    document.getElementById('generate-btn').addEventListener('click', async () => {
      const data = await post('/api/graph/parse', {
        text: document.getElementById('graph-input').value,
        weighted: document.getElementById('weighted-checkbox').checked,
        directed: document.querySelector('input[name="direction"]:checked').value === 'directed',
        inputMode: document.querySelector('input[name="input-mode"]:checked').value,
      });
      if (data.error || data.message) alert(data.error || data.message);
      setSvg(data);
      setNodeIds(data.node_ids);
      show('dijkstra-result', {}, '');
      show('prim-result', {}, '');
    });

    document.getElementById('reset-btn').addEventListener('click', async () => {
      const data = await post('/api/reset', {});
      setSvg(data);
      show('dijkstra-result', {}, '');
      show('prim-result', {}, '');
    });

    // Dijkstra
    document.getElementById('dijkstra-run').addEventListener('click', async () => {
      const data = await post('/api/shortest-path', {
        source: document.getElementById('dijkstra-source').value,
        target: document.getElementById('dijkstra-target').value,
      });
      setSvg(data);
      show('dijkstra-result', data, data.message);
    });

    // Prim
    document.getElementById('prim-run').addEventListener('click', async () => {
      const data = await post('/api/mst', {start: document.getElementById('prim-start').value});
      setSvg(data);
      show('prim-result', data, data.message);
    });

    // Calculators
    document.querySelectorAll('.calc-btn').forEach(btn => {
      btn.addEventListener('click', async () => {
        const data = await post('/api/calc/' + btn.dataset.op, {
          text: document.getElementById('calc-list').value,
        });
        let text = '';
        if (data.result !== undefined) text = 'Result: ' + data.result + '  (inputs: ' + data.inputs.join(', ') + ')';
        if (data.output !== undefined) text = data.input + ' → ' + data.output;
        show('calc-result', data, text);
      });
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("server_starting", app=settings.app_name, host=settings.host, port=settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)

"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • graph_input_panel     – textarea + weighted / directed / input-mode
  • shortest_path_panel   – source / target inputs + run button
  • mst_panel             – optional start node + run button
  • calculator_panel      – bitwise + base-conversion buttons
  • algorithm_cards       – registry cards with pseudocode

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List

from algorithms import AlgoInfo

PLAIN_PLACEHOLDER = """A B 4
B C 1
C: D-2 E"""

ARRAY_PLACEHOLDER = "[[1,2,5],[2,3,3]]"


# ---------------------------------------------------------------------------
# Graph Input
# ---------------------------------------------------------------------------
def graph_input_panel(
    text: str = "",
    weighted: bool = False,
    directed: bool = False,
    input_mode: str = "plain",
) -> str:
    return f"""
    <div class="panel graph-input">
      <h3>🌐 Graph Input</h3>
      <div class="radio-row">
        <label><input type="radio" name="input-mode" id="graph-mode-plain" value="plain"
               {'checked' if input_mode == 'plain' else ''}> Plain text</label>
        <label><input type="radio" name="input-mode" id="graph-mode-array" value="array"
               {'checked' if input_mode == 'array' else ''}> Array / JSON</label>
      </div>
      <textarea id="graph-input" rows="8" placeholder="{escape(PLAIN_PLACEHOLDER)}">{escape(text)}</textarea>
      <div class="radio-row">
        <label><input type="radio" name="direction" value="undirected"
               {'' if directed else 'checked'}> Undirected</label>
        <label><input type="radio" name="direction" value="directed"
               {'checked' if directed else ''}> Directed</label>
        <label><input type="checkbox" id="weighted-checkbox" {'checked' if weighted else ''}> Weighted</label>
      </div>
      <div class="button-row">
        <button id="generate-btn" class="btn-primary">Generate Graph</button>
        <button id="reset-btn" class="btn-secondary">Reset Highlights</button>
      </div>
      <p class="hint">Edge list <code>u v [w]</code>, adjacency <code>u: v-w v</code>,
         or an array such as <code>{escape(ARRAY_PLACEHOLDER)}</code>.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Panels
# ---------------------------------------------------------------------------
def shortest_path_panel(node_ids: List[str]) -> str:
    options = "".join(f'<option value="{escape(nid)}"></option>' for nid in node_ids)
    return f"""
    <div class="panel shortest-path">
      <h3>🎯 Shortest Path (Dijkstra)</h3>
      <datalist id="node-ids">{options}</datalist>
      <label>Source: <input type="text" id="dijkstra-source" list="node-ids"></label>
      <label>Target: <input type="text" id="dijkstra-target" list="node-ids"></label>
      <button id="dijkstra-run" class="btn-primary">▶ Find Path</button>
      <div id="dijkstra-result" class="result"></div>
    </div>
    """


def mst_panel() -> str:
    return """
    <div class="panel mst">
      <h3>🌲 Minimum Spanning Tree (Prim)</h3>
      <label>Start (optional): <input type="text" id="prim-start" list="node-ids"></label>
      <button id="prim-run" class="btn-primary">▶ Build MST</button>
      <div id="prim-result" class="result"></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------
def calculator_panel() -> str:
    return """
    <div class="panel calculators">
      <h3>🧮 Calculators</h3>
      <input type="text" id="calc-list" placeholder="12, 10 0x6 0b11">
      <div class="button-row">
        <button class="calc-btn" data-op="and">AND</button>
        <button class="calc-btn" data-op="or">OR</button>
        <button class="calc-btn" data-op="xor">XOR</button>
        <button class="calc-btn" data-op="dec-to-bin">Dec → Bin</button>
        <button class="calc-btn" data-op="bin-to-dec">Bin → Dec</button>
      </div>
      <div id="calc-result" class="result"></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Cards (registry + pseudocode)
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return ""
    lines_html = [
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(pseudocode_lines)
    ]
    return f"""<div class="code-block">{''.join(lines_html)}</div>"""


def algorithm_cards(algorithms: List[AlgoInfo]) -> str:
    cards = []
    for algo in algorithms:
        inputs = "Needs a source and a target node." if algo.needs_target else "Start node is optional."
        cards.append(f"""
      <details class="algo-card" data-key="{algo.key}">
        <summary>{escape(algo.label)} <span class="complexity">{algo.complexity_time}</span></summary>
        <p>{escape(algo.description)}</p>
        <p class="hint">{inputs}</p>
        {pseudocode_viewer(algo.pseudocode)}
      </details>""")
    return f"""
    <div class="panel algorithm-cards">
      <h3>🧠 Algorithms</h3>
      {''.join(cards)}
    </div>
    """



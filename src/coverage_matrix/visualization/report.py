"""Generate a self-contained HTML coverage matrix.

The report embeds one pre-computed render state per selectable category
as a JSON blob inside a ``<script>`` tag and draws the matrix as plain
SVG (no CDN, no d3.js download), so it opens from any local file:// path.
When served live, the page instead asks the server for a fresh state on
every category change.
"""

import json
from pathlib import Path
from typing import Optional, Sequence

from ..models import CategoryField, Dataset
from ..state import Layout, build_render_state
from .matrix import build_matrix_data


def build_report_html(
    dataset: Dataset,
    fields: Sequence[CategoryField],
    layout: Optional[Layout] = None,
    initial: Optional[CategoryField] = None,
    live: bool = False,
    title: str = "Program Coverage Matrix",
) -> str:
    """Render the report page as a string.

    Parameters
    ----------
    dataset:
        Loaded goals and programs.
    fields:
        Category fields offered in the selector, in display order.
    layout:
        Plot geometry; defaults to :class:`~coverage_matrix.state.Layout`.
    initial:
        Field drawn first; defaults to the first of *fields*.
    live:
        Embed only the initial state and fetch ``api/state`` on change.
    """
    if not fields:
        raise ValueError("at least one category field is required")
    initial = initial or fields[0]

    states = {}
    for f in fields:
        if live and f != initial:
            continue
        states[f.column] = build_matrix_data(build_render_state(dataset, f, layout))

    data_json = json.dumps(
        {
            "title": title,
            "fields": [{"column": f.column, "label": f.label} for f in fields],
            "initial": initial.column,
            "states": states,
            "live": live,
            "summary": {
                "goal_count": len(dataset.goals),
                "program_count": len(dataset.programs),
            },
        }
    ).replace("</", "<\\/")

    return _build_html(data_json, title)


def generate_report(
    dataset: Dataset,
    fields: Sequence[CategoryField],
    output_path: str = "coverage-matrix.html",
    layout: Optional[Layout] = None,
    initial: Optional[CategoryField] = None,
) -> str:
    """Write the self-contained report and return its absolute path."""
    html = build_report_html(dataset, fields, layout=layout, initial=initial)
    out = Path(output_path).resolve()
    out.write_text(html, encoding="utf-8")
    return str(out)


# ── Private helpers ──────────────────────────────────────────────────


def _build_html(data_json: str, title: str) -> str:
    """Build the HTML page around the embedded data.

    The f-string uses {{ / }} to produce literal braces in CSS and JS.
    """
    safe_title = title.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{safe_title}</title>
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; background: #f9fafb; color: #2c3e50; padding: 24px 32px; }}
h1 {{ font-size: 22px; margin-bottom: 6px; }}
#summary {{ font-size: 13px; color: #696e7b; margin-bottom: 16px; }}
#controls {{ display: flex; gap: 12px; align-items: center; margin-bottom: 16px; }}
#controls label {{ font-size: 14px; color: #696e7b; }}
#categorySelector {{ padding: 4px 10px; border: 1px solid #dfe1e6; border-radius: 5px; font-size: 14px; background: #fff; }}
#legend {{ display: flex; gap: 16px; font-size: 13px; }}
.swatch {{ display: inline-block; width: 12px; height: 12px; border: 1px solid #bbb; margin-right: 4px; vertical-align: middle; }}
#timeline-chart text {{ font-size: 11px; fill: #2c3e50; }}
#timeline-chart .domain {{ stroke: #95a5a6; }}
.coverage-cell {{ cursor: pointer; }}
#tooltip {{ position: absolute; visibility: hidden; background: #fff; border: 1px solid #ccc; padding: 10px; border-radius: 6px; font-size: 13px; pointer-events: none; box-shadow: 0 4px 12px rgba(0,0,0,0.15); max-width: 360px; }}
</style>
</head>
<body>
<h1>{safe_title}</h1>
<div id="summary"></div>
<div id="controls">
  <label for="categorySelector">Group programs by:</label>
  <select id="categorySelector"></select>
  <div id="legend"></div>
</div>
<svg id="timeline-chart"></svg>
<div id="tooltip"></div>

<script>
// All report data embedded at generation time.
const DATA = {data_json};
const SVG_NS = "http://www.w3.org/2000/svg";

(function() {{
  var s = DATA.summary;
  document.getElementById("summary").textContent =
    s.goal_count + " goals \\u00b7 " + s.program_count + " programs";
}})();

// ── Category selector ────────────────────────────────────────────
(function() {{
  var sel = document.getElementById("categorySelector");
  DATA.fields.forEach(function(f) {{
    var opt = document.createElement("option");
    opt.value = f.column;
    opt.textContent = f.label;
    if (f.column === DATA.initial) opt.selected = true;
    sel.appendChild(opt);
  }});
  sel.addEventListener("change", function() {{ selectCategory(sel.value); }});
}})();

function selectCategory(column) {{
  if (!DATA.live) {{
    drawChart(DATA.states[column]);
    return;
  }}
  fetch("api/state?category=" + encodeURIComponent(column))
    .then(function(r) {{ if (!r.ok) throw new Error(r.statusText); return r.json(); }})
    .then(drawChart)
    .catch(function(err) {{ console.error("Category change failed:", err); }});
}}

// ── Matrix drawing (pure SVG, zero deps) ─────────────────────────
function el(name, attrs, parent) {{
  var node = document.createElementNS(SVG_NS, name);
  Object.keys(attrs).forEach(function(k) {{ node.setAttribute(k, attrs[k]); }});
  if (parent) parent.appendChild(node);
  return node;
}}

function drawChart(state) {{
  var svg = document.getElementById("timeline-chart");
  svg.innerHTML = "";
  svg.setAttribute("width", state.size.width);
  svg.setAttribute("height", state.size.height);
  var g = el("g", {{ transform: "translate(" + state.margin.left + "," + state.margin.top + ")" }}, svg);

  // Y axis: goal names, one row per goal in framework order.
  var yAxis = el("g", {{ "class": "y-axis" }}, g);
  el("line", {{ "class": "domain", x1: 0, x2: 0, y1: 0, y2: state.plot.height }}, yAxis);
  state.y_ticks.forEach(function(t) {{
    var text = el("text", {{ x: -6, y: t.y, dy: ".32em", "text-anchor": "end" }}, yAxis);
    text.textContent = t.label;
  }});

  // X axis: category values along the top.
  var xAxis = el("g", {{ "class": "x-axis" }}, g);
  el("line", {{ "class": "domain", x1: 0, x2: state.plot.width, y1: 0, y2: 0 }}, xAxis);
  state.x_ticks.forEach(function(t) {{
    var text = el("text", {{ x: t.x, y: -9, "text-anchor": "middle" }}, xAxis);
    text.textContent = t.value;
  }});

  var tooltip = document.getElementById("tooltip");
  state.cells.forEach(function(c) {{
    var rect = el("rect", {{
      "class": "coverage-cell", x: c.x, y: c.y,
      width: c.width, height: c.height, fill: c.fill
    }}, g);
    rect.addEventListener("mouseover", function() {{
      tooltip.style.visibility = "visible";
      rect.setAttribute("stroke", "#2c3e50");
      rect.setAttribute("stroke-width", 2);
    }});
    rect.addEventListener("mousemove", function(e) {{
      var t = c.tooltip;
      tooltip.style.left = (e.pageX + 10) + "px";
      tooltip.style.top = (e.pageY - 20) + "px";
      tooltip.innerHTML =
        "<strong>Goal:</strong> " + escapeHtml(t.goal_id) + " (" + escapeHtml(t.goal_name) + ")<br>" +
        "<strong>Category:</strong> " + escapeHtml(t.category) + "<br>" +
        "<strong>Programs:</strong> " + escapeHtml(t.programs.join(", ")) + "<br>" +
        (t.overlap ? "<strong>" + escapeHtml(t.summary) + "</strong>" : escapeHtml(t.summary));
    }});
    rect.addEventListener("mouseout", function() {{
      tooltip.style.visibility = "hidden";
      rect.removeAttribute("stroke");
    }});
  }});

  drawLegend(state.legend);
}}

function drawLegend(legend) {{
  var box = document.getElementById("legend");
  var labels = {{ none: "No coverage", single: "One program", overlap: "Overlap (2+)" }};
  box.innerHTML = Object.keys(legend).map(function(k) {{
    return '<span><span class="swatch" style="background:' + legend[k] + '"></span>' + labels[k] + '</span>';
  }}).join("");
}}

// ── Utility ──────────────────────────────────────────────────────
function escapeHtml(str) {{
  var div = document.createElement("div");
  div.appendChild(document.createTextNode(String(str)));
  return div.innerHTML;
}}

// Initial render.
drawChart(DATA.states[DATA.initial]);
</script>
</body>
</html>"""

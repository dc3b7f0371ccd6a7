"""Flatten a RenderState into JSON-safe data for the SVG matrix.

The browser does no aggregation or scale math: every rectangle and tick
arrives with its coordinates already computed, so the page only has to
draw what it is given.
"""

from typing import Any, Dict

from ..coloring import COLOR_PALETTE
from ..state import RenderState


def build_matrix_data(state: RenderState) -> Dict[str, Any]:
    """Convert one render state to a JSON-ready dictionary.

    Structure::

        {
            "field": {"column": "Rigor", "label": "Rigor"},
            "size": {"width": 700, "height": 270},
            "margin": {"top": 50, "right": 20, "bottom": 20, "left": 180},
            "plot": {"width": 500, "height": 200},
            "x_ticks": [{"value": "High", "x": 75.0}],
            "y_ticks": [{"value": "G-01", "label": "Basic Computation", "y": 9.0}],
            "cells": [
                {
                    "goal_id": "G-06", "category": "High",
                    "x": 0.0, "y": 100.0, "width": 150.0, "height": 18.0,
                    "level": "overlap", "fill": "#c0392b",
                    "program_count": 2,
                    "tooltip": {...}
                }
            ]
        }
    """
    layout = state.layout
    plot_height = state.y_scale.extent
    width, height = layout.total_size(len(state.goal_domain))

    cells = []
    for p in state.placements():
        cells.append(
            {
                "goal_id": p.cell.goal_id,
                "category": p.cell.category,
                "x": round(p.x, 3),
                "y": round(p.y, 3),
                "width": round(p.width, 3),
                "height": round(p.height, 3),
                "level": p.level.value,
                "fill": p.fill,
                "program_count": p.cell.program_count,
                "tooltip": state.tooltip(p.cell),
            }
        )

    return {
        "field": {"column": state.field.column, "label": state.field.label},
        "size": {"width": width, "height": height},
        "margin": {
            "top": layout.margin_top,
            "right": layout.margin_right,
            "bottom": layout.margin_bottom,
            "left": layout.margin_left,
        },
        "plot": {"width": layout.width, "height": plot_height},
        "x_ticks": [{"value": v, "x": round(x, 3)} for v, x in state.x_scale.ticks()],
        "y_ticks": [
            {"value": v, "label": state.goal_label(v), "y": round(y, 3)}
            for v, y in state.y_scale.ticks()
        ],
        "cells": cells,
        "legend": {level.value: color for level, color in COLOR_PALETTE.items()},
    }

"""JSON formatter for coverage cells and axis domains."""

import json

from ..coloring import color_for
from ..state import RenderState
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the state as JSON."""

    def render(self, state: RenderState) -> None:
        print(self.format(state))

    def format(self, state: RenderState) -> str:
        cells = []
        for c in state.visible_cells():
            entry = c.to_dict()
            entry["level"] = color_for(c.program_count).value
            cells.append(entry)
        data = {
            "category_field": state.field.column,
            "goal_domain": list(state.goal_domain),
            "category_domain": list(state.category_domain),
            "cells": cells,
        }
        return json.dumps(data, indent=2)

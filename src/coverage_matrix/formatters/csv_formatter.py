"""CSV formatter: one row per materialized cell."""

import csv
import io

from ..coloring import color_for
from ..state import RenderState
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render cells as CSV, in goal order then category order."""

    def render(self, state: RenderState) -> None:
        print(self.format(state), end="")

    def format(self, state: RenderState) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["goal_id", "goal_name", "category", "program_count", "level", "programs"])

        row_order = {g: i for i, g in enumerate(state.goal_domain)}
        col_order = {c: i for i, c in enumerate(state.category_domain)}
        ordered = sorted(
            state.visible_cells(),
            key=lambda c: (
                row_order.get(c.goal_id, len(row_order)),
                col_order.get(c.category, len(col_order)),
                c.category,
            ),
        )
        for c in ordered:
            writer.writerow([
                c.goal_id,
                state.goal_label(c.goal_id),
                c.category,
                c.program_count,
                color_for(c.program_count).value,
                "; ".join(c.program_names),
            ])
        return output.getvalue()

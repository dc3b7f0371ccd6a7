"""Rich terminal formatter: the coverage matrix as a colored grid."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..coloring import RICH_STYLES, color_for
from ..models import CoverageLevel
from ..state import RenderState
from .base import BaseFormatter

_GLYPHS = {
    CoverageLevel.NONE: "·",
    CoverageLevel.SINGLE: "■",
    CoverageLevel.OVERLAP: "■",
}


class RichFormatter(BaseFormatter):
    """Goal rows by category columns, one glyph per cell."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, state: RenderState) -> None:
        self.console.print(self.build_table(state))
        self.console.print(self._legend())

    def format(self, state: RenderState) -> str:
        with self.console.capture() as capture:
            self.render(state)
        return capture.get()

    def build_table(self, state: RenderState) -> Table:
        table = Table(
            title=f"Coverage by {state.field.label}",
            show_lines=False,
            header_style="bold cyan",
        )
        table.add_column("Goal", style="dim", no_wrap=True)
        table.add_column("Name")
        for category in state.category_domain:
            table.add_column(category, justify="center")

        for goal_id in state.goal_domain:
            row = [goal_id, state.goal_label(goal_id)]
            for category in state.category_domain:
                row.append(self._cell_text(state.count_at(goal_id, category)))
            table.add_row(*row)
        return table

    @staticmethod
    def _cell_text(count: int) -> Text:
        level = color_for(count)
        glyph = _GLYPHS[level]
        label = f"{glyph} {count}" if level is CoverageLevel.OVERLAP else glyph
        return Text(label, style=RICH_STYLES[level])

    @staticmethod
    def _legend() -> Text:
        legend = Text()
        legend.append(_GLYPHS[CoverageLevel.SINGLE], style=RICH_STYLES[CoverageLevel.SINGLE])
        legend.append(" one program   ")
        legend.append(_GLYPHS[CoverageLevel.OVERLAP], style=RICH_STYLES[CoverageLevel.OVERLAP])
        legend.append(" overlap (count shown)   ")
        legend.append(_GLYPHS[CoverageLevel.NONE], style=RICH_STYLES[CoverageLevel.NONE])
        legend.append(" none")
        return legend

"""Immutable render state, rebuilt from scratch on every category change."""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Tuple, TypeVar, Union

from .aggregation import aggregate, missing_bucket
from .axes import BandScale, category_domain, goal_domain
from .coloring import color_for, fill_for
from .models import UNSPECIFIED, CategoryField, Cell, CoverageLevel, Dataset, Goal

T = TypeVar("T")


@dataclass(frozen=True)
class Layout:
    """Plot geometry; ``width`` is the inner plot width, margins excluded."""

    width: float = 500
    row_height: float = 20
    padding_inner: float = 0.1
    margin_top: float = 50
    margin_right: float = 20
    margin_bottom: float = 20
    margin_left: float = 180
    unspecified: str = UNSPECIFIED
    show_unspecified: bool = True

    def plot_height(self, goal_count: int) -> float:
        """Plot height grows with the number of goal rows."""
        return goal_count * self.row_height

    def total_size(self, goal_count: int) -> Tuple[float, float]:
        return (
            self.width + self.margin_left + self.margin_right,
            self.plot_height(goal_count) + self.margin_top + self.margin_bottom,
        )


@dataclass(frozen=True)
class CellPlacement:
    """Where and how one cell is drawn."""

    cell: Cell
    x: float
    y: float
    width: float
    height: float
    level: CoverageLevel
    fill: str


@dataclass(frozen=True)
class RenderState:
    """Everything a renderer needs for one category selection."""

    field: CategoryField
    goal_domain: Tuple[str, ...]
    category_domain: Tuple[str, ...]
    cells: Tuple[Cell, ...]
    x_scale: BandScale
    y_scale: BandScale
    layout: Layout
    goals: Mapping[str, Goal] = field(default_factory=dict)

    def cell_at(self, goal_id: str, category: str) -> Optional[Cell]:
        for c in self.cells:
            if c.goal_id == goal_id and c.category == category:
                return c
        return None

    def count_at(self, goal_id: str, category: str) -> int:
        """Program count for a pair; an absent cell means zero."""
        c = self.cell_at(goal_id, category)
        return c.program_count if c else 0

    def goal_label(self, goal_id: str) -> str:
        g = self.goals.get(goal_id)
        return g.name if g and g.name else goal_id

    def visible_cells(self) -> List[Cell]:
        """Cells that have both a column and a row; hidden buckets are left out."""
        return [c for c in self.cells if c.category in self.x_scale and c.goal_id in self.y_scale]

    def placements(self) -> List[CellPlacement]:
        """Rectangles for every visible cell."""
        placed = []
        for c in self.visible_cells():
            x = self.x_scale.position(c.category)
            y = self.y_scale.position(c.goal_id)
            placed.append(
                CellPlacement(
                    cell=c,
                    x=x,
                    y=y,
                    width=self.x_scale.bandwidth,
                    height=self.y_scale.bandwidth,
                    level=color_for(c.program_count),
                    fill=fill_for(c.program_count),
                )
            )
        return placed

    def tooltip(self, cell: Cell) -> Dict[str, object]:
        """Hover content for a cell."""
        g = self.goals.get(cell.goal_id)
        overlap = cell.program_count >= 2
        return {
            "goal_id": cell.goal_id,
            "goal_name": g.name if g and g.name else "N/A",
            "category": cell.category,
            "programs": list(cell.program_names),
            "overlap": overlap,
            "summary": f"Overlap: {cell.program_count} programs" if overlap else "Coverage",
        }


def build_render_state(
    dataset: Dataset,
    field: Union[CategoryField, str],
    layout: Optional[Layout] = None,
) -> RenderState:
    """Aggregate cells and derive both axes for *field*."""
    layout = layout or Layout()
    if isinstance(field, str):
        field = CategoryField.parse(field)

    unspecified = missing_bucket(dataset.programs, field, layout.unspecified)
    cells = aggregate(dataset.goals, dataset.programs, field, unspecified=unspecified)

    rows = goal_domain(dataset.goals)
    columns = category_domain(dataset.programs, field)
    if layout.show_unspecified and any(c.category == unspecified for c in cells):
        columns.append(unspecified)

    return RenderState(
        field=field,
        goal_domain=tuple(rows),
        category_domain=tuple(columns),
        cells=tuple(cells),
        x_scale=BandScale(columns, layout.width, layout.padding_inner),
        y_scale=BandScale(rows, layout.plot_height(len(rows)), layout.padding_inner),
        layout=layout,
        goals=dataset.goals_by_id(),
    )


def on_category_changed(
    dataset: Dataset,
    new_field: Union[CategoryField, str],
    render: Callable[[RenderState], T],
    layout: Optional[Layout] = None,
) -> T:
    """Rebuild the render state for *new_field* and hand it to *render*."""
    return render(build_render_state(dataset, new_field, layout))

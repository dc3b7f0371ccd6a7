"""
Coverage Matrix - curriculum goal coverage by program category

Aggregates which programs cover which curriculum goals, grouped by a
chosen program attribute (rigor, program type, ...), and renders the
result as a goals x categories matrix: no coverage, one program, or an
overlap of two or more.
"""

__version__ = "0.1.0"

from .aggregation import aggregate, parse_goal_references
from .axes import BandScale, category_domain, goal_domain
from .coloring import color_for
from .models import (
    UNSPECIFIED,
    CategoryField,
    Cell,
    CoverageLevel,
    Dataset,
    Goal,
    Program,
)
from .state import Layout, RenderState, build_render_state, on_category_changed

__all__ = [
    "aggregate",  # Core entry point
    "parse_goal_references",
    "goal_domain",
    "category_domain",
    "BandScale",
    "color_for",
    "build_render_state",
    "on_category_changed",
    "RenderState",
    "Layout",
    "Goal",
    "Program",
    "Cell",
    "CategoryField",
    "CoverageLevel",
    "Dataset",
    "UNSPECIFIED",
]

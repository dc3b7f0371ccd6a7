"""Coverage aggregation: program rows to per-(goal, category) cells.

Programs are grouped by the value of the selected category column, then
by each goal they reference.  Every non-empty bucket becomes one
:class:`~coverage_matrix.models.Cell`; empty buckets are never emitted,
so a missing cell means zero coverage.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Union

from .models import UNSPECIFIED, CategoryField, Cell, Goal, Program

logger = logging.getLogger(__name__)


def parse_goal_references(goals_covered: str) -> List[str]:
    """Split a ``Goals_Covered`` value into trimmed goal ids.

    Empty or missing text gives an empty list.  Repeated ids are kept.
    """
    if not goals_covered:
        return []
    refs = []
    for piece in goals_covered.split(","):
        goal_id = piece.strip()
        if goal_id:
            refs.append(goal_id)
    return refs


def missing_bucket(
    programs: Iterable[Program],
    field: Union[CategoryField, str],
    unspecified: str = UNSPECIFIED,
) -> str:
    """Bucket name for programs with no value in *field*.

    If some program really has *unspecified* as its value, the bucket is
    renamed (``"Unspecified (2)"``, ...) so the two groups never share a cell.
    """
    column = field.column if isinstance(field, CategoryField) else field
    values = {p.value_of(column) for p in programs}
    label = unspecified
    n = 1
    while label in values:
        n += 1
        label = f"{unspecified} ({n})"
    if label != unspecified:
        logger.warning(
            "Column %s has real value %r; programs without a value are shown as %r",
            column,
            unspecified,
            label,
        )
    return label


def category_of(program: Program, field: Union[CategoryField, str], unspecified: str = UNSPECIFIED) -> str:
    """Category bucket a program falls into for *field*."""
    column = field.column if isinstance(field, CategoryField) else field
    value = program.value_of(column)
    return unspecified if value is None else value


def aggregate(
    goals: Sequence[Goal],
    programs: Iterable[Program],
    field: Union[CategoryField, str],
    unspecified: str = UNSPECIFIED,
) -> List[Cell]:
    """Aggregate programs into coverage cells for one category field.

    Args:
        goals: The valid goal universe; references outside it are dropped.
        programs: Raw program rows.
        field: Column supplying each program's category value.
        unspecified: Bucket name for programs with no value in *field*;
            see :func:`missing_bucket` for clashes with real values.

    Returns:
        One Cell per (category, goal) pair covered by at least one program.
        ``program_names`` keeps program iteration order and duplicates.
    """
    programs = list(programs)
    unspecified = missing_bucket(programs, field, unspecified)
    universe = {g.id for g in goals}

    buckets: Dict[str, Dict[str, List[str]]] = {}
    dropped = 0
    for program in programs:
        category = category_of(program, field, unspecified)
        by_goal = buckets.setdefault(category, {})
        for goal_id in parse_goal_references(program.goals_covered):
            if goal_id not in universe:
                dropped += 1
                continue
            by_goal.setdefault(goal_id, []).append(program.name)

    if dropped:
        logger.debug("Ignored %d reference(s) to goals outside the framework", dropped)

    cells = []
    for category, by_goal in buckets.items():
        for goal_id, names in by_goal.items():
            cells.append(Cell(goal_id=goal_id, category=category, program_names=tuple(names)))
    return cells

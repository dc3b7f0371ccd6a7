"""Data models for the coverage matrix: goals, programs and derived cells."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

# Bucket for programs that have no value in the selected category column.
UNSPECIFIED = "Unspecified"


class CoverageLevel(str, Enum):
    """Visual classification of a cell's program count."""

    NONE = "none"
    SINGLE = "single"
    OVERLAP = "overlap"


@dataclass(frozen=True)
class Goal:
    """One curriculum goal (a matrix row)."""

    id: str
    name: str
    grade: Optional[str] = None


@dataclass(frozen=True)
class Program:
    """One program row as entered by staff.

    ``goals_covered`` keeps the raw comma-separated text; categorical
    columns such as ``Rigor`` and ``Program_Type`` live in ``fields``.
    """

    name: str
    goals_covered: str = ""
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def value_of(self, column: str) -> Optional[str]:
        """Return the trimmed value of a categorical column, or None if missing or blank."""
        value = self.fields.get(column)
        if value is None:
            return None
        return str(value).strip() or None

    @property
    def rigor(self) -> Optional[str]:
        return self.value_of("Rigor")

    @property
    def program_type(self) -> Optional[str]:
        return self.value_of("Program_Type")


@dataclass(frozen=True)
class CategoryField:
    """A program column selectable as the horizontal axis."""

    column: str
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.column.replace("_", " "))

    @classmethod
    def parse(cls, column: str) -> "CategoryField":
        return cls(column=column.strip())


RIGOR = CategoryField("Rigor")
PROGRAM_TYPE = CategoryField("Program_Type")
DEFAULT_CATEGORY_FIELDS: Tuple[CategoryField, ...] = (RIGOR, PROGRAM_TYPE)


@dataclass(frozen=True)
class Cell:
    """Coverage of one goal by the programs of one category value."""

    goal_id: str
    category: str
    program_names: Tuple[str, ...]

    @property
    def program_count(self) -> int:
        return len(self.program_names)

    def to_dict(self) -> Dict[str, object]:
        return {
            "goal_id": self.goal_id,
            "category": self.category,
            "program_count": self.program_count,
            "program_names": list(self.program_names),
        }


@dataclass(frozen=True)
class Dataset:
    """Goals and programs loaded once per session and never mutated."""

    goals: Tuple[Goal, ...]
    programs: Tuple[Program, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "goals", tuple(self.goals))
        object.__setattr__(self, "programs", tuple(self.programs))

    def goal(self, goal_id: str) -> Optional[Goal]:
        """Look up a goal by id (first occurrence wins)."""
        for g in self.goals:
            if g.id == goal_id:
                return g
        return None

    def goals_by_id(self) -> Dict[str, Goal]:
        lookup: Dict[str, Goal] = {}
        for g in self.goals:
            lookup.setdefault(g.id, g)
        return lookup

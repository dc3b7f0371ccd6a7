"""Axis domains and band placement for the two categorical axes."""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .models import CategoryField, Goal, Program


def goal_domain(goals: Iterable[Goal]) -> List[str]:
    """Goal ids in framework order (first occurrence of a duplicate id wins)."""
    seen = set()
    domain = []
    for g in goals:
        if g.id not in seen:
            seen.add(g.id)
            domain.append(g.id)
    return domain


def category_domain(programs: Iterable[Program], field: Union[CategoryField, str]) -> List[str]:
    """Distinct non-empty values of *field* across programs, sorted ascending."""
    column = field.column if isinstance(field, CategoryField) else field
    values = {p.value_of(column) for p in programs}
    values.discard(None)
    return sorted(values)


class BandScale:
    """Map an ordered domain onto equal-width bands over ``[0, extent]``.

    Each value owns a slot of width ``step = extent / n`` starting at
    ``index * step``.  The band itself is ``step * (1 - padding_inner)``
    wide and sits at the start of its slot, so the inner padding follows
    each band.  Axis ticks use :meth:`center`, which keeps labels aligned
    with the cells placed by :meth:`position`.
    """

    def __init__(self, domain: Sequence[str], extent: float, padding_inner: float = 0.1):
        if not 0.0 <= padding_inner < 1.0:
            raise ValueError("padding_inner must be in [0.0, 1.0)")
        if extent < 0:
            raise ValueError("extent must be non-negative")
        self.domain: Tuple[str, ...] = tuple(domain)
        self.extent = float(extent)
        self.padding_inner = padding_inner
        self._index: Dict[str, int] = {}
        for i, value in enumerate(self.domain):
            self._index.setdefault(value, i)

    @property
    def step(self) -> float:
        if not self.domain:
            return 0.0
        return self.extent / len(self.domain)

    @property
    def bandwidth(self) -> float:
        return self.step * (1.0 - self.padding_inner)

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self.domain)

    def position(self, value: str) -> Optional[float]:
        """Start offset of *value*'s band, or None if it is not in the domain."""
        index = self._index.get(value)
        if index is None:
            return None
        return index * self.step

    def center(self, value: str) -> Optional[float]:
        start = self.position(value)
        if start is None:
            return None
        return start + self.bandwidth / 2

    def ticks(self) -> List[Tuple[str, float]]:
        """(value, center) pairs for drawing axis labels."""
        return [(value, self.center(value)) for value in self.domain]

    def to_dict(self) -> Dict[str, object]:
        return {
            "domain": list(self.domain),
            "extent": self.extent,
            "step": self.step,
            "bandwidth": self.bandwidth,
            "padding_inner": self.padding_inner,
        }

    def __repr__(self) -> str:
        return f"BandScale(n={len(self.domain)}, extent={self.extent}, padding_inner={self.padding_inner})"

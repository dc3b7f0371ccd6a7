"""Load the goals and programs tables from CSV files or published CSV URLs."""

import csv
import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import requests

from .exceptions import DataLoadError, MissingColumnError
from .models import Dataset, Goal, Program

logger = logging.getLogger(__name__)

GOAL_COLUMNS = ("ID", "Name")
PROGRAM_COLUMNS = ("Program_Name", "Goals_Covered")

Row = Mapping[str, Optional[str]]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def read_table(source: str, timeout: float = 10.0) -> List[Dict[str, str]]:
    """Read CSV rows from a local path or an http(s) URL."""
    if _is_url(source):
        logger.debug("Fetching %s", source)
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            text = response.content.decode("utf-8-sig")
        except (requests.RequestException, UnicodeDecodeError) as e:
            raise DataLoadError(source, str(e))
    else:
        path = Path(source)
        if not path.is_file():
            raise DataLoadError(source, "file not found")
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise DataLoadError(source, str(e))

    try:
        reader = csv.DictReader(io.StringIO(text))
        if not reader.fieldnames:
            raise DataLoadError(source, "empty table")
        # Cells past the header width land under the None key; drop them.
        rows = [{_clean(k): v for k, v in r.items() if k is not None} for r in reader]
    except csv.Error as e:
        raise DataLoadError(source, f"malformed CSV: {e}")

    logger.info("Read %d row(s) from %s", len(rows), source)
    return rows


def _require(rows: Sequence[Row], columns: Iterable[str], source: str) -> None:
    present = set()
    for r in rows:
        present.update(r.keys())
    missing = [c for c in columns if c not in present]
    if missing:
        raise MissingColumnError(source, missing)


def goals_from_rows(rows: Sequence[Row], source: str = "goals") -> List[Goal]:
    """Convert framework rows to goals, keeping row order.

    Rows with a blank ID are skipped; a repeated ID keeps its first row.
    """
    if rows:
        _require(rows, GOAL_COLUMNS, source)

    goals: List[Goal] = []
    seen = set()
    for line, r in enumerate(rows, start=2):
        goal_id = _clean(r.get("ID"))
        if not goal_id:
            logger.warning("%s line %d: goal without ID skipped", source, line)
            continue
        if goal_id in seen:
            logger.warning("%s line %d: duplicate goal ID %s ignored", source, line, goal_id)
            continue
        seen.add(goal_id)
        grade = _clean(r.get("Grade")) or None
        goals.append(Goal(id=goal_id, name=_clean(r.get("Name")), grade=grade))
    return goals


def programs_from_rows(rows: Sequence[Row], source: str = "programs") -> List[Program]:
    """Convert program rows; every extra column becomes a categorical field."""
    if rows:
        _require(rows, PROGRAM_COLUMNS, source)

    programs = []
    for r in rows:
        fields = {k: _clean(v) for k, v in r.items() if k not in PROGRAM_COLUMNS}
        programs.append(
            Program(
                name=_clean(r.get("Program_Name")),
                goals_covered=_clean(r.get("Goals_Covered")),
                fields=fields,
            )
        )
    return programs


def load_dataset(goals_source: str, programs_source: str, timeout: float = 10.0) -> Dataset:
    """Load both tables; the dataset exists only if both loads succeed.

    Raises:
        DataLoadError: If either table is unreadable or malformed.
    """
    goals = goals_from_rows(read_table(goals_source, timeout), goals_source)
    programs = programs_from_rows(read_table(programs_source, timeout), programs_source)
    if not goals:
        raise DataLoadError(goals_source, "no goals defined")
    logger.info("Loaded %d goal(s) and %d program(s)", len(goals), len(programs))
    return Dataset(goals=tuple(goals), programs=tuple(programs))

"""Shared test fixtures for Coverage Matrix tests."""

import pytest

from coverage_matrix.models import Dataset, Goal, Program
from coverage_matrix.sample import sample_dataset


@pytest.fixture
def three_goals():
    """G-01..G-03 in framework order."""
    return [
        Goal("G-01", "Basic Computation", "K"),
        Goal("G-02", "Phonological Awareness", "1"),
        Goal("G-03", "Simple Measurement", "1"),
    ]


@pytest.fixture
def two_programs():
    """P1 covers G-01 and G-02, P2 covers G-02; both in category X."""
    return [
        Program("P1", "G-01, G-02", {"cat": "X"}),
        Program("P2", "G-02", {"cat": "X"}),
    ]


@pytest.fixture
def scenario_dataset(three_goals, two_programs):
    return Dataset(goals=tuple(three_goals), programs=tuple(two_programs))


@pytest.fixture
def sample():
    """The built-in ten-goal, six-program dataset."""
    return sample_dataset()


@pytest.fixture
def goals_csv(tmp_path):
    path = tmp_path / "goals.csv"
    path.write_text(
        "ID,Name,Grade\n"
        "G-01,Basic Computation,K\n"
        "G-02,Phonological Awareness,1\n"
        "G-03,Simple Measurement,1\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def programs_csv(tmp_path):
    path = tmp_path / "programs.csv"
    path.write_text(
        "Program_Name,Goals_Covered,Rigor,Program_Type\n"
        'Math Club,"G-01, G-02",High,District\n'
        'Reading Buddies," G-02 ,G-99",High,Community\n'
        "Open Lab,,Low,Community\n"
        "Drop-in,G-03,,District\n",
        encoding="utf-8",
    )
    return path

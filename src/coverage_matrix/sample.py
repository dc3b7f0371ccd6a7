"""Built-in demonstration data so the matrix runs without files or network."""

from .loader import goals_from_rows, programs_from_rows
from .models import Dataset

SAMPLE_GOALS = [
    {"ID": "G-01", "Name": "Basic Computation", "Grade": "K"},
    {"ID": "G-02", "Name": "Phonological Awareness", "Grade": "1"},
    {"ID": "G-03", "Name": "Simple Measurement", "Grade": "1"},
    {"ID": "G-04", "Name": "Introduction to History", "Grade": "2"},
    {"ID": "G-05", "Name": "Ecosystems", "Grade": "3"},
    {"ID": "G-06", "Name": "Decimals and Fractions", "Grade": "4"},
    {"ID": "G-07", "Name": "Essay Structure", "Grade": "5"},
    {"ID": "G-08", "Name": "Algebraic Thinking", "Grade": "6"},
    {"ID": "G-09", "Name": "Constitutional Law", "Grade": "8"},
    {"ID": "G-10", "Name": "Scientific Inquiry", "Grade": "9"},
]

# G-06 and G-08 overlap in the High rigor column.
SAMPLE_PROGRAMS = [
    {"Program_Name": "Math Club", "Goals_Covered": "G-06, G-08", "Rigor": "High", "Program_Type": "District"},
    {"Program_Name": "Summer Literacy", "Goals_Covered": "G-02, G-07", "Rigor": "Medium", "Program_Type": "District"},
    {
        "Program_Name": "Community Tutoring",
        "Goals_Covered": "G-01, G-02, G-03, G-06",
        "Rigor": "Low",
        "Program_Type": "Community",
    },
    {"Program_Name": "History Bee Prep", "Goals_Covered": "G-04, G-09", "Rigor": "High", "Program_Type": "Community"},
    {"Program_Name": "Science Camp", "Goals_Covered": "G-05, G-10", "Rigor": "Medium", "Program_Type": "Community"},
    {
        "Program_Name": "Advanced Study Group",
        "Goals_Covered": "G-06, G-08, G-09",
        "Rigor": "High",
        "Program_Type": "District",
    },
]


def sample_dataset() -> Dataset:
    goals = goals_from_rows(SAMPLE_GOALS, "sample goals")
    programs = programs_from_rows(SAMPLE_PROGRAMS, "sample programs")
    return Dataset(goals=tuple(goals), programs=tuple(programs))

"""Coloring policy: coverage count to visual level."""

from typing import Dict

from .models import CoverageLevel

COLOR_PALETTE: Dict[CoverageLevel, str] = {
    CoverageLevel.NONE: "transparent",
    CoverageLevel.SINGLE: "#3498db",  # blue, coverage
    CoverageLevel.OVERLAP: "#c0392b",  # red, overlap
}

# rich style names used by the terminal grid
RICH_STYLES: Dict[CoverageLevel, str] = {
    CoverageLevel.NONE: "dim",
    CoverageLevel.SINGLE: "bold blue",
    CoverageLevel.OVERLAP: "bold red",
}


def color_for(program_count: int) -> CoverageLevel:
    """Classify a program count: 0 -> NONE, 1 -> SINGLE, 2+ -> OVERLAP."""
    if program_count >= 2:
        return CoverageLevel.OVERLAP
    if program_count == 1:
        return CoverageLevel.SINGLE
    return CoverageLevel.NONE


def fill_for(program_count: int) -> str:
    """Presentation color for a program count."""
    return COLOR_PALETTE[color_for(program_count)]

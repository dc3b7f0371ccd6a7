"""Visualization layer: HTML coverage matrix with a category selector."""

from .matrix import build_matrix_data
from .report import build_report_html, generate_report

__all__ = [
    "build_matrix_data",
    "build_report_html",
    "generate_report",
]

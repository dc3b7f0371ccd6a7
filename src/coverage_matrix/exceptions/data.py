"""Data loading exceptions: unreadable sources and malformed tables."""

from typing import Sequence

from .base import CoverageMatrixError


class DataLoadError(CoverageMatrixError):
    """Raised when a source table cannot be loaded."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Cannot load table: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class MissingColumnError(DataLoadError):
    """Raised when a table lacks a column the matrix needs."""

    def __init__(self, source: str, missing: Sequence[str]):
        super().__init__(source, f"missing column(s): {', '.join(missing)}")
        self.missing = list(missing)

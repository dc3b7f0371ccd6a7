"""Configuration exceptions: settings and category selection."""

from typing import Any, Sequence

from .base import CoverageMatrixError


class ConfigurationError(CoverageMatrixError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class UnknownCategoryError(ConfigurationError):
    """Raised when a category field is not one of the selectable fields."""

    def __init__(self, column: str, available: Sequence[str]):
        super().__init__(
            f"Unknown category field: {column}",
            details={"column": column, "available": ", ".join(available)},
        )
        self.column = column
        self.available = list(available)

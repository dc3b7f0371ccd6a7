"""Exception hierarchy for Coverage Matrix."""

from .base import CoverageMatrixError
from .config import ConfigurationError, InvalidConfigError, UnknownCategoryError
from .data import DataLoadError, MissingColumnError

__all__ = [
    "CoverageMatrixError",
    "ConfigurationError",
    "InvalidConfigError",
    "UnknownCategoryError",
    "DataLoadError",
    "MissingColumnError",
]

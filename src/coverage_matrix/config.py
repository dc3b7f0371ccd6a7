"""Configuration loading and management for Coverage Matrix.

Configuration sources are merged in priority order:
    1. Defaults (defined in MatrixConfig)
    2. Global config (~/.coverage-matrix.toml)
    3. Project config (./coverage-matrix.toml)
    4. Explicit config file (--config)
    5. Environment variables (COVERAGE_MATRIX_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(programs_source="programs.csv")
    >>> config.category_fields
    ['Rigor', 'Program_Type']
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError, UnknownCategoryError
from .models import UNSPECIFIED, CategoryField
from .state import Layout

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "COVERAGE_MATRIX_"


@dataclass(frozen=True)
class MatrixConfig:
    """Settings for loading, aggregating and drawing the matrix.

    Attributes:
        Sources:
            goals_source: Path or URL of the goals (framework) CSV
            programs_source: Path or URL of the programs CSV
            request_timeout: Seconds to wait for a remote table

        Categories:
            category_fields: Program columns offered as the horizontal axis
            default_category: Initial selection (None = first field)
            unspecified_label: Bucket name for programs without a value
            show_unspecified: Add the unspecified bucket as a column when used

        Layout:
            width: Total chart width in pixels, margins included
            row_height: Pixels per goal row
            padding_inner: Inner band padding ratio for both axes
            margin_top / margin_right / margin_bottom / margin_left

        Output:
            output_path: Default HTML report path
            verbosity: Logging verbosity level
    """

    goals_source: Optional[str] = None
    programs_source: Optional[str] = None
    request_timeout: float = 10.0

    category_fields: list[str] = field(default_factory=lambda: ["Rigor", "Program_Type"])
    default_category: Optional[str] = None
    unspecified_label: str = UNSPECIFIED
    show_unspecified: bool = True

    width: int = 700
    row_height: int = 20
    padding_inner: float = 0.1
    margin_top: int = 50
    margin_right: int = 20
    margin_bottom: int = 20
    margin_left: int = 180

    output_path: str = "coverage-matrix.html"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.request_timeout <= 0:
            raise InvalidConfigError("request_timeout", self.request_timeout, "must be positive")

        if not self.category_fields:
            raise InvalidConfigError("category_fields", self.category_fields, "must not be empty")
        if any(not str(c).strip() for c in self.category_fields):
            raise InvalidConfigError("category_fields", self.category_fields, "blank column name")
        if len(set(self.category_fields)) != len(self.category_fields):
            raise InvalidConfigError("category_fields", self.category_fields, "duplicate column")
        if self.default_category is not None and self.default_category not in self.category_fields:
            raise UnknownCategoryError(self.default_category, self.category_fields)
        if not self.unspecified_label.strip():
            raise InvalidConfigError("unspecified_label", self.unspecified_label, "must not be blank")

        if not 0.0 <= self.padding_inner < 1.0:
            raise InvalidConfigError("padding_inner", self.padding_inner, "must be in [0.0, 1.0)")
        if self.row_height < 1:
            raise InvalidConfigError("row_height", self.row_height, "must be at least 1")
        for name in ("margin_top", "margin_right", "margin_bottom", "margin_left"):
            if getattr(self, name) < 0:
                raise InvalidConfigError(name, getattr(self, name), "must be non-negative")
        if self.width <= self.margin_left + self.margin_right:
            raise InvalidConfigError("width", self.width, "must exceed left + right margins")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet, normal or verbose")

    @property
    def fields(self) -> list[CategoryField]:
        """Selectable category fields in configured order."""
        return [CategoryField.parse(c) for c in self.category_fields]

    @property
    def initial_field(self) -> CategoryField:
        return CategoryField.parse(self.default_category or self.category_fields[0])

    def field_for(self, column: Optional[str]) -> CategoryField:
        """Resolve a column name to a selectable field (None = initial field)."""
        if column is None:
            return self.initial_field
        for f in self.fields:
            if f.column == column:
                return f
        raise UnknownCategoryError(column, self.category_fields)

    def layout(self) -> Layout:
        return Layout(
            width=self.width - self.margin_left - self.margin_right,
            row_height=self.row_height,
            padding_inner=self.padding_inner,
            margin_top=self.margin_top,
            margin_right=self.margin_right,
            margin_bottom=self.margin_bottom,
            margin_left=self.margin_left,
            unspecified=self.unspecified_label,
            show_unspecified=self.show_unspecified,
        )


def load_config(config_file: Optional[Path] = None, **overrides) -> MatrixConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None
            values are ignored

    Returns:
        Validated MatrixConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".coverage-matrix.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "coverage-matrix.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return MatrixConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COVERAGE_MATRIX_* environment variables.

    ``COVERAGE_MATRIX_CATEGORY_FIELDS`` takes a comma-separated list;
    other variables are parsed by the field's declared type.
    """
    type_hints = get_type_hints(MatrixConfig)

    result: dict[str, Any] = {}
    for field_name in MatrixConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type."""
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[matrix]`` table is accepted as well as top-level keys.
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)
    section = data.pop("matrix", None)
    if isinstance(section, dict):
        data.update(section)
    return data

"""Shared CLI helpers."""

import logging
from typing import Optional

import typer
from rich.console import Console

from ..config import MatrixConfig
from ..exceptions import ConfigurationError, CoverageMatrixError
from ..loader import load_dataset
from ..models import CategoryField, Dataset
from ..sample import sample_dataset

console = Console()
logger = logging.getLogger(__name__)


def get_config(ctx: typer.Context) -> MatrixConfig:
    return ctx.obj["config"]


def load_data(ctx: typer.Context) -> Dataset:
    """Load the dataset named by the global options.

    Raises:
        CoverageMatrixError: If sources are missing or cannot be loaded.
    """
    if ctx.obj.get("sample"):
        logger.info("Using built-in sample data")
        return sample_dataset()

    config = get_config(ctx)
    if not config.goals_source or not config.programs_source:
        raise ConfigurationError(
            "Both --goals and --programs are required (or use --sample)",
            details={
                "goals": config.goals_source or "unset",
                "programs": config.programs_source or "unset",
            },
        )
    return load_dataset(config.goals_source, config.programs_source, timeout=config.request_timeout)


def resolve_field(ctx: typer.Context, category: Optional[str]) -> CategoryField:
    return get_config(ctx).field_for(category)


def fail(error: CoverageMatrixError) -> None:
    """Report an error and exit with status 1."""
    logger.debug("Command failed", exc_info=True)
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)

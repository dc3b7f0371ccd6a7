"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..config import load_config
from ..exceptions import CoverageMatrixError
from ..logging_config import setup_logging
from . import app
from ._common import console, fail


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"coverage-matrix {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    goals: Optional[str] = typer.Option(
        None,
        "--goals",
        "-g",
        help="Goals table: CSV path or published CSV URL (columns ID, Name, Grade)",
    ),
    programs: Optional[str] = typer.Option(
        None,
        "--programs",
        "-p",
        help="Programs table: CSV path or URL (columns Program_Name, Goals_Covered, ...)",
    ),
    sample: bool = typer.Option(
        False,
        "--sample",
        help="Use the built-in sample data instead of --goals/--programs",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only report errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Render which programs cover which curriculum goals.

    Rows are goals in framework order; columns are the values of a chosen
    program category. Cells show no coverage, one program, or an overlap.

    [bold cyan]Examples:[/bold cyan]

      coverage-matrix --sample show

      coverage-matrix -g goals.csv -p programs.csv report -o matrix.html

      coverage-matrix -g goals.csv -p programs.csv show --category Program_Type --format csv
    """
    try:
        settings = load_config(
            config_file=config,
            goals_source=goals,
            programs_source=programs,
            verbose=verbose,
            quiet=quiet,
        )
    except CoverageMatrixError as e:
        fail(e)

    setup_logging(
        verbose=settings.verbosity == "verbose",
        quiet=settings.verbosity == "quiet",
        log_file=str(log_file) if log_file else None,
    )
    ctx.obj = {"config": settings, "sample": sample}

"""Typer application; importing the command modules registers them."""

import typer

app = typer.Typer(
    name="coverage-matrix",
    help="Coverage Matrix - which programs cover which curriculum goals",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .report import report as _report  # noqa: F401, E402
from .show import show as _show, categories as _categories  # noqa: F401, E402
from .serve import serve as _serve  # noqa: F401, E402

"""Terminal output: the matrix grid, cell exports and category listing."""

from typing import Optional

import click
import typer
from rich.table import Table

from ..axes import category_domain
from ..exceptions import CoverageMatrixError
from ..formatters import get_formatter
from ..state import build_render_state
from . import app
from ._common import console, fail, get_config, load_data, resolve_field


@app.command()
def show(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-k",
        help="Program column to group by (default: first configured field)",
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (grid), json or csv (cells)",
        click_type=click.Choice(["rich", "json", "csv"], case_sensitive=False),
    ),
):
    """Print the coverage matrix for one category."""
    config = get_config(ctx)
    try:
        field = resolve_field(ctx, category)
        dataset = load_data(ctx)
    except CoverageMatrixError as e:
        fail(e)

    state = build_render_state(dataset, field, config.layout())
    formatter = get_formatter(fmt.lower())
    formatter.render(state)


@app.command()
def categories(ctx: typer.Context):
    """List selectable category fields and the values found in the data."""
    config = get_config(ctx)
    try:
        dataset = load_data(ctx)
    except CoverageMatrixError as e:
        fail(e)

    table = Table(title="Category fields", header_style="bold cyan")
    table.add_column("Column", style="cyan")
    table.add_column("Label")
    table.add_column("Values")
    table.add_column("Missing", justify="right")
    for f in config.fields:
        values = category_domain(dataset.programs, f)
        missing = sum(1 for p in dataset.programs if p.value_of(f.column) is None)
        table.add_row(f.column, f.label, ", ".join(values) or "[dim]none[/dim]", str(missing))
    console.print(table)

"""Report CLI command -- generate the interactive HTML matrix."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CoverageMatrixError
from . import app
from ._common import console, fail, get_config, load_data, resolve_field


@app.command()
def report(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output HTML file path (default from config: coverage-matrix.html)",
        dir_okay=False,
    ),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-k",
        help="Category shown first (default: first configured field)",
    ),
):
    """
    Generate a self-contained HTML coverage matrix.

    Every configured category is pre-computed and embedded, so switching
    the selector in the browser needs no server.

    [bold cyan]Examples:[/bold cyan]

      coverage-matrix --sample report

      coverage-matrix -g goals.csv -p programs.csv report --category Program_Type
    """
    from ..visualization import generate_report

    config = get_config(ctx)
    try:
        initial = resolve_field(ctx, category)
        dataset = load_data(ctx)
        report_path = generate_report(
            dataset,
            config.fields,
            output_path=str(output or config.output_path),
            layout=config.layout(),
            initial=initial,
        )
    except CoverageMatrixError as e:
        fail(e)

    console.print(f"\nReport saved to: [bold green]{report_path}[/bold green]")

"""``coverage-matrix serve`` -- live matrix answering category changes."""

import logging
import threading
import webbrowser

import typer

from ..exceptions import CoverageMatrixError
from . import app
from ._common import console, fail, get_config, load_data

logger = logging.getLogger(__name__)


@app.command()
def serve(
    ctx: typer.Context,
    port: int = typer.Option(8765, help="Port to listen on"),
    host: str = typer.Option("127.0.0.1", help="Host to bind to"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Don't open browser"),
) -> None:
    """Serve the matrix; each category change is aggregated on request."""
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..server.app import create_app

    config = get_config(ctx)
    try:
        initial = config.initial_field
        # Load before binding: a failed load never starts the server.
        with console.status("[cyan]Loading goals and programs..."):
            dataset = load_data(ctx)
    except CoverageMatrixError as e:
        fail(e)

    console.print(
        f"[green]Ready[/green]: {len(dataset.goals)} goal(s), {len(dataset.programs)} program(s)"
    )

    url = f"http://{host}:{port}"
    if not no_browser:
        threading.Timer(1.0, lambda: webbrowser.open(url)).start()

    console.print(f"[bold]Matrix[/bold] → [link={url}]{url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    asgi_app = create_app(dataset, config.fields, layout=config.layout(), initial=initial)
    try:
        uvicorn.run(
            asgi_app,
            host=host,
            port=port,
            log_level="warning" if config.verbosity != "verbose" else "info",
        )
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Stopped.[/dim]")

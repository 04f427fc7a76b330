"""API server command."""

import os
from pathlib import Path

import click

from ..logger import setup_logger
from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding liftlog.db (overrides LIFTLOG_DATA_DIR)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write server logs to this rotating file",
)
@click.option("--reload", is_flag=True, help="Restart on code changes")
@click.pass_context
def serve(
    ctx: click.Context,
    host: str,
    port: int,
    data_dir: Path | None,
    log_file: Path | None,
    reload: bool,
):
    """Serve the workout session and import API.

    Examples:

        liftlog serve

        # Separate database, logs kept on disk
        liftlog serve --data-dir ~/lifts --log-file ~/lifts/server.log
    """
    if data_dir is not None:
        # The reloader builds the app in a child process, which reads this
        os.environ["LIFTLOG_DATA_DIR"] = str(data_dir)
    ensure_initialized(ctx)

    if log_file is not None:
        setup_logger(level="INFO", log_file=log_file)

    import uvicorn

    from ..web import create_app

    click.echo(click.style("liftlog API", fg="green") + f" on http://{host}:{port}")
    click.echo(f"  Interactive docs: http://{host}:{port}/docs")
    click.echo("  Ctrl+C to stop")

    uvicorn.run(
        "liftlog.web:create_app" if reload else create_app(),
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )

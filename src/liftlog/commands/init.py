"""Initialize database command."""

import click

from ..db import get_db_path, init_db, seed_database
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the liftlog database.

    Creates the data directory and the SQLite database, then loads the
    built-in exercise library, workout templates and default settings.
    Running it again keeps existing data.
    """
    db_path = get_db_path()

    echo_info(f"Initializing liftlog in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_database(db_path)
    echo_success(f"Exercise library populated ({count} new exercises)")

    click.echo()
    click.echo("liftlog is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Import your Setgraph history:")
    click.echo("     liftlog import setgraph export.csv")
    click.echo()
    click.echo("  2. Start the API server:")
    click.echo("     liftlog serve")

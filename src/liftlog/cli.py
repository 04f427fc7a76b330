"""CLI entry point for liftlog."""

import click

from .commands import exercises, import_data, init, serve, stats, workouts
from .logger import setup_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="liftlog")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """liftlog: workout logging with Setgraph history import.

    Example usage:

        # Initialize the database
        liftlog init

        # Import a Setgraph export
        liftlog import setgraph export.csv

        # Review history
        liftlog workouts list
        liftlog stats volume --weeks 8
    """
    setup_logger(level="DEBUG" if verbose else "WARNING")


# Register commands
main.add_command(init)
main.add_command(import_data)
main.add_command(exercises)
main.add_command(workouts)
main.add_command(stats)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

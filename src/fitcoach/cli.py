"""CLI entry point for fitcoach."""

import logging

import click

from . import __version__
from .commands import clients, init, notes, reset, workouts


@click.group()
@click.version_option(version=__version__, prog_name="fitcoach")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Database file (defaults to data/fitcoach.db)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, db_path: str | None, verbose: bool):
    """fitcoach: local data store for a fitness-coaching assistant.

    Example usage:

        # Create the database and the default trainer
        fitcoach init

        # Write and browse notes
        fitcoach notes add "Squat cues" "Brace, knees out" -c technique -t legs
        fitcoach notes list

        # Wipe everything (asks first)
        fitcoach reset
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path


# Register commands
main.add_command(init)
main.add_command(reset)
main.add_command(notes)
main.add_command(clients)
main.add_command(workouts)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

"""Initialize project command."""

import click

from ..db import startup
from ..exceptions import FitcoachError
from .base import async_command, echo_error, echo_info, echo_success, get_store_path, open_store


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the fitcoach database.

    Creates the SQLite database with the required schema and makes sure
    the default trainer account exists. Safe to run more than once.
    """
    echo_info(f"Initializing fitcoach database at {get_store_path(ctx)}")

    store = open_store(ctx)
    try:
        trainer_id = await startup(store)
    except FitcoachError as e:
        echo_error(e.message)
        ctx.exit(1)
    finally:
        await store.close()

    echo_success("Database initialized")
    echo_success(f"Default trainer: {trainer_id}")

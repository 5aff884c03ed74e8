"""Reset (clear) all data."""

import click

from ..db import ensure_default_trainer
from .base import async_command, echo_info, echo_success, ensure_initialized, open_store


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def reset(ctx: click.Context, yes: bool):
    """Delete all trainers, clients, notes and workouts.

    This cannot be undone. The default trainer is recreated afterwards.
    """
    ensure_initialized(ctx)

    if not yes:
        if not click.confirm("This permanently deletes all data. Continue?"):
            echo_info("Reset cancelled")
            return

    async with open_store(ctx) as store:
        await store.clear_all_data()
        await ensure_default_trainer(store)

    echo_success("All data cleared")

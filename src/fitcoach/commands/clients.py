"""Client commands."""

import click

from ..db import DEFAULT_TRAINER_ID, ClientRepository
from ..exceptions import FitcoachError
from ..models.client import Client
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    open_store,
)


@click.group()
@click.pass_context
def clients(ctx):
    """Manage a trainer's clients."""
    ensure_initialized(ctx)


@clients.command(name="list")
@click.option("--trainer", "trainer_id", default=DEFAULT_TRAINER_ID, help="Trainer ID")
@click.pass_context
@async_command
async def list_clients(ctx, trainer_id: str):
    """List a trainer's clients by name."""
    async with open_store(ctx) as store:
        all_clients = await ClientRepository(store).list_for_trainer(trainer_id)

    if not all_clients:
        echo_info("No clients found. Add one with 'fitcoach clients add'")
        return

    headers = ["ID", "Name", "Email", "Goals"]
    rows = [
        [client.id, client.name, client.email or "", str(len(client.goals))]
        for client in all_clients
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_clients)} client(s)")


@clients.command(name="add")
@click.argument("name")
@click.option("--email", default=None, help="Client email")
@click.option("--phone", default=None, help="Client phone")
@click.option("--trainer", "trainer_id", default=DEFAULT_TRAINER_ID, help="Trainer ID")
@click.pass_context
@async_command
async def add_client(ctx, name: str, email: str | None, phone: str | None, trainer_id: str):
    """Add a client for a trainer."""
    client = Client(
        trainer_id=trainer_id,
        name=name,
        email=email,
        phone=phone,
        contact_info={"phone": phone} if phone else {},
    )
    async with open_store(ctx) as store:
        try:
            client_id = await ClientRepository(store).create(client)
        except FitcoachError as e:
            echo_error(e.message)
            ctx.exit(1)

    echo_success(f"Client created: {client_id}")

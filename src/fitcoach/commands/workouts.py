"""Workout commands."""

import click

from ..db import DEFAULT_TRAINER_ID, WorkoutRepository
from .base import async_command, echo_info, ensure_initialized, format_table, open_store, truncate


@click.group()
@click.pass_context
def workouts(ctx):
    """Browse a trainer's workouts."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--trainer", "trainer_id", default=DEFAULT_TRAINER_ID, help="Trainer ID")
@click.option("--templates", is_flag=True, help="Only show templates")
@click.pass_context
@async_command
async def list_workouts(ctx, trainer_id: str, templates: bool):
    """List a trainer's workouts, most recently updated first."""
    async with open_store(ctx) as store:
        repo = WorkoutRepository(store)
        if templates:
            all_workouts = await repo.list_templates(trainer_id)
        else:
            all_workouts = await repo.list_for_trainer(trainer_id)

    if not all_workouts:
        echo_info("No workouts found")
        return

    headers = ["ID", "Name", "Type", "Difficulty", "Exercises", "Client"]
    rows = [
        [
            workout.id,
            truncate(workout.name),
            workout.type.value,
            workout.difficulty.value,
            str(len(workout.exercises)),
            workout.client_id or "-",
        ]
        for workout in all_workouts
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_workouts)} workout(s)")

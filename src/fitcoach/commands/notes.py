"""Trainer note commands."""

import click

from ..db import DEFAULT_TRAINER_ID, NoteRepository
from ..exceptions import FitcoachError
from ..models.note import NoteCategory, TrainerNote
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    open_store,
    truncate,
)


@click.group()
@click.pass_context
def notes(ctx):
    """Manage trainer notes."""
    ensure_initialized(ctx)


@notes.command(name="list")
@click.option("--trainer", "trainer_id", default=DEFAULT_TRAINER_ID, help="Trainer ID")
@click.pass_context
@async_command
async def list_notes(ctx, trainer_id: str):
    """List a trainer's notes, most recently updated first."""
    async with open_store(ctx) as store:
        all_notes = await NoteRepository(store).list_for_trainer(trainer_id)

    if not all_notes:
        echo_info("No notes found. Add one with 'fitcoach notes add'")
        return

    headers = ["ID", "Title", "Category", "Tags", "Updated"]
    rows = []
    for note in all_notes:
        updated = note.updated_at.strftime("%Y-%m-%d") if note.updated_at else "N/A"
        rows.append([
            note.id,
            truncate(note.title),
            note.category.value,
            ", ".join(note.tags),
            updated,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_notes)} note(s)")


@notes.command(name="add")
@click.argument("title")
@click.argument("content")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in NoteCategory]),
    default=NoteCategory.OTHER.value,
    help="Note category",
)
@click.option("--tag", "-t", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--public", is_flag=True, help="Share the note publicly")
@click.option("--trainer", "trainer_id", default=DEFAULT_TRAINER_ID, help="Trainer ID")
@click.pass_context
@async_command
async def add_note(ctx, title: str, content: str, category: str, tags: tuple, public: bool, trainer_id: str):
    """Add a note for a trainer."""
    note = TrainerNote(
        trainer_id=trainer_id,
        title=title,
        content=content,
        category=NoteCategory(category),
        tags=list(tags),
        is_public=public,
    )
    async with open_store(ctx) as store:
        try:
            note_id = await NoteRepository(store).create(note)
        except FitcoachError as e:
            echo_error(e.message)
            ctx.exit(1)

    echo_success(f"Note created: {note_id}")


@notes.command(name="delete")
@click.argument("note_id")
@click.pass_context
@async_command
async def delete_note(ctx, note_id: str):
    """Delete a note."""
    async with open_store(ctx) as store:
        repo = NoteRepository(store)
        if not await repo.exists(note_id):
            echo_error(f"Note {note_id} not found")
            ctx.exit(1)
        await repo.delete(note_id)

    echo_success(f"Note deleted: {note_id}")

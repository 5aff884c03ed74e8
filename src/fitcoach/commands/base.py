"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..db import Store, get_db_path


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_store_path(ctx: click.Context) -> Path:
    """Database path chosen on the command line, or the default one."""
    obj = ctx.find_root().obj or {}
    db_path = obj.get("db_path")
    return Path(db_path) if db_path else get_db_path()


def open_store(ctx: click.Context) -> Store:
    """Build the store for this invocation. The caller initializes it."""
    return Store(get_store_path(ctx))


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database has been created with 'fitcoach init'."""
    if not get_store_path(ctx).exists():
        echo_error("Project not initialized. Run 'fitcoach init' first.")
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def truncate(text: str | None, width: int = 30) -> str:
    """Shorten text for table cells."""
    if not text:
        return ""
    return text[:width] + "..." if len(text) > width else text


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []
    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)))
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(lines)

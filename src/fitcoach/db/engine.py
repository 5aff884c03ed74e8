"""Store lifecycle: owns the single database connection."""

import logging
import os
from pathlib import Path

import aiosqlite

from ..exceptions import NotInitializedError
from . import schema

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(
    os.environ.get("FITCOACH_DATA_DIR", Path(__file__).parent.parent.parent.parent / "data")
)
DB_FILENAME = "fitcoach.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


class Store:
    """The embedded SQLite store.

    One Store owns one connection. Repositories are constructed with the
    store and reach the connection only through it, so every call made
    before ``initialize()`` succeeds fails with NotInitializedError.
    """

    def __init__(self, db_path: Path | str | None = None):
        self.db_path = db_path if db_path is not None else get_db_path()
        self._db: aiosqlite.Connection | None = None
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready and self._db is not None

    @property
    def connection(self) -> aiosqlite.Connection:
        """The open connection. Raises NotInitializedError unless ready."""
        self.ensure_initialized()
        return self._db

    def ensure_initialized(self) -> None:
        """Fail fast when the store is not ready."""
        if not self.is_ready:
            raise NotInitializedError()

    async def initialize(self) -> bool:
        """Open the connection, enable foreign keys and apply the schema.

        Calling this on a ready store is a no-op. If any step fails the
        store stays un-ready and the error propagates; calling again
        retries from scratch.
        """
        if self.is_ready:
            return True

        logger.info(f"Initializing database at {self.db_path}")
        db = await aiosqlite.connect(self.db_path)
        try:
            db.row_factory = aiosqlite.Row
            await db.execute("PRAGMA foreign_keys = ON")
            await schema.apply(db)
        except Exception:
            logger.error(f"Database initialization failed for {self.db_path}", exc_info=True)
            await db.close()
            raise

        self._db = db
        self._ready = True
        logger.info("Database initialized")
        return True

    async def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        db = self._db
        self._db = None
        self._ready = False
        if db is not None:
            await db.close()
            logger.info("Database connection closed")

    async def clear_all_data(self) -> None:
        """Delete every row from every table.

        Destructive and not recoverable; callers gate this behind an
        explicit confirmation.
        """
        db = self.connection
        logger.warning("Clearing all database data")
        try:
            for table in schema.table_names():
                await db.execute(f"DELETE FROM {table}")
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info("All data cleared")

    async def __aenter__(self) -> "Store":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

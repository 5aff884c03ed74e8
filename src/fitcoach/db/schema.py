"""Schema definition and migrations applied on every store open."""

import logging

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

TABLES = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        email TEXT UNIQUE,
        type TEXT NOT NULL CHECK (type IN ('trainer', 'client')),
        profile_image TEXT,
        certification TEXT,
        specialties TEXT,
        experience INTEGER,
        philosophy TEXT,
        bio TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS trainer_notes (
        id TEXT PRIMARY KEY,
        trainer_id TEXT NOT NULL,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        tags TEXT,
        category TEXT NOT NULL CHECK (
            category IN ('exercise', 'nutrition', 'philosophy', 'technique', 'other')
        ),
        is_public INTEGER DEFAULT 0,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY (trainer_id) REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS clients (
        id TEXT PRIMARY KEY,
        trainer_id TEXT NOT NULL,
        name TEXT NOT NULL,
        email TEXT,
        phone TEXT,
        goals TEXT,
        restrictions TEXT,
        preferences TEXT,
        measurements TEXT,
        contact_info TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY (trainer_id) REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS workouts (
        id TEXT PRIMARY KEY,
        trainer_id TEXT NOT NULL,
        client_id TEXT,
        name TEXT NOT NULL,
        description TEXT,
        type TEXT NOT NULL CHECK (
            type IN ('strength', 'cardio', 'mixed', 'flexibility', 'recovery')
        ),
        difficulty TEXT NOT NULL CHECK (
            difficulty IN ('beginner', 'intermediate', 'advanced')
        ),
        estimated_duration INTEGER,
        exercises TEXT,
        warmup TEXT,
        cooldown TEXT,
        tags TEXT,
        is_template INTEGER DEFAULT 0,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY (trainer_id) REFERENCES users(id) ON DELETE CASCADE,
        FOREIGN KEY (client_id) REFERENCES clients(id) ON DELETE SET NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS workout_sessions (
        id TEXT PRIMARY KEY,
        workout_id TEXT NOT NULL,
        client_id TEXT NOT NULL,
        scheduled_date TEXT NOT NULL,
        completed_date TEXT,
        completed_sets TEXT,
        duration INTEGER,
        notes TEXT,
        rating INTEGER CHECK (rating BETWEEN 1 AND 5),
        status TEXT NOT NULL CHECK (
            status IN ('scheduled', 'completed', 'skipped', 'in_progress')
        ),
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY (workout_id) REFERENCES workouts(id) ON DELETE CASCADE,
        FOREIGN KEY (client_id) REFERENCES clients(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS goals (
        id TEXT PRIMARY KEY,
        client_id TEXT NOT NULL,
        type TEXT NOT NULL CHECK (
            type IN ('weight_loss', 'muscle_gain', 'strength', 'endurance', 'flexibility', 'other')
        ),
        description TEXT NOT NULL,
        target_value REAL,
        current_value REAL,
        unit TEXT,
        target_date TEXT,
        priority TEXT NOT NULL CHECK (priority IN ('low', 'medium', 'high')),
        status TEXT NOT NULL CHECK (status IN ('active', 'completed', 'paused')),
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY (client_id) REFERENCES clients(id) ON DELETE CASCADE
    )
    """,
]

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_users_type ON users(type)",
    "CREATE INDEX IF NOT EXISTS idx_trainer_notes_trainer_id ON trainer_notes(trainer_id)",
    "CREATE INDEX IF NOT EXISTS idx_clients_trainer_id ON clients(trainer_id)",
    "CREATE INDEX IF NOT EXISTS idx_workouts_trainer_id ON workouts(trainer_id)",
    "CREATE INDEX IF NOT EXISTS idx_workouts_client_id ON workouts(client_id)",
    "CREATE INDEX IF NOT EXISTS idx_workout_sessions_workout_id ON workout_sessions(workout_id)",
    "CREATE INDEX IF NOT EXISTS idx_workout_sessions_client_id ON workout_sessions(client_id)",
    "CREATE INDEX IF NOT EXISTS idx_goals_client_id ON goals(client_id)",
]

# Nullable columns added after the first release; older databases get them
# through ALTER TABLE on open.
OPTIONAL_COLUMNS = {
    "users": {
        "profile_image": "TEXT",
        "certification": "TEXT",
        "philosophy": "TEXT",
        "bio": "TEXT",
    },
    "clients": {
        "phone": "TEXT",
        "contact_info": "TEXT",
    },
    "workouts": {
        "description": "TEXT",
        "estimated_duration": "INTEGER",
        "warmup": "TEXT",
        "cooldown": "TEXT",
    },
    "workout_sessions": {
        "completed_sets": "TEXT",
        "notes": "TEXT",
    },
    "goals": {
        "unit": "TEXT",
        "target_date": "TEXT",
    },
}

# Children before parents, so plain DELETEs never trip a foreign key.
DELETION_ORDER = [
    "workout_sessions",
    "goals",
    "workouts",
    "clients",
    "trainer_notes",
    "users",
]


def table_names() -> list[str]:
    """Tables in child-to-parent deletion order."""
    return list(DELETION_ORDER)


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Add columns that databases created by older versions lack."""
    for table, columns in OPTIONAL_COLUMNS.items():
        cursor = await db.execute(f"PRAGMA table_info({table})")
        existing = {col[1] for col in await cursor.fetchall()}
        for column, column_type in columns.items():
            if column not in existing:
                logger.info(f"Migrating {table}: adding column {column}")
                await db.execute(f"ALTER TABLE {table} ADD COLUMN {column} {column_type}")

    await db.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
    await db.commit()


async def get_schema_version(db: aiosqlite.Connection) -> int:
    """Read the schema version recorded in the database file."""
    cursor = await db.execute("PRAGMA user_version")
    row = await cursor.fetchone()
    return row[0] if row else 0


async def apply(db: aiosqlite.Connection) -> None:
    """Create tables and indexes if absent, then run migrations.

    Safe to call on every open. Foreign-key enforcement must already be on.
    """
    for statement in TABLES:
        await db.execute(statement)
    for statement in INDEXES:
        await db.execute(statement)
    await db.commit()

    await _run_migrations(db)
    logger.debug(f"Schema applied (version {SCHEMA_VERSION})")

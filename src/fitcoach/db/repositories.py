"""Data access layer for fitcoach.

Repositories hold no rows of their own: every call goes through the
store's connection. Nested attributes are JSON-encoded on write and decoded
back to lists/dicts on read.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

import aiosqlite

from ..exceptions import ConstraintViolationError
from ..models.client import Client, ClientPatch
from ..models.goal import Goal, GoalPatch
from ..models.note import NotePatch, TrainerNote
from ..models.patch import Patch
from ..models.session import WorkoutSession, WorkoutSessionPatch
from ..models.user import User, UserPatch, UserType
from ..models.workout import Workout, WorkoutPatch
from .codecs import JSON_LIST, JSON_OBJECT
from .engine import Store
from .identity import new_id, now

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _value(value: Any) -> Any:
    """Unwrap enum members to their stored value."""
    return value.value if isinstance(value, Enum) else value


def _flag(value: Any) -> int:
    return 1 if value else 0


def _list_column(field: str) -> Callable[[Any], str]:
    return lambda value: JSON_LIST.encode(value, field)


def _object_column(field: str) -> Callable[[Any], str]:
    return lambda value: JSON_OBJECT.encode(value, field)


def _timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class BaseRepository(Generic[T]):
    """Shared CRUD plumbing for one table.

    Subclasses set ``table``, ``patch_type`` and ``encoders`` (column name
    to write-side converter) and implement ``_row_to_entity``.
    """

    table: str = ""
    patch_type: type[Patch] = Patch
    encoders: dict[str, Callable[[Any], Any]] = {}

    def __init__(self, store: Store):
        self.store = store

    @property
    def db(self) -> aiosqlite.Connection:
        return self.store.connection

    def _encode(self, column: str, value: Any) -> Any:
        encoder = self.encoders.get(column, _value)
        return encoder(value)

    async def _write(self, sql: str, params: tuple | list) -> int:
        """Execute one write statement and commit it."""
        db = self.db
        try:
            cursor = await db.execute(sql, params)
            await db.commit()
        except aiosqlite.IntegrityError as e:
            await db.rollback()
            raise ConstraintViolationError(self.table, str(e)) from e
        return cursor.rowcount

    async def _insert(self, fields: dict[str, Any], entity_id: str | None) -> str:
        """Insert a row with a fresh (or caller-pinned) id and timestamps."""
        self.store.ensure_initialized()
        if entity_id is None:
            entity_id = new_id()
        timestamp = now()

        row = {"id": entity_id}
        row.update({column: self._encode(column, value) for column, value in fields.items()})
        row["created_at"] = timestamp
        row["updated_at"] = timestamp

        columns = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)
        await self._write(
            f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})",
            tuple(row.values()),
        )
        logger.debug(f"Created {self.table} row {entity_id}")
        return entity_id

    async def _fetch_one(self, sql: str, params: tuple) -> aiosqlite.Row | None:
        cursor = await self.db.execute(sql, params)
        return await cursor.fetchone()

    async def _fetch_all(self, sql: str, params: tuple) -> list[T]:
        cursor = await self.db.execute(sql, params)
        rows = await cursor.fetchall()
        return [self._row_to_entity(row) for row in rows]

    async def get(self, entity_id: str) -> T | None:
        """Get a row by ID, or None if it does not exist."""
        row = await self._fetch_one(f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,))
        if row is None:
            return None
        return self._row_to_entity(row)

    async def exists(self, entity_id: str) -> bool:
        """Check whether a row with this ID exists."""
        row = await self._fetch_one(f"SELECT 1 FROM {self.table} WHERE id = ?", (entity_id,))
        return row is not None

    async def update(self, entity_id: str, patch: Patch) -> None:
        """Apply a partial update.

        Only fields set on the patch are written; ``updated_at`` is always
        refreshed. Updating a missing ID does nothing.
        """
        if not isinstance(patch, self.patch_type):
            raise TypeError(
                f"{type(self).__name__}.update expects {self.patch_type.__name__}, "
                f"got {type(patch).__name__}"
            )
        self.store.ensure_initialized()

        changes = patch.changes()
        assignments = [f"{column} = ?" for column in changes]
        params = [self._encode(column, value) for column, value in changes.items()]
        assignments.append("updated_at = ?")
        params.append(now())
        params.append(entity_id)

        count = await self._write(
            f"UPDATE {self.table} SET {', '.join(assignments)} WHERE id = ?", params
        )
        if count == 0:
            logger.debug(f"Update of missing {self.table} row {entity_id} ignored")

    async def delete(self, entity_id: str) -> None:
        """Delete a row. Deleting a missing ID does nothing."""
        await self._write(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
        logger.debug(f"Deleted {self.table} row {entity_id}")

    def _row_to_entity(self, row: aiosqlite.Row) -> T:
        raise NotImplementedError


class UserRepository(BaseRepository[User]):
    """Repository for trainer and client accounts."""

    table = "users"
    patch_type = UserPatch
    encoders = {"specialties": _list_column("specialties")}

    async def create(self, user: User, user_id: str | None = None) -> str:
        """Create a user. ``user_id`` pins the identifier instead of generating one."""
        return await self._insert(
            {
                "name": user.name,
                "email": user.email,
                "type": user.type,
                "profile_image": user.profile_image,
                "certification": user.certification,
                "specialties": user.specialties,
                "experience": user.experience,
                "philosophy": user.philosophy,
                "bio": user.bio,
            },
            user_id,
        )

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        row = await self._fetch_one("SELECT * FROM users WHERE email = ?", (email,))
        if row is None:
            return None
        return self._row_to_entity(row)

    async def list_by_type(self, user_type: UserType) -> list[User]:
        """List users of one type, by name."""
        return await self._fetch_all(
            "SELECT * FROM users WHERE type = ? ORDER BY name ASC, rowid ASC",
            (_value(user_type),),
        )

    def _row_to_entity(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        data = {
            "name": row["name"],
            "type": row["type"],
            "email": row["email"],
            "profile_image": row["profile_image"],
            "certification": row["certification"],
            "specialties": JSON_LIST.decode(row["specialties"], "specialties"),
            "experience": row["experience"],
            "philosophy": row["philosophy"],
            "bio": row["bio"],
        }
        return User.from_dict(
            data,
            id=row["id"],
            created_at=_timestamp(row["created_at"]),
            updated_at=_timestamp(row["updated_at"]),
        )


class NoteRepository(BaseRepository[TrainerNote]):
    """Repository for trainer notes."""

    table = "trainer_notes"
    patch_type = NotePatch
    encoders = {"tags": _list_column("tags"), "is_public": _flag}

    async def create(self, note: TrainerNote, note_id: str | None = None) -> str:
        """Create a new note."""
        return await self._insert(
            {
                "trainer_id": note.trainer_id,
                "title": note.title,
                "content": note.content,
                "tags": note.tags,
                "category": note.category,
                "is_public": note.is_public,
            },
            note_id,
        )

    async def list_for_trainer(self, trainer_id: str) -> list[TrainerNote]:
        """List a trainer's notes, most recently updated first."""
        return await self._fetch_all(
            """
            SELECT * FROM trainer_notes
            WHERE trainer_id = ?
            ORDER BY updated_at DESC, rowid DESC
            """,
            (trainer_id,),
        )

    def _row_to_entity(self, row: aiosqlite.Row) -> TrainerNote:
        """Convert a database row to a TrainerNote."""
        data = {
            "trainer_id": row["trainer_id"],
            "title": row["title"],
            "content": row["content"],
            "category": row["category"],
            "tags": JSON_LIST.decode(row["tags"], "tags"),
            "is_public": bool(row["is_public"]),
        }
        return TrainerNote.from_dict(
            data,
            id=row["id"],
            created_at=_timestamp(row["created_at"]),
            updated_at=_timestamp(row["updated_at"]),
        )


class ClientRepository(BaseRepository[Client]):
    """Repository for clients."""

    table = "clients"
    patch_type = ClientPatch
    encoders = {
        "goals": _list_column("goals"),
        "restrictions": _list_column("restrictions"),
        "preferences": _object_column("preferences"),
        "measurements": _object_column("measurements"),
        "contact_info": _object_column("contact_info"),
    }

    async def create(self, client: Client, client_id: str | None = None) -> str:
        """Create a new client."""
        return await self._insert(
            {
                "trainer_id": client.trainer_id,
                "name": client.name,
                "email": client.email,
                "phone": client.phone,
                "goals": client.goals,
                "restrictions": client.restrictions,
                "preferences": client.preferences,
                "measurements": client.measurements,
                "contact_info": client.contact_info,
            },
            client_id,
        )

    async def list_for_trainer(self, trainer_id: str) -> list[Client]:
        """List a trainer's clients by name."""
        return await self._fetch_all(
            "SELECT * FROM clients WHERE trainer_id = ? ORDER BY name ASC, rowid ASC",
            (trainer_id,),
        )

    def _row_to_entity(self, row: aiosqlite.Row) -> Client:
        """Convert a database row to a Client."""
        data = {
            "trainer_id": row["trainer_id"],
            "name": row["name"],
            "email": row["email"],
            "phone": row["phone"],
            "goals": JSON_LIST.decode(row["goals"], "goals"),
            "restrictions": JSON_LIST.decode(row["restrictions"], "restrictions"),
            "preferences": JSON_OBJECT.decode(row["preferences"], "preferences"),
            "measurements": JSON_OBJECT.decode(row["measurements"], "measurements"),
            "contact_info": JSON_OBJECT.decode(row["contact_info"], "contact_info"),
        }
        return Client.from_dict(
            data,
            id=row["id"],
            created_at=_timestamp(row["created_at"]),
            updated_at=_timestamp(row["updated_at"]),
        )


class WorkoutRepository(BaseRepository[Workout]):
    """Repository for workouts."""

    table = "workouts"
    patch_type = WorkoutPatch
    encoders = {
        "exercises": _list_column("exercises"),
        "warmup": _list_column("warmup"),
        "cooldown": _list_column("cooldown"),
        "tags": _list_column("tags"),
        "is_template": _flag,
    }

    async def create(self, workout: Workout, workout_id: str | None = None) -> str:
        """Create a new workout."""
        return await self._insert(
            {
                "trainer_id": workout.trainer_id,
                "client_id": workout.client_id,
                "name": workout.name,
                "description": workout.description,
                "type": workout.type,
                "difficulty": workout.difficulty,
                "estimated_duration": workout.estimated_duration,
                "exercises": workout.exercises,
                "warmup": workout.warmup,
                "cooldown": workout.cooldown,
                "tags": workout.tags,
                "is_template": workout.is_template,
            },
            workout_id,
        )

    async def list_for_trainer(self, trainer_id: str) -> list[Workout]:
        """List a trainer's workouts, most recently updated first."""
        return await self._fetch_all(
            """
            SELECT * FROM workouts
            WHERE trainer_id = ?
            ORDER BY updated_at DESC, rowid DESC
            """,
            (trainer_id,),
        )

    async def list_for_client(self, client_id: str) -> list[Workout]:
        """List workouts assigned to a client, most recently updated first."""
        return await self._fetch_all(
            """
            SELECT * FROM workouts
            WHERE client_id = ?
            ORDER BY updated_at DESC, rowid DESC
            """,
            (client_id,),
        )

    async def list_templates(self, trainer_id: str) -> list[Workout]:
        """List a trainer's reusable workout templates."""
        return await self._fetch_all(
            """
            SELECT * FROM workouts
            WHERE trainer_id = ? AND is_template = 1
            ORDER BY updated_at DESC, rowid DESC
            """,
            (trainer_id,),
        )

    def _row_to_entity(self, row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        data = {
            "trainer_id": row["trainer_id"],
            "client_id": row["client_id"],
            "name": row["name"],
            "description": row["description"],
            "type": row["type"],
            "difficulty": row["difficulty"],
            "estimated_duration": row["estimated_duration"],
            "exercises": JSON_LIST.decode(row["exercises"], "exercises"),
            "warmup": JSON_LIST.decode(row["warmup"], "warmup"),
            "cooldown": JSON_LIST.decode(row["cooldown"], "cooldown"),
            "tags": JSON_LIST.decode(row["tags"], "tags"),
            "is_template": bool(row["is_template"]),
        }
        return Workout.from_dict(
            data,
            id=row["id"],
            created_at=_timestamp(row["created_at"]),
            updated_at=_timestamp(row["updated_at"]),
        )


class WorkoutSessionRepository(BaseRepository[WorkoutSession]):
    """Repository for scheduled and completed workout sessions."""

    table = "workout_sessions"
    patch_type = WorkoutSessionPatch
    encoders = {"completed_sets": _list_column("completed_sets")}

    async def create(self, session: WorkoutSession, session_id: str | None = None) -> str:
        """Schedule a new session."""
        return await self._insert(
            {
                "workout_id": session.workout_id,
                "client_id": session.client_id,
                "scheduled_date": session.scheduled_date,
                "completed_date": session.completed_date,
                "completed_sets": session.completed_sets,
                "duration": session.duration,
                "notes": session.notes,
                "rating": session.rating,
                "status": session.status,
            },
            session_id,
        )

    async def list_for_client(self, client_id: str) -> list[WorkoutSession]:
        """List a client's sessions in schedule order."""
        return await self._fetch_all(
            """
            SELECT * FROM workout_sessions
            WHERE client_id = ?
            ORDER BY scheduled_date ASC, rowid ASC
            """,
            (client_id,),
        )

    async def list_for_workout(self, workout_id: str) -> list[WorkoutSession]:
        """List sessions of one workout in schedule order."""
        return await self._fetch_all(
            """
            SELECT * FROM workout_sessions
            WHERE workout_id = ?
            ORDER BY scheduled_date ASC, rowid ASC
            """,
            (workout_id,),
        )

    def _row_to_entity(self, row: aiosqlite.Row) -> WorkoutSession:
        """Convert a database row to a WorkoutSession."""
        data = {
            "workout_id": row["workout_id"],
            "client_id": row["client_id"],
            "scheduled_date": row["scheduled_date"],
            "completed_date": row["completed_date"],
            "completed_sets": JSON_LIST.decode(row["completed_sets"], "completed_sets"),
            "duration": row["duration"],
            "notes": row["notes"],
            "rating": row["rating"],
            "status": row["status"],
        }
        return WorkoutSession.from_dict(
            data,
            id=row["id"],
            created_at=_timestamp(row["created_at"]),
            updated_at=_timestamp(row["updated_at"]),
        )


class GoalRepository(BaseRepository[Goal]):
    """Repository for client goals."""

    table = "goals"
    patch_type = GoalPatch

    async def create(self, goal: Goal, goal_id: str | None = None) -> str:
        """Create a new goal."""
        return await self._insert(
            {
                "client_id": goal.client_id,
                "type": goal.type,
                "description": goal.description,
                "target_value": goal.target_value,
                "current_value": goal.current_value,
                "unit": goal.unit,
                "target_date": goal.target_date,
                "priority": goal.priority,
                "status": goal.status,
            },
            goal_id,
        )

    async def list_for_client(self, client_id: str) -> list[Goal]:
        """List a client's goals in creation order."""
        return await self._fetch_all(
            "SELECT * FROM goals WHERE client_id = ? ORDER BY created_at ASC, rowid ASC",
            (client_id,),
        )

    def _row_to_entity(self, row: aiosqlite.Row) -> Goal:
        """Convert a database row to a Goal."""
        data = {
            "client_id": row["client_id"],
            "type": row["type"],
            "description": row["description"],
            "target_value": row["target_value"],
            "current_value": row["current_value"],
            "unit": row["unit"],
            "target_date": row["target_date"],
            "priority": row["priority"],
            "status": row["status"],
        }
        return Goal.from_dict(
            data,
            id=row["id"],
            created_at=_timestamp(row["created_at"]),
            updated_at=_timestamp(row["updated_at"]),
        )

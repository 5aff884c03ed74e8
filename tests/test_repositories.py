"""Tests for entity repositories."""

from dataclasses import replace

import pytest

from fitcoach.db import (
    ClientRepository,
    GoalRepository,
    NoteRepository,
    UserRepository,
    WorkoutRepository,
    WorkoutSessionRepository,
)
from fitcoach.exceptions import ConstraintViolationError, ErrorCode, SerializationError
from fitcoach.models import (
    Client,
    ClientPatch,
    Difficulty,
    Goal,
    GoalPatch,
    GoalPriority,
    GoalStatus,
    GoalType,
    NoteCategory,
    NotePatch,
    SessionStatus,
    TrainerNote,
    User,
    UserPatch,
    UserType,
    Workout,
    WorkoutPatch,
    WorkoutSession,
    WorkoutSessionPatch,
    WorkoutType,
)


def _strip(entity):
    """Drop the store-managed fields for comparison with the input."""
    return replace(entity, id=None, created_at=None, updated_at=None)


def _note(trainer_id: str, title: str = "Squat cues", **kwargs) -> TrainerNote:
    return TrainerNote(
        trainer_id=trainer_id,
        title=title,
        content=kwargs.pop("content", "Brace, knees out"),
        category=kwargs.pop("category", NoteCategory.EXERCISE),
        **kwargs,
    )


def _workout(trainer_id: str, name: str = "Leg Day", **kwargs) -> Workout:
    return Workout(
        trainer_id=trainer_id,
        name=name,
        type=kwargs.pop("type", WorkoutType.STRENGTH),
        difficulty=kwargs.pop("difficulty", Difficulty.INTERMEDIATE),
        **kwargs,
    )


class TestUserRepository:
    """Tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, store, sample_trainer):
        """Every field round-trips; timestamps are set together."""
        repo = UserRepository(store)
        user_id = await repo.create(sample_trainer)

        user = await repo.get(user_id)
        assert user.id == user_id
        assert _strip(user) == sample_trainer
        assert user.created_at is not None
        assert user.created_at == user.updated_at

    @pytest.mark.asyncio
    async def test_create_with_pinned_id(self, store, sample_trainer):
        """A caller-supplied id is used as-is."""
        user_id = await UserRepository(store).create(sample_trainer, user_id="t1")
        assert user_id == "t1"

    @pytest.mark.asyncio
    async def test_defaults_filled(self, store):
        """Omitted list attributes read back as []."""
        repo = UserRepository(store)
        user_id = await repo.create(User(name="Minimal", type=UserType.CLIENT))
        user = await repo.get(user_id)
        assert user.specialties == []
        assert user.email is None

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, store):
        """Unknown ids return None, not an error."""
        assert await UserRepository(store).get("nope") is None

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, store, sample_trainer):
        """Email uniqueness is enforced by the store."""
        repo = UserRepository(store)
        await repo.create(sample_trainer)
        with pytest.raises(ConstraintViolationError) as exc_info:
            await repo.create(replace(sample_trainer, name="Copycat"))
        assert exc_info.value.table == "users"
        assert exc_info.value.code == ErrorCode.CONSTRAINT_VIOLATION

    @pytest.mark.asyncio
    async def test_multiple_null_emails_allowed(self, store):
        """NULL emails do not collide."""
        repo = UserRepository(store)
        await repo.create(User(name="A", type=UserType.CLIENT))
        await repo.create(User(name="B", type=UserType.CLIENT))
        assert len(await repo.list_by_type(UserType.CLIENT)) == 2

    @pytest.mark.asyncio
    async def test_get_by_email(self, store, trainer_id):
        """Users can be found by email."""
        user = await UserRepository(store).get_by_email("trainer@example.com")
        assert user.id == trainer_id

    @pytest.mark.asyncio
    async def test_list_by_type_sorted_by_name(self, store):
        """Listing is name ascending and filtered by type."""
        repo = UserRepository(store)
        await repo.create(User(name="Zoe", type=UserType.TRAINER))
        await repo.create(User(name="Adam", type=UserType.TRAINER))
        await repo.create(User(name="Client", type=UserType.CLIENT))

        trainers = await repo.list_by_type(UserType.TRAINER)
        assert [u.name for u in trainers] == ["Adam", "Zoe"]

    @pytest.mark.asyncio
    async def test_update_keeps_type(self, store, trainer_id):
        """Patching a user never changes its type."""
        repo = UserRepository(store)
        await repo.update(trainer_id, UserPatch(bio="Updated bio", specialties=["Yoga"]))

        user = await repo.get(trainer_id)
        assert user.bio == "Updated bio"
        assert user.specialties == ["Yoga"]
        assert user.type == UserType.TRAINER

    @pytest.mark.asyncio
    async def test_invalid_type_rejected(self, store):
        """The type column is CHECK-constrained."""
        with pytest.raises(ConstraintViolationError):
            await UserRepository(store).create(User(name="X", type="admin"))


class TestNoteRepository:
    """Tests for NoteRepository."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, store, trainer_id):
        """The note is listed with its tags intact."""
        repo = NoteRepository(store)
        note = _note(trainer_id, tags=["legs", "strength"])
        note_id = await repo.create(note)

        notes = await repo.list_for_trainer("t1")
        assert [n.id for n in notes] == [note_id]
        assert notes[0].tags == ["legs", "strength"]
        assert _strip(notes[0]) == note

    @pytest.mark.asyncio
    async def test_defaults_filled(self, store, trainer_id):
        """Omitted tags decode to [] and is_public to False."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id))
        note = await repo.get(note_id)
        assert note.tags == []
        assert note.is_public is False

    @pytest.mark.asyncio
    async def test_invalid_category_rejected(self, store, trainer_id):
        """A category outside the enumeration never gets stored."""
        repo = NoteRepository(store)
        with pytest.raises(ConstraintViolationError):
            await repo.create(_note(trainer_id, category="invalid-value"))
        assert await repo.list_for_trainer(trainer_id) == []

    @pytest.mark.asyncio
    async def test_unknown_trainer_rejected(self, store):
        """Foreign keys are enforced."""
        with pytest.raises(ConstraintViolationError):
            await NoteRepository(store).create(_note("ghost"))

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, store, trainer_id):
        """A patch touches only its fields and updated_at."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id, tags=["legs"]))
        before = await repo.get(note_id)

        await repo.update(note_id, NotePatch(title="Deadlift cues"))

        after = await repo.get(note_id)
        assert after.title == "Deadlift cues"
        assert after.updated_at >= before.updated_at
        assert after.created_at == before.created_at
        assert replace(after, title=before.title, updated_at=before.updated_at) == before

    @pytest.mark.asyncio
    async def test_update_bool_and_tags(self, store, trainer_id):
        """Boolean and list fields are encoded on update."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id))
        await repo.update(note_id, NotePatch(is_public=True, tags=["mobility"]))

        note = await repo.get(note_id)
        assert note.is_public is True
        assert note.tags == ["mobility"]

    @pytest.mark.asyncio
    async def test_update_invalid_category_rejected(self, store, trainer_id):
        """Updates are constrained too, and leave the row untouched."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id))
        with pytest.raises(ConstraintViolationError):
            await repo.update(note_id, NotePatch(category="bogus"))
        assert (await repo.get(note_id)).category == NoteCategory.EXERCISE

    @pytest.mark.asyncio
    async def test_update_missing_is_noop(self, store):
        """Updating an unknown id does nothing."""
        await NoteRepository(store).update("missing", NotePatch(title="x"))

    @pytest.mark.asyncio
    async def test_update_wrong_patch_type(self, store, trainer_id):
        """Each repository only accepts its own patch type."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id))
        with pytest.raises(TypeError):
            await repo.update(note_id, ClientPatch(name="x"))

    @pytest.mark.asyncio
    async def test_delete(self, store, trainer_id):
        """Deleted notes are gone; deleting again is fine."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id))
        await repo.delete(note_id)
        assert await repo.get(note_id) is None
        await repo.delete(note_id)

    @pytest.mark.asyncio
    async def test_list_most_recently_updated_first(self, store, trainer_id):
        """Updating an older note moves it to the front."""
        repo = NoteRepository(store)
        first = await repo.create(_note(trainer_id, title="First"))
        second = await repo.create(_note(trainer_id, title="Second"))
        assert [n.id for n in await repo.list_for_trainer(trainer_id)] == [second, first]

        await repo.update(first, NotePatch(content="edited"))
        assert [n.id for n in await repo.list_for_trainer(trainer_id)] == [first, second]

    @pytest.mark.asyncio
    async def test_corrupt_tags_do_not_block_read(self, store, trainer_id):
        """Malformed stored JSON decodes to the empty default."""
        repo = NoteRepository(store)
        note_id = await repo.create(_note(trainer_id, tags=["legs"]))
        await store.connection.execute(
            "UPDATE trainer_notes SET tags = ? WHERE id = ?", ("[legs", note_id)
        )
        await store.connection.commit()

        note = await repo.get(note_id)
        assert note.tags == []
        assert note.title == "Squat cues"


class TestClientRepository:
    """Tests for ClientRepository."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, store, trainer_id, sample_client):
        """Nested attributes round-trip as structured values."""
        repo = ClientRepository(store)
        client_id = await repo.create(sample_client)

        client = await repo.get(client_id)
        assert _strip(client) == sample_client
        assert client.contact_info["emergency_contact"]["name"] == "Sam"
        assert client.created_at == client.updated_at

    @pytest.mark.asyncio
    async def test_defaults_filled(self, store, trainer_id):
        """Omitted nested attributes decode to [] / {}."""
        repo = ClientRepository(store)
        client_id = await repo.create(Client(trainer_id=trainer_id, name="Bare"))

        client = await repo.get(client_id)
        assert client.goals == []
        assert client.restrictions == []
        assert client.preferences == {}
        assert client.measurements == {}
        assert client.contact_info == {}

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, store, trainer_id):
        """Clients are listed name ascending."""
        repo = ClientRepository(store)
        for name in ["Charlie", "alice", "Bob"]:
            await repo.create(Client(trainer_id=trainer_id, name=name))

        names = [c.name for c in await repo.list_for_trainer(trainer_id)]
        assert names == ["Bob", "Charlie", "alice"]

    @pytest.mark.asyncio
    async def test_list_other_trainer_empty(self, store, client_id):
        """Listing is scoped to one trainer."""
        assert await ClientRepository(store).list_for_trainer("someone-else") == []

    @pytest.mark.asyncio
    async def test_update_nested(self, store, client_id):
        """Patching one nested attribute leaves the others alone."""
        repo = ClientRepository(store)
        before = await repo.get(client_id)

        await repo.update(client_id, ClientPatch(measurements={"weight": 68.0}))

        after = await repo.get(client_id)
        assert after.measurements == {"weight": 68.0}
        assert after.preferences == before.preferences
        assert replace(after, measurements=before.measurements, updated_at=before.updated_at) == before

    @pytest.mark.asyncio
    async def test_patch_none_clears_to_default(self, store, client_id):
        """A nested attribute patched to None reads back as its empty default."""
        repo = ClientRepository(store)
        await repo.update(client_id, ClientPatch(restrictions=None, email=None))

        client = await repo.get(client_id)
        assert client.restrictions == []
        assert client.email is None

    @pytest.mark.asyncio
    async def test_unserializable_nested_value(self, store, trainer_id):
        """Values that cannot be encoded are rejected before writing."""
        repo = ClientRepository(store)
        with pytest.raises(SerializationError):
            await repo.create(Client(trainer_id=trainer_id, name="Bad", preferences={"x": object()}))
        with pytest.raises(SerializationError):
            await repo.create(Client(trainer_id=trainer_id, name="Bad", goals="lose weight"))
        assert await repo.list_for_trainer(trainer_id) == []


class TestWorkoutRepository:
    """Tests for WorkoutRepository."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, store, trainer_id, client_id):
        """Every field round-trips."""
        repo = WorkoutRepository(store)
        workout = _workout(
            trainer_id,
            client_id=client_id,
            description="Heavy lower body",
            estimated_duration=60,
            exercises=[{"exercise_id": "squat", "sets": 5, "reps": 5, "weight": 100}],
            warmup=[{"exercise_id": "bike", "sets": 1, "duration": 300}],
            cooldown=[{"exercise_id": "stretch", "sets": 1, "duration": 600}],
            tags=["legs"],
            is_template=True,
        )
        workout_id = await repo.create(workout)

        stored = await repo.get(workout_id)
        assert _strip(stored) == workout
        assert stored.created_at == stored.updated_at

    @pytest.mark.asyncio
    async def test_defaults_filled(self, store, trainer_id):
        """Omitted lists decode to []."""
        repo = WorkoutRepository(store)
        stored = await repo.get(await repo.create(_workout(trainer_id)))
        assert stored.exercises == []
        assert stored.warmup == []
        assert stored.cooldown == []
        assert stored.tags == []
        assert stored.client_id is None

    @pytest.mark.asyncio
    async def test_invalid_difficulty_rejected(self, store, trainer_id):
        """Difficulty is CHECK-constrained."""
        with pytest.raises(ConstraintViolationError):
            await WorkoutRepository(store).create(_workout(trainer_id, difficulty="extreme"))

    @pytest.mark.asyncio
    async def test_invalid_type_rejected(self, store, trainer_id):
        """Type is CHECK-constrained."""
        with pytest.raises(ConstraintViolationError):
            await WorkoutRepository(store).create(_workout(trainer_id, type="yoga"))

    @pytest.mark.asyncio
    async def test_list_for_client_and_templates(self, store, trainer_id, client_id):
        """Client and template listings filter correctly."""
        repo = WorkoutRepository(store)
        assigned = await repo.create(_workout(trainer_id, name="Assigned", client_id=client_id))
        template = await repo.create(_workout(trainer_id, name="Template", is_template=True))

        assert [w.id for w in await repo.list_for_client(client_id)] == [assigned]
        assert [w.id for w in await repo.list_templates(trainer_id)] == [template]
        assert [w.id for w in await repo.list_for_trainer(trainer_id)] == [template, assigned]

    @pytest.mark.asyncio
    async def test_unassign_client(self, store, trainer_id, client_id):
        """Patching client_id to None stores NULL."""
        repo = WorkoutRepository(store)
        workout_id = await repo.create(_workout(trainer_id, client_id=client_id))
        await repo.update(workout_id, WorkoutPatch(client_id=None))
        assert (await repo.get(workout_id)).client_id is None

    @pytest.mark.asyncio
    async def test_update_enum_field(self, store, trainer_id):
        """Enum fields are stored by value."""
        repo = WorkoutRepository(store)
        workout_id = await repo.create(_workout(trainer_id))
        await repo.update(workout_id, WorkoutPatch(difficulty=Difficulty.ADVANCED, is_template=True))

        stored = await repo.get(workout_id)
        assert stored.difficulty == Difficulty.ADVANCED
        assert stored.is_template is True
        assert stored.type == WorkoutType.STRENGTH


class TestWorkoutSessionRepository:
    """Tests for WorkoutSessionRepository."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, store, trainer_id, client_id):
        """Sessions are listed in schedule order."""
        workout_id = await WorkoutRepository(store).create(_workout(trainer_id))
        repo = WorkoutSessionRepository(store)
        later = await repo.create(
            WorkoutSession(workout_id=workout_id, client_id=client_id, scheduled_date="2024-06-08")
        )
        sooner = await repo.create(
            WorkoutSession(workout_id=workout_id, client_id=client_id, scheduled_date="2024-06-01")
        )

        assert [s.id for s in await repo.list_for_client(client_id)] == [sooner, later]
        assert [s.id for s in await repo.list_for_workout(workout_id)] == [sooner, later]

    @pytest.mark.asyncio
    async def test_complete_session(self, store, trainer_id, client_id):
        """Completing a session records sets and rating."""
        workout_id = await WorkoutRepository(store).create(_workout(trainer_id))
        repo = WorkoutSessionRepository(store)
        session_id = await repo.create(
            WorkoutSession(workout_id=workout_id, client_id=client_id, scheduled_date="2024-06-01")
        )

        await repo.update(
            session_id,
            WorkoutSessionPatch(
                status=SessionStatus.COMPLETED,
                completed_date="2024-06-01",
                completed_sets=[{"exercise_id": "squat", "sets": 5, "reps": 5}],
                rating=4,
            ),
        )

        session = await repo.get(session_id)
        assert session.status == SessionStatus.COMPLETED
        assert session.rating == 4
        assert session.completed_sets[0]["exercise_id"] == "squat"

    @pytest.mark.asyncio
    async def test_rating_bounds(self, store, trainer_id, client_id):
        """Ratings outside 1-5 are rejected."""
        workout_id = await WorkoutRepository(store).create(_workout(trainer_id))
        repo = WorkoutSessionRepository(store)
        for rating in (0, 6):
            with pytest.raises(ConstraintViolationError):
                await repo.create(
                    WorkoutSession(
                        workout_id=workout_id,
                        client_id=client_id,
                        scheduled_date="2024-06-01",
                        rating=rating,
                    )
                )


class TestGoalRepository:
    """Tests for GoalRepository."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, store, client_id):
        """Every field round-trips."""
        repo = GoalRepository(store)
        goal = Goal(
            client_id=client_id,
            type=GoalType.WEIGHT_LOSS,
            description="Lose 5kg",
            target_value=65.0,
            current_value=70.5,
            unit="kg",
            target_date="2024-12-31",
            priority=GoalPriority.HIGH,
        )
        goal_id = await repo.create(goal)
        assert _strip(await repo.get(goal_id)) == goal

    @pytest.mark.asyncio
    async def test_update_status(self, store, client_id):
        """Goals can be paused and completed."""
        repo = GoalRepository(store)
        goal_id = await repo.create(
            Goal(client_id=client_id, type=GoalType.ENDURANCE, description="Run 10k")
        )
        await repo.update(goal_id, GoalPatch(status=GoalStatus.COMPLETED, current_value=10.0))

        goal = await repo.get(goal_id)
        assert goal.status == GoalStatus.COMPLETED
        assert goal.current_value == 10.0
        assert goal.description == "Run 10k"

    @pytest.mark.asyncio
    async def test_invalid_priority_rejected(self, store, client_id):
        """Priority is CHECK-constrained."""
        with pytest.raises(ConstraintViolationError):
            await GoalRepository(store).create(
                Goal(client_id=client_id, type=GoalType.OTHER, description="x", priority="urgent")
            )


class TestReferentialIntegrity:
    """Cascade and set-null behaviour across tables."""

    @pytest.mark.asyncio
    async def test_deleting_trainer_cascades(self, store, trainer_id, client_id):
        """Notes, clients, workouts and their dependents go with the trainer."""
        notes = NoteRepository(store)
        workouts = WorkoutRepository(store)
        sessions = WorkoutSessionRepository(store)
        goals = GoalRepository(store)

        note_id = await notes.create(_note(trainer_id))
        workout_id = await workouts.create(_workout(trainer_id, client_id=client_id))
        session_id = await sessions.create(
            WorkoutSession(workout_id=workout_id, client_id=client_id, scheduled_date="2024-06-01")
        )
        goal_id = await goals.create(
            Goal(client_id=client_id, type=GoalType.STRENGTH, description="Squat 140kg")
        )

        await UserRepository(store).delete(trainer_id)

        assert await notes.get(note_id) is None
        assert await ClientRepository(store).get(client_id) is None
        assert await workouts.get(workout_id) is None
        assert await sessions.get(session_id) is None
        assert await goals.get(goal_id) is None
        assert await notes.list_for_trainer(trainer_id) == []
        assert await workouts.list_for_trainer(trainer_id) == []

    @pytest.mark.asyncio
    async def test_deleting_client_nulls_workout(self, store, trainer_id, client_id):
        """A workout outlives its client with client_id set to NULL."""
        workouts = WorkoutRepository(store)
        workout_id = await workouts.create(_workout(trainer_id, client_id=client_id))

        await ClientRepository(store).delete(client_id)

        workout = await workouts.get(workout_id)
        assert workout is not None
        assert workout.client_id is None

    @pytest.mark.asyncio
    async def test_note_lifecycle_scenario(self, store, sample_trainer):
        """Create trainer t1 and a note, then delete the trainer."""
        users = UserRepository(store)
        notes = NoteRepository(store)
        await users.create(sample_trainer, user_id="t1")
        note_id = await notes.create(
            _note("t1", category=NoteCategory.EXERCISE, tags=["legs", "strength"])
        )

        listed = await notes.list_for_trainer("t1")
        assert len(listed) == 1
        assert listed[0].id == note_id
        assert listed[0].tags == ["legs", "strength"]

        await users.delete("t1")
        assert await notes.list_for_trainer("t1") == []

"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

from fitcoach.db import ClientRepository, Store, UserRepository
from fitcoach.models.client import Client
from fitcoach.models.user import User, UserType


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def store(temp_db_path):
    """An initialized store backed by a temporary file."""
    db = Store(temp_db_path)
    await db.initialize()
    yield db
    await db.close()


@pytest.fixture
def sample_trainer():
    """Create a sample trainer for testing."""
    return User(
        name="Test Trainer",
        email="trainer@example.com",
        type=UserType.TRAINER,
        certification="NSCA-CSCS",
        specialties=["Powerlifting", "Mobility"],
        experience=8,
        philosophy="Train hard, recover harder",
        bio="Former collegiate rower.",
    )


@pytest_asyncio.fixture
async def trainer_id(store, sample_trainer):
    """A trainer stored under the fixed ID 't1'."""
    return await UserRepository(store).create(sample_trainer, user_id="t1")


@pytest.fixture
def sample_client():
    """Create a sample client (trainer_id filled in by the test)."""
    return Client(
        trainer_id="t1",
        name="Jamie Client",
        email="jamie@example.com",
        phone="555-0100",
        goals=[{"type": "strength", "description": "Squat 1.5x bodyweight"}],
        restrictions=["knee surgery 2021"],
        preferences={"workout_days": ["monday", "thursday"], "location": "gym"},
        measurements={"height": 172, "weight": 70.5, "last_updated": "2024-05-01"},
        contact_info={"phone": "555-0100", "emergency_contact": {"name": "Sam", "phone": "555-0199"}},
    )


@pytest_asyncio.fixture
async def client_id(store, trainer_id, sample_client):
    """A stored client belonging to trainer 't1'."""
    return await ClientRepository(store).create(sample_client)

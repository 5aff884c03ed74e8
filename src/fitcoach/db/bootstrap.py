"""First-run bootstrap: make sure the default trainer account exists."""

import logging

from ..models.user import User, UserType
from .engine import Store
from .repositories import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_TRAINER_ID = "default_trainer_001"


def default_trainer() -> User:
    """Seed attributes for the default trainer account."""
    return User(
        name="Demo Trainer",
        email="demo@fitnesstrainer.app",
        type=UserType.TRAINER,
        specialties=["Strength Training", "Weight Loss"],
        experience=5,
        philosophy="Consistent progress over perfection",
    )


async def ensure_default_trainer(store: Store) -> str:
    """Create the default trainer unless it already exists.

    An existing row is the normal case on every start after the first, not
    an error. Lookup failures propagate to the caller.

    Returns:
        The default trainer's ID
    """
    users = UserRepository(store)
    if await users.get(DEFAULT_TRAINER_ID) is not None:
        logger.info("Default trainer account already exists")
        return DEFAULT_TRAINER_ID

    created_id = await users.create(default_trainer(), user_id=DEFAULT_TRAINER_ID)
    logger.info(f"Created default trainer account with ID: {created_id}")
    return created_id


async def startup(store: Store) -> str:
    """Initialize the store and ensure the default trainer.

    Returns:
        The current trainer's ID
    """
    await store.initialize()
    return await ensure_default_trainer(store)

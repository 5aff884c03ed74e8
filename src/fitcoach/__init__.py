"""fitcoach: local data store for a fitness-coaching assistant."""

__version__ = "0.1.0"

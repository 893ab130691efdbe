"""Configuration storage backends."""

from agreedisclaimer.storage.store import SqliteConfigStore

__all__ = ["SqliteConfigStore"]

"""Grant persistence."""

from .grant_repository import GrantDatabaseRepository

__all__ = ["GrantDatabaseRepository"]

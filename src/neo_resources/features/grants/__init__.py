"""Grants: explicit sharing of resources with users."""

from .entities import Grant, GrantRepository
from .repositories import GrantDatabaseRepository
from .services import GrantIndex

__all__ = [
    "Grant",
    "GrantRepository",
    "GrantDatabaseRepository",
    "GrantIndex",
]

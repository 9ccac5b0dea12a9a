"""Users as principals of authorization decisions."""

from .entities import User, UserRepository, UserType
from .repositories import UserDatabaseRepository

__all__ = [
    "User",
    "UserType",
    "UserRepository",
    "UserDatabaseRepository",
]

"""User entities and contracts."""

from .protocols import UserRepository
from .user import User, UserType

__all__ = [
    "User",
    "UserType",
    "UserRepository",
]

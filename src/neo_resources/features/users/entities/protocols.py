"""User repository protocol."""

from typing import Optional, Protocol, runtime_checkable

from ....core.value_objects import UserId
from .user import User


@runtime_checkable
class UserRepository(Protocol):
    """Storage contract for users."""

    async def insert(self, user: User) -> User:
        """Persist a user. Raises ConflictError on a duplicate user name."""
        ...

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        ...

    async def delete(self, user_id: UserId) -> int:
        ...

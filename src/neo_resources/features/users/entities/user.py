"""User domain entity.

Only the fields the authorization core reads are modelled here; credentials
and profile data belong to the account service.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional

from ....core.value_objects import TenantId, UserId


class UserType(IntEnum):
    """User roles. Values are the persisted codes."""

    ADMIN_USER = 0
    GENERAL_USER = 1


@dataclass
class User:
    """User domain entity."""

    user_name: str
    tenant_id: TenantId
    user_type: UserType = UserType.GENERAL_USER
    id: Optional[UserId] = None
    email: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.user_type == UserType.ADMIN_USER

"""Grant (resource-to-user relation) entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ....core.value_objects import GrantId, ResourceId, UserId


@dataclass
class Grant:
    """Explicit permission for ``user_id`` to access ``resource_id``.

    Independent of ownership. Several rows for the same pair may exist;
    only presence matters for authorization.
    """

    resource_id: ResourceId
    user_id: UserId
    id: Optional[GrantId] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

"""Grant index: read-only view of which users hold explicit grants."""

import logging
from typing import Iterable, Set

from ....core.exceptions import InvalidArgumentError
from ....core.value_objects import ResourceId, UserId
from ..entities.protocols import GrantRepository

logger = logging.getLogger(__name__)


class GrantIndex:
    """Answers grant-presence questions. Never considers ownership."""

    def __init__(self, grant_repository: GrantRepository):
        self._grants = grant_repository

    async def has_grant(self, resource_id: ResourceId, user_id: UserId) -> bool:
        """True iff a grant row exists for the pair."""
        return await self._grants.exists(resource_id, user_id)

    async def granted_aliases(self, user_id: UserId, candidate_aliases: Iterable[str]) -> Set[str]:
        """Subset of ``candidate_aliases`` the user holds a grant on."""
        if isinstance(candidate_aliases, str):
            raise InvalidArgumentError(
                "candidate_aliases must be a collection of aliases, not a single string",
                field="candidate_aliases",
            )
        candidates = set(candidate_aliases)
        if not candidates:
            return set()
        granted = await self._grants.find_granted_aliases(user_id, candidates)
        # Stores must not widen the candidate set
        return granted & candidates

    async def granted_resource_ids(self, user_id: UserId) -> Set[ResourceId]:
        """Distinct resource ids granted to the user.

        May contain ids of deleted resources; callers resolve and drop them.
        """
        resource_ids = await self._grants.find_resource_ids_by_user(user_id)
        logger.debug(f"User {user_id} holds grants on {len(resource_ids)} resource(s)")
        return resource_ids

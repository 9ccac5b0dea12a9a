"""Identifier value objects.

Store-assigned integer keys wrapped in distinct types so a user id can never
be passed where a resource id is expected. Immutable and hashable for use in
sets and as dictionary keys.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, order=True)
class _IntegerId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(
                f"{type(self).__name__} must be an int, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive, got {self.value}")

    @classmethod
    def of(cls, value: Union[int, "_IntegerId"]):
        """Accept either a raw key or an existing identifier of this type."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class ResourceId(_IntegerId):
    """Resource identifier."""


class UserId(_IntegerId):
    """User identifier."""


class TenantId(_IntegerId):
    """Tenant identifier."""


class GrantId(_IntegerId):
    """Grant (resource-to-user relation) identifier."""

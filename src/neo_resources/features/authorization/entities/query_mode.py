"""Selection modes for paged resource queries."""

from enum import Enum
from typing import Union

from ....core.exceptions import InvalidArgumentError


class ResourceQueryMode(str, Enum):
    """Which resources a paged query considers, relative to the principal."""

    OWNED_BY_USER = "owned_by_user"
    EXCLUDE_USER = "exclude_user"
    AUTHORIZED = "authorized"  # owned by the user or explicitly granted to them

    @classmethod
    def parse(cls, value: Union[str, "ResourceQueryMode"]) -> "ResourceQueryMode":
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidArgumentError(f"Unsupported query mode: {value!r}", field="mode") from e

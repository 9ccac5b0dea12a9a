"""Grant entities and contracts."""

from .grant import Grant
from .protocols import GrantRepository

__all__ = [
    "Grant",
    "GrantRepository",
]

"""Grant services."""

from .grant_index import GrantIndex

__all__ = ["GrantIndex"]

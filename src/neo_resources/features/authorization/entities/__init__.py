"""Authorization query entities."""

from .query_mode import ResourceQueryMode

__all__ = ["ResourceQueryMode"]

"""Authorization-aware resource queries."""

from .entities import ResourceQueryMode
from .services import AuthorizationQueryEngine

__all__ = [
    "ResourceQueryMode",
    "AuthorizationQueryEngine",
]

"""Authorization services."""

from .query_engine import AuthorizationQueryEngine

__all__ = ["AuthorizationQueryEngine"]

"""PostgreSQL plumbing: pool management and driver error translation."""

from .connection import DatabaseManager, affected_rows
from .error_handling import STORE_FAILURES, store_error_handler

__all__ = [
    "DatabaseManager",
    "affected_rows",
    "STORE_FAILURES",
    "store_error_handler",
]

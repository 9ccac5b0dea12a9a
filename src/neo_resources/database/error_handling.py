"""Translation of driver failures into the neo-resources error taxonomy."""

import functools
import logging
from typing import Any, Callable

import asyncpg

from ..core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

# Connection resets surface as OSError subclasses, pool misuse as InterfaceError
STORE_FAILURES = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def store_error_handler(operation_name: str) -> Callable:
    """Decorator that turns driver failures into ``StoreUnavailableError``.

    Our own errors (NotFound, Conflict, ...) and cancellation pass through
    untouched.

    Usage:
        @store_error_handler("insert resource")
        async def insert(self, resource):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except STORE_FAILURES as e:
                logger.error(f"Failed to {operation_name}: {e}")
                raise StoreUnavailableError(
                    f"Failed to {operation_name}: {e}", operation=operation_name
                ) from e

        return wrapper
    return decorator

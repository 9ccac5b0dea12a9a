"""Exceptions for neo-resources."""

from .base import ResourceAclError, create_error_response
from .domain import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
)

__all__ = [
    "ResourceAclError",
    "create_error_response",
    "NotFoundError",
    "InvalidArgumentError",
    "ConflictError",
    "StoreUnavailableError",
]

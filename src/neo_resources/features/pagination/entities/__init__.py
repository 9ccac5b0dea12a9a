"""Pagination entities."""

from .requests import DEFAULT_MAX_PAGE_SIZE, OffsetPaginationRequest
from .responses import OffsetPaginationResponse

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "OffsetPaginationRequest",
    "OffsetPaginationResponse",
]

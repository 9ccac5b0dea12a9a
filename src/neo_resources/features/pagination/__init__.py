"""Offset pagination shared by the paged resource queries."""

from .entities import DEFAULT_MAX_PAGE_SIZE, OffsetPaginationRequest, OffsetPaginationResponse

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "OffsetPaginationRequest",
    "OffsetPaginationResponse",
]

"""Pagination response entities."""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OffsetPaginationResponse(Generic[T]):
    """Offset-based pagination response with page info.

    ``total`` counts every row matching the query, not just this page.
    """

    items: List[T]
    total: int
    page: int
    per_page: int

    @property
    def count(self) -> int:
        """Get number of items in current page."""
        return len(self.items)

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        if self.per_page == 0:
            return 0
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next else None

    @property
    def prev_page(self) -> Optional[int]:
        return self.page - 1 if self.has_prev else None

    @property
    def page_info(self) -> Dict[str, Any]:
        """Get comprehensive page information."""
        return {
            "current_page": self.page,
            "per_page": self.per_page,
            "total_items": self.total,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
            "next_page": self.next_page,
            "prev_page": self.prev_page,
            "items_on_page": self.count,
        }

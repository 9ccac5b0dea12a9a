"""Pagination request entities."""

from dataclasses import dataclass

from ....core.exceptions import InvalidArgumentError

DEFAULT_MAX_PAGE_SIZE = 1000


@dataclass(frozen=True)
class OffsetPaginationRequest:
    """Offset-based pagination request (traditional page/limit).

    Pages are 1-indexed.
    """

    page: int = 1
    per_page: int = 20
    max_per_page: int = DEFAULT_MAX_PAGE_SIZE

    def __post_init__(self):
        """Validate pagination parameters."""
        if self.page < 1:
            raise InvalidArgumentError("Page must be >= 1", field="page")
        if self.per_page < 1 or self.per_page > self.max_per_page:
            raise InvalidArgumentError(
                f"Page size must be between 1 and {self.max_per_page}", field="page_size"
            )

    @property
    def offset(self) -> int:
        """Calculate offset from page and per_page."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Get limit (alias for per_page)."""
        return self.per_page

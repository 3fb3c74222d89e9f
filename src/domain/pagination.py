import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PaginationRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def with_defaults(self) -> "PaginationRequest":
        """Clamp out-of-range values instead of rejecting them."""
        page = self.page if self.page > 0 else DEFAULT_PAGE
        limit = self.limit if self.limit > 0 else DEFAULT_LIMIT
        return PaginationRequest(page=page, limit=min(limit, MAX_LIMIT))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageMetadata:
    page: int
    limit: int
    total: int
    total_pages: int


def calculate_metadata(page: int, limit: int, total: int) -> PageMetadata:
    return PageMetadata(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )

from dataclasses import dataclass, field, replace

import structlog

from src.application.errors import InvalidQueryError
from src.application.interfaces.listing_repository import ListingRepository
from src.application.use_cases.list_listings import ListingPage, ListListings, ListListingsInput
from src.domain.filters.listing_filter import ListingFilter
from src.domain.pagination import PaginationRequest

logger = structlog.get_logger(__name__)


@dataclass
class SearchListingsInput:
    query: str
    listing_filter: ListingFilter = field(default_factory=ListingFilter)
    pagination: PaginationRequest = field(default_factory=PaginationRequest)


class SearchListings:
    """
    Use case: Free-text search over listings.

    The query is a location substring: it is folded into the filter's
    location predicate unless the caller already set one. Title and property
    type are not searched on this path.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._list_listings = ListListings(listing_repo)

    def execute(self, input_data: SearchListingsInput) -> ListingPage:
        query = input_data.query.strip()
        if not query:
            raise InvalidQueryError("Search query is required", field="q")

        listing_filter = input_data.listing_filter
        if not listing_filter.location:
            listing_filter = replace(listing_filter, location=query)

        page = self._list_listings.execute(
            ListListingsInput(listing_filter=listing_filter, pagination=input_data.pagination)
        )
        logger.info("listings_searched", query=query, total=page.total)
        return page

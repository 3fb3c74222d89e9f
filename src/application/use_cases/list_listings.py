from dataclasses import dataclass, field

import structlog

from src.application.interfaces.listing_repository import ListingRepository
from src.domain.entities.listing import Listing
from src.domain.filters.listing_filter import ListingFilter
from src.domain.pagination import PageMetadata, PaginationRequest, calculate_metadata

logger = structlog.get_logger(__name__)


@dataclass
class ListListingsInput:
    listing_filter: ListingFilter = field(default_factory=ListingFilter)
    pagination: PaginationRequest = field(default_factory=PaginationRequest)


@dataclass
class ListingPage:
    items: list[Listing]
    total: int
    meta: PageMetadata


class ListListings:
    """
    Use case: Return one page of listings matching a filter.

    Results are ordered by id ascending. The sort is stable, so listings that
    share an id keep their load order.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    def execute(self, input_data: ListListingsInput) -> ListingPage:
        pagination = input_data.pagination.with_defaults()

        # get_all hands back a fresh list, so sorting it leaves the store untouched
        filtered = sorted(
            self._listing_repo.get_all(input_data.listing_filter),
            key=lambda listing: listing.id,
        )
        total = len(filtered)

        offset = pagination.offset
        items = filtered[offset:offset + pagination.limit] if offset < total else []

        logger.debug(
            "listings_page_built",
            page=pagination.page,
            limit=pagination.limit,
            total=total,
            returned=len(items),
        )

        return ListingPage(
            items=items,
            total=total,
            meta=calculate_metadata(pagination.page, pagination.limit, total),
        )

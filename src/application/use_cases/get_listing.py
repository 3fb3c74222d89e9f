from dataclasses import dataclass

from src.application.errors import ListingNotFoundError
from src.application.interfaces.listing_repository import ListingRepository
from src.domain.entities.listing import Listing


@dataclass
class GetListingInput:
    listing_id: int


class GetListing:
    """Use case: Look up a single listing by id."""

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    def execute(self, input_data: GetListingInput) -> Listing:
        listing = self._listing_repo.get_by_id(input_data.listing_id)
        if listing is None:
            raise ListingNotFoundError(input_data.listing_id)
        return listing

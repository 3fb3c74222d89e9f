from dataclasses import dataclass

from src.application.errors import InvalidQueryError, ListingNotFoundError
from src.application.interfaces.listing_repository import ListingRepository
from src.domain.entities.listing import Listing

BEDROOM_TOLERANCE = 1
PRICE_TOLERANCE = 0.20


@dataclass
class GetSimilarListingsInput:
    listing_id: int
    limit: int = 5


def is_similar(target: Listing, candidate: Listing) -> bool:
    """Same city and property type, close bedroom count and close price."""
    if candidate.city.lower() != target.city.lower():
        return False
    if candidate.property_type.lower() != target.property_type.lower():
        return False
    if abs(candidate.bedrooms - target.bedrooms) > BEDROOM_TOLERANCE:
        return False

    # Price is only compared when both sides have one
    target_price = target.price_numeric
    candidate_price = candidate.price_numeric
    if target_price > 0 and candidate_price > 0:
        if abs(candidate_price - target_price) > target_price * PRICE_TOLERANCE:
            return False

    return True


class GetSimilarListings:
    """
    Use case: Find listings resembling a given one.

    Scans the store in load order and stops at the first ``limit`` matches.
    This is a first-N scan, not a best-N ranking.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    def execute(self, input_data: GetSimilarListingsInput) -> list[Listing]:
        if input_data.limit <= 0:
            raise InvalidQueryError("limit must be a positive integer", field="limit")

        target = self._listing_repo.get_by_id(input_data.listing_id)
        if target is None:
            raise ListingNotFoundError(input_data.listing_id)

        similar: list[Listing] = []
        for candidate in self._listing_repo.get_all():
            if candidate.id == target.id:
                continue
            if is_similar(target, candidate):
                similar.append(candidate)
                if len(similar) >= input_data.limit:
                    break
        return similar

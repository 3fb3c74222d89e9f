from dataclasses import dataclass

from src.domain.entities.listing import Listing


@dataclass(frozen=True)
class ListingFilter:
    """
    Optional, conjunctive predicates over listings.

    Empty strings and ``None`` bounds mean "no constraint on that dimension".
    """

    location: str = ""
    property_type: str = ""
    city: str = ""
    min_price: int | None = None
    max_price: int | None = None
    min_bedrooms: int | None = None
    max_bedrooms: int | None = None
    min_bathrooms: int | None = None
    max_bathrooms: int | None = None

    @property
    def is_empty(self) -> bool:
        return self == ListingFilter()


def _within(value: float, minimum: int | None, maximum: int | None) -> bool:
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def matches(listing: Listing, listing_filter: ListingFilter) -> bool:
    """Return True if the listing satisfies every predicate set on the filter."""
    if listing_filter.location:
        if listing_filter.location.lower() not in listing.location.lower():
            return False

    if listing_filter.city:
        if listing_filter.city.lower() not in listing.city.lower():
            return False

    if listing_filter.property_type:
        if listing_filter.property_type.lower() != listing.property_type.lower():
            return False

    # Listings without a usable price are never excluded by price bounds
    price = listing.price_numeric
    if price > 0 and not _within(price, listing_filter.min_price, listing_filter.max_price):
        return False

    if not _within(listing.bedrooms, listing_filter.min_bedrooms, listing_filter.max_bedrooms):
        return False

    if not _within(listing.bathrooms, listing_filter.min_bathrooms, listing_filter.max_bathrooms):
        return False

    return True

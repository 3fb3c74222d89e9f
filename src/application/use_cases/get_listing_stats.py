from collections import Counter
from dataclasses import dataclass

import structlog

from src.application.interfaces.listing_repository import ListingRepository

logger = structlog.get_logger(__name__)

# (bucket name, exclusive upper bound); the last bucket is open-ended
PRICE_BUCKETS: tuple[tuple[str, float | None], ...] = (
    ("under_1m", 1_000_000),
    ("1m_to_2m", 2_000_000),
    ("2m_to_3m", 3_000_000),
    ("3m_to_5m", 5_000_000),
    ("above_5m", None),
)


def price_bucket(price: float) -> str:
    for name, upper in PRICE_BUCKETS:
        if upper is None or price < upper:
            return name
    raise AssertionError("unreachable: last bucket is open-ended")


@dataclass
class PriceStats:
    average: float
    minimum: float | None
    maximum: float | None


@dataclass
class ListingStats:
    total_listings: int
    property_types: dict[str, int]
    cities: dict[str, int]
    price_ranges: dict[str, int]
    price_stats: PriceStats


class GetListingStats:
    """
    Use case: Aggregate statistics over the whole collection.

    Price figures only count listings with a valid price, so an unparseable
    price never drags the minimum or the average down to zero.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    def execute(self) -> ListingStats:
        listings = self._listing_repo.get_all()

        property_types: Counter[str] = Counter()
        cities: Counter[str] = Counter()
        price_ranges = {name: 0 for name, _ in PRICE_BUCKETS}

        priced = 0
        total_price = 0.0
        minimum: float | None = None
        maximum: float | None = None

        for listing in listings:
            property_types[listing.property_type] += 1
            cities[listing.city] += 1

            price = listing.price_numeric
            if price <= 0:
                continue

            priced += 1
            total_price += price
            if minimum is None or price < minimum:
                minimum = price
            if maximum is None or price > maximum:
                maximum = price
            price_ranges[price_bucket(price)] += 1

        average = total_price / priced if priced else 0.0

        logger.debug("listing_stats_computed", total=len(listings), priced=priced)

        return ListingStats(
            total_listings=len(listings),
            property_types=dict(property_types),
            cities=dict(cities),
            price_ranges=price_ranges,
            price_stats=PriceStats(average=average, minimum=minimum, maximum=maximum),
        )

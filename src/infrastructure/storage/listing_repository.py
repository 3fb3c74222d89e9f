"""
In-memory listing storage.

The collection lives in an immutable tuple snapshot. Readers grab the current
snapshot reference once per call and work on it; ``replace`` swaps the whole
reference, so a read never observes a half-loaded collection.
"""
import json
from collections.abc import Callable, Iterable
from pathlib import Path

import structlog

from src.application.interfaces.listing_repository import (
    ListingRepository,
    ReloadableListingRepository,
    ValueRange,
)
from src.domain.entities.listing import Listing
from src.domain.filters.listing_filter import ListingFilter, matches

logger = structlog.get_logger(__name__)


class ListingsLoadError(Exception):
    """Raised when the listing source is missing or does not parse."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load listings from {path}: {reason}")


def _value_range(values: Iterable[float]) -> ValueRange:
    minimum: float | None = None
    maximum: float | None = None
    for value in values:
        if minimum is None or value < minimum:
            minimum = value
        if maximum is None or value > maximum:
            maximum = value
    return ValueRange(minimum=minimum, maximum=maximum)


class InMemoryListingRepository(ListingRepository):
    """Listing store backed by a fixed, already-parsed collection."""

    def __init__(self, listings: Iterable[Listing] = ()) -> None:
        self._snapshot: tuple[Listing, ...] = tuple(listings)

    @property
    def snapshot(self) -> tuple[Listing, ...]:
        return self._snapshot

    def replace(self, listings: Iterable[Listing]) -> None:
        """Swap in a new collection in a single reference assignment."""
        new_snapshot = tuple(listings)
        self._snapshot = new_snapshot

    def get_all(self, listing_filter: ListingFilter | None = None) -> list[Listing]:
        snapshot = self._snapshot
        if listing_filter is None or listing_filter.is_empty:
            return list(snapshot)
        return [listing for listing in snapshot if matches(listing, listing_filter)]

    def get_by_id(self, listing_id: int) -> Listing | None:
        # Ids come from the source and may repeat; first one wins
        for listing in self._snapshot:
            if listing.id == listing_id:
                return listing
        return None

    def count(self) -> int:
        return len(self._snapshot)

    def get_unique_locations(self) -> list[str]:
        return self._unique(lambda listing: listing.city)

    def get_unique_property_types(self) -> list[str]:
        return self._unique(lambda listing: listing.property_type)

    def get_price_range(self) -> ValueRange:
        prices = (listing.price_numeric for listing in self._snapshot)
        return _value_range(price for price in prices if price > 0)

    def get_bedroom_range(self) -> ValueRange:
        return _value_range(listing.bedrooms for listing in self._snapshot)

    def get_bathroom_range(self) -> ValueRange:
        return _value_range(listing.bathrooms for listing in self._snapshot)

    def search_text(self, query: str) -> list[Listing]:
        snapshot = self._snapshot
        if not query:
            return list(snapshot)

        needle = query.lower()
        return [
            listing
            for listing in snapshot
            if needle in listing.title.lower()
            or needle in listing.location.lower()
            or needle in listing.property_type.lower()
        ]

    def _unique(self, key: Callable[[Listing], str]) -> list[str]:
        return sorted({value for value in map(key, self._snapshot) if value})


class JsonListingRepository(InMemoryListingRepository, ReloadableListingRepository):
    """Listing store loaded from a JSON array of listing records."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        super().__init__(self._load())
        logger.info("listings_loaded", path=str(self._path), count=self.count())

    @property
    def path(self) -> Path:
        return self._path

    def reload(self) -> int:
        """Re-read the source file and swap it in; the old data stays on failure."""
        listings = self._load()
        self.replace(listings)
        logger.info("listings_reloaded", path=str(self._path), count=len(listings))
        return len(listings)

    def _load(self) -> list[Listing]:
        if not self._path.is_file():
            raise ListingsLoadError(self._path, "file does not exist")

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ListingsLoadError(self._path, f"could not read file: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ListingsLoadError(self._path, f"invalid UTF-8: {exc}") from exc

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ListingsLoadError(self._path, f"invalid JSON: {exc}") from exc

        if not isinstance(records, list):
            raise ListingsLoadError(self._path, "expected a JSON array of listings")

        listings: list[Listing] = []
        for index, record in enumerate(records):
            try:
                listings.append(Listing.from_record(record))
            except (KeyError, TypeError, ValueError) as exc:
                raise ListingsLoadError(
                    self._path, f"record {index} is not a valid listing: {exc}"
                ) from exc
        return listings

from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.domain.entities.listing import Listing
from src.domain.filters.listing_filter import ListingFilter


@dataclass(frozen=True)
class ValueRange:
    """Min/max over a collection; both are None when nothing qualified."""

    minimum: float | None = None
    maximum: float | None = None


class ListingRepository(ABC):
    """Port for reading the loaded listing collection."""

    @abstractmethod
    def get_all(self, listing_filter: ListingFilter | None = None) -> list[Listing]:
        """Return matching listings in natural load order."""
        ...

    @abstractmethod
    def get_by_id(self, listing_id: int) -> Listing | None:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def get_unique_locations(self) -> list[str]:
        ...

    @abstractmethod
    def get_unique_property_types(self) -> list[str]:
        ...

    @abstractmethod
    def get_price_range(self) -> ValueRange:
        ...

    @abstractmethod
    def get_bedroom_range(self) -> ValueRange:
        ...

    @abstractmethod
    def get_bathroom_range(self) -> ValueRange:
        ...

    @abstractmethod
    def search_text(self, query: str) -> list[Listing]:
        ...


class ReloadableListingRepository(ListingRepository):
    """A listing store that can re-read its source and swap the whole collection."""

    @abstractmethod
    def reload(self) -> int:
        """Replace the collection from the source; return the new listing count."""
        ...

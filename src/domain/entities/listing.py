from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.parsing import field_parser


def _as_count(value: Any, name: str) -> int:
    # bool is an int subclass but never a valid room count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _as_text(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Listing:
    """
    A single housing listing exactly as received from the data source.

    Only the raw fields are stored. Price, city, area, property type and
    listing type are derived from them on every access.
    """

    id: int
    title: str = ""
    price: str = ""
    bedrooms: int = 0
    bathrooms: int = 0
    location: str = ""
    status: tuple[str, ...] = field(default_factory=tuple)
    image: str = ""

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Listing":
        """Build a listing from one decoded source record.

        Raises KeyError, TypeError or ValueError when the record does not have
        the listing shape.
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"listing record must be an object, got {type(record).__name__}")

        listing_id = record["id"]
        if isinstance(listing_id, bool) or not isinstance(listing_id, int):
            raise TypeError(f"id must be an integer, got {type(listing_id).__name__}")

        status = record.get("status") or []
        if not isinstance(status, list) or not all(isinstance(tag, str) for tag in status):
            raise TypeError("status must be a list of strings")

        return cls(
            id=listing_id,
            title=_as_text(record.get("title"), "title"),
            price=_as_text(record.get("price"), "price"),
            bedrooms=_as_count(record.get("bedrooms", 0), "bedrooms"),
            bathrooms=_as_count(record.get("bathrooms", 0), "bathrooms"),
            location=_as_text(record.get("location"), "location"),
            status=tuple(status),
            image=_as_text(record.get("image"), "image"),
        )

    # -------------------------------------------------------------------------
    # Derived attributes
    # -------------------------------------------------------------------------

    @property
    def price_numeric(self) -> float:
        """Parsed price, or 0.0 when the raw price is unusable."""
        value, _ = field_parser.parse_price(self.price)
        return value

    @property
    def has_valid_price(self) -> bool:
        return self.price_numeric > 0

    @property
    def area(self) -> str:
        return field_parser.split_location(self.location)[0]

    @property
    def city(self) -> str:
        return field_parser.split_location(self.location)[1]

    @property
    def property_type(self) -> str:
        return field_parser.property_type(self.status)

    @property
    def listing_type(self) -> str:
        """e.g. "For Rent", "For Sale"."""
        return field_parser.listing_type(self.status)

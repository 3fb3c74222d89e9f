"""Unit tests for the Listing domain entity."""
import dataclasses

import pytest

from src.domain.entities.listing import Listing


def _record(**overrides) -> dict:  # type: ignore[no-untyped-def,type-arg]
    defaults = dict(
        id=1,
        title="Luxury 4 Bedroom Duplex",
        price="₦4,500,000 / year",
        bedrooms=4,
        bathrooms=5,
        location="Lekki Phase 1, Lagos",
        status=["House", "For Rent"],
        image="https://images.example.com/1.jpg",
    )
    defaults.update(overrides)
    return defaults


class TestFromRecord:
    def test_builds_listing(self) -> None:
        listing = Listing.from_record(_record())
        assert listing.id == 1
        assert listing.status == ("House", "For Rent")
        assert listing.bedrooms == 4

    def test_missing_optional_fields_default(self) -> None:
        listing = Listing.from_record({"id": 7})
        assert listing.title == ""
        assert listing.status == ()
        assert listing.bedrooms == 0

    def test_missing_id_raises(self) -> None:
        record = _record()
        del record["id"]
        with pytest.raises(KeyError):
            Listing.from_record(record)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": "1"},
            {"id": True},
            {"bedrooms": "three"},
            {"bathrooms": 1.5},
            {"status": "House"},
            {"status": ["House", 3]},
            {"price": 4500000},
        ],
    )
    def test_wrong_types_raise_type_error(self, overrides: dict) -> None:  # type: ignore[type-arg]
        with pytest.raises(TypeError):
            Listing.from_record(_record(**overrides))

    def test_negative_counts_raise_value_error(self) -> None:
        with pytest.raises(ValueError):
            Listing.from_record(_record(bedrooms=-1))

    def test_non_object_record_raises(self) -> None:
        with pytest.raises(TypeError):
            Listing.from_record(["not", "a", "record"])  # type: ignore[arg-type]


class TestDerivedAttributes:
    def test_derived_values(self) -> None:
        listing = Listing.from_record(_record())
        assert listing.price_numeric == 4500000.0
        assert listing.has_valid_price is True
        assert listing.area == "Lekki Phase 1"
        assert listing.city == "Lagos"
        assert listing.property_type == "House"
        assert listing.listing_type == "For Rent"

    def test_unparseable_price_is_zero(self) -> None:
        listing = Listing.from_record(_record(price="N/A"))
        assert listing.price_numeric == 0.0
        assert listing.has_valid_price is False

    def test_listing_is_immutable(self) -> None:
        listing = Listing.from_record(_record())
        with pytest.raises(dataclasses.FrozenInstanceError):
            listing.title = "changed"  # type: ignore[misc]

"""Unit tests for matching listings against filters."""
import pytest

from src.domain.entities.listing import Listing
from src.domain.filters.listing_filter import ListingFilter, matches


def _listing(**overrides) -> Listing:  # type: ignore[no-untyped-def]
    defaults = dict(
        id=1,
        title="Semi Detached 4 Bedroom",
        price="₦4,000,000 / year",
        bedrooms=4,
        bathrooms=3,
        location="Lekki Phase 1, Lagos",
        status=("House", "For Rent"),
    )
    defaults.update(overrides)
    return Listing(**defaults)


class TestTextPredicates:
    def test_empty_filter_matches_everything(self) -> None:
        assert matches(_listing(), ListingFilter()) is True

    def test_location_is_case_insensitive_substring(self) -> None:
        assert matches(_listing(), ListingFilter(location="lekki phase")) is True
        assert matches(_listing(), ListingFilter(location="Ikoyi")) is False

    def test_location_matches_raw_field_including_area(self) -> None:
        assert matches(_listing(), ListingFilter(location="phase 1, lag")) is True

    def test_city_matches_derived_city_only(self) -> None:
        assert matches(_listing(), ListingFilter(city="lag")) is True
        assert matches(_listing(), ListingFilter(city="Lekki")) is False

    def test_property_type_is_exact_case_insensitive(self) -> None:
        assert matches(_listing(), ListingFilter(property_type="house")) is True
        assert matches(_listing(), ListingFilter(property_type="Hou")) is False

    def test_property_type_missing_status(self) -> None:
        assert matches(_listing(status=()), ListingFilter(property_type="House")) is False


class TestPriceRange:
    def test_within_bounds(self) -> None:
        assert matches(_listing(), ListingFilter(min_price=3_000_000, max_price=5_000_000)) is True

    def test_bounds_are_inclusive(self) -> None:
        assert matches(_listing(), ListingFilter(min_price=4_000_000, max_price=4_000_000)) is True

    def test_below_min(self) -> None:
        assert matches(_listing(), ListingFilter(min_price=4_000_001)) is False

    def test_above_max(self) -> None:
        assert matches(_listing(), ListingFilter(max_price=1_000_000)) is False

    @pytest.mark.parametrize("price", ["N/A", "", "₦0"])
    def test_listing_without_valid_price_always_passes(self, price: str) -> None:
        listing = _listing(price=price)
        assert matches(listing, ListingFilter(min_price=1_000_000, max_price=2_000_000)) is True


class TestRoomRanges:
    def test_bedroom_bounds(self) -> None:
        assert matches(_listing(), ListingFilter(min_bedrooms=4, max_bedrooms=4)) is True
        assert matches(_listing(), ListingFilter(min_bedrooms=5)) is False
        assert matches(_listing(), ListingFilter(max_bedrooms=3)) is False

    def test_zero_bedrooms_still_checked(self) -> None:
        assert matches(_listing(bedrooms=0), ListingFilter(min_bedrooms=1)) is False
        assert matches(_listing(bedrooms=0), ListingFilter(max_bedrooms=0)) is True

    def test_bathroom_bounds(self) -> None:
        assert matches(_listing(), ListingFilter(min_bathrooms=2, max_bathrooms=3)) is True
        assert matches(_listing(), ListingFilter(min_bathrooms=4)) is False
        assert matches(_listing(bathrooms=0), ListingFilter(min_bathrooms=1)) is False


def test_predicates_are_conjunctive() -> None:
    listing_filter = ListingFilter(city="Lagos", property_type="House", min_bedrooms=5)
    assert matches(_listing(), listing_filter) is False
    assert matches(_listing(bedrooms=5), listing_filter) is True


def test_is_empty() -> None:
    assert ListingFilter().is_empty is True
    assert ListingFilter(min_bedrooms=0).is_empty is False

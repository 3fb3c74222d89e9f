"""Unit tests for parsing raw listing fields."""
import pytest

from src.domain.parsing.field_parser import (
    listing_type,
    parse_price,
    property_type,
    split_location,
)


class TestParsePrice:
    def test_strips_currency_separators_and_period(self) -> None:
        assert parse_price("₦1,200,000 / month") == (1200000.0, True)

    def test_plain_amount(self) -> None:
        assert parse_price("₦950,000") == (950000.0, True)

    def test_not_available_is_invalid(self) -> None:
        assert parse_price("N/A") == (0.0, False)

    def test_period_without_spaces(self) -> None:
        assert parse_price("₦45,000/night") == (45000.0, True)

    def test_only_text_before_first_slash_counts(self) -> None:
        assert parse_price("₦10,000 / week / negotiable") == (10000.0, True)

    @pytest.mark.parametrize("raw", ["", "   ", "₦", "Contact agent", "₦0", "-5000"])
    def test_unusable_amounts_fall_back_to_zero(self, raw: str) -> None:
        assert parse_price(raw) == (0.0, False)

    @pytest.mark.parametrize("raw", ["inf", "nan", "₦-inf"])
    def test_non_finite_values_are_invalid(self, raw: str) -> None:
        assert parse_price(raw) == (0.0, False)

    def test_decimal_amount(self) -> None:
        assert parse_price("$1,250.50") == (1250.5, True)


class TestSplitLocation:
    def test_area_and_city(self) -> None:
        assert split_location("Lekki, Lagos") == ("Lekki", "Lagos")

    def test_single_segment_is_both(self) -> None:
        assert split_location("Lagos") == ("Lagos", "Lagos")

    def test_middle_segments_ignored(self) -> None:
        assert split_location("Banana Island, Ikoyi, Lagos") == ("Banana Island", "Lagos")

    def test_single_segment_is_trimmed(self) -> None:
        assert split_location("  Abuja ") == ("Abuja", "Abuja")

    def test_empty_location(self) -> None:
        assert split_location("") == ("", "")


class TestStatusTags:
    def test_property_and_listing_type(self) -> None:
        status = ["House", "For Rent"]
        assert property_type(status) == "House"
        assert listing_type(status) == "For Rent"

    def test_missing_listing_type(self) -> None:
        assert property_type(["Commercial"]) == "Commercial"
        assert listing_type(["Commercial"]) == ""

    def test_empty_status(self) -> None:
        assert property_type([]) == ""
        assert listing_type(()) == ""

"""Unit tests for pagination defaults and metadata."""
import pytest

from src.domain.pagination import PaginationRequest, calculate_metadata


class TestPaginationDefaults:
    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            (0, 0, (1, 10)),
            (-3, -1, (1, 10)),
            (2, 500, (2, 100)),
            (4, 25, (4, 25)),
            (1, 100, (1, 100)),
        ],
    )
    def test_with_defaults(self, page: int, limit: int, expected: tuple[int, int]) -> None:
        request = PaginationRequest(page=page, limit=limit).with_defaults()
        assert (request.page, request.limit) == expected

    def test_offset(self) -> None:
        assert PaginationRequest(page=3, limit=10).offset == 20


class TestCalculateMetadata:
    def test_rounds_total_pages_up(self) -> None:
        meta = calculate_metadata(page=1, limit=10, total=25)
        assert meta.total_pages == 3
        assert meta.total == 25

    def test_exact_multiple(self) -> None:
        assert calculate_metadata(page=1, limit=5, total=20).total_pages == 4

    def test_no_results(self) -> None:
        assert calculate_metadata(page=1, limit=10, total=0).total_pages == 0

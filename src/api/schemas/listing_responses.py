from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from src.domain.entities.listing import Listing

DataT = TypeVar("DataT")


class ErrorInfo(BaseModel):
    code: int
    message: str
    details: str | None = None


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapped around every listings API response."""

    success: bool = True
    message: str = ""
    data: DataT | None = None
    error: ErrorInfo | None = None


class ListingResponse(BaseModel):
    id: int
    title: str
    price: str
    bedrooms: int
    bathrooms: int
    location: str
    status: list[str]
    image: str

    @classmethod
    def from_domain(cls, listing: Listing) -> "ListingResponse":
        return cls(
            id=listing.id,
            title=listing.title,
            price=listing.price,
            bedrooms=listing.bedrooms,
            bathrooms=listing.bathrooms,
            location=listing.location,
            status=list(listing.status),
            image=listing.image,
        )


class PageMetaResponse(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedListingsResponse(BaseModel):
    items: list[ListingResponse]
    meta: PageMetaResponse


class ValueRangeResponse(BaseModel):
    minimum: float | None = None
    maximum: float | None = None


class FiltersMetadataResponse(BaseModel):
    locations: list[str]
    property_types: list[str]
    filters: dict[str, dict[str, Any]]
    pagination: dict[str, dict[str, Any]]
    price_range: ValueRangeResponse
    bedroom_range: ValueRangeResponse
    bathroom_range: ValueRangeResponse


class PriceStatsResponse(BaseModel):
    average: float
    minimum: float | None = None
    maximum: float | None = None


class ListingStatsResponse(BaseModel):
    total_listings: int
    property_types: dict[str, int]
    cities: dict[str, int]
    price_ranges: dict[str, int]
    price_stats: PriceStatsResponse


class ReloadResponse(BaseModel):
    count: int

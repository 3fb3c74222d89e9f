from fastapi import APIRouter, Depends, Query

from src.api.dependencies import (
    get_filters_metadata_use_case,
    get_list_listings_use_case,
    get_listing_stats_use_case,
    get_listing_use_case,
    get_search_listings_use_case,
    get_similar_listings_use_case,
)
from src.api.schemas.listing_responses import (
    ApiResponse,
    FiltersMetadataResponse,
    ListingResponse,
    ListingStatsResponse,
    PageMetaResponse,
    PaginatedListingsResponse,
    PriceStatsResponse,
    ValueRangeResponse,
)
from src.application.use_cases.get_filters_metadata import GetFiltersMetadata
from src.application.use_cases.get_listing import GetListing, GetListingInput
from src.application.use_cases.get_listing_stats import GetListingStats
from src.application.use_cases.get_similar_listings import (
    GetSimilarListings,
    GetSimilarListingsInput,
)
from src.application.use_cases.list_listings import ListingPage, ListListings, ListListingsInput
from src.application.use_cases.search_listings import SearchListings, SearchListingsInput
from src.config import settings
from src.domain.filters.listing_filter import ListingFilter
from src.domain.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, PaginationRequest

router = APIRouter(prefix="/listings", tags=["listings"])


def listing_filter_params(
    location: str = Query(default="", description="Filter by location (partial match)"),
    property_type: str = Query(default="", description="Filter by property type (exact match)"),
    city: str = Query(default="", description="Filter by city (partial match)"),
    min_price: int | None = Query(default=None),
    max_price: int | None = Query(default=None),
    min_bedrooms: int | None = Query(default=None),
    max_bedrooms: int | None = Query(default=None),
    min_bathrooms: int | None = Query(default=None),
    max_bathrooms: int | None = Query(default=None),
) -> ListingFilter:
    return ListingFilter(
        location=location,
        property_type=property_type,
        city=city,
        min_price=min_price,
        max_price=max_price,
        min_bedrooms=min_bedrooms,
        max_bedrooms=max_bedrooms,
        min_bathrooms=min_bathrooms,
        max_bathrooms=max_bathrooms,
    )


def pagination_params(
    page: int = Query(default=DEFAULT_PAGE, description="Page number (starts from 1)"),
    limit: int = Query(default=DEFAULT_LIMIT, description="Items per page (max 100)"),
) -> PaginationRequest:
    # Out-of-range values are clamped by the use case, not rejected here
    return PaginationRequest(page=page, limit=limit)


def _page_to_response(page: ListingPage) -> PaginatedListingsResponse:
    return PaginatedListingsResponse(
        items=[ListingResponse.from_domain(listing) for listing in page.items],
        meta=PageMetaResponse(
            page=page.meta.page,
            limit=page.meta.limit,
            total=page.meta.total,
            total_pages=page.meta.total_pages,
        ),
    )


@router.get("", response_model=ApiResponse[PaginatedListingsResponse])
async def list_listings(
    listing_filter: ListingFilter = Depends(listing_filter_params),
    pagination: PaginationRequest = Depends(pagination_params),
    use_case: ListListings = Depends(get_list_listings_use_case),
) -> ApiResponse[PaginatedListingsResponse]:
    """List housing listings with optional filtering and pagination."""
    page = use_case.execute(
        ListListingsInput(listing_filter=listing_filter, pagination=pagination)
    )
    return ApiResponse(message="Listings retrieved successfully", data=_page_to_response(page))


@router.get("/search", response_model=ApiResponse[PaginatedListingsResponse])
async def search_listings(
    q: str = Query(default="", description="Search query"),
    listing_filter: ListingFilter = Depends(listing_filter_params),
    pagination: PaginationRequest = Depends(pagination_params),
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> ApiResponse[PaginatedListingsResponse]:
    page = use_case.execute(
        SearchListingsInput(query=q, listing_filter=listing_filter, pagination=pagination)
    )
    return ApiResponse(message="Search completed successfully", data=_page_to_response(page))


@router.get("/filters", response_model=ApiResponse[FiltersMetadataResponse])
async def get_filters_metadata(
    use_case: GetFiltersMetadata = Depends(get_filters_metadata_use_case),
) -> ApiResponse[FiltersMetadataResponse]:
    metadata = use_case.execute()
    return ApiResponse(
        message="Filter metadata retrieved successfully",
        data=FiltersMetadataResponse(
            locations=metadata.locations,
            property_types=metadata.property_types,
            filters=metadata.filters,
            pagination=metadata.pagination,
            price_range=ValueRangeResponse(
                minimum=metadata.price_range.minimum, maximum=metadata.price_range.maximum
            ),
            bedroom_range=ValueRangeResponse(
                minimum=metadata.bedroom_range.minimum, maximum=metadata.bedroom_range.maximum
            ),
            bathroom_range=ValueRangeResponse(
                minimum=metadata.bathroom_range.minimum, maximum=metadata.bathroom_range.maximum
            ),
        ),
    )


@router.get("/stats", response_model=ApiResponse[ListingStatsResponse])
async def get_listing_stats(
    use_case: GetListingStats = Depends(get_listing_stats_use_case),
) -> ApiResponse[ListingStatsResponse]:
    stats = use_case.execute()
    return ApiResponse(
        message="Listing statistics retrieved successfully",
        data=ListingStatsResponse(
            total_listings=stats.total_listings,
            property_types=stats.property_types,
            cities=stats.cities,
            price_ranges=stats.price_ranges,
            price_stats=PriceStatsResponse(
                average=stats.price_stats.average,
                minimum=stats.price_stats.minimum,
                maximum=stats.price_stats.maximum,
            ),
        ),
    )


@router.get("/{listing_id}", response_model=ApiResponse[ListingResponse])
async def get_listing(
    listing_id: int,
    use_case: GetListing = Depends(get_listing_use_case),
) -> ApiResponse[ListingResponse]:
    listing = use_case.execute(GetListingInput(listing_id=listing_id))
    return ApiResponse(
        message="Listing retrieved successfully", data=ListingResponse.from_domain(listing)
    )


@router.get("/{listing_id}/similar", response_model=ApiResponse[list[ListingResponse]])
async def get_similar_listings(
    listing_id: int,
    limit: int = Query(
        default=settings.similar_listings_default_limit,
        le=settings.similar_listings_max_limit,
    ),
    use_case: GetSimilarListings = Depends(get_similar_listings_use_case),
) -> ApiResponse[list[ListingResponse]]:
    """First matches in store order, not a similarity ranking."""
    similar = use_case.execute(GetSimilarListingsInput(listing_id=listing_id, limit=limit))
    return ApiResponse(
        message="Similar listings retrieved successfully",
        data=[ListingResponse.from_domain(listing) for listing in similar],
    )

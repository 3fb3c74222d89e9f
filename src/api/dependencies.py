"""
FastAPI dependency injection wiring.

The listing store is created once at startup and kept on ``app.state``.
Each use-case dependency wraps that same store, keeping route handlers thin.
"""
from fastapi import Depends, HTTPException, Request, status

from src.application.interfaces.listing_repository import (
    ListingRepository,
    ReloadableListingRepository,
)
from src.application.use_cases.get_filters_metadata import GetFiltersMetadata
from src.application.use_cases.get_listing import GetListing
from src.application.use_cases.get_listing_stats import GetListingStats
from src.application.use_cases.get_similar_listings import GetSimilarListings
from src.application.use_cases.list_listings import ListListings
from src.application.use_cases.reload_listings import ReloadListings
from src.application.use_cases.search_listings import SearchListings


# ---- Low-level dependencies ------------------------------------------------

def get_listing_repo(request: Request) -> ListingRepository:
    repo: ListingRepository | None = getattr(request.app.state, "listing_repo", None)
    if repo is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Listings are not loaded.",
        )
    return repo


# ---- Use-case dependencies -------------------------------------------------

def get_list_listings_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> ListListings:
    return ListListings(listing_repo)


def get_search_listings_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> SearchListings:
    return SearchListings(listing_repo)


def get_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> GetListing:
    return GetListing(listing_repo)


def get_filters_metadata_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> GetFiltersMetadata:
    return GetFiltersMetadata(listing_repo)


def get_listing_stats_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> GetListingStats:
    return GetListingStats(listing_repo)


def get_similar_listings_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> GetSimilarListings:
    return GetSimilarListings(listing_repo)


def get_reload_listings_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> ReloadListings:
    if not isinstance(listing_repo, ReloadableListingRepository):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="The configured listing source cannot be reloaded.",
        )
    return ReloadListings(listing_repo)

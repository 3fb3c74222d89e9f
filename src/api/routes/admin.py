import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_reload_listings_use_case
from src.api.schemas.listing_responses import ApiResponse, ReloadResponse
from src.application.use_cases.reload_listings import ReloadListings
from src.infrastructure.storage.listing_repository import ListingsLoadError

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/listings/reload", response_model=ApiResponse[ReloadResponse])
def reload_listings(
    use_case: ReloadListings = Depends(get_reload_listings_use_case),
) -> ApiResponse[ReloadResponse]:
    """Re-read the listing source and swap in the new collection."""
    try:
        count = use_case.execute()
    except ListingsLoadError as exc:
        logger.error("listings_reload_failed", path=str(exc.path), reason=exc.reason)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to reload listings: {exc.reason}",
        ) from exc
    return ApiResponse(message="Listings reloaded successfully", data=ReloadResponse(count=count))

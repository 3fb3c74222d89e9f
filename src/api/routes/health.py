from fastapi import APIRouter, Depends

from src.api.dependencies import get_listing_repo
from src.application.interfaces.listing_repository import ListingRepository
from src.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> dict:  # type: ignore[type-arg]
    """Liveness check; only reachable once listings have loaded."""
    return {
        "success": True,
        "message": f"{settings.app_name} is running!",
        "data": {
            "status": "healthy",
            "environment": settings.environment,
            "listings": listing_repo.count(),
        },
    }

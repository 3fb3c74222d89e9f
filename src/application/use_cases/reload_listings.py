import structlog

from src.application.interfaces.listing_repository import ReloadableListingRepository

logger = structlog.get_logger(__name__)


class ReloadListings:
    """
    Use case: Replace the whole listing collection from its source.

    The store swaps its snapshot only after the new data has fully loaded;
    a failed reload raises and keeps serving the previous collection.
    """

    def __init__(self, listing_repo: ReloadableListingRepository) -> None:
        self._listing_repo = listing_repo

    def execute(self) -> int:
        previous = self._listing_repo.count()
        count = self._listing_repo.reload()
        logger.info("listings_reload_completed", previous_count=previous, count=count)
        return count

class ListingNotFoundError(Exception):
    def __init__(self, listing_id: int) -> None:
        self.listing_id = listing_id
        super().__init__(f"Listing {listing_id} not found.")


class InvalidQueryError(Exception):
    """Raised when a query parameter is outside the accepted shape."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)

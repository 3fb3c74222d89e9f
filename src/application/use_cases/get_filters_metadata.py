from dataclasses import dataclass
from typing import Any

from src.application.interfaces.listing_repository import ListingRepository, ValueRange
from src.domain.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

# Static description of every accepted query parameter, for client discovery
FILTER_PARAMETERS: dict[str, dict[str, Any]] = {
    "location": {
        "type": "string",
        "description": "Filter by location (partial match)",
        "example": "Lagos",
    },
    "property_type": {
        "type": "string",
        "description": "Filter by property type (exact match)",
        "example": "House",
    },
    "city": {
        "type": "string",
        "description": "Filter by city (partial match)",
        "example": "Lagos",
    },
    "min_price": {
        "type": "integer",
        "description": "Minimum price filter",
        "example": 1000000,
    },
    "max_price": {
        "type": "integer",
        "description": "Maximum price filter",
        "example": 5000000,
    },
    "min_bedrooms": {
        "type": "integer",
        "description": "Minimum number of bedrooms",
        "example": 2,
    },
    "max_bedrooms": {
        "type": "integer",
        "description": "Maximum number of bedrooms",
        "example": 5,
    },
    "min_bathrooms": {
        "type": "integer",
        "description": "Minimum number of bathrooms",
        "example": 1,
    },
    "max_bathrooms": {
        "type": "integer",
        "description": "Maximum number of bathrooms",
        "example": 4,
    },
}

PAGINATION_PARAMETERS: dict[str, dict[str, Any]] = {
    "page": {
        "type": "integer",
        "description": "Page number (starts from 1)",
        "default": DEFAULT_PAGE,
        "minimum": 1,
    },
    "limit": {
        "type": "integer",
        "description": "Number of items per page",
        "default": DEFAULT_LIMIT,
        "minimum": 1,
        "maximum": MAX_LIMIT,
    },
}


@dataclass
class FiltersMetadata:
    locations: list[str]
    property_types: list[str]
    filters: dict[str, dict[str, Any]]
    pagination: dict[str, dict[str, Any]]
    price_range: ValueRange
    bedroom_range: ValueRange
    bathroom_range: ValueRange


class GetFiltersMetadata:
    """Use case: Describe the filter values clients can choose from."""

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    def execute(self) -> FiltersMetadata:
        property_types = self._listing_repo.get_unique_property_types()

        filters = {name: dict(spec) for name, spec in FILTER_PARAMETERS.items()}
        filters["property_type"]["options"] = property_types

        return FiltersMetadata(
            locations=self._listing_repo.get_unique_locations(),
            property_types=property_types,
            filters=filters,
            pagination={name: dict(spec) for name, spec in PAGINATION_PARAMETERS.items()},
            price_range=self._listing_repo.get_price_range(),
            bedroom_range=self._listing_repo.get_bedroom_range(),
            bathroom_range=self._listing_repo.get_bathroom_range(),
        )

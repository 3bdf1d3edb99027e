"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from company_profiles.repositories.base import BaseRepository
from company_profiles.repositories.listing_repository import (
    ListingRepository,
    ListingStore,
)

__all__ = [
    "BaseRepository",
    "ListingRepository",
    "ListingStore",
]

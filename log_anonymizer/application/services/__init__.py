"""Application services."""

from .scheduler import Scheduler, SchedulerSettings
from .listing_service import ListingService

__all__ = [
    'Scheduler',
    'SchedulerSettings',
    'ListingService',
]

"""Station dataset adapters."""

from station_finder.adapters.dataset.cdn_station_repository import CdnStationRepository
from station_finder.adapters.dataset.fallback_station_repository import FallbackStationRepository
from station_finder.adapters.dataset.offline_station_repository import (
    OfflineFileStationRepository,
)

__all__ = [
    "CdnStationRepository",
    "FallbackStationRepository",
    "OfflineFileStationRepository",
]

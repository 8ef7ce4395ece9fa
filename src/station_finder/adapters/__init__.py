"""Adapters layer - external system integrations."""

from station_finder.adapters.config import AppConfig
from station_finder.adapters.dataset import (
    CdnStationRepository,
    FallbackStationRepository,
    OfflineFileStationRepository,
)
from station_finder.adapters.storage import InMemoryStorage, JsonFileStorage

__all__ = [
    "AppConfig",
    "CdnStationRepository",
    "FallbackStationRepository",
    "InMemoryStorage",
    "JsonFileStorage",
    "OfflineFileStationRepository",
]

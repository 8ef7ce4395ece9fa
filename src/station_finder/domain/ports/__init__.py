"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_finder.domain.ports.recents_storage import RecentsStorage, StorageListener
from station_finder.domain.ports.station_dataset_repository import StationDatasetRepository

__all__ = [
    "RecentsStorage",
    "StationDatasetRepository",
    "StorageListener",
]

"""Domain layer - core models and ports."""

from station_finder.domain.models import (
    ScoredStation,
    StationRecord,
)
from station_finder.domain.ports import (
    RecentsStorage,
    StationDatasetRepository,
)

__all__ = [
    "RecentsStorage",
    "ScoredStation",
    "StationDatasetRepository",
    "StationRecord",
]

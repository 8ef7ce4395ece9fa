"""Domain models for station search."""

from station_finder.domain.models.dataset import (
    DatasetSource,
    DatasetUnavailableError,
    LoadedDataset,
)
from station_finder.domain.models.error_details import ErrorDetails
from station_finder.domain.models.search import ScoredStation, SearchField, SearchMode
from station_finder.domain.models.session import (
    NO_HIGHLIGHT,
    DisplayView,
    NavigationKey,
    SessionSnapshot,
)
from station_finder.domain.models.station import (
    LANGUAGE_TAGS,
    LanguageTag,
    MalformedStationError,
    RegionalNames,
    StationRecord,
)

__all__ = [
    "LANGUAGE_TAGS",
    "NO_HIGHLIGHT",
    "DatasetSource",
    "DatasetUnavailableError",
    "DisplayView",
    "ErrorDetails",
    "LanguageTag",
    "LoadedDataset",
    "MalformedStationError",
    "NavigationKey",
    "RegionalNames",
    "ScoredStation",
    "SearchField",
    "SearchMode",
    "SessionSnapshot",
    "StationRecord",
]

"""Application services (use cases) for station search."""

from station_finder.application.services.field_index_builder import (
    FieldIndex,
    FieldIndexBuilder,
    normalize_text,
)
from station_finder.application.services.fuzzy_matcher import FuzzyMatcher, field_distance
from station_finder.application.services.query_session import QuerySessionController
from station_finder.application.services.recent_stations import RecentStationsService
from station_finder.application.services.record_store import RecordStore
from station_finder.application.services.station_catalog import StationCatalog
from station_finder.application.services.substring_matcher import SubstringMatcher

__all__ = [
    "FieldIndex",
    "FieldIndexBuilder",
    "FuzzyMatcher",
    "QuerySessionController",
    "RecentStationsService",
    "RecordStore",
    "StationCatalog",
    "SubstringMatcher",
    "field_distance",
    "normalize_text",
]

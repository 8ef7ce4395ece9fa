"""Search-related domain models."""

from dataclasses import dataclass
from enum import Enum

from .station import StationRecord


class SearchMode(str, Enum):
    """How queries are matched against the index."""

    FUZZY = "fuzzy"
    SUBSTRING = "substring"  # Degraded fallback: literal substring matching only


@dataclass(frozen=True)
class SearchField:
    """A searchable field of a station and its relative importance."""

    key: str  # "name", "code", "name_hi", ..., "district", "state", "utterances"
    weight: float


@dataclass(frozen=True)
class ScoredStation:
    """A station matched by a query, with the field that produced its best score."""

    station: StationRecord
    score: float  # weight * (1 - distance); higher is better
    distance: float  # normalized distance of the best field, 0.0 = exact
    matched_field: str

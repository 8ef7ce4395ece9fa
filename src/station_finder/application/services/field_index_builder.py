"""Builds the searchable field index over a record store."""

import logging
import re
import time
import unicodedata
from bisect import bisect_left
from dataclasses import dataclass

from station_finder.domain.models import LANGUAGE_TAGS, SearchField, StationRecord

from .record_store import RecordStore

logger = logging.getLogger(__name__)

NAME_FIELD = SearchField(key="name", weight=2.0)
CODE_FIELD = SearchField(key="code", weight=2.0)
REGIONAL_FIELDS: dict[str, SearchField] = {
    tag.value: SearchField(key=tag.wire_key, weight=1.5) for tag in LANGUAGE_TAGS
}
DISTRICT_FIELD = SearchField(key="district", weight=1.0)
STATE_FIELD = SearchField(key="state", weight=1.0)
UTTERANCE_FIELD = SearchField(key="utterances", weight=1.0)

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize text for matching.

    Applies NFKC, case folding (a no-op for Indic scripts) and whitespace collapsing.
    """
    folded = unicodedata.normalize("NFKC", text).casefold()
    return _WHITESPACE.sub(" ", folded).strip()


@dataclass(frozen=True)
class IndexedField:
    """One normalized field value of one station."""

    position: int  # Position of the station in the record store
    field: SearchField
    text: str


class FieldIndex:
    """Search-ready structure built once per dataset load.

    `texts[i]` is the normalized value of `entries[i]`. Distinct texts are also kept
    once each in `unique_texts`, sorted by length, so the matcher scores every
    distinct value a single time and can split the batch at the query length.
    """

    def __init__(self, stations: tuple[StationRecord, ...], entries: list[IndexedField]) -> None:
        self.stations = stations
        self.entries = entries
        self.texts: list[str] = [entry.text for entry in entries]

        entries_by_text: dict[str, list[int]] = {}
        for i, text in enumerate(self.texts):
            entries_by_text.setdefault(text, []).append(i)
        self.unique_texts: list[str] = sorted(entries_by_text, key=len)
        self.unique_lengths: list[int] = [len(text) for text in self.unique_texts]
        # Entry indices sharing unique_texts[i], in index order
        self.entries_by_text: list[list[int]] = [
            entries_by_text[text] for text in self.unique_texts
        ]

    def shorter_than(self, length: int) -> int:
        """Number of distinct texts shorter than `length`; they lead `unique_texts`."""
        return bisect_left(self.unique_lengths, length)

    def __len__(self) -> int:
        return len(self.entries)


class FieldIndexBuilder:
    """Extracts the weighted searchable fields of every station."""

    @staticmethod
    def fields_for(station: StationRecord) -> list[tuple[SearchField, str]]:
        """Return the populated searchable fields of a station with their raw values.

        Absent optional fields are skipped rather than indexed as empty strings.
        """
        fields: list[tuple[SearchField, str]] = [
            (NAME_FIELD, station.name),
            (CODE_FIELD, station.code),
        ]
        for tag, value in station.regional_names.items():
            fields.append((REGIONAL_FIELDS[tag.value], value))
        fields.append((DISTRICT_FIELD, station.district))
        fields.append((STATE_FIELD, station.state))
        for utterance in station.utterances:
            fields.append((UTTERANCE_FIELD, utterance))
        return fields

    def build(self, store: RecordStore) -> FieldIndex:
        """Build the index for all stations in the store."""
        started = time.perf_counter()
        entries: list[IndexedField] = []
        for position, station in enumerate(store.stations):
            for search_field, value in self.fields_for(station):
                text = normalize_text(value)
                if text:
                    entries.append(IndexedField(position=position, field=search_field, text=text))

        duration = time.perf_counter() - started
        logger.info(
            f"Built field index with {len(entries)} fields for {len(store)} stations "
            f"in {duration:.3f}s"
        )
        return FieldIndex(store.stations, entries)

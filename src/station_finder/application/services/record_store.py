"""In-memory store of station records for one dataset load."""

import logging
from collections.abc import Iterator
from typing import Any

from station_finder.domain.models import MalformedStationError, StationRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Read-only collection of stations, keyed by station code.

    Dataset order is preserved; it is the tie-break order for search results.
    """

    def __init__(self, stations: list[StationRecord]) -> None:
        """Initialize with already parsed stations.

        Args:
            stations: Stations in dataset order. Codes must be unique.
        """
        self._stations: tuple[StationRecord, ...] = tuple(stations)
        self._by_code: dict[str, StationRecord] = {s.code: s for s in self._stations}
        if len(self._by_code) != len(self._stations):
            raise ValueError("Station codes must be unique within a record store")

    @classmethod
    def from_entries(cls, entries: list[Any]) -> "RecordStore":
        """Parse raw dataset entries, skipping malformed entries and duplicate codes.

        The first entry for a code wins.
        """
        stations: list[StationRecord] = []
        seen_codes: set[str] = set()
        skipped = 0
        for position, entry in enumerate(entries):
            try:
                station = StationRecord.from_dict(entry)
            except MalformedStationError as e:
                logger.debug(f"Skipping station entry #{position}: {e}")
                skipped += 1
                continue
            if station.code in seen_codes:
                logger.debug(f"Skipping duplicate station code {station.code} at #{position}")
                skipped += 1
                continue
            seen_codes.add(station.code)
            stations.append(station)

        if skipped:
            logger.warning(f"Skipped {skipped} malformed or duplicate station entries")
        logger.info(f"Loaded {len(stations)} stations into record store")
        return cls(stations)

    @property
    def stations(self) -> tuple[StationRecord, ...]:
        """All stations in dataset order."""
        return self._stations

    def get(self, code: str) -> StationRecord | None:
        """Look up a station by its exact code."""
        return self._by_code.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[StationRecord]:
        return iter(self._stations)

    def __len__(self) -> int:
        return len(self._stations)

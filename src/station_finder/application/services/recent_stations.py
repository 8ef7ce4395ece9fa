"""Most-recently-used list of selected stations, persisted in durable storage."""

import json
import logging
from typing import TYPE_CHECKING

from station_finder.domain.models import MalformedStationError, StationRecord

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_finder.domain.ports import RecentsStorage

DEFAULT_RECENTS_KEY = "recentStations"
DEFAULT_MAX_RECENT = 10


class RecentStationsService:
    """Bounded MRU list of stations keyed by code.

    Adding a station removes any earlier entry with the same code, puts the station
    in front and drops the oldest entries beyond `max_recent`.
    """

    def __init__(
        self,
        storage: "RecentsStorage",
        key: str = DEFAULT_RECENTS_KEY,
        max_recent: int = DEFAULT_MAX_RECENT,
    ) -> None:
        """Initialize with a storage port.

        Args:
            storage: Durable storage holding the serialized list.
            key: Name of the storage slot.
            max_recent: Maximum number of stations kept.
        """
        if max_recent < 1:
            raise ValueError("max_recent must be at least 1")
        self._storage = storage
        self._key = key
        self._max_recent = max_recent
        self._recents: list[StationRecord] = []

    @property
    def recents(self) -> list[StationRecord]:
        """Recent stations, most recent first."""
        return list(self._recents)

    def load(self) -> list[StationRecord]:
        """Read the list from storage.

        A missing slot or a corrupt value yields an empty list.
        """
        self._recents = self._read()
        return self.recents

    def _read(self) -> list[StationRecord]:
        try:
            raw = self._storage.get(self._key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read recent stations: {e}")
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupt recent stations data: {e}")
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring recent stations data that is not a list")
            return []

        recents: list[StationRecord] = []
        seen: set[str] = set()
        for entry in data:
            try:
                station = StationRecord.from_dict(entry)
            except MalformedStationError as e:
                logger.warning(f"Ignoring malformed recent station: {e}")
                continue
            if station.code not in seen:
                seen.add(station.code)
                recents.append(station)
        return recents[: self._max_recent]

    def add(self, station: StationRecord) -> list[StationRecord]:
        """Promote a station to the front of the list and persist it.

        Returns:
            The updated list, most recent first.
        """
        updated = [station, *(s for s in self._recents if s.code != station.code)]
        self._recents = updated[: self._max_recent]
        self._write()
        return self.recents

    def _write(self) -> None:
        payload = json.dumps([s.to_dict() for s in self._recents], ensure_ascii=False)
        try:
            self._storage.set(self._key, payload)
        except OSError as e:
            logger.error(f"Failed to save recent stations: {e}")

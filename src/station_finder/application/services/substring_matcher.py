"""Literal substring matcher used as the degraded fallback search mode."""

from station_finder.domain.contracts.station_matcher import StationMatcherProtocol
from station_finder.domain.models import ScoredStation

from .field_index_builder import CODE_FIELD, NAME_FIELD, FieldIndex, normalize_text


class SubstringMatcher(StationMatcherProtocol):
    """Matches stations whose fields contain the query verbatim (case-insensitive).

    Exact name or code matches come first, then every other station with a field
    containing the query, both in dataset order. No typo tolerance.
    """

    def __init__(self, index: FieldIndex) -> None:
        self._index = index

    def search(self, query: str, cap: int) -> list[ScoredStation]:
        q = normalize_text(query)
        if cap <= 0 or not q:
            return []

        exact: dict[int, ScoredStation] = {}
        partial: dict[int, ScoredStation] = {}
        for entry in self._index.entries:
            if entry.position in exact:
                continue
            station = self._index.stations[entry.position]
            if entry.field.key in (NAME_FIELD.key, CODE_FIELD.key) and entry.text == q:
                exact[entry.position] = ScoredStation(station, 2.0, 0.0, entry.field.key)
                partial.pop(entry.position, None)
            elif entry.position not in partial and q in entry.text:
                partial[entry.position] = ScoredStation(station, 1.0, 0.0, entry.field.key)

        ordered = [exact[p] for p in sorted(exact)] + [partial[p] for p in sorted(partial)]
        return ordered[:cap]

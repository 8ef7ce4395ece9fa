"""Fuzzy multi-field station matcher."""

import logging
from dataclasses import dataclass

from rapidfuzz import fuzz, process

from station_finder.domain.contracts.station_matcher import StationMatcherProtocol
from station_finder.domain.models import ScoredStation

from .field_index_builder import FieldIndex, normalize_text
from .query_parser import ExtendedQuery, QueryToken, TokenKind, parse_extended_query

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.4
DEFAULT_MIN_FUZZY_LENGTH = 2


def field_distance(
    query: str, text: str, min_fuzzy_length: int = DEFAULT_MIN_FUZZY_LENGTH
) -> float:
    """Normalized distance between a query and the best-matching part of a field.

    Both arguments must already be normalized. The query may match anywhere in the
    field; a contained query scores 0.0. Queries shorter than `min_fuzzy_length`
    only match literally (1.0 otherwise). Fields shorter than the query are compared
    as a whole, so a short code never counts as a fragment of a long query.

    Returns:
        A distance in [0.0, 1.0], 0.0 being an exact match.
    """
    if query in text:
        return 0.0
    if len(query) < min_fuzzy_length:
        return 1.0
    if len(text) < len(query):
        similarity = fuzz.ratio(query, text)
    else:
        similarity = fuzz.partial_ratio(query, text)
    return 1.0 - similarity / 100.0


@dataclass
class _Candidate:
    position: int
    score: float
    distance: float
    field_key: str

    def offer(self, score: float, distance: float, field_key: str) -> None:
        """Keep the better of the current and offered field match."""
        if score > self.score or (score == self.score and distance < self.distance):
            self.score = score
            self.distance = distance
            self.field_key = field_key


class FuzzyMatcher(StationMatcherProtocol):
    """Ranks stations against a free-text query across weighted fields.

    A field contributes only when its distance is within the threshold. A station's
    score is the best `weight * (1 - distance)` over its contributing fields; stations
    without any are excluded. Equal scores keep dataset order.
    """

    def __init__(
        self,
        index: FieldIndex,
        threshold: float = DEFAULT_THRESHOLD,
        min_fuzzy_length: int = DEFAULT_MIN_FUZZY_LENGTH,
    ) -> None:
        """Initialize the matcher.

        Args:
            index: Field index built for the current dataset.
            threshold: Maximum normalized distance a field match may have
                (0.0 = exact only, 1.0 = almost anything).
            min_fuzzy_length: Queries shorter than this match literally.
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("threshold must be between 0.0 and 1.0")
        if min_fuzzy_length < 1:
            raise ValueError("min_fuzzy_length must be at least 1")
        self._index = index
        self._threshold = threshold
        self._min_fuzzy_length = min_fuzzy_length

    @property
    def threshold(self) -> float:
        return self._threshold

    def search(self, query: str, cap: int) -> list[ScoredStation]:
        """Rank stations against a query.

        Args:
            query: Free-text query; blank queries return no results.
            cap: Maximum number of results, applied after ranking the full candidate set.

        Returns:
            Matches ordered best first.
        """
        if cap <= 0 or not query.strip():
            return []

        extended = parse_extended_query(query)
        if extended is not None:
            candidates = self._match_extended(extended)
        else:
            candidates = self._candidates(self._field_hits(normalize_text(query)))

        ranked = sorted(candidates.values(), key=lambda c: (-c.score, c.position))
        logger.debug(f"Query {query!r} matched {len(ranked)} stations")
        return [
            ScoredStation(
                station=self._index.stations[c.position],
                score=c.score,
                distance=c.distance,
                matched_field=c.field_key,
            )
            for c in ranked[:cap]
        ]

    def _text_hits(self, query: str) -> list[tuple[int, float]]:
        """Return (unique text index, distance) for every distinct text within the threshold.

        Gives the same distances as `field_distance`, scored in two batches: texts
        shorter than the query with `ratio`, the rest with `partial_ratio`.
        """
        texts = self._index.unique_texts
        if len(query) < self._min_fuzzy_length:
            return [(i, 0.0) for i, text in enumerate(texts) if query in text]

        cutoff = (1.0 - self._threshold) * 100.0
        split = self._index.shorter_than(len(query))
        hits: list[tuple[int, float]] = []
        for scorer, offset, batch in (
            (fuzz.ratio, 0, texts[:split]),
            (fuzz.partial_ratio, split, texts[split:]),
        ):
            for _text, similarity, i in process.extract(
                query, batch, scorer=scorer, score_cutoff=cutoff, limit=None
            ):
                distance = 1.0 - similarity / 100.0
                if distance <= self._threshold:
                    hits.append((offset + i, distance))
        return hits

    def _expand(self, text_hits: list[tuple[int, float]]) -> list[tuple[int, float]]:
        """Map distinct-text hits back to (entry index, distance), in index order."""
        entries_by_text = self._index.entries_by_text
        hits = [
            (entry_index, distance)
            for i, distance in text_hits
            for entry_index in entries_by_text[i]
        ]
        hits.sort()
        return hits

    def _field_hits(self, query: str) -> list[tuple[int, float]]:
        """Return (entry index, distance) for every field within the threshold."""
        if not query:
            return []
        return self._expand(self._text_hits(query))

    def _literal_hits(self, token: QueryToken) -> list[tuple[int, float]]:
        texts = self._index.unique_texts
        return self._expand(
            [(i, 0.0) for i, text in enumerate(texts) if token.matches_literally(text)]
        )

    def _token_hits(self, token: QueryToken) -> list[tuple[int, float]]:
        if token.kind == TokenKind.FUZZY:
            return self._field_hits(token.text)
        return self._literal_hits(token)

    def _candidates(self, hits: list[tuple[int, float]]) -> dict[int, _Candidate]:
        """Keep the best field match per station."""
        candidates: dict[int, _Candidate] = {}
        for entry_index, distance in hits:
            entry = self._index.entries[entry_index]
            score = entry.field.weight * (1.0 - distance)
            candidate = candidates.get(entry.position)
            if candidate is None:
                candidates[entry.position] = _Candidate(
                    entry.position, score, distance, entry.field.key
                )
            else:
                candidate.offer(score, distance, entry.field.key)
        return candidates

    def _match_extended(self, query: ExtendedQuery) -> dict[int, _Candidate]:
        """Match every token; a station must satisfy all of them."""
        excluded: set[int] = set()
        for token in query.negative:
            excluded.update(
                self._index.entries[entry_index].position
                for entry_index, _distance in self._literal_hits(token)
            )

        per_token = [self._candidates(self._token_hits(token)) for token in query.positive]
        if not per_token:
            return {
                position: _Candidate(position, 1.0, 0.0, "*")
                for position in range(len(self._index.stations))
                if position not in excluded
            }

        positions = set(per_token[0]).intersection(*per_token[1:]) - excluded
        candidates: dict[int, _Candidate] = {}
        for position in sorted(positions):
            token_matches = [matches[position] for matches in per_token]
            score = sum(m.score for m in token_matches) / len(token_matches)
            distance = max(m.distance for m in token_matches)
            candidates[position] = _Candidate(position, score, distance, token_matches[0].field_key)
        return candidates

"""Loads the station dataset and builds the search structures for it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from station_finder.domain.models import (
    DatasetSource,
    DatasetUnavailableError,
    ErrorDetails,
    SearchMode,
)

from .field_index_builder import FieldIndex, FieldIndexBuilder
from .fuzzy_matcher import DEFAULT_MIN_FUZZY_LENGTH, DEFAULT_THRESHOLD, FuzzyMatcher
from .record_store import RecordStore
from .substring_matcher import SubstringMatcher

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_finder.domain.contracts.station_matcher import StationMatcherProtocol
    from station_finder.domain.ports import StationDatasetRepository

LOAD_ERROR_MESSAGE = "Failed to load station data. Please check your connection."


class StationCatalog:
    """Owns the record store, index and matcher for the active dataset.

    A failed load leaves no dataset behind: the previous store and index are
    discarded so a partial or stale dataset is never searched.
    """

    def __init__(
        self,
        repository: StationDatasetRepository,
        search_mode: SearchMode = SearchMode.FUZZY,
        threshold: float = DEFAULT_THRESHOLD,
        min_fuzzy_length: int = DEFAULT_MIN_FUZZY_LENGTH,
    ) -> None:
        self._repository = repository
        self._search_mode = search_mode
        self._threshold = threshold
        self._min_fuzzy_length = min_fuzzy_length
        self._index_builder = FieldIndexBuilder()

        # No dataset until the first load completes
        self.loading = True
        self.error: ErrorDetails | None = None
        self.source: DatasetSource | None = None
        self.store: RecordStore | None = None
        self.index: FieldIndex | None = None
        self.matcher: StationMatcherProtocol | None = None

    @property
    def is_ready(self) -> bool:
        return self.matcher is not None and not self.loading

    async def load(self) -> bool:
        """Fetch the dataset and rebuild the search structures.

        Returns:
            True if a dataset is now active, False if loading failed.
        """
        self.loading = True
        self.error = None
        self.store = None
        self.index = None
        self.matcher = None
        self.source = None
        try:
            dataset = await self._repository.load_stations()
            store = RecordStore.from_entries(dataset.entries)
            index = self._index_builder.build(store)
        except DatasetUnavailableError as e:
            logger.error(f"Station dataset unavailable: {e}")
            self.error = ErrorDetails(status_code=e.status_code, reason=LOAD_ERROR_MESSAGE)
            return False
        finally:
            self.loading = False

        self.store = store
        self.index = index
        self.matcher = self._create_matcher(index)
        self.source = dataset.source
        logger.info(f"Station catalog ready with {len(store)} stations from {dataset.source.value}")
        return True

    async def retry(self) -> bool:
        """Retry loading after a failure."""
        logger.info("Retrying station dataset load")
        return await self.load()

    def _create_matcher(self, index: FieldIndex) -> StationMatcherProtocol:
        if self._search_mode == SearchMode.SUBSTRING:
            logger.warning("Using substring search mode (no typo tolerance)")
            return SubstringMatcher(index)
        return FuzzyMatcher(
            index, threshold=self._threshold, min_fuzzy_length=self._min_fuzzy_length
        )

"""Station dataset repository that falls back to a secondary source."""

import logging

from station_finder.domain.models import DatasetUnavailableError, LoadedDataset
from station_finder.domain.ports.station_dataset_repository import StationDatasetRepository

logger = logging.getLogger(__name__)


class FallbackStationRepository(StationDatasetRepository):
    """Tries the primary source and, if it fails, the secondary one.

    The returned dataset carries the source that actually supplied it.
    """

    def __init__(
        self, primary: StationDatasetRepository, secondary: StationDatasetRepository
    ) -> None:
        """Initialize with the two sources.

        Args:
            primary: Preferred source, usually the remote dataset.
            secondary: Source used when the primary fails, usually the local file.
        """
        self._primary = primary
        self._secondary = secondary

    async def load_stations(self) -> LoadedDataset:
        """Load from the primary source, falling back to the secondary.

        Raises:
            DatasetUnavailableError: If both sources fail.
        """
        try:
            return await self._primary.load_stations()
        except DatasetUnavailableError as primary_error:
            logger.warning(f"Primary dataset failed ({primary_error}), trying offline data...")
            try:
                return await self._secondary.load_stations()
            except DatasetUnavailableError as secondary_error:
                raise DatasetUnavailableError(
                    "all sources",
                    f"{primary_error}; {secondary_error}",
                    status_code=primary_error.status_code,
                ) from secondary_error

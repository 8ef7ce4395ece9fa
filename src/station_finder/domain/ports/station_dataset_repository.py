"""Station dataset repository port."""

from typing import Protocol

from station_finder.domain.models.dataset import LoadedDataset


class StationDatasetRepository(Protocol):
    """Port for retrieving the full station dataset."""

    async def load_stations(self) -> LoadedDataset:
        """Load all station entries.

        Raises:
            DatasetUnavailableError: If the source cannot supply a dataset.
        """
        ...

"""Station dataset adapter reading the bundled offline JSON file."""

import json
import logging
from pathlib import Path

from station_finder.adapters.api_request_logger import log_api_request
from station_finder.domain.models import DatasetSource, DatasetUnavailableError, LoadedDataset
from station_finder.domain.ports.station_dataset_repository import StationDatasetRepository

logger = logging.getLogger(__name__)


class OfflineFileStationRepository(StationDatasetRepository):
    """Adapter for a local JSON copy of the station dataset."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def load_stations(self) -> LoadedDataset:
        """Read the dataset file.

        Raises:
            DatasetUnavailableError: If the file is missing, unreadable or not a JSON array.
        """
        source = DatasetSource.OFFLINE.value
        log_api_request("READ", str(self._path))
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise DatasetUnavailableError(source, f"file not found: {self._path}") from e
        except OSError as e:
            raise DatasetUnavailableError(source, f"cannot read {self._path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DatasetUnavailableError(source, f"invalid encoding in {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DatasetUnavailableError(source, f"invalid JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            raise DatasetUnavailableError(source, "dataset is not a JSON array")

        logger.debug(f"Read {len(data)} station entries from {self._path}")
        return LoadedDataset(entries=data, source=DatasetSource.OFFLINE)

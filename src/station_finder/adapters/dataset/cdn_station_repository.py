"""Station dataset adapter fetching the versioned dataset over HTTP."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from station_finder.adapters.api_request_logger import log_api_request
from station_finder.domain.models import DatasetSource, DatasetUnavailableError, LoadedDataset
from station_finder.domain.ports.station_dataset_repository import StationDatasetRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

REQUEST_HEADERS = {
    "accept": "application/json",
    "user-agent": "station-finder/0.1",
}


class CdnStationRepository(StationDatasetRepository):
    """Adapter for the remote station dataset (JSON array of station objects)."""

    def __init__(
        self,
        url: str,
        session: "ClientSession | None" = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with the dataset URL and optional aiohttp session.

        Args:
            url: URL of the JSON dataset.
            session: aiohttp ClientSession for HTTP requests.
            timeout_seconds: Total timeout for the request.
        """
        self._url = url
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def load_stations(self) -> LoadedDataset:
        """Fetch the dataset.

        Raises:
            DatasetUnavailableError: On network errors, timeouts, non-200 status or
                a body that is not a JSON array.
        """
        source = DatasetSource.CDN.value
        if self._session is None:
            raise DatasetUnavailableError(source, "no HTTP session available")

        log_api_request("GET", self._url, headers=REQUEST_HEADERS)
        try:
            async with self._session.get(
                self._url, headers=REQUEST_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    response_text = await response.text()
                    logger.warning(
                        f"Dataset request returned status {response.status}: {response_text[:200]}"
                    )
                    raise DatasetUnavailableError(
                        source, f"HTTP {response.status}", status_code=response.status
                    )
                data: Any = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error fetching station dataset from {self._url}: {e!r}")
            raise DatasetUnavailableError(source, f"request failed: {e!r}") from e
        except ValueError as e:
            raise DatasetUnavailableError(source, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise DatasetUnavailableError(source, "dataset is not a JSON array")

        log_api_request("GET", self._url, status=200, detail=f"{len(data)} entries")
        return LoadedDataset(entries=data, source=DatasetSource.CDN)

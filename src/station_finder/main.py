"""Main entry point for the station finder application."""

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

import aiohttp

from station_finder.adapters.config import AppConfig
from station_finder.adapters.dataset import (
    CdnStationRepository,
    FallbackStationRepository,
    OfflineFileStationRepository,
)
from station_finder.adapters.storage import JsonFileStorage
from station_finder.application.services import (
    QuerySessionController,
    RecentStationsService,
    StationCatalog,
)
from station_finder.domain.models import SearchMode

if TYPE_CHECKING:
    from station_finder.domain.ports import RecentsStorage

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_catalog(config: AppConfig, session: aiohttp.ClientSession | None) -> StationCatalog:
    """Wire the dataset sources (remote first, then the offline file) into a catalog."""
    repository = FallbackStationRepository(
        primary=CdnStationRepository(
            config.dataset_url,
            session=session,
            timeout_seconds=config.request_timeout_seconds,
        ),
        secondary=OfflineFileStationRepository(config.offline_dataset_path),
    )
    return StationCatalog(
        repository,
        search_mode=SearchMode(config.search_mode),
        threshold=config.fuzzy_threshold,
        min_fuzzy_length=config.min_fuzzy_length,
    )


def create_recents(
    config: AppConfig, storage: "RecentsStorage | None" = None
) -> RecentStationsService:
    """Create the recents service on the configured storage file."""
    return RecentStationsService(
        storage if storage is not None else JsonFileStorage(config.recents_file),
        key=config.recents_key,
        max_recent=config.max_recent,
    )


def create_session(
    config: AppConfig, catalog: StationCatalog, recents: RecentStationsService
) -> QuerySessionController:
    """Create a query session over a catalog."""
    return QuerySessionController(catalog, recents, result_cap=config.result_cap)


def load_config() -> AppConfig:
    """Load configuration from the environment and the optional TOML file."""
    config = AppConfig()
    config.load_toml_overrides()
    return config


async def main() -> None:
    """Main application entry point: run the interactive search session."""
    from station_finder.cli import run_interactive

    try:
        config = load_config()
    except (ValueError, FileNotFoundError) as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)

    async with aiohttp.ClientSession() as session:
        catalog = create_catalog(config, session)
        controller = create_session(config, catalog, create_recents(config))
        try:
            await run_interactive(controller)
        except KeyboardInterrupt:
            logger.info("Shutting down...")


if __name__ == "__main__":
    asyncio.run(main())

"""Shared fixtures and test doubles for station finder tests."""

from typing import Any

import pytest

from station_finder.adapters.storage import InMemoryStorage
from station_finder.application.services import (
    FieldIndex,
    FieldIndexBuilder,
    RecentStationsService,
    RecordStore,
    StationCatalog,
)
from station_finder.domain.models import DatasetSource, LoadedDataset, StationRecord


def make_entry(
    code: str,
    name: str | None = None,
    district: str = "District",
    state: str = "State",
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw dataset entry with the required keys filled in."""
    entry: dict[str, Any] = {
        "name": name if name is not None else f"Station {code}",
        "code": code,
        "district": district,
        "state": state,
    }
    entry.update(extra)
    return entry


def make_station(code: str, name: str | None = None, **extra: Any) -> StationRecord:
    return StationRecord.from_dict(make_entry(code, name, **extra))


def build_index(entries: list[dict[str, Any]]) -> FieldIndex:
    """Parse entries and build a field index over them."""
    return FieldIndexBuilder().build(RecordStore.from_entries(entries))


SCENARIO_ENTRIES: list[dict[str, Any]] = [
    make_entry(
        "NDLS",
        "New Delhi",
        district="New Delhi",
        state="Delhi",
        name_hi="नई दिल्ली",
        trainCount="350",
    ),
    make_entry(
        "BCT",
        "Mumbai Central",
        district="Mumbai",
        state="Maharashtra",
        name_mr="मुंबई सेंट्रल",
    ),
]


class StubDatasetRepository:
    """Dataset repository double returning canned entries or raising canned errors."""

    def __init__(
        self,
        entries: list[Any] | None = None,
        errors: list[Exception] | None = None,
        source: DatasetSource = DatasetSource.CDN,
    ) -> None:
        self.entries = entries if entries is not None else []
        self.errors = list(errors or [])
        self.source = source
        self.calls = 0

    async def load_stations(self) -> LoadedDataset:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return LoadedDataset(entries=list(self.entries), source=self.source)


@pytest.fixture
def scenario_entries() -> list[dict[str, Any]]:
    return [dict(entry) for entry in SCENARIO_ENTRIES]


@pytest.fixture
def scenario_index(scenario_entries: list[dict[str, Any]]) -> FieldIndex:
    return build_index(scenario_entries)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def recents(storage: InMemoryStorage) -> RecentStationsService:
    return RecentStationsService(storage)


@pytest.fixture
def scenario_catalog(scenario_entries: list[dict[str, Any]]) -> StationCatalog:
    return StationCatalog(StubDatasetRepository(scenario_entries))

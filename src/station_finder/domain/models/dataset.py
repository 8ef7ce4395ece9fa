"""Dataset domain models."""

from dataclasses import dataclass
from enum import Enum


class DatasetSource(str, Enum):
    """Which source supplied the active station dataset."""

    CDN = "cdn"
    OFFLINE = "offline"


@dataclass(frozen=True)
class LoadedDataset:
    """Raw station entries together with the source they came from."""

    entries: list[dict]
    source: DatasetSource


class DatasetUnavailableError(Exception):
    """Raised when a station dataset source cannot supply data."""

    def __init__(self, source: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
        self.status_code = status_code

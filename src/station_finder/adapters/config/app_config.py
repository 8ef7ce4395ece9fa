"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_URL = (
    "https://cdn.jsdelivr.net/gh/corover/assets@UIChange/askdisha-bucket/stationupdated.json"
)

# TOML section -> fields it may override
_TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "dataset": ("dataset_url", "offline_dataset_path", "request_timeout_seconds"),
    "storage": ("recents_file", "recents_key", "max_recent"),
    "search": ("result_cap", "fuzzy_threshold", "min_fuzzy_length", "search_mode"),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Dataset sources
    dataset_url: str = Field(
        default=DEFAULT_DATASET_URL, description="Primary (remote, versioned) station dataset URL"
    )
    offline_dataset_path: str = Field(
        default="data/stationupdated.json",
        description="Local JSON file used when the primary dataset cannot be fetched",
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="Timeout for the dataset request in seconds"
    )

    # Recents storage
    recents_file: str = Field(
        default=str(Path.home() / ".station_finder" / "recents.json"),
        description="File backing durable local storage",
    )
    recents_key: str = Field(default="recentStations", description="Storage slot for recents")
    max_recent: int = Field(default=10, description="Maximum number of recent stations kept")

    # Search
    result_cap: int = Field(default=50, description="Maximum number of search results")
    fuzzy_threshold: float = Field(
        default=0.4,
        description="Maximum normalized distance of a match (0.0 exact, 1.0 anything)",
    )
    min_fuzzy_length: int = Field(
        default=2, description="Queries shorter than this are matched literally"
    )
    search_mode: str = Field(
        default="fuzzy", description="Search mode: 'fuzzy' or 'substring' (degraded fallback)"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # TOML config file path, optional
    config_file: str | None = Field(
        default=None, description="Path to TOML file overriding dataset/storage/search settings"
    )

    @field_validator("fuzzy_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Validate threshold is within 0.0-1.0."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("fuzzy_threshold must be between 0.0 and 1.0")
        return v

    @field_validator("min_fuzzy_length", "result_cap", "max_recent")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts are at least 1."""
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @field_validator("search_mode")
    @classmethod
    def validate_search_mode(cls, v: str) -> str:
        """Validate search mode is either 'fuzzy' or 'substring'."""
        if v.lower() not in ("fuzzy", "substring"):
            raise ValueError("search_mode must be either 'fuzzy' or 'substring'")
        return v.lower()

    def load_toml_overrides(self) -> dict[str, Any]:
        """Apply [dataset], [storage] and [search] sections of the TOML config file.

        Returns:
            The parsed TOML data, or an empty dict when no config file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, keys in _TOML_SECTIONS.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for key in keys:
                if key in values:
                    setattr(self, key, values[key])

        return toml_data

"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from station_finder.adapters.config import AppConfig


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.dataset_url.endswith("stationupdated.json")
    assert config.offline_dataset_path == "data/stationupdated.json"
    assert config.recents_key == "recentStations"
    assert config.max_recent == 10
    assert config.result_cap == 50
    assert config.fuzzy_threshold == 0.4
    assert config.min_fuzzy_length == 2
    assert config.search_mode == "fuzzy"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("FUZZY_THRESHOLD", "0.25")
    monkeypatch.setenv("RESULT_CAP", "20")
    monkeypatch.setenv("SEARCH_MODE", "SUBSTRING")

    config = AppConfig()

    assert config.fuzzy_threshold == 0.25
    assert config.result_cap == 20
    assert config.search_mode == "substring"


def test_config_validates_threshold(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a threshold above 1, when loading config, then it is rejected."""
    monkeypatch.setenv("FUZZY_THRESHOLD", "1.5")

    with pytest.raises(ValueError, match="fuzzy_threshold must be between"):
        AppConfig()


def test_config_validates_search_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown search mode, when loading config, then it is rejected."""
    monkeypatch.setenv("SEARCH_MODE", "regex")

    with pytest.raises(ValueError, match="search_mode must be either"):
        AppConfig()


def test_config_validates_counts(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a zero recents limit, when loading config, then it is rejected."""
    monkeypatch.setenv("MAX_RECENT", "0")

    with pytest.raises(ValueError, match="at least 1"):
        AppConfig()


def test_toml_overrides_apply_sections(tmp_path: Path) -> None:
    """Given a TOML file with all sections, when applying overrides, then values are replaced."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
[dataset]
offline_dataset_path = "/srv/stations.json"

[storage]
max_recent = 5

[search]
fuzzy_threshold = 0.2
search_mode = "substring"
""",
        encoding="utf-8",
    )
    config = AppConfig(config_file=str(config_path))

    data = config.load_toml_overrides()

    assert "search" in data
    assert config.offline_dataset_path == "/srv/stations.json"
    assert config.max_recent == 5
    assert config.fuzzy_threshold == 0.2
    assert config.search_mode == "substring"


def test_toml_overrides_are_validated(tmp_path: Path) -> None:
    """Given an invalid threshold in TOML, when applying overrides, then it is rejected."""
    config_path = tmp_path / "config.toml"
    config_path.write_text("[search]\nfuzzy_threshold = 2.0\n", encoding="utf-8")
    config = AppConfig(config_file=str(config_path))

    with pytest.raises(ValueError, match="fuzzy_threshold"):
        config.load_toml_overrides()


def test_toml_section_must_be_table(tmp_path: Path) -> None:
    """Given a section that is not a table, when applying overrides, then ValueError is raised."""
    config_path = tmp_path / "config.toml"
    config_path.write_text('search = "fast"\n', encoding="utf-8")
    config = AppConfig(config_file=str(config_path))

    with pytest.raises(ValueError, match="must be a table"):
        config.load_toml_overrides()


def test_toml_overrides_without_file_are_noop() -> None:
    """Given no config file, when applying overrides, then nothing changes."""
    config = AppConfig()

    assert config.load_toml_overrides() == {}
    assert config.result_cap == 50


def test_missing_config_file_raises() -> None:
    """Given a config file path that does not exist, when applying overrides, then it fails."""
    config = AppConfig(config_file="/nonexistent/station-finder.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml_overrides()


def test_example_config_is_valid() -> None:
    """Given the bundled example config, when applying it, then it loads cleanly."""
    example = Path(__file__).parent.parent / "config.example.toml"
    config = AppConfig(config_file=str(example))

    config.load_toml_overrides()

    assert config.result_cap == 50
    assert config.search_mode == "fuzzy"

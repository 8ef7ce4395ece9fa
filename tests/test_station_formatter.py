"""Tests for terminal formatting of stations and sessions."""

from conftest import make_station

from station_finder.adapters.terminal import (
    format_result_line,
    format_station_card,
    render_snapshot,
)
from station_finder.domain.models import (
    DatasetSource,
    DisplayView,
    ErrorDetails,
    SessionSnapshot,
)


def test_result_line_shows_name_code_and_locality() -> None:
    """Given a station, when formatting a dropdown line, then name, code and locality appear."""
    station = make_station("NDLS", "New Delhi", district="New Delhi", state="Delhi")

    assert format_result_line(station) == "  New Delhi [NDLS] - New Delhi, Delhi"
    assert format_result_line(station, highlighted=True).startswith("> ")


def test_card_shows_populated_details() -> None:
    """Given a fully populated station, when formatting a card, then all details appear."""
    station = make_station(
        "NDLS",
        "New Delhi",
        district="New Delhi",
        state="Delhi",
        name_hi="नई दिल्ली",
        trainCount="350",
        address="Ajmeri Gate",
        latitude=28.64312,
        longitude=77.21968,
    )

    card = format_station_card(station)

    assert card.splitlines()[0] == "New Delhi (NDLS)"
    assert "हिंदी: नई दिल्ली" in card
    assert "Location: New Delhi, Delhi" in card
    assert "Trains: 350" in card
    assert "Address: Ajmeri Gate" in card
    assert "28.6431, 77.2197" in card


def test_card_omits_zero_train_count_and_missing_fields() -> None:
    """Given a zero train count and no address, when formatting, then both are omitted."""
    card = format_station_card(make_station("ERS", "Ernakulam Junction", trainCount="0"))

    assert "Trains" not in card
    assert "Address" not in card
    assert card.count("\n") == 1


def test_render_loading_and_error() -> None:
    """Given loading and error snapshots, when rendering, then status text is shown."""
    loading = SessionSnapshot(view=DisplayView.LOADING, query="")
    error = SessionSnapshot(
        view=DisplayView.ERROR,
        query="",
        error=ErrorDetails(reason="Failed to load station data."),
    )

    assert render_snapshot(loading) == "Loading stations..."
    assert "Failed to load station data." in render_snapshot(error)
    assert ":retry" in render_snapshot(error)


def test_render_dropdown_with_highlight() -> None:
    """Given an open dropdown with a highlight, when rendering, then the marker is on that row."""
    results = [make_station("A", "Alpha"), make_station("B", "Beta")]
    snapshot = SessionSnapshot(
        view=DisplayView.SEARCH,
        query="a",
        results=results,
        highlight_index=1,
        show_dropdown=True,
    )

    lines = render_snapshot(snapshot).splitlines()

    assert lines[0].startswith("  Alpha")
    assert lines[1].startswith("> Beta")


def test_render_no_results() -> None:
    """Given an open dropdown without results, when rendering, then a no-results line appears."""
    snapshot = SessionSnapshot(view=DisplayView.SEARCH, query="zzz", show_dropdown=True)

    assert render_snapshot(snapshot) == 'No stations found for "zzz"'


def test_render_selected_with_source_badge() -> None:
    """Given selected stations from offline data, when rendering, then the header says so."""
    snapshot = SessionSnapshot(
        view=DisplayView.SELECTED,
        query="",
        selected=[make_station("A", "Alpha"), make_station("B", "Beta")],
        dataset_source=DatasetSource.OFFLINE,
    )

    rendered = render_snapshot(snapshot)

    assert rendered.startswith("Selected 2 stations (Offline)")
    assert "Alpha (A)" in rendered


def test_render_recent_and_empty() -> None:
    """Given recent and empty snapshots, when rendering, then the matching section shows."""
    recent = SessionSnapshot(
        view=DisplayView.RECENT, query="", recents=[make_station("A", "Alpha")]
    )
    empty = SessionSnapshot(view=DisplayView.EMPTY, query="")

    assert render_snapshot(recent).startswith("Recently viewed stations")
    assert render_snapshot(empty).startswith("Start typing to search for stations")

"""Plain-text formatting of stations and session snapshots for the terminal."""

from station_finder.domain.models import (
    DatasetSource,
    DisplayView,
    LanguageTag,
    SessionSnapshot,
    StationRecord,
)

LANGUAGE_LABELS: dict[LanguageTag, str] = {
    LanguageTag.HINDI: "हिंदी",
    LanguageTag.GUJARATI: "ગુજરાતી",
    LanguageTag.TAMIL: "தமிழ்",
    LanguageTag.TELUGU: "తెలుగు",
    LanguageTag.KANNADA: "ಕನ್ನಡ",
    LanguageTag.MALAYALAM: "മലയാളം",
    LanguageTag.MARATHI: "मराठी",
    LanguageTag.PUNJABI: "ਪੰਜਾਬੀ",
    LanguageTag.BENGALI: "বাংলা",
    LanguageTag.ODIA: "ଓଡ଼ିଆ",
    LanguageTag.ASSAMESE: "অসমীয়া",
}


def format_result_line(station: StationRecord, highlighted: bool = False) -> str:
    """One dropdown line: name, code and locality."""
    marker = ">" if highlighted else " "
    return f"{marker} {station.name} [{station.code}] - {station.district}, {station.state}"


def format_station_card(station: StationRecord) -> str:
    """Multi-line station card with every populated detail."""
    lines = [f"{station.name} ({station.code})"]
    for tag, value in station.regional_names.items():
        lines.append(f"  {LANGUAGE_LABELS[tag]}: {value}")
    lines.append(f"  Location: {station.district}, {station.state}")

    train_count = station.display_train_count
    if train_count is not None:
        lines.append(f"  Trains: {train_count}")
    if station.address:
        lines.append(f"  Address: {station.address}")
    coordinates = station.coordinates
    if coordinates is not None:
        lines.append(f"  {coordinates[0]:.4f}, {coordinates[1]:.4f}")
    return "\n".join(lines)


def _format_source(source: DatasetSource | None) -> str:
    if source == DatasetSource.OFFLINE:
        return "Offline"
    return "Live"


def render_snapshot(snapshot: SessionSnapshot) -> str:
    """Render the whole session as text: dropdown first, then the main view."""
    if snapshot.view == DisplayView.LOADING:
        return "Loading stations..."
    if snapshot.view == DisplayView.ERROR:
        reason = snapshot.error.reason if snapshot.error else "Unknown error"
        return f"{reason}\nType :retry to try again."

    blocks: list[str] = []
    if snapshot.show_dropdown:
        if snapshot.results:
            blocks.append(
                "\n".join(
                    format_result_line(station, index == snapshot.highlight_index)
                    for index, station in enumerate(snapshot.results)
                )
            )
        elif snapshot.no_results:
            blocks.append(f'No stations found for "{snapshot.query}"')

    if snapshot.view == DisplayView.SELECTED:
        count = len(snapshot.selected)
        plural = "s" if count > 1 else ""
        header = f"Selected {count} station{plural} ({_format_source(snapshot.dataset_source)})"
        blocks.append(header)
        blocks.extend(format_station_card(station) for station in snapshot.selected)
    elif snapshot.view == DisplayView.RECENT:
        blocks.append("Recently viewed stations")
        blocks.extend(format_station_card(station) for station in snapshot.recents)
    elif snapshot.view == DisplayView.EMPTY:
        blocks.append(
            "Start typing to search for stations\n"
            'Fuzzy search enabled - typos like "GZB" for "GBZ" will work!\n'
            "Search by name, code, district, state, or regional language"
        )

    return "\n\n".join(blocks)

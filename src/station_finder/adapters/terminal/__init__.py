"""Terminal presentation adapters."""

from station_finder.adapters.terminal.station_formatter import (
    format_result_line,
    format_station_card,
    render_snapshot,
)

__all__ = ["format_result_line", "format_station_card", "render_snapshot"]

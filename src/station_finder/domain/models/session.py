"""Query session domain models."""

from dataclasses import dataclass, field
from enum import Enum

from .dataset import DatasetSource
from .error_details import ErrorDetails
from .station import StationRecord

NO_HIGHLIGHT = -1


class DisplayView(str, Enum):
    """Mutually exclusive main views, in priority order."""

    LOADING = "loading"
    ERROR = "error"
    SELECTED = "selected"
    RECENT = "recent"
    EMPTY = "empty"
    SEARCH = "search"  # Nothing selected and a query is active: only the dropdown shows


class NavigationKey(str, Enum):
    """Keys the session reacts to while the dropdown is open."""

    DOWN = "down"
    UP = "up"
    CONFIRM = "confirm"
    DISMISS = "dismiss"


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of the session state handed to the presentation layer.

    `show_dropdown` is layered on top of `view`: an active query always shows
    the ranked dropdown regardless of which grid or prompt is behind it.
    """

    view: DisplayView
    query: str
    results: list[StationRecord] = field(default_factory=list)
    highlight_index: int = NO_HIGHLIGHT
    show_dropdown: bool = False
    selected: list[StationRecord] = field(default_factory=list)
    recents: list[StationRecord] = field(default_factory=list)
    error: ErrorDetails | None = None
    dataset_source: DatasetSource | None = None

    @property
    def no_results(self) -> bool:
        """True when the dropdown is open for a query that matched nothing."""
        return self.show_dropdown and bool(self.query) and not self.results

    @property
    def highlighted(self) -> StationRecord | None:
        """The highlighted result, if any."""
        if 0 <= self.highlight_index < len(self.results):
            return self.results[self.highlight_index]
        return None

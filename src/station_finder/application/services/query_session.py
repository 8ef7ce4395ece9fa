"""Query session controller: search-as-you-type, selection and recents bookkeeping."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from station_finder.domain.models import (
    NO_HIGHLIGHT,
    DisplayView,
    NavigationKey,
    SessionSnapshot,
    StationRecord,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_finder.domain.contracts.session_listener import SessionListenerProtocol

    from .recent_stations import RecentStationsService
    from .station_catalog import StationCatalog

DEFAULT_RESULT_CAP = 50


class QuerySessionController:
    """Owns the state of one interactive search session.

    Every query change re-runs the matcher synchronously; only the latest query's
    results are kept. Selected stations live for the session only, recents are
    persisted through the recents service.
    """

    def __init__(
        self,
        catalog: StationCatalog,
        recents: RecentStationsService,
        result_cap: int = DEFAULT_RESULT_CAP,
    ) -> None:
        """Initialize the session.

        Args:
            catalog: Catalog providing the matcher for the active dataset.
            recents: Persistent most-recently-used list.
            result_cap: Maximum number of results shown in the dropdown.
        """
        if result_cap < 1:
            raise ValueError("result_cap must be at least 1")
        self._catalog = catalog
        self._recents = recents
        self._result_cap = result_cap
        self._listeners: list[SessionListenerProtocol] = []

        self.search_query = ""
        self.results: list[StationRecord] = []
        self.show_dropdown = False
        self.highlight_index = NO_HIGHLIGHT
        self._selected: dict[str, StationRecord] = {}

    # Lifecycle

    async def start(self) -> None:
        """Read persisted recents and load the dataset."""
        self._recents.load()
        await self._catalog.load()
        self._refresh_results()
        self._notify()

    async def retry(self) -> None:
        """Retry a failed dataset load."""
        await self._catalog.retry()
        self._refresh_results()
        self._notify()

    # Query input

    def set_query(self, text: str) -> None:
        """Handle a change of the query text."""
        self.search_query = text
        self._refresh_results()
        self.highlight_index = NO_HIGHLIGHT
        self.show_dropdown = bool(text)
        self._notify()

    def clear_query(self) -> None:
        """Clear the query text and close the dropdown."""
        self.search_query = ""
        self.results = []
        self.show_dropdown = False
        self.highlight_index = NO_HIGHLIGHT
        self._notify()

    def focus(self) -> None:
        """Reopen the dropdown when the input regains focus with a query."""
        if self.search_query:
            self.show_dropdown = True
            self._notify()

    def click_outside(self) -> None:
        """Close the dropdown without touching the query or highlight."""
        self.show_dropdown = False
        self._notify()

    def _refresh_results(self) -> None:
        matcher = self._catalog.matcher
        if matcher is None or not self.search_query.strip():
            self.results = []
            return
        matches = matcher.search(self.search_query, self._result_cap)
        self.results = [match.station for match in matches]

    # Keyboard and pointer navigation

    def handle_key(self, key: NavigationKey) -> bool:
        """Handle a navigation key.

        Keys are ignored while the dropdown is closed or empty.

        Returns:
            True if the key was consumed.
        """
        if not self.show_dropdown or not self.results:
            return False

        if key == NavigationKey.DOWN:
            self.highlight_index = min(self.highlight_index + 1, len(self.results) - 1)
        elif key == NavigationKey.UP:
            self.highlight_index = (
                self.highlight_index - 1 if self.highlight_index > 0 else NO_HIGHLIGHT
            )
        elif key == NavigationKey.CONFIRM:
            return self.commit_highlighted()
        elif key == NavigationKey.DISMISS:
            self.show_dropdown = False
            self.highlight_index = NO_HIGHLIGHT
        else:
            return False

        self._notify()
        return True

    def hover(self, index: int) -> None:
        """Highlight the result under the pointer."""
        if 0 <= index < len(self.results):
            self.highlight_index = index
            self._notify()

    # Selection

    def commit_highlighted(self) -> bool:
        """Select the highlighted result, if there is one."""
        if not 0 <= self.highlight_index < len(self.results):
            return False
        self.select(self.results[self.highlight_index])
        return True

    def select(self, station: StationRecord) -> None:
        """Commit a station picked from the results."""
        self._recents.add(station)
        if station.code not in self._selected:
            self._selected[station.code] = station
            logger.debug(f"Selected station {station.code}")
        self.search_query = ""
        self.results = []
        self.show_dropdown = False
        self.highlight_index = NO_HIGHLIGHT
        self._notify()

    def remove_selected(self, code: str) -> None:
        """Remove a station from the selection; recents are left untouched."""
        if self._selected.pop(code, None) is not None:
            logger.debug(f"Removed selected station {code}")
            self._notify()

    @property
    def selected(self) -> list[StationRecord]:
        """Selected stations in selection order."""
        return list(self._selected.values())

    @property
    def recents(self) -> list[StationRecord]:
        return self._recents.recents

    # Presentation

    @property
    def view(self) -> DisplayView:
        """Main view to show behind the dropdown, by priority."""
        if self._catalog.loading:
            return DisplayView.LOADING
        if self._catalog.error is not None:
            return DisplayView.ERROR
        if self._selected:
            return DisplayView.SELECTED
        if self.search_query:
            return DisplayView.SEARCH
        if self._recents.recents:
            return DisplayView.RECENT
        return DisplayView.EMPTY

    def snapshot(self) -> SessionSnapshot:
        """Capture the current state for rendering."""
        return SessionSnapshot(
            view=self.view,
            query=self.search_query,
            results=list(self.results),
            highlight_index=self.highlight_index,
            show_dropdown=self.show_dropdown and bool(self.search_query),
            selected=self.selected,
            recents=self.recents,
            error=self._catalog.error,
            dataset_source=self._catalog.source,
        )

    def subscribe(self, listener: SessionListenerProtocol) -> Callable[[], None]:
        """Register a listener called with a snapshot after each state change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

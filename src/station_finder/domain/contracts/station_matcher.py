"""Protocol for ranking stations against a query."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from station_finder.domain.models.search import ScoredStation


class StationMatcherProtocol(Protocol):
    """Protocol for matchers used by the query session."""

    def search(self, query: str, cap: int) -> list["ScoredStation"]:
        """Rank stations against a query.

        Args:
            query: Free-text query as typed by the user.
            cap: Maximum number of results, applied after ranking.

        Returns:
            Matches ordered best first; empty for blank queries.
        """
        ...

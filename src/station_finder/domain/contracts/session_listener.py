"""Protocol for receiving query session updates."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from station_finder.domain.models.session import SessionSnapshot


class SessionListenerProtocol(Protocol):
    """Called with a fresh snapshot after every session state change."""

    def __call__(self, snapshot: "SessionSnapshot") -> None:
        """Receive the new session snapshot."""
        ...

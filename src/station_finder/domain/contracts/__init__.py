"""Domain contracts (protocols implemented by application services)."""

from station_finder.domain.contracts.session_listener import SessionListenerProtocol
from station_finder.domain.contracts.station_matcher import StationMatcherProtocol

__all__ = ["SessionListenerProtocol", "StationMatcherProtocol"]

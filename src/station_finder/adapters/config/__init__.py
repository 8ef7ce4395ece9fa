"""Configuration adapters."""

from station_finder.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

"""Durable storage adapters."""

from station_finder.adapters.storage.json_file_storage import InMemoryStorage, JsonFileStorage

__all__ = ["InMemoryStorage", "JsonFileStorage"]

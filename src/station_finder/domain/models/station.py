"""Station record domain model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LanguageTag(str, Enum):
    """Regional scripts a station name may be published in."""

    HINDI = "hi"
    GUJARATI = "gu"
    TAMIL = "ta"
    TELUGU = "te"
    KANNADA = "kn"
    MALAYALAM = "ml"
    MARATHI = "mr"
    PUNJABI = "pa"
    BENGALI = "bn"
    ODIA = "or"
    ASSAMESE = "as"

    @property
    def wire_key(self) -> str:
        """Key used for this language in the station dataset JSON."""
        return f"name_{self.value}"


# Fixed iteration order for regional names (dataset column order)
LANGUAGE_TAGS: tuple[LanguageTag, ...] = tuple(LanguageTag)

REQUIRED_KEYS: tuple[str, ...] = ("name", "code", "district", "state")


class MalformedStationError(ValueError):
    """Raised when a dataset entry lacks a required station field."""


def _clean_text(value: Any) -> str | None:
    """Return a stripped string, or None for absent/blank/non-string values."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class RegionalNames:
    """Station names in regional scripts, keyed by language tag.

    Only populated languages are stored; lookups for the rest return None.
    """

    names: dict[LanguageTag, str] = field(default_factory=dict)

    def get(self, tag: LanguageTag) -> str | None:
        """Get the name for a language, or None if the record has none."""
        return self.names.get(tag)

    def items(self) -> list[tuple[LanguageTag, str]]:
        """Populated (tag, name) pairs in fixed language order."""
        return [(tag, self.names[tag]) for tag in LANGUAGE_TAGS if tag in self.names]

    def __len__(self) -> int:
        return len(self.names)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RegionalNames":
        """Read `name_<tag>` keys for every known language."""
        names: dict[LanguageTag, str] = {}
        for tag in LANGUAGE_TAGS:
            value = _clean_text(data.get(tag.wire_key))
            if value is not None:
                names[tag] = value
        return cls(names=names)


@dataclass(frozen=True)
class StationRecord:
    """Represents one physical railway station.

    `code` is the identity key everywhere a station is stored.
    """

    name: str
    code: str
    district: str
    state: str
    regional_names: RegionalNames = field(default_factory=RegionalNames)
    train_count: str = "0"
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    utterances: tuple[str, ...] = ()

    @property
    def display_train_count(self) -> int | None:
        """Train count to show, or None for the "0" sentinel and unparsable values."""
        try:
            count = int(self.train_count)
        except (TypeError, ValueError):
            return None
        return count if count > 0 else None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """(latitude, longitude) when both are present."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StationRecord":
        """Build a record from a dataset entry.

        Raises:
            MalformedStationError: If name, code, district or state is missing.
        """
        if not isinstance(data, dict):
            raise MalformedStationError(
                f"Station entry must be an object, got {type(data).__name__}"
            )

        required = {key: _clean_text(data.get(key)) for key in REQUIRED_KEYS}
        missing = [key for key, value in required.items() if value is None]
        if missing:
            raise MalformedStationError(f"Station entry missing {', '.join(missing)}")

        raw_utterances = data.get("utterances") or []
        utterances: tuple[str, ...] = ()
        if isinstance(raw_utterances, list):
            utterances = tuple(
                text for text in (_clean_text(u) for u in raw_utterances) if text is not None
            )

        return cls(
            name=required["name"] or "",
            code=required["code"] or "",
            district=required["district"] or "",
            state=required["state"] or "",
            regional_names=RegionalNames.from_dict(data),
            train_count=_clean_text(data.get("trainCount")) or "0",
            latitude=_to_float(data.get("latitude")),
            longitude=_to_float(data.get("longitude")),
            address=_clean_text(data.get("address")),
            utterances=utterances,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dataset wire shape, omitting absent optionals."""
        data: dict[str, Any] = {
            "name": self.name,
            "code": self.code,
        }
        for tag, value in self.regional_names.items():
            data[tag.wire_key] = value
        data["district"] = self.district
        data["state"] = self.state
        data["trainCount"] = self.train_count
        if self.latitude is not None:
            data["latitude"] = self.latitude
        if self.longitude is not None:
            data["longitude"] = self.longitude
        if self.address is not None:
            data["address"] = self.address
        if self.utterances:
            data["utterances"] = list(self.utterances)
        return data


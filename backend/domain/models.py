"""
Core domain models for the nearby places command.
These are framework-agnostic and can be used across all services.

Upstream JSON numbers are carried as their literal text where possible, so
ratings and coordinates reach the rendered output exactly as the search
service sent them.
"""
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterable, Iterator, Tuple, Union

NumberText = Union[str, int, float]

# How many places a single answer shows (and therefore how many map markers).
MAX_RENDERED_PLACES = 4


def _number_text(value: Any) -> str:
    """Render a JSON number (or its literal text) without re-parsing it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return ""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair. No range validation is performed."""
    lat: NumberText = ""
    lng: NumberText = ""

    @property
    def wire(self) -> str:
        """The `lat,lng` form used in request and map parameters."""
        return f"{_number_text(self.lat)},{_number_text(self.lng)}"

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse `"lat,lng"` text, keeping each component's original spelling."""
        parts = [p.strip() for p in (text or "").split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"expected 'lat,lng', got {text!r}")
        for part in parts:
            float(part)
        return cls(lat=parts[0], lng=parts[1])

    @classmethod
    def from_payload(cls, payload: Any) -> "Coordinate":
        data = _mapping(payload)
        return cls(lat=_number_text(data.get("lat")), lng=_number_text(data.get("lng")))


@dataclass(frozen=True)
class PlaceEntry:
    """One place from a search response. Text fields are opaque pass-through."""
    name: str = ""
    address: str = ""
    icon: str = ""
    rating: str = ""  # empty when the place has no rating
    open_now: bool = False
    location: Coordinate = field(default_factory=Coordinate)

    @classmethod
    def from_payload(cls, payload: dict) -> "PlaceEntry":
        """Decode a single result, defaulting any missing or mistyped field."""
        hours = _mapping(payload.get("opening_hours"))
        geometry = _mapping(payload.get("geometry"))
        open_now = hours.get("open_now")
        return cls(
            name=_text(payload.get("name")),
            address=_text(payload.get("vicinity")),
            icon=_text(payload.get("icon")),
            rating=_number_text(payload.get("rating")),
            open_now=open_now if isinstance(open_now, bool) else False,
            location=Coordinate.from_payload(geometry.get("location")),
        )


@dataclass(frozen=True)
class SearchResult:
    """
    Decoded search envelope.

    Entries keep the upstream order (distance-ranked by the request), they are
    never re-sorted locally. `status` and `error_message` are diagnostics only.
    """
    entries: Tuple[PlaceEntry, ...] = ()
    status: str = ""
    error_message: str = ""
    skipped: int = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchResult":
        """
        Best-effort structural decode.

        Anything that does not match the expected shape degrades to defaults:
        a non-object body gives an empty result, a non-list `results` gives no
        entries, and non-object entries are skipped (and counted).
        """
        data = _mapping(payload)
        raw_results = data.get("results")
        if not isinstance(raw_results, list):
            raw_results = []
        entries = []
        skipped = 0
        for item in raw_results:
            if not isinstance(item, dict):
                skipped += 1
                continue
            entries.append(PlaceEntry.from_payload(item))
        return cls(
            entries=tuple(entries),
            status=_text(data.get("status")),
            error_message=_text(data.get("error_message")),
            skipped=skipped,
        )


class NearestPlaces:
    """
    The nearest places to show, capped at MAX_RENDERED_PLACES.

    Built only through `take`, so a rendered answer can never carry more
    entries (or map markers) than the cap.
    """

    __slots__ = ("_entries",)

    capacity = MAX_RENDERED_PLACES

    def __init__(self, entries: Tuple[PlaceEntry, ...]):
        if len(entries) > self.capacity:
            raise ValueError(
                f"NearestPlaces holds at most {self.capacity} entries, got {len(entries)}"
            )
        self._entries = entries

    @classmethod
    def take(cls, entries: Iterable[PlaceEntry]) -> "NearestPlaces":
        """Keep the first `capacity` entries in input order, drop the rest."""
        return cls(tuple(islice(entries, cls.capacity)))

    def __iter__(self) -> Iterator[PlaceEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> PlaceEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NearestPlaces):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"NearestPlaces({list(self._entries)!r})"

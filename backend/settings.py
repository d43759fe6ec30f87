import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

from domain.models import Coordinate

# Settings helper that reads environment configuration once at startup.

PLACES_SEARCH_ENDPOINT = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
STATIC_MAP_ENDPOINT = "https://maps.googleapis.com/maps/api/staticmap"
DEFAULT_ANCHOR = "37.7749,-122.4194"
DEFAULT_HTTP_TIMEOUT = 10.0


class ConfigurationError(ValueError):
    """Raised when the process environment cannot produce usable settings."""


def _parse_proxy_url(val: Optional[str]) -> str:
    if not val or not val.strip():
        raise ConfigurationError("QUOTAGUARDSTATIC_URL is not set")
    parts = urlsplit(val.strip())
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError("QUOTAGUARDSTATIC_URL must be an absolute URI")
    return val.strip()


def _parse_anchor(val: Optional[str]) -> Coordinate:
    try:
        return Coordinate.parse(val or DEFAULT_ANCHOR)
    except ValueError as exc:
        raise ConfigurationError(f"NEARBY_ANCHOR is invalid: {exc}") from exc


def _as_float(val: Optional[str], default: float) -> float:
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError as exc:
        raise ConfigurationError(f"expected a number, got {val!r}") from exc


def redact_url(url: str) -> str:
    """Strip userinfo from a URL so it can be logged."""
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rsplit("@", 1)[1]
    return urlunsplit((parts.scheme, f"<redacted>@{host}", parts.path, parts.query, parts.fragment))


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    proxy_url: str
    anchor: Coordinate
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    places_search_endpoint: str = PLACES_SEARCH_ENDPOINT
    static_map_endpoint: str = STATIC_MAP_ENDPOINT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            google_api_key=env.get("GOOGLE_API_KEY", ""),
            proxy_url=_parse_proxy_url(env.get("QUOTAGUARDSTATIC_URL")),
            anchor=_parse_anchor(env.get("NEARBY_ANCHOR")),
            http_timeout=_as_float(env.get("NEARBY_HTTP_TIMEOUT"), DEFAULT_HTTP_TIMEOUT),
            places_search_endpoint=env.get("PLACES_SEARCH_ENDPOINT") or PLACES_SEARCH_ENDPOINT,
            static_map_endpoint=env.get("STATIC_MAP_ENDPOINT") or STATIC_MAP_ENDPOINT,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build the process-wide settings on first use."""
    return Settings.from_env()

"""
Places search client for the Google Places nearby-search endpoint.

All traffic goes through the configured forward proxy so the upstream
allow-list sees a single static egress IP.
"""
from __future__ import annotations

import json
import logging
from typing import List, Optional, Tuple
from urllib.parse import quote_plus

import requests

from domain.models import SearchResult
from settings import Settings, redact_url

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """The search request could not be completed (DNS, connect, proxy, timeout)."""


def build_search_params(query: str, settings: Settings) -> List[Tuple[str, str]]:
    """Ordered query parameters for a rank-by-distance keyword search."""
    return [
        ("location", settings.anchor.wire),
        ("sensor", "false"),
        ("rankby", "distance"),
        ("key", settings.google_api_key),
        ("keyword", query),
    ]


def build_search_url(query: str, settings: Settings) -> str:
    """Full search URL; the credential and keyword are URL-escaped, the anchor is not."""
    params = build_search_params(query, settings)
    return settings.places_search_endpoint + "?" + "&".join(
        f"{name}={value if name == 'location' else quote_plus(value)}" for name, value in params
    )


def _reject_constant(name: str) -> None:
    # NaN and Infinity are not JSON numbers; treat them as absent
    return None


def decode_search_body(body: str) -> SearchResult:
    """
    Decode a search response body, never raising.

    JSON numbers are kept as their literal text. A body that is not valid
    JSON decodes to an empty result.
    """
    try:
        payload = json.loads(
            body, parse_float=str, parse_int=str, parse_constant=_reject_constant
        )
    except (ValueError, RecursionError) as exc:
        logger.warning("Places response is not valid JSON, treating as no results: %s", exc)
        return SearchResult()
    result = SearchResult.from_payload(payload)
    if result.skipped:
        logger.warning("Places response had %d malformed entries, skipped", result.skipped)
    if result.status and result.status not in ("OK", "ZERO_RESULTS"):
        logger.warning(
            "Places search returned status=%s: %s", result.status, result.error_message or "-"
        )
    return result


class PlacesClient:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()
        # ignore HTTP(S)_PROXY / NO_PROXY from the environment
        self.session.trust_env = False
        self.session.proxies = {"http": settings.proxy_url, "https": settings.proxy_url}
        self.logger = logging.getLogger(__name__)

    def search(self, query: str, timeout: Optional[float] = None) -> SearchResult:
        """
        Run a nearby keyword search around the configured anchor.

        Raises:
            FetchError: on any transport failure. Malformed bodies do not raise.
        """
        url = build_search_url(query, self.settings)
        if timeout is None:
            timeout = self.settings.http_timeout
        try:
            with self.session.get(url, timeout=timeout) as resp:
                if not resp.ok:
                    self.logger.warning(
                        "Places search answered HTTP %s for keyword=%r", resp.status_code, query
                    )
                result = decode_search_body(resp.text)
        except requests.RequestException as exc:
            self.logger.warning(
                "Places search failed via proxy %s: %s",
                redact_url(self.settings.proxy_url),
                exc,
            )
            raise FetchError(str(exc)) from exc

        self.logger.debug(
            "PlacesClient.search: keyword=%r status=%s got %d results",
            query,
            result.status or "-",
            len(result.entries),
        )
        return result

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PlacesClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

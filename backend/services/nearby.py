"""
The `nearby <query>` command: the four nearest places matching a query,
as an HTML list with a map.
"""
from __future__ import annotations

import logging
from typing import Optional

from services.nearby_render import render_places
from services.places_client import FetchError, PlacesClient
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

NEARBY_ERROR_SENTINEL = "error"
NEARBY_COMMAND_HELP = (
    "nearby <query>: get the 4 nearest places matching <query>, "
    "returned as an HTML list of places with a map"
)


def answer_nearby_query(
    query: str,
    client: Optional[PlacesClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Fetch places for `query` and render them.

    Returns the rendered HTML, or "error" when the search could not be
    reached. Transport failures never propagate to the caller.
    """
    settings = settings or (client.settings if client else get_settings())
    if client is None:
        with PlacesClient(settings) as own_client:
            return _answer(query, own_client, settings)
    return _answer(query, client, settings)


def _answer(query: str, client: PlacesClient, settings: Settings) -> str:
    try:
        result = client.search(query)
    except FetchError as exc:
        logger.warning("nearby %r: search unavailable: %s", query, exc)
        return NEARBY_ERROR_SENTINEL
    return render_places(result.entries, query, settings)

"""
HTML renderer for nearby place answers.

Produces a bold title, a list of up to four places and a static map image
with one lettered marker per listed place. Rendering is a pure function of
its inputs; field values are inserted as-is without escaping.
"""
from typing import Iterable, List

from domain.models import Coordinate, NearestPlaces, PlaceEntry
from services.presentation import (
    format_open_now,
    format_rating,
    marker_param,
    title_case,
)
from settings import Settings

MAP_ZOOM = 15
MAP_SIZE = "600x200"


def build_static_map_url(endpoint: str, center: Coordinate, places: NearestPlaces) -> str:
    """Static map URL centred on the anchor, with markers in listed order."""
    url = f"{endpoint}?center={center.wire}&zoom={MAP_ZOOM}&size={MAP_SIZE}&sensor=false"
    for index, place in enumerate(places):
        url += "&" + marker_param(index, place.location)
    return url


def render_place_item(place: PlaceEntry) -> str:
    return (
        f"<li>{place.name}<br>"
        f"{place.address}<br>"
        f"<em>Rating: {format_rating(place.rating)}</em> | "
        f"{format_open_now(place.open_now)}<br></li>"
    )


def render_places(entries: Iterable[PlaceEntry], query: str, settings: Settings) -> str:
    """
    Render the nearest places for `query` as an HTML snippet.

    Args:
        entries: Places in distance order; only the first four are used.
        query: The user's query, shown title-cased in the heading.
        settings: Supplies the anchor coordinate and static map endpoint.

    Returns:
        Title line, <ul> of places, and an <img> of the marked map.
    """
    places = NearestPlaces.take(entries)

    parts: List[str] = [f"<strong>Results for Nearby {title_case(query)}</strong><br>", "<ul>"]
    parts.extend(render_place_item(place) for place in places)
    parts.append("</ul><br>")

    map_url = build_static_map_url(settings.static_map_endpoint, settings.anchor, places)
    parts.append(f"<img src='{map_url}'>")
    return "".join(parts)

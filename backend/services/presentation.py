"""
Small deterministic formatters used when rendering a nearby answer.
"""
import re

from domain.models import MAX_RENDERED_PLACES, Coordinate

NO_RATING = "N/A"
OPEN_NOW_HTML = "<strong>Open Now</strong>"
CLOSED_HTML = "<strong>Closed</strong>"
MARKER_COLOR = "blue"
MARKER_LABELS = ("A", "B", "C", "D", "E", "F", "G")

if MAX_RENDERED_PLACES > len(MARKER_LABELS):
    raise RuntimeError("MAX_RENDERED_PLACES exceeds the available marker labels")

_WORD_START = re.compile(r"(?<!\w)\w")


def format_rating(rating: str) -> str:
    """Return the rating text unchanged, or "N/A" when there is none."""
    if rating:
        return rating
    return NO_RATING


def format_open_now(is_open: bool) -> str:
    if is_open:
        return OPEN_NOW_HTML
    return CLOSED_HTML


def marker_label(index: int) -> str:
    """
    Map a 0-based rendered position to its map marker letter (0 -> "A").

    Only 0-6 are valid; anything else raises IndexError.
    """
    if not 0 <= index < len(MARKER_LABELS):
        raise IndexError(
            f"marker index {index} out of range 0-{len(MARKER_LABELS) - 1}"
        )
    return MARKER_LABELS[index]


def title_case(text: str) -> str:
    """
    Uppercase the first letter of every word, leaving the rest as typed.

    Any character other than a letter, digit or underscore starts a new word,
    so "coffee-shop" becomes "Coffee-Shop".
    """
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def marker_param(index: int, location: Coordinate) -> str:
    return f"markers=color:{MARKER_COLOR}|label:{marker_label(index)}|{location.wire}"

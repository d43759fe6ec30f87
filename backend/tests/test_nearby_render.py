from services.nearby_render import build_static_map_url, render_places
from domain.models import NearestPlaces

MAP_PREFIX = (
    "https://maps.googleapis.com/maps/api/staticmap"
    "?center=37.7749,-122.4194&zoom=15&size=600x200&sensor=false"
)


def test_render_two_entries_end_to_end(settings, make_place):
    entries = [
        make_place("Cafe One", lat=1.0, lng=2.0, rating="4.5", open_now=True),
        make_place("Cafe Two", lat=3.0, lng=4.0, rating="", open_now=False),
    ]

    html = render_places(entries, "cafe", settings)

    assert html == (
        "<strong>Results for Nearby Cafe</strong><br>"
        "<ul>"
        "<li>Cafe One<br>Cafe One Street<br><em>Rating: 4.5</em> | <strong>Open Now</strong><br></li>"
        "<li>Cafe Two<br>Cafe Two Street<br><em>Rating: N/A</em> | <strong>Closed</strong><br></li>"
        "</ul><br>"
        "<img src='" + MAP_PREFIX
        + "&markers=color:blue|label:A|1,2"
        + "&markers=color:blue|label:B|3,4'>"
    )


def test_render_caps_at_four_entries(settings, make_place):
    entries = [make_place(f"Place {i}", lat=float(i), lng=float(i)) for i in range(6)]

    html = render_places(entries, "bar", settings)

    assert html.count("<li>") == 4
    assert html.count("markers=") == 4
    assert "Place 4" not in html
    assert "Place 5" not in html
    assert "label:E" not in html
    for label in "ABCD":
        assert f"label:{label}|" in html
    assert html.index("label:A|0,0") < html.index("label:B|1,1") < html.index("label:D|3,3")


def test_render_items_match_entry_count(settings, make_place):
    for count in range(5):
        entries = [make_place(f"Spot {i}") for i in range(count)]
        html = render_places(entries, "spot", settings)
        assert html.count("<li>") == count
        assert html.count("markers=") == count
        for entry in entries:
            assert entry.name in html
            assert entry.address in html


def test_render_empty_results_has_markerless_map(settings):
    html = render_places([], "tacos", settings)
    assert html == (
        "<strong>Results for Nearby Tacos</strong><br><ul></ul><br>"
        "<img src='" + MAP_PREFIX + "'>"
    )


def test_labels_follow_rendered_position_not_content(settings, make_place):
    entries = [make_place("Zeta"), make_place("Alpha")]
    html = render_places(entries, "x", settings)
    assert html.index("Zeta") < html.index("Alpha")
    assert "label:A|1,2&markers=color:blue|label:B|1,2'" in html


def test_fields_are_not_escaped(settings, make_place):
    html = render_places([make_place("Tom & Jerry's <Diner>")], "diner", settings)
    assert "<li>Tom & Jerry's <Diner><br>" in html


def test_render_is_idempotent(settings, make_place):
    entries = [make_place("A"), make_place("B", lat="9.99", lng="-1.5")]
    assert render_places(entries, "coffee shop", settings) == render_places(
        entries, "coffee shop", settings
    )


def test_title_is_capitalized_per_word(settings):
    assert render_places([], "coffee shop", settings).startswith(
        "<strong>Results for Nearby Coffee Shop</strong><br>"
    )


def test_static_map_url_uses_configured_endpoint(settings, make_place):
    url = build_static_map_url(
        "https://maps.example.com/static",
        settings.anchor,
        NearestPlaces.take([make_place("P", lat="5", lng="6")]),
    )
    assert url == (
        "https://maps.example.com/static?center=37.7749,-122.4194&zoom=15&size=600x200"
        "&sensor=false&markers=color:blue|label:A|5,6"
    )

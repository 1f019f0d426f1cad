import folium
import pytest

from markers.icons import _ICON_BUILDERS, create_marker, icon_for
from markers.popups import (
    crime_popup,
    disaster_popup,
    render_popup,
    sub_region_popup,
)
from markers.styles import (
    CRIME_STYLE,
    DISTURBANCE_STYLE,
    PAGE_CSS,
    SUB_REGION_STYLE,
    MarkerKind,
    MarkerStyle,
)
from sources.models import DisasterRecord, RegionCrimeRecord, SubRegionRecord


def test_every_marker_kind_has_an_icon():
    assert set(_ICON_BUILDERS) == set(MarkerKind)
    for kind in MarkerKind:
        assert isinstance(icon_for(MarkerStyle(kind), "label"), folium.DivIcon)


@pytest.mark.parametrize(
    "lat, lon",
    [(None, None), (None, 106.8), (-6.2, None)],
)
def test_no_marker_without_both_coordinates(lat, lon):
    record = SubRegionRecord(name="Polres", lat=lat, lon=lon, total_cases=1)
    assert create_marker(record, DISTURBANCE_STYLE) is None


def test_no_marker_for_missing_record():
    assert create_marker(None, CRIME_STYLE) is None


def test_marker_placed_at_record_position():
    record = SubRegionRecord(name="Polres", lat=-6.2, lon=106.8, total_cases=1)
    marker = create_marker(record, SUB_REGION_STYLE, label=record.name)
    assert marker.location == [-6.2, 106.8]


def test_float_label_icon_escapes_name():
    icon = icon_for(SUB_REGION_STYLE, "<b>Polres</b>")
    markup = icon.options["html"]
    assert "&lt;b&gt;Polres&lt;/b&gt;" in markup
    assert "<b>Polres</b>" not in markup

    m = folium.Map()
    folium.Marker([-6.2, 106.8], icon=icon).add_to(m)
    assert "&lt;b&gt;Polres&lt;/b&gt;" in m.get_root().render()


def test_crime_popup_keeps_first_five_types(crime_records):
    record = crime_records[0]
    assert len(record.top_crime_types) == 7

    content = crime_popup(record)

    assert [name for name, _ in content.items] == ["Type 1", "Type 2", "Type 3", "Type 4", "Type 5"]
    html = render_popup(content)
    assert html.count("<li>") == 5
    assert "Type 6" not in html
    assert "<strong>Polda Metro Jaya</strong>" in html
    assert "Total cases: 300" in html


def test_sub_region_popup_lists_full_breakdown():
    record = SubRegionRecord.from_dict(
        {
            "nama": "Polres A",
            "jumlah": 42,
            "jenis": [{"nama": f"T{i}", "jumlah": i} for i in range(7)],
        }
    )
    html = render_popup(sub_region_popup(record))
    assert html.count("<li>") == 7
    assert "Total cases: 42" in html


def test_popup_markup_is_escaped():
    record = RegionCrimeRecord(region_name="<script>x</script>", total_cases=1, lat=0.0, lon=0.0)
    html = render_popup(crime_popup(record))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_disaster_popup_with_missing_note():
    record = DisasterRecord.from_dict({"polda": "Polda Maluku", "kejadian": 2, "jenis": "Gempa"})
    html = render_popup(disaster_popup(record))
    assert "Type: Gempa" in html
    assert "Events: 2" in html
    assert "Note: " in html


def test_page_css_only_styles_map_icons():
    assert "@keyframes pulse" in PAGE_CSS
    assert "@keyframes float" in PAGE_CSS
    assert ".clickable" not in PAGE_CSS

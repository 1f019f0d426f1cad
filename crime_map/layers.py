from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

import folium

from config.settings import (
    BOUNDARY_STYLE,
    FLY_TO_DURATION_S,
    FLY_TO_ZOOM,
    MAP_CENTER,
    MAP_ZOOM,
    TILE_ATTRIBUTION,
    TILE_URL,
)
from markers.icons import create_marker
from markers.popups import (
    PopupContent,
    crime_popup,
    disaster_popup,
    disturbance_popup,
    render_popup,
    sub_region_popup,
)
from markers.styles import (
    CRIME_STYLE,
    DISASTER_STYLE,
    DISTURBANCE_STYLE,
    PAGE_CSS,
    SUB_REGION_STYLE,
    MarkerStyle,
)
from sources.models import RegionCrimeRecord, Snapshot, SubRegionRecord
from state.session import FocusRequest

from .elements import FlyTo, HoverPopup, add_page_css

logger = logging.getLogger(__name__)

CRIME_LAYER_NAME = "Crime"
DISTURBANCE_LAYER_NAME = "Disturbances"
DISASTER_LAYER_NAME = "Disasters"
BOUNDARY_LAYER_NAME = "Regency/City boundaries"


def click_key(lat: float, lon: float) -> tuple[float, float]:
    return round(float(lat), 5), round(float(lon), 5)


@dataclass
class MapBuild:
    map: folium.Map
    layers: dict[str, Any] = field(default_factory=dict)
    crime_markers: dict[str, folium.Marker] = field(default_factory=dict)
    crime_by_position: dict[tuple[float, float], RegionCrimeRecord] = field(default_factory=dict)

    def crime_record_at(self, lat: float | None, lon: float | None) -> RegionCrimeRecord | None:
        if lat is None or lon is None:
            return None
        return self.crime_by_position.get(click_key(lat, lon))


def build_map() -> folium.Map:
    m = folium.Map(
        location=list(MAP_CENTER),
        zoom_start=MAP_ZOOM,
        tiles=None,
        zoom_snap=0.5,
    )
    folium.TileLayer(TILE_URL, attr=TILE_ATTRIBUTION, name="OpenStreetMap", control=False).add_to(m)
    add_page_css(m, PAGE_CSS)
    return m


def _place(
    record: Any,
    style: MarkerStyle,
    popup: Callable[[Any], PopupContent],
    group: folium.FeatureGroup,
    label: str | None = None,
) -> folium.Marker | None:
    marker = create_marker(record, style, label=label)
    if marker is None:
        return None
    folium.Popup(render_popup(popup(record)), max_width=300).add_to(marker)
    marker.add_child(HoverPopup())
    marker.add_to(group)
    return marker


def _marker_layer(
    name: str,
    records: Iterable[Any],
    style: MarkerStyle,
    popup: Callable[[Any], PopupContent],
    show: bool,
) -> tuple[folium.FeatureGroup, list[tuple[Any, folium.Marker]]]:
    group = folium.FeatureGroup(name=name, overlay=False, show=show)
    placed = []
    skipped = 0
    for record in records:
        marker = _place(record, style, popup, group)
        if marker is None:
            skipped += 1
            continue
        placed.append((record, marker))
    if skipped:
        logger.debug("%s: skipped %d records without coordinates", name, skipped)
    return group, placed


def build_sub_region_marker(record: SubRegionRecord) -> folium.Marker | None:
    marker = create_marker(record, SUB_REGION_STYLE, label=record.name)
    if marker is None:
        return None
    folium.Popup(render_popup(sub_region_popup(record)), max_width=300).add_to(marker)
    return marker


def boundary_layer(geometry: dict | None) -> folium.GeoJson | None:
    if not geometry:
        return None
    return folium.GeoJson(
        geometry,
        name=BOUNDARY_LAYER_NAME,
        style_function=lambda _feature: dict(BOUNDARY_STYLE),
        overlay=True,
        control=True,
        show=False,
    )


def build_layers(snapshot: Snapshot, focus: FocusRequest | None = None) -> MapBuild:
    """Build the map with its marker layers, boundary overlay and layer control.

    Only the crime layer is visible at first. The three marker layers are
    base layers, so the control shows them as one exclusive choice; the
    boundary layer is an independent overlay.
    """
    m = build_map()
    build = MapBuild(map=m)

    crime_group, crime_placed = _marker_layer(
        CRIME_LAYER_NAME, snapshot.crime or (), CRIME_STYLE, crime_popup, show=True
    )
    for record, marker in crime_placed:
        build.crime_markers[record.region_name] = marker
        build.crime_by_position[click_key(record.lat, record.lon)] = record

    disturbance_group, _ = _marker_layer(
        DISTURBANCE_LAYER_NAME, snapshot.disturbance or (), DISTURBANCE_STYLE, disturbance_popup, show=False
    )
    disaster_group, _ = _marker_layer(
        DISASTER_LAYER_NAME, snapshot.disaster or (), DISASTER_STYLE, disaster_popup, show=False
    )

    for group in (crime_group, disturbance_group, disaster_group):
        group.add_to(m)
        build.layers[group.layer_name] = group

    boundaries = boundary_layer(snapshot.boundaries)
    if boundaries is not None:
        boundaries.add_to(m)
        build.layers[BOUNDARY_LAYER_NAME] = boundaries

    folium.LayerControl(collapsed=False, position="topright").add_to(m)

    if focus is not None:
        fly_to(build, focus)

    return build


def fly_to(build: MapBuild, focus: FocusRequest) -> FlyTo:
    """Fly to the focus point and open the crime marker named like it, if any."""
    marker = build.crime_markers.get(focus.name) if focus.name is not None else None
    element = FlyTo(
        focus.lat, focus.lon, zoom=FLY_TO_ZOOM, duration=FLY_TO_DURATION_S, marker=marker, seq=focus.seq
    )
    build.map.add_child(element)
    return element

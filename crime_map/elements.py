"""Small Leaflet behaviours that folium has no element for."""

from __future__ import annotations

import folium
from branca.element import MacroElement
from jinja2 import Template


class HoverPopup(MacroElement):
    """Open the parent marker's popup on pointer-enter, close it on pointer-leave."""

    _template = Template(
        """
        {% macro script(this, kwargs) %}
        {{ this._parent.get_name() }}.on('mouseover', function() { this.openPopup(); });
        {{ this._parent.get_name() }}.on('mouseout', function() { this.closePopup(); });
        {% endmacro %}
        """
    )

    def __init__(self):
        super().__init__()
        self._name = "HoverPopup"


class FlyTo(MacroElement):
    """Animate the map to a point once loaded and open a marker's popup there."""

    _template = Template(
        """
        {% macro script(this, kwargs) %}
        (function() {
          var map = {{ this._parent.get_name() }};
          map._focusRequest = {{ this.seq }};
          {%- if this.marker_name %}
          map.once('moveend', function() { {{ this.marker_name }}.openPopup(); });
          {%- endif %}
          map.flyTo([{{ this.lat }}, {{ this.lon }}], {{ this.zoom }}, {duration: {{ this.duration }}});
        })();
        {% endmacro %}
        """
    )

    def __init__(
        self,
        lat: float,
        lon: float,
        zoom: float,
        duration: float,
        marker: folium.Marker | None = None,
        seq: int = 0,
    ):
        super().__init__()
        self._name = "FlyTo"
        self.lat = float(lat)
        self.lon = float(lon)
        self.zoom = zoom
        self.duration = duration
        self.marker_name = marker.get_name() if marker is not None else None
        self.seq = int(seq)


def add_page_css(m: folium.Map, css: str) -> None:
    m.get_root().header.add_child(folium.Element(css), name="crime_map_css")

from __future__ import annotations

import html
from typing import Any, Callable

import folium

from sources.models import has_coordinates

from .styles import MarkerKind, MarkerStyle


def _dot_icon(style: MarkerStyle, _label: str | None) -> folium.DivIcon:
    css = (
        f"background-color: {style.color};"
        "border-radius: 50%;"
        f"width: {style.size}px;"
        f"height: {style.size}px;"
        f"box-shadow: 0 0 5px {style.color};"
        "transition: transform 0.3s ease;"
    )
    return folium.DivIcon(
        html=f'<div style="{css}"></div>',
        class_name="custom-div-icon",
        icon_size=(20, 20),
        icon_anchor=(10, 10),
    )


def _pulse_icon(style: MarkerStyle, _label: str | None) -> folium.DivIcon:
    return folium.DivIcon(
        html=(
            f'<div style="color:{style.color};font-size:{style.size}px;'
            'animation:pulse 1.5s infinite;">&#11088;</div>'
        ),
        class_name="custom-div-icon",
        icon_size=(20, 20),
        icon_anchor=(10, 10),
    )


def _float_label_icon(style: MarkerStyle, label: str | None) -> folium.DivIcon:
    name = html.escape(label or "")
    return folium.DivIcon(
        html=f"""
        <div style="text-align: center; font-size: {style.size}px; user-select: none;
                    animation: float 1.5s ease-in-out infinite; white-space: nowrap;
                    line-height: 1.2; cursor: pointer;">
          <div>&#128110;&#8205;&#9794;&#65039;</div>
          <div style="font-size: 12px; color: {style.color}; margin-top: 2px; font-weight: 600;
                      background: rgba(0, 0, 0, 0.5); padding: 2px 6px; border-radius: 4px;
                      box-shadow: 0 0 3px rgba(0,0,0,0.3); display: inline-block;">{name}</div>
        </div>""",
        class_name="emoji-polres",
        icon_size=(100, 40),
        icon_anchor=(50, 40),
    )


_ICON_BUILDERS: dict[MarkerKind, Callable[[MarkerStyle, str | None], folium.DivIcon]] = {
    MarkerKind.DOT: _dot_icon,
    MarkerKind.PULSE: _pulse_icon,
    MarkerKind.FLOAT_LABEL: _float_label_icon,
}


def icon_for(style: MarkerStyle, label: str | None = None) -> folium.DivIcon:
    return _ICON_BUILDERS[style.kind](style, label)


def create_marker(record: Any, style: MarkerStyle, label: str | None = None) -> folium.Marker | None:
    """Build a styled marker, or None when the record has no usable position."""
    if not has_coordinates(record):
        return None
    return folium.Marker(
        location=[record.lat, record.lon],
        icon=icon_for(style, label),
    )

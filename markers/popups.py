"""Popup view-models and their markup.

Builders shape a record into a `PopupContent`; `render_popup` turns that
into HTML. Tests can assert on the view-model without any map around it.
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Template

from config.settings import POPUP_TOP_TYPES
from sources.models import DisasterRecord, DisturbanceRecord, RegionCrimeRecord, SubRegionRecord


@dataclass(frozen=True)
class PopupContent:
    title: str
    fields: tuple[tuple[str, str], ...] = ()
    items_heading: str | None = None
    items: tuple[tuple[str, str], ...] = ()
    footer: str | None = None


_POPUP_TEMPLATE = Template(
    """<strong>{{ c.title }}</strong>
{%- for label, value in c.fields %}<br/>{{ label }}: {{ value }}{% endfor %}
{%- if c.items_heading %}<hr/><em>{{ c.items_heading }}</em>{% endif %}
{%- if c.items_heading or c.items %}<ul>
{%- for name, count in c.items %}<li>{{ name }}: {{ count }}</li>{% endfor -%}
</ul>{% endif %}
{%- if c.footer %}<hr/><em>{{ c.footer }}</em>{% endif %}""",
    autoescape=True,
)


def _text(value) -> str:
    return "" if value is None else str(value)


def render_popup(content: PopupContent) -> str:
    return _POPUP_TEMPLATE.render(c=content)


def crime_popup(record: RegionCrimeRecord) -> PopupContent:
    return PopupContent(
        title=record.region_name,
        fields=(("Total cases", _text(record.total_cases)),),
        items_heading=f"Top {POPUP_TOP_TYPES} crime types:",
        items=tuple(
            (j.name, _text(j.count)) for j in record.top_crime_types[:POPUP_TOP_TYPES]
        ),
        footer="Click ⭐ to show Polres",
    )


def disturbance_popup(record: DisturbanceRecord) -> PopupContent:
    return PopupContent(
        title=record.region_name,
        fields=(
            ("Disturbances", _text(record.event_count)),
            ("Type", record.type_label),
        ),
    )


def disaster_popup(record: DisasterRecord) -> PopupContent:
    return PopupContent(
        title=record.region_name,
        fields=(
            ("Type", record.type_label),
            ("Events", _text(record.event_count)),
            ("Note", _text(record.note)),
        ),
    )


def sub_region_popup(record: SubRegionRecord) -> PopupContent:
    return PopupContent(
        title=record.name,
        fields=(("Total cases", _text(record.total_cases)),),
        items=tuple((j.name, _text(j.count)) for j in record.crime_type_breakdown),
    )

"""Per-session view state.

The dashboard keeps exactly three pieces of mutable state besides the
loaded snapshot: the active drill-down marker set, the single chart figure
and a pending "fly to" request coming from a table row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

import folium
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from sources.models import RegionCrimeRecord, Snapshot, SubRegionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusRequest:
    lat: float
    lon: float
    name: str | None = None
    seq: int = 0


@dataclass
class DrilldownSet:
    region_name: str | None = None
    markers: list[folium.Marker] = field(default_factory=list)

    def clear(self) -> None:
        # The feature group is rebuilt from `markers` on every run.
        self.markers = []
        self.region_name = None

    def show(
        self,
        record: RegionCrimeRecord,
        build: Callable[[SubRegionRecord], folium.Marker | None],
    ) -> None:
        """Replace the active set with markers for `record`'s sub-regions."""
        self.clear()
        if not record.top_sub_regions:
            return
        self.region_name = record.region_name
        for sub_region in record.top_sub_regions:
            marker = build(sub_region)
            if marker is not None:
                self.markers.append(marker)
        logger.info("Showing %d sub-region markers for %s", len(self.markers), record.region_name)

    def to_feature_group(self) -> folium.FeatureGroup:
        group = folium.FeatureGroup(name="Polres", control=False)
        for marker in self.markers:
            marker.add_to(group)
        return group


@dataclass
class ChartSlot:
    figure: Figure | None = None

    def replace(self, figure: Figure) -> Figure:
        if self.figure is not None and self.figure is not figure:
            plt.close(self.figure)
        self.figure = figure
        return figure

    def discard(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)
        self.figure = None


@dataclass
class DashboardSession:
    snapshot: Snapshot
    drilldown: DrilldownSet = field(default_factory=DrilldownSet)
    chart: ChartSlot = field(default_factory=ChartSlot)
    focus: FocusRequest | None = None
    focus_count: int = 0
    selections: dict[str, int | None] = field(default_factory=dict)

    def request_focus(self, lat: float, lon: float, name: str | None = None) -> FocusRequest:
        self.focus_count += 1
        self.focus = FocusRequest(lat=lat, lon=lon, name=name, seq=self.focus_count)
        return self.focus

    def select_row(self, table_id: str, row: int | None, target: Any = None) -> FocusRequest | None:
        """Record the selected row of a table; a newly selected row requests focus.

        Deselecting forgets the row, so selecting it again flies there again.
        """
        previous = self.selections.get(table_id)
        self.selections[table_id] = row
        if row is None or row == previous or target is None:
            return None
        return self.request_focus(target.lat, target.lon, target.name)

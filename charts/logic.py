from __future__ import annotations

from typing import Iterable

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from sources.models import TopCrimeTypeRecord

BAR_COLOR = (42 / 255, 157 / 255, 143 / 255, 0.85)
BAR_EDGE_COLOR = (21 / 255, 101 / 255, 73 / 255, 1.0)
LABEL_COLOR = "#264653"


def sort_counts(items: Iterable[TopCrimeTypeRecord]) -> list[TopCrimeTypeRecord]:
    """Largest count first; ties keep their input order."""
    return sorted(items, key=lambda item: item.count or 0, reverse=True)


def build_bar_chart(items: Iterable[TopCrimeTypeRecord]) -> Figure:
    ranked = sort_counts(items)
    labels = [item.name for item in ranked]
    counts = [item.count or 0 for item in ranked]

    fig, ax = plt.subplots(figsize=(10, 5))
    bars = ax.bar(
        range(len(counts)),
        counts,
        color=BAR_COLOR,
        edgecolor=BAR_EDGE_COLOR,
        linewidth=1,
        width=0.6,
    )
    ax.bar_label(bars, labels=[f"{c:,}" for c in counts], padding=2, fontsize=9)

    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=35, ha="right", color=LABEL_COLOR, fontsize=10, fontweight="semibold")
    ax.set_xlabel("Crime type")
    ax.set_ylabel("Cases")
    ax.set_ylim(bottom=0)
    ax.yaxis.get_major_locator().set_params(integer=True)
    ax.grid(True, axis="y", linestyle="--", color="#e0e0e0")
    ax.set_axisbelow(True)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)

    fig.tight_layout()
    return fig

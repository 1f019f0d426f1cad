from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from config.settings import CRIME_COLOR, DISASTER_COLOR, DISTURBANCE_COLOR


class MarkerKind(Enum):
    DOT = "dot"                  # plain coloured circle
    PULSE = "pulse"              # pulsing star, top-level crime markers
    FLOAT_LABEL = "float_label"  # floating officer with a name tag, drill-down markers


@dataclass(frozen=True)
class MarkerStyle:
    kind: MarkerKind
    color: str = "#3388ff"
    size: int = 25


CRIME_STYLE = MarkerStyle(MarkerKind.PULSE, color=CRIME_COLOR, size=30)
DISTURBANCE_STYLE = MarkerStyle(MarkerKind.DOT, color=DISTURBANCE_COLOR)
DISASTER_STYLE = MarkerStyle(MarkerKind.DOT, color=DISASTER_COLOR)
SUB_REGION_STYLE = MarkerStyle(MarkerKind.FLOAT_LABEL, color="white", size=20)


PAGE_CSS = """
<style>
@keyframes pulse {
  0% { transform: scale(1); opacity: 1; }
  50% { transform: scale(1.3); opacity: 0.6; }
  100% { transform: scale(1); opacity: 1; }
}
@keyframes float {
  0%, 100% { transform: translateY(0); }
  50% { transform: translateY(-6px); }
}
.custom-div-icon div {
  transition: transform 0.3s ease;
}
.custom-div-icon:hover div {
  transform: scale(1.3);
  filter: drop-shadow(0 0 4px rgba(0,0,0,0.4));
  cursor: pointer;
}
</style>
"""

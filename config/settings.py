"""Runtime settings and map defaults for the dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


DATA_BASE_ENV = "CRIME_MAP_DATA_BASE"
FETCH_TIMEOUT_ENV = "CRIME_MAP_FETCH_TIMEOUT"
LOG_LEVEL_ENV = "CRIME_MAP_LOG_LEVEL"

DEFAULT_DATA_BASE = "data/"
DEFAULT_FETCH_TIMEOUT = 30.0

# Resource name -> file under the data base
DATASET_FILES = {
    "crime": "kriminalitas.json",
    "disturbance": "gangguan.json",
    "disaster": "bencana.json",
    "top_regions": "top5.json",
    "trend": "tren.json",
    "percent": "persen_kekerasan.json",
    "boundaries": "batasKab.json",
    "top_crime_types": "10besar.json",
}

MAP_CENTER = (-2.5, 118.0)
MAP_ZOOM = 5.5
FLY_TO_ZOOM = 10
FLY_TO_DURATION_S = 1.2

TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = "&copy; OpenStreetMap contributors"

CRIME_COLOR = "#ff0000"
DISTURBANCE_COLOR = "#ff9933"
DISASTER_COLOR = "#ff3333"

BOUNDARY_STYLE = {
    "color": "red",
    "weight": 2,
    "opacity": 0.8,
    "fillColor": "red",
    "fillOpacity": 0.2,
}

RANKING_SIZE = 5
POPUP_TOP_TYPES = 5


@dataclass(frozen=True)
class Settings:
    data_base: str = DEFAULT_DATA_BASE
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    log_level: str = "INFO"

    @property
    def is_remote(self) -> bool:
        return self.data_base.startswith(("http://", "https://"))


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def load_settings() -> Settings:
    """Read settings from the environment (and a local `.env`, if present)."""
    load_dotenv()
    return Settings(
        data_base=(os.getenv(DATA_BASE_ENV) or DEFAULT_DATA_BASE).strip(),
        fetch_timeout=_float_env(FETCH_TIMEOUT_ENV, DEFAULT_FETCH_TIMEOUT),
        log_level=(os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper(),
    )

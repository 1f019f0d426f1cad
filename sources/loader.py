"""Startup data loading.

Every dataset is fetched independently and concurrently. A failure in one
resource (network error, non-2xx status, bad JSON, wrong shape) is logged
and recorded; it never stops the others from loading.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import requests

from config.settings import DATASET_FILES, Settings

from .models import (
    DisasterRecord,
    DisturbanceRecord,
    PercentRecord,
    RankedRegionRecord,
    RegionCrimeRecord,
    Snapshot,
    TopCrimeTypeRecord,
    TrendRecord,
    parse_geometry,
    parse_records,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settled:
    """Outcome of one job: either `data` or an `error` message."""

    name: str
    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _join(base: str, filename: str) -> str:
    return base.rstrip("/") + "/" + filename


def fetch_json(filename: str, settings: Settings) -> Any:
    """Fetch and decode one JSON resource from a URL prefix or a directory."""
    if settings.is_remote:
        url = _join(settings.data_base, filename)
        r = requests.get(url, timeout=settings.fetch_timeout)
        r.raise_for_status()
        return r.json()

    path = Path(settings.data_base) / filename
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def settle_all(jobs: dict[str, Callable[[], Any]], max_workers: int | None = None) -> dict[str, Settled]:
    """Run all jobs concurrently and wait for every one of them."""
    if not jobs:
        return {}

    results: dict[str, Settled] = {}
    with ThreadPoolExecutor(max_workers=max_workers or len(jobs)) as executor:
        futures = {executor.submit(fn): name for name, fn in jobs.items()}
        for future in as_completed(futures):
            name = futures[future]
            try:
                results[name] = Settled(name=name, data=future.result())
            except Exception as exc:
                logger.error("Failed to load '%s': %s", name, exc)
                results[name] = Settled(name=name, error=str(exc))

    # Callers index by name; keep the submission order for readability.
    return {name: results[name] for name in jobs}


_PARSERS: dict[str, Callable[[Any], Any]] = {
    "crime": lambda payload: parse_records(payload, RegionCrimeRecord),
    "disturbance": lambda payload: parse_records(payload, DisturbanceRecord),
    "disaster": lambda payload: parse_records(payload, DisasterRecord),
    "top_regions": lambda payload: parse_records(payload, RankedRegionRecord),
    "trend": lambda payload: parse_records(payload, TrendRecord),
    "percent": lambda payload: parse_records(payload, PercentRecord),
    "boundaries": parse_geometry,
    "top_crime_types": lambda payload: parse_records(payload, TopCrimeTypeRecord),
}


def load_snapshot(settings: Settings, fetch: Callable[[str, Settings], Any] = fetch_json) -> Snapshot:
    """Load every dataset once and parse what arrived."""
    jobs = {
        name: (lambda filename=filename: fetch(filename, settings))
        for name, filename in DATASET_FILES.items()
    }
    settled = settle_all(jobs)

    values: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for name, outcome in settled.items():
        if not outcome.ok:
            errors[name] = outcome.error or "unavailable"
            continue
        try:
            values[name] = _PARSERS[name](outcome.data)
        except Exception as exc:
            logger.warning("Discarding '%s' payload: %s", name, exc)
            errors[name] = str(exc)

    logger.info(
        "Snapshot loaded from %s: %d/%d datasets available",
        settings.data_base,
        len(values),
        len(settled),
    )
    return Snapshot(errors=errors, **values)

"""Record types for the dashboard datasets.

Payloads use the publisher's Indonesian keys (``polda``, ``jumlah``,
``jenis``...). The ``from_dict`` constructors map them onto English
attribute names and do nothing beyond null checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class DatasetFormatError(RuntimeError):
    """A payload does not have the top-level shape its dataset expects."""


def _safe_float(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _safe_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _first(raw: dict, *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


@dataclass(frozen=True)
class CrimeTypeCount:
    name: str
    count: int | None

    @classmethod
    def from_dict(cls, raw: dict) -> "CrimeTypeCount":
        return cls(name=str(raw.get("nama") or ""), count=_safe_int(raw.get("jumlah")))


# Rows of the top-10 chart share the breakdown shape.
TopCrimeTypeRecord = CrimeTypeCount


@dataclass(frozen=True)
class SubRegionRecord:
    name: str
    lat: float | None
    lon: float | None
    total_cases: int | None
    crime_type_breakdown: tuple[CrimeTypeCount, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict) -> "SubRegionRecord":
        return cls(
            name=str(raw.get("nama") or ""),
            lat=_safe_float(raw.get("lat")),
            lon=_safe_float(raw.get("lon")),
            total_cases=_safe_int(raw.get("jumlah")),
            crime_type_breakdown=tuple(
                CrimeTypeCount.from_dict(j) for j in (raw.get("jenis") or []) if isinstance(j, dict)
            ),
        )


@dataclass(frozen=True)
class RegionCrimeRecord:
    region_name: str
    total_cases: int | None
    lat: float | None
    lon: float | None
    top_crime_types: tuple[CrimeTypeCount, ...] = ()
    top_sub_regions: tuple[SubRegionRecord, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict) -> "RegionCrimeRecord":
        return cls(
            region_name=str(raw.get("polda") or ""),
            total_cases=_safe_int(raw.get("total")),
            lat=_safe_float(raw.get("lat")),
            lon=_safe_float(raw.get("lon")),
            top_crime_types=tuple(
                CrimeTypeCount.from_dict(j) for j in (raw.get("jenis") or []) if isinstance(j, dict)
            ),
            top_sub_regions=tuple(
                SubRegionRecord.from_dict(p) for p in (raw.get("top_polres") or []) if isinstance(p, dict)
            ),
        )


@dataclass(frozen=True)
class DisturbanceRecord:
    region_name: str
    lat: float | None
    lon: float | None
    event_count: int | None
    type_label: str
    note: str | None = None

    @classmethod
    def from_dict(cls, raw: dict) -> "DisturbanceRecord":
        return cls(
            region_name=str(raw.get("polda") or ""),
            lat=_safe_float(raw.get("lat")),
            lon=_safe_float(raw.get("lon")),
            event_count=_safe_int(raw.get("kejadian")),
            type_label=str(raw.get("jenis") or ""),
            note=raw.get("keterangan"),
        )


# Disaster rows carry the same fields; `note` is usually filled.
DisasterRecord = DisturbanceRecord


@dataclass(frozen=True)
class RankedRegionRecord:
    region_name: str
    count: int | None
    lat: float | None
    lon: float | None

    @classmethod
    def from_dict(cls, raw: dict) -> "RankedRegionRecord":
        return cls(
            region_name=str(_first(raw, "wilayah", "polda") or ""),
            count=_safe_int(_first(raw, "jumlah", "total")),
            lat=_safe_float(raw.get("lat")),
            lon=_safe_float(raw.get("lon")),
        )

    @classmethod
    def from_crime(cls, record: RegionCrimeRecord) -> "RankedRegionRecord":
        return cls(
            region_name=record.region_name,
            count=record.total_cases,
            lat=record.lat,
            lon=record.lon,
        )


@dataclass(frozen=True)
class TrendRecord:
    year: int | None
    count: int | None

    @classmethod
    def from_dict(cls, raw: dict) -> "TrendRecord":
        return cls(year=_safe_int(raw.get("tahun")), count=_safe_int(raw.get("jumlah")))


@dataclass(frozen=True)
class PercentRecord:
    category: str
    percent: float | None

    @classmethod
    def from_dict(cls, raw: dict) -> "PercentRecord":
        return cls(category=str(raw.get("kategori") or ""), percent=_safe_float(raw.get("persen")))


@dataclass(frozen=True)
class Snapshot:
    """Everything loaded at startup. `None` means the dataset is unavailable."""

    crime: tuple[RegionCrimeRecord, ...] | None = None
    disturbance: tuple[DisturbanceRecord, ...] | None = None
    disaster: tuple[DisasterRecord, ...] | None = None
    top_regions: tuple[RankedRegionRecord, ...] | None = None
    trend: tuple[TrendRecord, ...] | None = None
    percent: tuple[PercentRecord, ...] | None = None
    boundaries: dict[str, Any] | None = None
    top_crime_types: tuple[TopCrimeTypeRecord, ...] | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def map_ready(self) -> bool:
        return self.crime is not None and self.disturbance is not None and self.disaster is not None


def has_coordinates(record: Any) -> bool:
    if record is None:
        return False
    return getattr(record, "lat", None) is not None and getattr(record, "lon", None) is not None


def parse_records(payload: Any, record_type) -> tuple:
    if not isinstance(payload, list):
        raise DatasetFormatError(f"Expected a JSON array, got {type(payload).__name__}")
    return tuple(record_type.from_dict(item) for item in payload if isinstance(item, dict))


def parse_geometry(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict) or "type" not in payload:
        raise DatasetFormatError("Expected a GeoJSON object")
    return payload

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Iterable, Sequence

from config.settings import RANKING_SIZE
from sources.models import RankedRegionRecord, RegionCrimeRecord

NO_DATA_MESSAGE = "No data"
LOAD_ERROR_MESSAGE = "Failed to load data."


@dataclass(frozen=True)
class NavTarget:
    lat: float
    lon: float
    name: str


@dataclass(frozen=True)
class TableCell:
    text: str
    nav: NavTarget | None = None


@dataclass(frozen=True)
class TableView:
    table_id: str
    keys: tuple[str, ...]
    rows: tuple[tuple[TableCell, ...], ...] = ()
    placeholder: str | None = None
    error: str | None = None

    @classmethod
    def failed(cls, table_id: str, keys: Sequence[str] = ()) -> "TableView":
        return cls(table_id=table_id, keys=tuple(keys), error=LOAD_ERROR_MESSAGE)

    @property
    def is_placeholder(self) -> bool:
        return self.placeholder is not None or self.error is not None

    def nav_target(self, row_index: int) -> NavTarget | None:
        if row_index < 0 or row_index >= len(self.rows):
            return None
        for cell in self.rows[row_index]:
            if cell.nav is not None:
                return cell.nav
        return None

    def as_records(self) -> list[dict[str, str]]:
        return [{key: cell.text for key, cell in zip(self.keys, row)} for row in self.rows]


def _as_mapping(record: Any) -> dict:
    if is_dataclass(record):
        return asdict(record)
    return dict(record)


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def build_table(
    table_id: str,
    records: Iterable[Any] | None,
    keys: Sequence[str],
    navigable_key: str | None = None,
) -> TableView:
    """Project records onto `keys`, one row per record, in input order.

    Cells under `navigable_key` carry the record's coordinates so a click
    can move the map there. The value of that cell doubles as the name used
    to find the matching map marker.
    """
    rows = []
    for record in records or ():
        values = _as_mapping(record)
        cells = []
        for key in keys:
            text = _cell_text(values.get(key))
            nav = None
            if key == navigable_key and values.get("lat") is not None and values.get("lon") is not None:
                nav = NavTarget(lat=float(values["lat"]), lon=float(values["lon"]), name=text)
            cells.append(TableCell(text=text, nav=nav))
        rows.append(tuple(cells))

    if not rows:
        return TableView(table_id=table_id, keys=tuple(keys), placeholder=NO_DATA_MESSAGE)
    return TableView(table_id=table_id, keys=tuple(keys), rows=tuple(rows))


def ranking_rows(
    top_regions: Sequence[RankedRegionRecord] | None,
    crime: Sequence[RegionCrimeRecord] | None,
    size: int = RANKING_SIZE,
) -> tuple[RankedRegionRecord, ...] | None:
    """Rows of the ranking table.

    The published top-N dataset wins; without it the ranking is derived
    from the crime dataset, leaving that dataset's order untouched.
    """
    if top_regions is not None:
        return tuple(top_regions)
    if crime is None:
        return None
    ranked = sorted(crime, key=lambda r: r.total_cases or 0, reverse=True)
    return tuple(RankedRegionRecord.from_crime(r) for r in ranked[:size])

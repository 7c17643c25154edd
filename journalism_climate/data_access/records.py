"""Normalized climate record model shared by the fetchers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Iterable, Optional

import pandas as pd


@dataclass(frozen=True)
class ClimateRecord:
    """One daily extreme for a station, calendar day and measurement."""

    station_id: str
    station_name: str
    province: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    month: int
    day: int
    variable: str
    value: float
    years: tuple[int, ...]
    record_begin: Optional[int] = None
    record_end: Optional[int] = None

    @property
    def last_set(self) -> Optional[int]:
        """Most recent year the record was reached (ties are common for precipitation)."""
        return max(self.years) if self.years else None


RECORD_COLUMNS = [f.name for f in fields(ClimateRecord)]


def records_to_frame(records: Iterable[ClimateRecord]) -> pd.DataFrame:
    """Flatten records into a DataFrame, one row per record.

    The column order follows :class:`ClimateRecord`; an empty input still yields those
    columns so downstream ``groupby``/``merge`` calls don't need special cases.
    """
    rows = [asdict(record) for record in records]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    df = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    df["years"] = df["years"].apply(list)
    return df

"""Season labels for calendar dates."""

from __future__ import annotations

from datetime import date as date_type
from datetime import datetime
from typing import Optional

SEASONS = ("winter", "spring", "summer", "fall")
HEMISPHERES = ("northern", "southern")
KINDS = ("meteorological", "astronomical")

_OPPOSITE = {"winter": "summer", "spring": "fall", "summer": "winter", "fall": "spring"}

# Northern-hemisphere start of each astronomical season as (month, day). Equinoxes and
# solstices drift by a day between years; these are the usual newsroom dates.
ASTRONOMICAL_STARTS = [
    ((3, 20), "spring"),
    ((6, 21), "summer"),
    ((9, 22), "fall"),
    ((12, 21), "winter"),
]

_METEOROLOGICAL = {
    12: "winter", 1: "winter", 2: "winter",
    3: "spring", 4: "spring", 5: "spring",
    6: "summer", 7: "summer", 8: "summer",
    9: "fall", 10: "fall", 11: "fall",
}


def _as_date(value: Optional[date_type]) -> date_type:
    if value is None:
        return date_type.today()
    # datetime (and pandas.Timestamp) first: both are date subclasses.
    if isinstance(value, datetime):
        # pandas.NaT passes the isinstance check; it is the only value unequal to itself.
        if value != value:
            raise ValueError("date must be a real date, got NaT")
        return value.date()
    if isinstance(value, date_type):
        return value
    raise TypeError(f"date must be a date or datetime, got {type(value).__name__}")


def _astronomical(day: date_type) -> str:
    key = (day.month, day.day)
    season = "winter"
    for start, label in ASTRONOMICAL_STARTS:
        if key >= start:
            season = label
    return season


def get_season(
    date: Optional[date_type] = None,
    hemisphere: str = "northern",
    kind: str = "meteorological",
) -> str:
    """Return ``"winter"``, ``"spring"``, ``"summer"`` or ``"fall"`` for a date.

    Args:
        date: Day to classify; ``datetime``/``pandas.Timestamp`` use their calendar date.
            Defaults to today.
        hemisphere: ``"northern"`` or ``"southern"``. Southern seasons are the northern
            ones shifted by half a year.
        kind: ``"meteorological"`` (whole months: Dec-Feb is winter) or
            ``"astronomical"`` (starts on Mar 20, Jun 21, Sep 22 and Dec 21; the start day
            belongs to the new season).

    Example: ``get_season(date(2024, 12, 25))`` returns ``"winter"``.
    """
    if hemisphere not in HEMISPHERES:
        raise ValueError(f"hemisphere must be one of {HEMISPHERES}, got {hemisphere!r}")
    if kind not in KINDS:
        raise ValueError(f"kind must be one of {KINDS}, got {kind!r}")
    day = _as_date(date)
    season = _METEOROLOGICAL[day.month] if kind == "meteorological" else _astronomical(day)
    if hemisphere == "southern":
        return _OPPOSITE[season]
    return season

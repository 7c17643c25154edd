"""
Unit Tests for the season classifier

Tests verify:
1. Meteorological and astronomical boundaries
2. Southern hemisphere swap
3. Totality over a full (leap) year
4. Accepted input types and validation
"""

from datetime import date, datetime, timedelta

import pandas as pd
import pytest

from journalism_climate.analysis.season import SEASONS, get_season


def _year_days(year):
    day = date(year, 1, 1)
    while day.year == year:
        yield day
        day += timedelta(days=1)


# Test Cases: Meteorological seasons

def test_christmas_is_winter():
    assert get_season(date(2024, 12, 25)) == "winter"


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2024, 1, 15), "winter"),
        (date(2024, 2, 29), "winter"),
        (date(2024, 3, 1), "spring"),
        (date(2024, 5, 31), "spring"),
        (date(2024, 6, 1), "summer"),
        (date(2024, 8, 31), "summer"),
        (date(2024, 9, 1), "fall"),
        (date(2024, 11, 30), "fall"),
        (date(2024, 12, 1), "winter"),
    ],
)
def test_meteorological_boundaries(day, expected):
    assert get_season(day) == expected


# Test Cases: Astronomical seasons

@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2023, 1, 1), "winter"),
        (date(2023, 3, 19), "winter"),
        (date(2023, 3, 20), "spring"),
        (date(2023, 6, 20), "spring"),
        (date(2023, 6, 21), "summer"),
        (date(2023, 9, 21), "summer"),
        (date(2023, 9, 22), "fall"),
        (date(2023, 12, 20), "fall"),
        (date(2023, 12, 21), "winter"),
        (date(2023, 12, 31), "winter"),
    ],
)
def test_astronomical_boundaries(day, expected):
    assert get_season(day, kind="astronomical") == expected


# Test Cases: Southern hemisphere

def test_southern_christmas_is_summer():
    assert get_season(date(2024, 12, 25), hemisphere="southern") == "summer"


def test_southern_hemisphere_is_opposite():
    opposite = {"winter": "summer", "spring": "fall", "summer": "winter", "fall": "spring"}
    for kind in ("meteorological", "astronomical"):
        for day in _year_days(2024):
            north = get_season(day, kind=kind)
            south = get_season(day, hemisphere="southern", kind=kind)
            assert south == opposite[north]


# Test Cases: Totality

@pytest.mark.parametrize("kind", ["meteorological", "astronomical"])
def test_every_day_gets_one_label_and_four_transitions(kind):
    labels = [get_season(day, kind=kind) for day in _year_days(2024)]

    assert len(labels) == 366
    assert set(labels) == set(SEASONS)
    transitions = sum(1 for prev, curr in zip(labels, labels[1:]) if prev != curr)
    assert transitions == 4, "Labels should only change at the four season starts"


def test_astronomical_transitions_happen_on_start_dates():
    days = list(_year_days(2023))
    changes = [
        curr
        for prev, curr in zip(days, days[1:])
        if get_season(prev, kind="astronomical") != get_season(curr, kind="astronomical")
    ]

    assert changes == [date(2023, 3, 20), date(2023, 6, 21), date(2023, 9, 22), date(2023, 12, 21)]


# Test Cases: Inputs

def test_accepts_datetime_and_timestamp():
    assert get_season(datetime(2024, 7, 4, 23, 59)) == "summer"
    assert get_season(pd.Timestamp("2024-04-10")) == "spring"


def test_defaults_to_today():
    assert get_season() == get_season(date.today())


def test_rejects_string_date():
    with pytest.raises(TypeError):
        get_season("2024-12-25")


def test_rejects_nat():
    with pytest.raises(ValueError, match="NaT"):
        get_season(pd.NaT)


def test_rejects_unknown_hemisphere():
    with pytest.raises(ValueError, match="hemisphere"):
        get_season(date(2024, 1, 1), hemisphere="eastern")


def test_rejects_unknown_kind():
    with pytest.raises(ValueError, match="kind"):
        get_season(date(2024, 1, 1), kind="solar")

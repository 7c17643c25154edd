"""Humidex: Environment Canada's index of how hot humid air feels."""

from __future__ import annotations

import math
import numbers

# Vapour-pressure formula diverges at T = -237.7 °C.
_MAGNUS_POLE_C = -237.7

# (lower bound, label) in ascending order; Environment Canada comfort scale.
HUMIDEX_BANDS = [
    (float("-inf"), "no discomfort"),
    (30.0, "some discomfort"),
    (40.0, "great discomfort"),
    (46.0, "dangerous"),
    (54.0, "heat stroke imminent"),
]


def _check_finite(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return float(value)


def _finalize(temperature: float, vapour_pressure_hpa: float) -> int:
    humidex = temperature + (5.0 / 9.0) * (vapour_pressure_hpa - 10.0)
    if not math.isfinite(humidex):
        raise ValueError(f"temperature {temperature} is outside the range the formula supports")
    # Dry air would give a humidex below the air temperature; report the temperature.
    # Halves round up.
    return math.floor(max(humidex, temperature) + 0.5)


def compute_humidex(temperature: float, humidity: float) -> int:
    """Compute the humidex from air temperature (°C) and relative humidity (%).

    Uses the vapour-pressure form
    ``e = 6.112 * 10 ** (7.5 T / (237.7 + T)) * H / 100`` and
    ``humidex = T + 5/9 (e - 10)``, rounded to the nearest integer (halves up). The result
    is never lower than the rounded temperature, so dry air (``humidity=0``) returns the
    temperature itself.

    Example: ``compute_humidex(30, 70)`` returns 41.

    Raises:
        ValueError: humidity outside 0-100, or temperature non-finite, at/below -237.7 °C
            or so large the formula overflows.
        TypeError: non-numeric input.
    """
    t = _check_finite(temperature, "temperature")
    h = _check_finite(humidity, "humidity")
    if not 0 <= h <= 100:
        raise ValueError(f"humidity must be between 0 and 100, got {humidity}")
    if t <= _MAGNUS_POLE_C:
        raise ValueError(f"temperature must be above {_MAGNUS_POLE_C} °C, got {temperature}")
    vapour_pressure = 6.112 * 10 ** (7.5 * t / (237.7 + t)) * h / 100.0
    return _finalize(t, vapour_pressure)


def compute_humidex_from_dewpoint(temperature: float, dewpoint: float) -> int:
    """Compute the humidex from air temperature and dew point (both °C).

    This is the formulation Environment Canada publishes for station reports; for the same
    air it agrees with :func:`compute_humidex` to within a degree.
    """
    t = _check_finite(temperature, "temperature")
    td = _check_finite(dewpoint, "dewpoint")
    if td > t:
        raise ValueError(f"dewpoint ({dewpoint}) cannot exceed temperature ({temperature})")
    if td <= -273.15:
        raise ValueError(f"dewpoint must be above absolute zero, got {dewpoint}")
    vapour_pressure = 6.11 * math.exp(5417.7530 * (1 / 273.16 - 1 / (273.15 + td)))
    return _finalize(t, vapour_pressure)


def classify_humidex(value: float) -> str:
    """Map a humidex value onto Environment Canada's degree-of-comfort scale."""
    v = _check_finite(value, "value")
    label = HUMIDEX_BANDS[0][1]
    for lower, band in HUMIDEX_BANDS:
        if v >= lower:
            label = band
    return label

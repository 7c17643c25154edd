"""Climate helpers for data journalism.

The package supports:

- humidex from temperature and relative humidity (or dew point), with comfort bands
- season labels for any date, either hemisphere, meteorological or astronomical
- daily climate records (LTCE) for Environment Canada stations

``journalism_climate.web`` re-exports only the pure helpers, for code that must stay free of
network and filesystem access. The data-access names below are resolved on first use so
importing the web surface never loads ``requests``, ``pandas`` or ``yaml``.
"""

import importlib

from journalism_climate.analysis import (
    classify_humidex,
    compute_humidex,
    compute_humidex_from_dewpoint,
    get_season,
)
from journalism_climate.errors import ClimateDataError, NetworkError, ParseError

_LAZY_ATTRS = {
    "ClimateRecord": "journalism_climate.data_access.records",
    "records_to_frame": "journalism_climate.data_access.records",
    "fetch_environment_canada_records": "journalism_climate.data_access.environment_canada",
    "fetch_environment_canada_records_async": "journalism_climate.data_access.environment_canada",
}

__all__ = [
    "ClimateDataError",
    "ClimateRecord",
    "NetworkError",
    "ParseError",
    "classify_humidex",
    "compute_humidex",
    "compute_humidex_from_dewpoint",
    "fetch_environment_canada_records",
    "fetch_environment_canada_records_async",
    "get_season",
    "records_to_frame",
]


def __getattr__(name):
    module_name = _LAZY_ATTRS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    value = getattr(importlib.import_module(module_name), name)
    globals()[name] = value
    return value


def __dir__():
    return sorted(set(globals()) | set(_LAZY_ATTRS))

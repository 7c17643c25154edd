"""Web-safe surface: pure helpers only.

Import from here in environments without network or filesystem access::

    from journalism_climate.web import compute_humidex, get_season
"""

from journalism_climate.analysis.humidex import (
    classify_humidex,
    compute_humidex,
    compute_humidex_from_dewpoint,
)
from journalism_climate.analysis.season import get_season

__all__ = [
    "compute_humidex",
    "compute_humidex_from_dewpoint",
    "classify_humidex",
    "get_season",
]

"""Pure climate calculations: humidex and season labels.

Nothing here touches the network or the filesystem, so everything is safe to expose on the
web surface.
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

"""Configuration helpers for loading YAML-driven settings.

The settings files ship inside the package under ``settings/`` so an installed copy finds
them without a checkout. The helpers return plain Python objects so callers can inspect or
override individual entries before handing them to the data-access layer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_CONFIG_DIR = PACKAGE_ROOT / "settings"


def _load_yaml(path: Path) -> Any:
    """Load a YAML file and return its contents."""
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def validate_data_catalog(data: Any, source: Any = "catalog") -> dict[str, Any]:
    """Check the structure the data-access layer relies on; ``source`` names it in errors."""
    if not isinstance(data, dict) or not isinstance(data.get("environment_canada"), dict):
        raise ValueError(f"data catalog missing expected structure: {source}")
    entry = data["environment_canada"]
    for key in ("base_url", "collections", "fields"):
        if key not in entry:
            raise ValueError(f"environment_canada entry missing '{key}': {source}")
    if not isinstance(entry["collections"], dict) or not isinstance(entry["fields"], dict):
        raise ValueError(f"environment_canada collections/fields must be mappings: {source}")
    for key in ("station_id", "month", "day"):
        if key not in entry["fields"]:
            raise ValueError(f"environment_canada fields missing '{key}': {source}")
    for name, collection in entry["collections"].items():
        if not isinstance(collection, dict) or "collection" not in collection:
            raise ValueError(f"collection '{name}' missing 'collection': {source}")
        measurements = collection.get("measurements")
        if not isinstance(measurements, dict) or not measurements:
            raise ValueError(f"collection '{name}' missing 'measurements': {source}")
        for variable, spec in measurements.items():
            if not isinstance(spec, dict) or "value" not in spec or "years" not in spec:
                raise ValueError(
                    f"measurement '{name}.{variable}' needs 'value' and 'years': {source}"
                )
    return data


def load_data_catalog(config_path: Path | None = None) -> dict[str, Any]:
    """Load data source definitions (Environment Canada endpoint, collections, fields)."""
    path = config_path or DEFAULT_CONFIG_DIR / "data_catalog.yaml"
    return validate_data_catalog(_load_yaml(path), path)


def dump_json(data: Any) -> str:
    """Pretty-print helper used in notebooks and logging."""
    return json.dumps(data, indent=2, sort_keys=True, default=str)

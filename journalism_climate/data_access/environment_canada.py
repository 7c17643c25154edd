"""Environment and Climate Change Canada daily records client.

This helper hits the MSC GeoMet OGC API directly via ``requests`` and returns the Long Term
Climate Extremes (LTCE) of one virtual station as :class:`ClimateRecord` rows. LTCE
records are indexed by calendar day, so only the month/day of the requested dates matter.

One call makes exactly one request: no paging, no retries, no caching. Every request
carries a timeout so an unreachable endpoint surfaces as :class:`NetworkError` instead of
hanging.
"""

from __future__ import annotations

import asyncio
import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Optional

import requests

from journalism_climate.config import dump_json, load_data_catalog, validate_data_catalog
from journalism_climate.data_access.records import ClimateRecord
from journalism_climate.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)

# Calendar days per leap year; a window this long covers every month/day.
FULL_YEAR_DAYS = 366

_YEAR_SPLIT = re.compile(r"[,;\s]+")


@dataclass
class MeasurementFields:
    """Provider property names for one measurement (value + years it was set)."""

    value: str
    years: str


@dataclass
class CollectionConfig:
    """One LTCE collection and the measurements read from each of its features."""

    collection: str
    measurements: dict[str, MeasurementFields]


@dataclass
class EnvironmentCanadaConfig:
    """Configuration needed to build LTCE item queries."""

    base_url: str
    collections: dict[str, CollectionConfig]
    fields: dict[str, str]
    station_param: str = "VIRTUAL_CLIMATE_ID"
    month_param: str = "LOCAL_MONTH"
    timeout_s: float = 30.0
    limit: int = 10000
    extra_params: dict[str, Any] = field(default_factory=dict)


def _coerce_config(raw: dict) -> EnvironmentCanadaConfig:
    params_raw = raw.get("params", {})
    collections = {
        name: CollectionConfig(
            collection=entry["collection"],
            measurements={
                variable: MeasurementFields(value=spec["value"], years=spec["years"])
                for variable, spec in entry["measurements"].items()
            },
        )
        for name, entry in raw["collections"].items()
    }
    return EnvironmentCanadaConfig(
        base_url=raw["base_url"],
        collections=collections,
        fields=dict(raw["fields"]),
        station_param=params_raw.get("station", "VIRTUAL_CLIMATE_ID"),
        month_param=params_raw.get("month", "LOCAL_MONTH"),
        timeout_s=float(raw.get("timeout_s", 30)),
        limit=int(raw.get("limit", 10000)),
        extra_params=dict(params_raw.get("extra", {})),
    )


def _resolve_config(catalog: Optional[dict | EnvironmentCanadaConfig]) -> EnvironmentCanadaConfig:
    if isinstance(catalog, EnvironmentCanadaConfig):
        return catalog
    if catalog is None:
        raw = load_data_catalog()
    elif isinstance(catalog, dict):
        # Accept either the full catalog or its environment_canada entry.
        raw = catalog if "environment_canada" in catalog else {"environment_canada": catalog}
        validate_data_catalog(raw, "catalog argument")
    else:
        raise TypeError(
            f"catalog must be a dict or EnvironmentCanadaConfig, got {type(catalog).__name__}"
        )
    return _coerce_config(raw["environment_canada"])


def _as_date(value: Any, name: str) -> date:
    # pandas.Timestamp is a datetime subclass, so it lands here too.
    if isinstance(value, datetime):
        # NaT is the only datetime that is not equal to itself.
        if value != value:
            raise ValueError(f"{name} must be a real date, got NaT")
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"{name} must be a date, got {type(value).__name__}")


def _calendar_days(start: date, end: date) -> Optional[set[tuple[int, int]]]:
    """Return the (month, day) pairs covered by ``start..end``, or None for a full year."""
    span = (end - start).days + 1
    if span >= FULL_YEAR_DAYS:
        return None
    return {
        ((start + timedelta(days=offset)).month, (start + timedelta(days=offset)).day)
        for offset in range(span)
    }


def _build_params(
    cfg: EnvironmentCanadaConfig,
    station_id: str,
    window: Optional[set[tuple[int, int]]],
) -> dict:
    params = {
        cfg.station_param: station_id,
        "f": "json",
        "limit": cfg.limit,
        **cfg.extra_params,
    }
    if window:
        months = {month for month, _ in window}
        if len(months) == 1:
            params[cfg.month_param] = months.pop()
    return params


def _to_float(raw: Any, name: str) -> Optional[float]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ParseError(f"Property {name} is a boolean, expected a number")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Property {name} is not numeric: {raw!r}") from exc


def _to_int(raw: Any, name: str) -> int:
    if raw is None or isinstance(raw, bool):
        raise ParseError(f"Property {name} is missing or not an integer: {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Property {name} is not an integer: {raw!r}") from exc


def _parse_years(raw: Any, name: str) -> tuple[int, ...]:
    """Years fields come back as an int, a list, or a delimited string depending on the record."""
    if raw is None or raw == "":
        return ()
    if isinstance(raw, (list, tuple)):
        items = list(raw)
    elif isinstance(raw, str):
        items = [item for item in _YEAR_SPLIT.split(raw.strip()) if item]
    else:
        items = [raw]
    return tuple(sorted(_to_int(item, name) for item in items))


def _parse_year_bound(raw: Any, name: str) -> Optional[int]:
    """Period-of-record bounds may be a bare year or an ISO timestamp."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, str):
        match = re.match(r"\s*(\d{4})", raw)
        if not match:
            raise ParseError(f"Property {name} does not start with a year: {raw!r}")
        return int(match.group(1))
    return _to_int(raw, name)


def _parse_coordinates(feature: dict) -> tuple[Optional[float], Optional[float]]:
    geometry = feature.get("geometry") or {}
    coords = geometry.get("coordinates") if isinstance(geometry, dict) else None
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        return None, None
    # GeoJSON order is (longitude, latitude).
    return _to_float(coords[1], "latitude"), _to_float(coords[0], "longitude")


def _parse_features(
    payload: Any,
    cfg: EnvironmentCanadaConfig,
    collection: CollectionConfig,
    window: Optional[set[tuple[int, int]]],
) -> list[ClimateRecord]:
    if not isinstance(payload, dict) or payload.get("type") != "FeatureCollection":
        raise ParseError("Expected a GeoJSON FeatureCollection")
    features = payload.get("features")
    if not isinstance(features, list):
        raise ParseError("FeatureCollection has no 'features' list")

    names = cfg.fields
    records: list[ClimateRecord] = []
    for feature in features:
        props = feature.get("properties") if isinstance(feature, dict) else None
        if not isinstance(props, dict):
            raise ParseError("Feature without a 'properties' object")

        station_id = props.get(names["station_id"])
        if not station_id:
            raise ParseError(f"Feature missing {names['station_id']}")
        month = _to_int(props.get(names["month"]), names["month"])
        day = _to_int(props.get(names["day"]), names["day"])
        if window is not None and (month, day) not in window:
            continue

        latitude, longitude = _parse_coordinates(feature)
        base = {
            "station_id": str(station_id),
            "station_name": str(props.get(names.get("station_name", ""), "") or ""),
            "province": props.get(names.get("province", "")),
            "latitude": latitude,
            "longitude": longitude,
            "month": month,
            "day": day,
            "record_begin": _parse_year_bound(
                props.get(names.get("record_begin", "")), "record_begin"
            ),
            "record_end": _parse_year_bound(props.get(names.get("record_end", "")), "record_end"),
        }
        for variable, spec in collection.measurements.items():
            value = _to_float(props.get(spec.value), spec.value)
            if value is None:
                # Stations don't carry every measurement; absent values are not records.
                continue
            records.append(
                ClimateRecord(
                    variable=variable,
                    value=value,
                    years=_parse_years(props.get(spec.years), spec.years),
                    **base,
                )
            )

    records.sort(key=lambda rec: (rec.month, rec.day, rec.variable))
    return records


def fetch_environment_canada_records(
    station_id: str,
    start: date,
    end: date,
    variable: str = "temperature",
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    catalog: Optional[dict | EnvironmentCanadaConfig] = None,
) -> list[ClimateRecord]:
    """Fetch daily climate records for an LTCE virtual station.

    Args:
        station_id: Virtual climate ID of the station.
        start: First calendar day of interest (inclusive).
        end: Last calendar day of interest (inclusive). Ranges of a full year or longer
            return every day; ranges crossing New Year's wrap as expected.
        variable: ``"temperature"``, ``"precipitation"`` or ``"snowfall"`` (any key of the
            catalog's ``collections``).
        session: Optional ``requests.Session`` to reuse connections.
        timeout: Seconds to wait for the provider. Defaults to the catalog's ``timeout_s``.
        catalog: Alternate catalog (dict or parsed config) instead of the packaged YAML.

    Returns:
        Records sorted by month, day and measurement. Empty when nothing matches.

    Raises:
        ValueError: Blank station, unknown variable, ``end`` before ``start`` or bad timeout.
        TypeError: ``start``/``end`` are not dates.
        NetworkError: Connection failure, timeout or HTTP error status.
        ParseError: Response is not JSON or does not match the expected schema.
    """
    if not isinstance(station_id, str) or not station_id.strip():
        raise ValueError("station_id must be a non-empty string")
    cfg = _resolve_config(catalog)
    if variable not in cfg.collections:
        expected = ", ".join(sorted(cfg.collections))
        raise ValueError(f"Unknown variable {variable!r}; expected one of: {expected}")
    start_day = _as_date(start, "start")
    end_day = _as_date(end, "end")
    if end_day < start_day:
        raise ValueError(f"end ({end_day}) is before start ({start_day})")
    wait = cfg.timeout_s if timeout is None else timeout
    if not math.isfinite(wait) or wait <= 0:
        raise ValueError(f"timeout must be a positive finite number, got {wait}")

    collection = cfg.collections[variable]
    window = _calendar_days(start_day, end_day)
    params = _build_params(cfg, station_id.strip(), window)
    url = f"{cfg.base_url.rstrip('/')}/collections/{collection.collection}/items"
    http = session or requests

    logger.info(f"Fetching {variable} records for station {station_id} ({start_day} to {end_day})")
    logger.debug(f"GET {url} params={dump_json(params)}")
    try:
        resp = http.get(url, params=params, timeout=wait)
        resp.raise_for_status()
    except requests.exceptions.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        logger.error(f"HTTP error fetching Environment Canada records: {exc}")
        raise NetworkError(f"HTTP {status} from {url}", url=url, status_code=status) from exc
    except requests.exceptions.RequestException as exc:
        logger.error(f"Error fetching Environment Canada records: {exc}")
        raise NetworkError(f"Request to {url} failed: {exc}", url=url) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.error(f"Malformed response from {url}: {exc}")
        raise ParseError(f"Response from {url} is not valid JSON") from exc

    records = _parse_features(payload, cfg, collection, window)
    if not records:
        logger.warning(f"No {variable} records for station {station_id} between {start_day} and {end_day}")
    return records


async def fetch_environment_canada_records_async(
    station_id: str,
    start: date,
    end: date,
    variable: str = "temperature",
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    catalog: Optional[dict | EnvironmentCanadaConfig] = None,
) -> list[ClimateRecord]:
    """Awaitable variant of :func:`fetch_environment_canada_records`.

    The blocking request runs in a worker thread so the event loop keeps serving other
    tasks; the timeout still bounds the wait.
    """
    return await asyncio.to_thread(
        fetch_environment_canada_records,
        station_id,
        start,
        end,
        variable,
        session=session,
        timeout=timeout,
        catalog=catalog,
    )

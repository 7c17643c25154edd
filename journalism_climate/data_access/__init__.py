"""Data access layer for external climate records."""

from journalism_climate.data_access.environment_canada import (
    fetch_environment_canada_records,
    fetch_environment_canada_records_async,
)
from journalism_climate.data_access.records import ClimateRecord, records_to_frame

__all__ = [
    "ClimateRecord",
    "fetch_environment_canada_records",
    "fetch_environment_canada_records_async",
    "records_to_frame",
]

"""Exceptions raised by the data-access layer.

Pure helpers (humidex, seasons) only raise ``ValueError``/``TypeError`` for bad input.
Fetchers raise one of the classes below so callers can tell a transport problem from a
provider that answered with something unreadable.
"""

from __future__ import annotations

from typing import Optional


class ClimateDataError(RuntimeError):
    """Base class for failures while retrieving external climate data."""


class NetworkError(ClimateDataError):
    """The request never produced a usable HTTP response (connection, timeout, HTTP status)."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(ClimateDataError, ValueError):
    """The provider answered, but the payload does not match the expected schema."""

"""Small helpers shared across the package."""

from journalism_climate.helpers.sleep import sleep

__all__ = ["sleep"]

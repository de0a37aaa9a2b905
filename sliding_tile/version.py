"""
Single source of truth for the bridge's display version.

Reads installed package metadata once at import time. Used for API and
OpenAPI metadata only; the app-info channel queries metadata per request.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["VERSION", "APP_NAME", "APP_ID", "DISTRIBUTION_NAME"]

APP_NAME = "Sliding Tile"
APP_ID = "com.fgtp.sliding_tile"
DISTRIBUTION_NAME = "sliding-tile"


def _read_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"  # Running from a source checkout


VERSION = _read_version()

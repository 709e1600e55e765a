"""Core configuration, constants and errors."""

from tidetimes.core.config import Settings, get_settings
from tidetimes.core.errors import (
    InvalidDateRange,
    LocationSearchError,
    MalformedSeries,
    MissingAPIKey,
    TideAPIError,
    TideServiceError,
    TideTimesError,
)

__all__ = [
    "InvalidDateRange",
    "LocationSearchError",
    "MalformedSeries",
    "MissingAPIKey",
    "Settings",
    "TideAPIError",
    "TideServiceError",
    "TideTimesError",
    "get_settings",
]

"""Tide and location data sources."""

from tidetimes.data.location import Location, search_locations
from tidetimes.data.store import LocationStore
from tidetimes.data.tide import (
    TideKind,
    TideSample,
    classify_by_mean,
    fetch_tide_samples,
)

__all__ = [
    "Location",
    "LocationStore",
    "TideKind",
    "TideSample",
    "classify_by_mean",
    "fetch_tide_samples",
    "search_locations",
]

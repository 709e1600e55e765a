"""Tide height predictions from the WorldTides API."""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum

import httpx
import numpy as np
from pydantic import BaseModel, ValidationError

from tidetimes.core.config import WorldTidesSettings, get_settings
from tidetimes.core.errors import InvalidDateRange, MissingAPIKey, TideAPIError
from tidetimes.data.location import Location

logger = logging.getLogger(__name__)


class TideKind(str, Enum):
    """Coarse classification of a sample relative to its batch."""

    HIGH = "high"
    LOW = "low"


class TideSample(BaseModel):
    """One timestamped tide height."""

    timestamp: datetime
    height: float  # meters
    kind: TideKind


class TideHeight(BaseModel):
    """Raw height entry from the API."""

    dt: int  # epoch seconds, UTC
    height: float


class TideResponse(BaseModel):
    """WorldTides response body (heights request only)."""

    status: int = 200
    error: str | None = None
    heights: list[TideHeight] = []


def classify_by_mean(heights: list[float]) -> list[TideKind]:
    """Mark each height HIGH if strictly above the batch mean, else LOW.

    This is a batch-relative threshold, not a turning-point detector.
    """
    if not heights:
        return []
    mean = float(np.mean(heights))
    return [TideKind.HIGH if h > mean else TideKind.LOW for h in heights]


def parse_tide_response(payload: dict) -> list[TideSample]:
    """Turn a decoded WorldTides body into ordered samples.

    Entries repeating an earlier timestamp are dropped; the first one wins.

    Raises:
        TideAPIError: The body reports an error or does not parse.
    """
    try:
        response = TideResponse.model_validate(payload)
    except ValidationError as e:
        raise TideAPIError(f"Malformed tide response: {e.error_count()} invalid field(s)") from e

    if response.error or response.status != 200:
        raise TideAPIError(response.error or "Tide service error", status_code=response.status)

    entries = []
    for h in sorted(response.heights, key=lambda h: h.dt):
        if entries and entries[-1].dt == h.dt:
            logger.warning("Dropping duplicate tide entry at dt=%d", h.dt)
            continue
        entries.append(h)
    kinds = classify_by_mean([h.height for h in entries])

    return [
        TideSample(
            timestamp=datetime.fromtimestamp(h.dt, tz=timezone.utc),
            height=h.height,
            kind=kind,
        )
        for h, kind in zip(entries, kinds)
    ]


def prediction_window(now: datetime, window_hours: int) -> tuple[datetime, datetime]:
    """Return the [now - window, now + window] range."""
    start = now - timedelta(hours=window_hours)
    end = now + timedelta(hours=window_hours)
    if end <= start:
        raise InvalidDateRange(f"Empty prediction window: {start} to {end}")
    return start, end


async def fetch_tide_samples(
    location: Location,
    now: datetime | None = None,
    settings: WorldTidesSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[TideSample]:
    """Fetch tide heights around `now` for a location.

    Args:
        location: Place to predict for.
        now: Center of the window. Defaults to the current time.
        settings: API settings. Defaults to global settings.
        client: Optional shared client (tests inject a mock transport here).

    Returns:
        Samples ordered by timestamp.

    Raises:
        MissingAPIKey: No API key configured.
        InvalidDateRange: Window is empty.
        TideAPIError: Request failed or the response was unusable.
    """
    if settings is None:
        settings = get_settings().worldtides

    if not settings.api_key:
        raise MissingAPIKey("Set WORLDTIDES_API_KEY to fetch tide predictions")

    if now is None:
        now = datetime.now(timezone.utc)

    start, end = prediction_window(now, settings.window_hours)

    params = {
        "heights": "",
        "lat": location.latitude,
        "lon": location.longitude,
        "start": int(start.timestamp()),
        "length": int((end - start).total_seconds()),
        "key": settings.api_key,
    }

    logger.debug("Fetching tides for %s (%s to %s)", location.name, start, end)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.timeout_s) as own_client:
                response = await own_client.get(settings.base_url, params=params)
        else:
            response = await client.get(settings.base_url, params=params)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as e:
        logger.warning("Tide request failed: HTTP %s", e.response.status_code)
        raise TideAPIError(
            f"Tide service returned HTTP {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        logger.warning("Tide request failed: %s", e)
        raise TideAPIError(f"Could not reach tide service: {e}") from e
    except ValueError as e:
        raise TideAPIError("Tide service returned invalid JSON") from e

    samples = parse_tide_response(payload)
    logger.debug("Received %d tide samples", len(samples))
    return samples

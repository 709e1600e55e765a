"""Place search via OpenStreetMap Nominatim."""

import logging
from uuid import UUID, uuid4

import httpx
from pydantic import BaseModel, Field

from tidetimes.core.config import GeocodingSettings, get_settings
from tidetimes.core.errors import LocationSearchError

logger = logging.getLogger(__name__)


class Location(BaseModel):
    """A named geographic coordinate."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    latitude: float
    longitude: float


def _to_location(item: dict) -> Location:
    name = item.get("name") or item.get("display_name") or "Unknown Location"
    return Location(
        name=name,
        latitude=float(item["lat"]),
        longitude=float(item["lon"]),
    )


async def search_locations(
    query: str,
    settings: GeocodingSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Location]:
    """Search places matching a free-text query.

    Args:
        query: Address or place name fragment.
        settings: Geocoding settings. Defaults to global settings.
        client: Optional shared client.

    Returns:
        Matching locations in service ranking order, without duplicate
        coordinates. An empty query returns an empty list.
    """
    query = query.strip()
    if not query:
        return []

    if settings is None:
        settings = get_settings().geocoding

    params = {
        "q": query,
        "format": "jsonv2",
        "limit": settings.limit,
    }
    headers = {"User-Agent": settings.user_agent}
    url = f"{settings.base_url}/search"

    logger.debug("Searching places for %r", query)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.timeout_s) as own_client:
                response = await own_client.get(url, params=params, headers=headers)
        else:
            response = await client.get(url, params=params, headers=headers)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as e:
        logger.warning("Location search failed: %s", e)
        raise LocationSearchError(f"Location search failed: {e}") from e
    except ValueError as e:
        raise LocationSearchError("Location search returned invalid JSON") from e

    results: list[Location] = []
    seen: set[tuple[float, float]] = set()
    for item in data:
        try:
            location = _to_location(item)
        except (KeyError, TypeError, ValueError):
            logger.debug("Skipping unparseable search result: %r", item)
            continue
        key = (location.latitude, location.longitude)
        if key in seen:
            continue
        seen.add(key)
        results.append(location)

    return results

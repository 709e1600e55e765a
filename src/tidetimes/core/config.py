"""Configuration and settings for the tide app."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tidetimes.core.constants import (
    DEFAULT_WINDOW_HOURS,
    GRID_HORIZONTAL_LINES,
    LABEL_OFFSET,
    MARKER_RADIUS,
)


class WorldTidesSettings(BaseSettings):
    """WorldTides prediction API."""

    model_config = SettingsConfigDict(env_prefix="WORLDTIDES_")

    api_key: str = ""
    base_url: str = "https://www.worldtides.info/api/v3"

    # Hours either side of now
    window_hours: int = Field(default=DEFAULT_WINDOW_HOURS, gt=0)

    timeout_s: float = 30.0


class GeocodingSettings(BaseSettings):
    """Place search via OpenStreetMap Nominatim."""

    model_config = SettingsConfigDict(env_prefix="GEOCODING_")

    base_url: str = "https://nominatim.openstreetmap.org"

    # Nominatim's usage policy requires an identifying user agent
    user_agent: str = "tidetimes/0.1 (https://github.com/tidetimes/tidetimes)"

    limit: int = Field(default=10, gt=0)
    timeout_s: float = 15.0


class ChartSettings(BaseSettings):
    """Chart layout."""

    model_config = SettingsConfigDict(env_prefix="CHART_")

    width: float = 800.0
    height: float = 300.0
    grid_lines: int = GRID_HORIZONTAL_LINES
    label_offset: float = LABEL_OFFSET
    marker_radius: float = MARKER_RADIUS

    # IANA zone for time labels; None = device local time
    timezone: str | None = None


class StoreSettings(BaseSettings):
    """Persisted app state."""

    model_config = SettingsConfigDict(env_prefix="STORE_")

    state_file: Path = Path("~/.config/tidetimes/location.json").expanduser()


class Settings(BaseSettings):
    """Master configuration aggregating all subsystems."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    worldtides: WorldTidesSettings = Field(default_factory=WorldTidesSettings)
    geocoding: GeocodingSettings = Field(default_factory=GeocodingSettings)
    chart: ChartSettings = Field(default_factory=ChartSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)

    debug: bool = False


def get_settings() -> Settings:
    """Load settings from environment and .env file."""
    return Settings()

"""App controller tying location, tide data and chart together."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

import httpx

from tidetimes.chart.interpolate import ensure_increasing
from tidetimes.chart.mapping import Viewport
from tidetimes.chart.scene import TideChart, compose_chart
from tidetimes.core.config import Settings, get_settings
from tidetimes.core.errors import TideTimesError
from tidetimes.data.location import Location
from tidetimes.data.store import LocationStore
from tidetimes.data.tide import TideSample, fetch_tide_samples

logger = logging.getLogger(__name__)


@dataclass
class TideTimesApp:
    """Holds the selected location, its tide samples and the load state.

    The store and settings are injected so nothing depends on process-wide
    state.
    """

    settings: Settings
    store: LocationStore

    selected_location: Location | None = None
    samples: list[TideSample] = field(default_factory=list)
    is_loading: bool = False
    error_message: str | None = None

    @classmethod
    def create(cls, settings: Settings | None = None) -> "TideTimesApp":
        """Create an app using the configured state file."""
        if settings is None:
            settings = get_settings()
        return cls(settings=settings, store=LocationStore.create(settings.store))

    async def start(self, client: httpx.AsyncClient | None = None) -> None:
        """Restore the saved location and load its tides."""
        self.selected_location = self.store.load()
        if self.selected_location is not None:
            await self.load_tide_data(self.selected_location, client=client)

    async def select_location(
        self, location: Location, client: httpx.AsyncClient | None = None
    ) -> None:
        """Persist a new selection and load its tides.

        Samples from a previous location are discarded even if the load fails.
        """
        if location != self.selected_location:
            self.samples = []
        self.selected_location = location
        self.store.save(location)
        await self.load_tide_data(location, client=client)

    async def load_tide_data(
        self,
        location: Location,
        now: datetime | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Fetch samples for a location, recording any failure as a message."""
        self.is_loading = True
        self.error_message = None
        try:
            samples = await fetch_tide_samples(
                location,
                now=now,
                settings=self.settings.worldtides,
                client=client,
            )
            ensure_increasing(samples)
            self.samples = samples
        except (TideTimesError, httpx.HTTPError) as e:
            logger.warning("Tide load failed for %s: %s", location.name, e)
            self.error_message = str(e) or "Could not load tide data"
        finally:
            self.is_loading = False

    @property
    def timezone(self) -> ZoneInfo | None:
        name = self.settings.chart.timezone
        return ZoneInfo(name) if name else None

    def chart(self, viewport: Viewport | None = None, now: datetime | None = None) -> TideChart:
        """Compose the chart for the current samples."""
        cfg = self.settings.chart
        if viewport is None:
            viewport = Viewport(width=cfg.width, height=cfg.height)
        return compose_chart(
            self.samples,
            viewport,
            now=now,
            tz=self.timezone,
            grid_lines=cfg.grid_lines,
            label_offset=cfg.label_offset,
        )

"""Map tide samples into pixel-space plot coordinates."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

import numpy as np

from tidetimes.data.tide import TideSample

Origin = Literal["top", "bottom"]


@dataclass(frozen=True)
class PlotPoint:
    """A sample mapped into pixel space."""

    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    """Pixel rectangle available for drawing.

    With origin="top" (screen space) y grows downward; with origin="bottom"
    (Cartesian, e.g. matplotlib data coordinates) y grows upward. Either way
    higher tides are drawn higher up.
    """

    width: float
    height: float
    origin: Origin = "top"


@dataclass(frozen=True)
class SeriesScale:
    """Time and height normalization derived from a sample series."""

    t0: datetime
    time_span_s: float
    min_height: float
    height_range: float

    @classmethod
    def from_samples(cls, samples: Sequence[TideSample]) -> "SeriesScale":
        heights = np.array([s.height for s in samples], dtype=np.float64)
        min_height = float(heights.min())
        height_range = float(heights.max()) - min_height
        t0 = samples[0].timestamp
        time_span_s = (samples[-1].timestamp - t0).total_seconds()

        # Flat tide or single sample
        if height_range == 0:
            height_range = 1.0
        if time_span_s == 0:
            time_span_s = 1.0

        return cls(
            t0=t0,
            time_span_s=time_span_s,
            min_height=min_height,
            height_range=height_range,
        )

    def fraction_x(self, when: datetime) -> float:
        return (when - self.t0).total_seconds() / self.time_span_s

    def fraction_y(self, height: float) -> float:
        return (height - self.min_height) / self.height_range

    def to_point(self, when: datetime, height: float, viewport: Viewport) -> PlotPoint:
        x = viewport.width * self.fraction_x(when)
        level = self.fraction_y(height)
        if viewport.origin == "top":
            y = viewport.height * (1 - level)
        else:
            y = viewport.height * level
        return PlotPoint(x=float(x), y=float(y))


def map_points(samples: Sequence[TideSample], viewport: Viewport) -> list[PlotPoint]:
    """Map samples to plot points, one per sample, in order.

    An empty series maps to an empty list (nothing to draw).
    """
    if not samples:
        return []

    scale = SeriesScale.from_samples(samples)
    return [scale.to_point(s.timestamp, s.height, viewport) for s in samples]


def map_instant(
    samples: Sequence[TideSample],
    viewport: Viewport,
    when: datetime,
    height: float,
) -> PlotPoint | None:
    """Map an arbitrary (time, height) pair onto the series' scale."""
    if not samples:
        return None
    return SeriesScale.from_samples(samples).to_point(when, height, viewport)

"""Compose the full tide chart as drawable data."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo

from tidetimes.chart.curve import LabelPlacement, Path, build_curve, build_grid, build_labels
from tidetimes.chart.interpolate import current_height, ensure_increasing
from tidetimes.chart.mapping import PlotPoint, Viewport, map_instant, map_points
from tidetimes.core.constants import GRID_HORIZONTAL_LINES, LABEL_OFFSET
from tidetimes.data.tide import TideSample


@dataclass
class TideChart:
    """Everything the presentation layer needs to draw one frame."""

    viewport: Viewport
    points: list[PlotPoint] = field(default_factory=list)
    curve: Path = field(default_factory=Path)
    grid: Path = field(default_factory=Path)
    marker: PlotPoint | None = None
    current_height: float | None = None
    labels: list[LabelPlacement] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.points


def compose_chart(
    samples: Sequence[TideSample],
    viewport: Viewport,
    now: datetime | None = None,
    tz: tzinfo | None = None,
    grid_lines: int = GRID_HORIZONTAL_LINES,
    label_offset: float = LABEL_OFFSET,
) -> TideChart:
    """Build curve, grid, live marker and labels for a sample series.

    Raises:
        MalformedSeries: Timestamps are not strictly increasing.
    """
    ensure_increasing(samples)

    if now is None:
        now = datetime.now(timezone.utc)

    points = map_points(samples, viewport)
    height = current_height(samples, now)
    marker = map_instant(samples, viewport, now, height) if height is not None else None

    return TideChart(
        viewport=viewport,
        points=points,
        curve=build_curve(points),
        grid=build_grid(points, viewport, lines=grid_lines),
        marker=marker,
        current_height=height,
        labels=build_labels(points, samples, viewport, tz=tz, offset=label_offset),
    )

"""Curve, grid and label geometry for the tide chart."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from tidetimes.chart.mapping import PlotPoint, Viewport
from tidetimes.core.constants import (
    GRID_HORIZONTAL_LINES,
    HEIGHT_LABEL_FORMAT,
    LABEL_OFFSET,
    TIME_LABEL_FORMAT,
)
from tidetimes.data.tide import TideKind, TideSample


@dataclass(frozen=True)
class MoveTo:
    point: PlotPoint


@dataclass(frozen=True)
class LineTo:
    point: PlotPoint


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier segment from the current point to `point`."""

    control1: PlotPoint
    control2: PlotPoint
    point: PlotPoint


PathCommand = MoveTo | LineTo | CurveTo


@dataclass
class Path:
    """Ordered drawing commands."""

    commands: list[PathCommand] = field(default_factory=list)

    def move_to(self, point: PlotPoint) -> None:
        self.commands.append(MoveTo(point))

    def line_to(self, point: PlotPoint) -> None:
        self.commands.append(LineTo(point))

    def curve_to(self, point: PlotPoint, control1: PlotPoint, control2: PlotPoint) -> None:
        self.commands.append(CurveTo(control1=control1, control2=control2, point=point))

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @property
    def curves(self) -> list[CurveTo]:
        return [c for c in self.commands if isinstance(c, CurveTo)]


@dataclass(frozen=True)
class LabelPlacement:
    """Text block drawn above a plotted sample."""

    x: float
    y: float
    time_text: str
    height_text: str
    kind: TideKind

    @property
    def kind_text(self) -> str:
        return self.kind.value


def build_curve(points: Sequence[PlotPoint]) -> Path:
    """Smooth the points into a chain of cubic segments.

    Control points sit at one and two thirds of the horizontal gap, holding
    the previous and next y respectively. This is not a true spline and can
    overshoot visually on sharp reversals.
    """
    path = Path()
    if len(points) < 2:
        return path

    path.move_to(points[0])
    for previous, point in zip(points, points[1:]):
        dx = point.x - previous.x
        control1 = PlotPoint(x=previous.x + dx / 3, y=previous.y)
        control2 = PlotPoint(x=previous.x + 2 * dx / 3, y=point.y)
        path.curve_to(point, control1, control2)

    return path


def build_grid(
    points: Sequence[PlotPoint],
    viewport: Viewport,
    lines: int = GRID_HORIZONTAL_LINES,
) -> Path:
    """Evenly spaced horizontal guides plus one vertical guide per point."""
    path = Path()

    spacing = viewport.height / (lines + 1)
    for i in range(1, lines + 1):
        y = spacing * i
        path.move_to(PlotPoint(0.0, y))
        path.line_to(PlotPoint(viewport.width, y))

    for point in points:
        path.move_to(PlotPoint(point.x, 0.0))
        path.line_to(PlotPoint(point.x, viewport.height))

    return path


def format_time(when: datetime, tz: tzinfo | None = None) -> str:
    """24-hour HH:MM in `tz`, or the device's local zone."""
    return when.astimezone(tz).strftime(TIME_LABEL_FORMAT)


def format_height(height: float) -> str:
    return HEIGHT_LABEL_FORMAT.format(height)


def build_labels(
    points: Sequence[PlotPoint],
    samples: Sequence[TideSample],
    viewport: Viewport,
    tz: tzinfo | None = None,
    offset: float = LABEL_OFFSET,
) -> list[LabelPlacement]:
    """One label per (point, sample) pair, raised `offset` above the point."""
    # Screen space grows downward
    dy = -offset if viewport.origin == "top" else offset

    return [
        LabelPlacement(
            x=point.x,
            y=point.y + dy,
            time_text=format_time(sample.timestamp, tz),
            height_text=format_height(sample.height),
            kind=sample.kind,
        )
        for point, sample in zip(points, samples)
    ]

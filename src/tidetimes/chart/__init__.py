"""Tide chart geometry.

Pure functions of their inputs: nothing here performs I/O or keeps state
between draws.
"""

from tidetimes.chart.curve import (
    CurveTo,
    LabelPlacement,
    LineTo,
    MoveTo,
    Path,
    build_curve,
    build_grid,
    build_labels,
)
from tidetimes.chart.interpolate import current_height, ensure_increasing
from tidetimes.chart.mapping import PlotPoint, Viewport, map_instant, map_points
from tidetimes.chart.scene import TideChart, compose_chart

__all__ = [
    "CurveTo",
    "LabelPlacement",
    "LineTo",
    "MoveTo",
    "Path",
    "PlotPoint",
    "TideChart",
    "Viewport",
    "build_curve",
    "build_grid",
    "build_labels",
    "compose_chart",
    "current_height",
    "ensure_increasing",
    "map_instant",
    "map_points",
]

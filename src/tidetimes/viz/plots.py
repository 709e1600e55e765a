"""Matplotlib rendering of a composed tide chart."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle, PathPatch
from matplotlib.path import Path as MplPath

from tidetimes.chart.curve import CurveTo, LineTo, MoveTo, Path as ChartPath
from tidetimes.chart.scene import TideChart
from tidetimes.core.constants import MARKER_RADIUS
from tidetimes.data.tide import TideKind

KIND_COLORS = {
    TideKind.HIGH: "tab:blue",
    TideKind.LOW: "tab:red",
}


def to_mpl_path(path: ChartPath) -> MplPath:
    """Convert chart drawing commands to a matplotlib Path."""
    vertices = []
    codes = []
    for command in path:
        if isinstance(command, MoveTo):
            vertices.append((command.point.x, command.point.y))
            codes.append(MplPath.MOVETO)
        elif isinstance(command, LineTo):
            vertices.append((command.point.x, command.point.y))
            codes.append(MplPath.LINETO)
        elif isinstance(command, CurveTo):
            vertices.extend([
                (command.control1.x, command.control1.y),
                (command.control2.x, command.control2.y),
                (command.point.x, command.point.y),
            ])
            codes.extend([MplPath.CURVE4] * 3)

    if not vertices:
        return MplPath(np.empty((0, 2)))
    return MplPath(np.array(vertices, dtype=np.float64), codes)


def plot_tide_chart(
    chart: TideChart,
    title: str | None = None,
    marker_radius: float = MARKER_RADIUS,
    save_path: Path | None = None,
    dpi: int = 100,
) -> Figure:
    """Draw a tide chart composed in Cartesian (origin="bottom") space.

    Args:
        chart: Output of compose_chart.
        title: Optional title, usually the location name.
        marker_radius: Live marker radius in chart pixels.
        save_path: Optional path to save figure.
        dpi: Figure resolution; the viewport is sized in pixels.

    Returns:
        Matplotlib figure.
    """
    viewport = chart.viewport
    if viewport.origin != "bottom":
        raise ValueError("plot_tide_chart expects a chart composed with origin='bottom'")

    # labels may sit outside the viewport by the configured offset
    overhang = max(
        [marker_radius]
        + [label.y - viewport.height for label in chart.labels]
        + [-label.y for label in chart.labels]
    )
    pad = overhang + 20
    fig, ax = plt.subplots(
        figsize=((viewport.width + 2 * pad) / dpi, (viewport.height + 2 * pad) / dpi),
        dpi=dpi,
    )

    if chart.is_empty:
        ax.text(
            0.5, 0.5, "No tide data available",
            transform=ax.transAxes,
            ha="center",
            va="center",
        )
    else:
        ax.add_patch(PathPatch(
            to_mpl_path(chart.grid),
            fill=False,
            edgecolor="gray",
            alpha=0.3,
            linewidth=1,
        ))
        if not chart.curve.is_empty:
            ax.add_patch(PathPatch(
                to_mpl_path(chart.curve),
                fill=False,
                edgecolor="tab:blue",
                linewidth=2,
            ))

        if chart.marker is not None:
            ax.add_patch(Circle(
                (chart.marker.x, chart.marker.y),
                radius=marker_radius,
                color="tab:red",
                zorder=5,
            ))

        for label in chart.labels:
            ax.text(
                label.x, label.y,
                f"{label.time_text}\n{label.height_text}",
                ha="center",
                va="bottom",
                fontsize=8,
            )
            ax.text(
                label.x, label.y,
                label.kind_text,
                ha="center",
                va="top",
                fontsize=8,
                color=KIND_COLORS[label.kind],
            )

    ax.set_xlim(-pad, viewport.width + pad)
    ax.set_ylim(-pad, viewport.height + pad)
    ax.set_aspect("equal")
    ax.axis("off")

    if title:
        ax.set_title(title)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    return fig

"""Visualization of tide charts."""

from tidetimes.viz.plots import plot_tide_chart, to_mpl_path

__all__ = [
    "plot_tide_chart",
    "to_mpl_path",
]

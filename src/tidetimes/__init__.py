"""Tide Times.

Tide height predictions for a selected place, drawn as a smoothed curve with
high/low markers and a live marker for the current tide.
"""

__version__ = "0.1.0"

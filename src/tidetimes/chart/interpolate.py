"""Current tide height by linear interpolation between samples."""

from collections.abc import Sequence
from datetime import datetime

from tidetimes.core.errors import MalformedSeries
from tidetimes.data.tide import TideSample


def ensure_increasing(samples: Sequence[TideSample]) -> None:
    """Raise MalformedSeries unless timestamps strictly increase."""
    for prev, sample in zip(samples, samples[1:]):
        if sample.timestamp <= prev.timestamp:
            raise MalformedSeries(
                f"Sample timestamps must strictly increase: "
                f"{sample.timestamp.isoformat()} follows {prev.timestamp.isoformat()}"
            )


def current_height(samples: Sequence[TideSample], now: datetime) -> float | None:
    """Estimate the tide height at `now`.

    Returns None outside the sampled time range; there is no extrapolation.

    Raises:
        MalformedSeries: Timestamps are not strictly increasing.
    """
    if not samples:
        return None

    ensure_increasing(samples)

    if now == samples[-1].timestamp:
        return samples[-1].height

    after_index = next(
        (i for i, s in enumerate(samples) if s.timestamp > now),
        None,
    )
    if after_index is None or after_index == 0:
        return None

    before = samples[after_index - 1]
    after = samples[after_index]

    total = (after.timestamp - before.timestamp).total_seconds()
    if total <= 0:
        raise MalformedSeries("Bracketing samples share a timestamp")

    progress = (now - before.timestamp).total_seconds() / total
    return before.height + (after.height - before.height) * progress

"""Tests for full chart composition."""

from datetime import timedelta, timezone

import pytest

from conftest import BASE_TIME, make_samples
from tidetimes.chart.mapping import PlotPoint, Viewport
from tidetimes.chart.scene import compose_chart
from tidetimes.core.errors import MalformedSeries


class TestComposeChart:
    """Tests for compose_chart."""

    def test_worked_example(self, three_samples):
        chart = compose_chart(
            three_samples,
            Viewport(200, 100, origin="bottom"),
            now=BASE_TIME + timedelta(seconds=1800),
            tz=timezone.utc,
        )

        assert chart.points == [PlotPoint(0.0, 0.0), PlotPoint(100.0, 100.0), PlotPoint(200.0, 0.0)]
        assert len(chart.curve.curves) == 2
        assert chart.current_height == pytest.approx(1.5)
        assert chart.marker.x == pytest.approx(50.0)
        assert chart.marker.y == pytest.approx(50.0)
        assert len(chart.labels) == 3
        assert not chart.is_empty

    def test_now_outside_range_has_no_marker(self, three_samples):
        chart = compose_chart(
            three_samples,
            Viewport(200, 100),
            now=BASE_TIME + timedelta(hours=5),
        )

        assert chart.marker is None
        assert chart.current_height is None
        assert len(chart.points) == 3

    def test_empty_series(self):
        """No samples draws an empty chart (grid guides only)."""
        chart = compose_chart([], Viewport(200, 100), now=BASE_TIME)

        assert chart.is_empty
        assert chart.curve.is_empty
        assert chart.marker is None
        assert chart.labels == []
        assert len(chart.grid) == 8

    def test_single_sample(self):
        samples = make_samples([(0, 1.5)])
        chart = compose_chart(samples, Viewport(200, 100, origin="bottom"), now=BASE_TIME)

        assert chart.points == [PlotPoint(0.0, 0.0)]
        assert chart.curve.is_empty
        assert chart.current_height == 1.5
        assert chart.marker == PlotPoint(0.0, 0.0)

    def test_grid_lines_passed_through(self, three_samples):
        chart = compose_chart(three_samples, Viewport(200, 100), now=BASE_TIME, grid_lines=2)
        assert len(chart.grid) == 2 * (2 + 3)

    def test_malformed_series_fails_fast(self):
        samples = make_samples([(0, 1.0), (3600, 2.0), (3600, 1.0)])
        with pytest.raises(MalformedSeries):
            compose_chart(samples, Viewport(200, 100), now=BASE_TIME)

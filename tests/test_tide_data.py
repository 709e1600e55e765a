"""Tests for the WorldTides client."""

from datetime import datetime, timezone

import httpx
import pytest

from tidetimes.core.config import WorldTidesSettings
from tidetimes.core.errors import InvalidDateRange, MissingAPIKey, TideAPIError
from tidetimes.data.location import Location
from tidetimes.data.tide import (
    TideKind,
    classify_by_mean,
    fetch_tide_samples,
    parse_tide_response,
    prediction_window,
)

NOW = datetime(2024, 11, 22, 12, 0, tzinfo=timezone.utc)
T0 = int(NOW.timestamp())

PORTO = Location(name="Porto", latitude=41.1496, longitude=-8.611)


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def settings(**kwargs) -> WorldTidesSettings:
    kwargs.setdefault("api_key", "test-key")
    return WorldTidesSettings(**kwargs)


class TestClassifyByMean:
    """Tests for batch-relative high/low classification."""

    def test_split_on_mean(self):
        assert classify_by_mean([1.0, 2.0, 3.0]) == [TideKind.LOW, TideKind.LOW, TideKind.HIGH]

    def test_equal_to_mean_is_low(self):
        assert classify_by_mean([1.0, 1.0]) == [TideKind.LOW, TideKind.LOW]

    def test_empty(self):
        assert classify_by_mean([]) == []

    def test_dominant_extreme(self):
        """One large high drags the mean up; the other highs read as low."""
        kinds = classify_by_mean([1.0, 1.6, 1.0, 4.0, 1.0])
        assert kinds == [TideKind.LOW, TideKind.LOW, TideKind.LOW, TideKind.HIGH, TideKind.LOW]


class TestParseResponse:
    """Tests for response parsing."""

    def test_parses_and_sorts(self):
        payload = {
            "status": 200,
            "heights": [
                {"dt": T0 + 1800, "date": "ignored", "height": 1.4},
                {"dt": T0, "height": 0.2},
                {"dt": T0 + 3600, "height": 0.6},
            ],
        }
        samples = parse_tide_response(payload)

        assert [s.timestamp for s in samples] == [
            datetime.fromtimestamp(T0 + i, tz=timezone.utc) for i in (0, 1800, 3600)
        ]
        assert [s.height for s in samples] == [0.2, 1.4, 0.6]
        assert [s.kind for s in samples] == [TideKind.LOW, TideKind.HIGH, TideKind.LOW]
        assert samples[0].timestamp.tzinfo is not None

    def test_repeated_timestamp_keeps_first(self):
        samples = parse_tide_response({"status": 200, "heights": [
            {"dt": T0, "height": 0.2},
            {"dt": T0 + 3600, "height": 0.6},
            {"dt": T0, "height": 0.9},
        ]})

        assert [s.height for s in samples] == [0.2, 0.6]

    def test_no_heights(self):
        assert parse_tide_response({"status": 200}) == []

    def test_error_body(self):
        with pytest.raises(TideAPIError, match="Invalid key") as exc_info:
            parse_tide_response({"status": 400, "error": "Invalid key"})
        assert exc_info.value.status_code == 400

    def test_malformed_body(self):
        with pytest.raises(TideAPIError, match="Malformed"):
            parse_tide_response({"heights": [{"dt": "soon", "height": 1.0}]})


class TestPredictionWindow:
    def test_symmetric(self):
        start, end = prediction_window(NOW, 24)
        assert (NOW - start).total_seconds() == 24 * 3600
        assert (end - NOW).total_seconds() == 24 * 3600

    def test_empty_window(self):
        with pytest.raises(InvalidDateRange):
            prediction_window(NOW, 0)


class TestFetchTideSamples:
    """Tests for the HTTP request/response cycle."""

    @pytest.mark.asyncio
    async def test_request_parameters(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            return httpx.Response(200, json={"status": 200, "heights": [
                {"dt": T0, "height": 1.0},
                {"dt": T0 + 3600, "height": 2.0},
            ]})

        async with mock_client(handler) as client:
            samples = await fetch_tide_samples(PORTO, now=NOW, settings=settings(), client=client)

        params = seen["url"].params
        assert "heights" in params
        assert float(params["lat"]) == pytest.approx(41.1496)
        assert float(params["lon"]) == pytest.approx(-8.611)
        assert int(params["start"]) == T0 - 24 * 3600
        assert int(params["length"]) == 48 * 3600
        assert params["key"] == "test-key"
        assert len(samples) == 2

    @pytest.mark.asyncio
    async def test_window_hours_setting(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = request.url.params
            return httpx.Response(200, json={"status": 200, "heights": []})

        async with mock_client(handler) as client:
            await fetch_tide_samples(PORTO, now=NOW, settings=settings(window_hours=6), client=client)

        assert int(seen["params"]["length"]) == 12 * 3600

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        with pytest.raises(MissingAPIKey):
            await fetch_tide_samples(PORTO, now=NOW, settings=WorldTidesSettings(api_key=""))

    @pytest.mark.asyncio
    async def test_http_error(self):
        async with mock_client(lambda request: httpx.Response(503)) as client:
            with pytest.raises(TideAPIError) as exc_info:
                await fetch_tide_samples(PORTO, now=NOW, settings=settings(), client=client)

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        async with mock_client(handler) as client:
            with pytest.raises(TideAPIError, match="Could not reach"):
                await fetch_tide_samples(PORTO, now=NOW, settings=settings(), client=client)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        async with mock_client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(TideAPIError, match="invalid JSON"):
                await fetch_tide_samples(PORTO, now=NOW, settings=settings(), client=client)

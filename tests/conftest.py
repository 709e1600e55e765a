"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from tidetimes.data.tide import TideSample, classify_by_mean

BASE_TIME = datetime(2024, 11, 22, tzinfo=timezone.utc)


def make_samples(pairs, base=BASE_TIME):
    """Build samples from (seconds_after_base, height) pairs."""
    kinds = classify_by_mean([h for _, h in pairs])
    return [
        TideSample(timestamp=base + timedelta(seconds=t), height=h, kind=kind)
        for (t, h), kind in zip(pairs, kinds)
    ]


@pytest.fixture
def three_samples():
    """Low, high, low one hour apart."""
    return make_samples([(0, 1.0), (3600, 2.0), (7200, 1.0)])


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point settings at a temp state file and keep .env/real keys out."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STORE_STATE_FILE", str(tmp_path / "state" / "location.json"))
    monkeypatch.delenv("WORLDTIDES_API_KEY", raising=False)
    return tmp_path

from datetime import datetime, timezone
from typing import Iterable, List, Sequence, Tuple

import pytest

from tapo_power.domain.metrics import PowerReading
from tapo_power.exceptions import DeviceError
from tapo_power.ports.chart import ChartConfig


class SequencePowerMeter:
    """Deterministic meter that replays a fixed list of watt values."""

    def __init__(self, values: Iterable[float], fail_at: int = None):
        self.values = list(values)
        self.fail_at = fail_at
        self.calls = 0

    async def read_power(self) -> PowerReading:
        index = self.calls
        self.calls += 1
        if self.fail_at is not None and index == self.fail_at:
            raise DeviceError("device unreachable")
        if index >= len(self.values):
            raise DeviceError("no more readings")
        return PowerReading(timestamp=datetime.now(timezone.utc), power_watts=self.values[index])


class RecordingRenderer:
    def __init__(self):
        self.calls: List[Tuple[List[Tuple[float, float]], ChartConfig]] = []

    def render(self, points: Sequence[Tuple[float, float]], config: ChartConfig) -> None:
        self.calls.append((list(points), config))


@pytest.fixture
def no_sleep(monkeypatch):
    """Replace asyncio.sleep with a recorder so loops run instantly."""
    delays = []

    async def fake_sleep(delay):
        delays.append(delay)

    monkeypatch.setattr("asyncio.sleep", fake_sleep)
    return delays


@pytest.fixture
def clean_env(monkeypatch):
    """Remove tapo_power related variables from the environment."""
    for name in (
        "LOG_LEVEL",
        "METER_MODE",
        "TAPO_USERNAME",
        "TAPO_PASSWORD",
        "TAPO_DEVICE_MODEL",
        "POLL_INTERVAL",
        "SAMPLE_COUNT",
        "WINDOW_SIZE",
        "CHART_WIDTH",
        "CHART_HEIGHT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_meter():
    return SequencePowerMeter


@pytest.fixture
def renderer():
    return RecordingRenderer()

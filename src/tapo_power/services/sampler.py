import asyncio
import logging
import sys
import time
from typing import Callable, List, Optional, Sequence, TextIO

import pandas as pd

from tapo_power.domain.metrics import SummaryStatistics
from tapo_power.ports.power_meter import PowerMeterPort

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class ProgressPrinter:
    """Single-line progress feedback while samples are being obtained."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stderr
        self._started = time.monotonic()

    def __call__(self, done: int, total: int) -> None:
        elapsed = int(time.monotonic() - self._started)
        minutes, seconds = divmod(elapsed, 60)
        self.stream.write(f"\robtaining samples... [{minutes:02d}:{seconds:02d}] {done:>7}/{total:<7}")
        self.stream.flush()

    def finish(self) -> None:
        self.stream.write("\r\x1b[2K")
        self.stream.flush()


async def collect(
    meter: PowerMeterPort,
    count: int,
    interval: float,
    progress: Optional[ProgressCallback] = None,
) -> List[float]:
    """
    Poll the meter ``count`` times, sleeping ``interval`` seconds after each poll.

    The sleep is not adjusted for the time the poll itself takes. The first
    failing poll aborts the whole collection and its error propagates, no
    partial samples are returned.
    """
    if count < 1:
        raise ValueError(f"Sample count must be at least 1, got {count}")

    logger.debug(f"Collecting {count} samples every {interval}s")
    samples = []
    for _ in range(count):
        reading = await meter.read_power()
        samples.append(reading.power_watts)
        if progress is not None:
            progress(len(samples), count)
        await asyncio.sleep(interval)

    return samples


def summarize(samples: Sequence[float]) -> SummaryStatistics:
    """
    Compute min, max, mean and population standard deviation of the samples.
    """
    if not samples:
        raise ValueError("Cannot summarize an empty sample set")

    series = pd.Series(samples, dtype="float64")
    return SummaryStatistics(
        minimum=float(series.min()),
        maximum=float(series.max()),
        mean=float(series.mean()),
        standard_deviation=float(series.std(ddof=0)),
        sample_count=len(series),
    )


def _format_watts(value: float) -> str:
    return f"{value:g}"


def format_summary(stats: SummaryStatistics, samples: Sequence[float]) -> str:
    return "\n".join(
        [
            f"avg: {stats.mean:.1f} W +-{stats.standard_deviation:.1f} W",
            f"min: {_format_watts(stats.minimum)} W",
            f"max: {_format_watts(stats.maximum)} W",
            f"samples: [{', '.join(_format_watts(s) for s in samples)}]",
        ]
    )

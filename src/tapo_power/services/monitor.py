import asyncio
import logging
import sys
from typing import Optional, TextIO

from tapo_power.domain.metrics import PowerReading
from tapo_power.domain.window import SlidingWindow
from tapo_power.ports.chart import ChartConfig, ChartRendererPort
from tapo_power.ports.power_meter import PowerMeterPort

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"


class LiveMonitor:
    """
    Polls the meter forever and redraws a chart of the last ``capacity`` readings.
    """

    def __init__(
        self,
        meter: PowerMeterPort,
        renderer: ChartRendererPort,
        capacity: int = 100,
        interval: float = 1.0,
        chart_width: int = 200,
        chart_height: int = 50,
        output: Optional[TextIO] = None,
    ):
        self.meter = meter
        self.renderer = renderer
        self.interval = interval
        self.output = output or sys.stdout
        self.window = SlidingWindow(capacity)
        self.chart_config = ChartConfig(
            width=chart_width,
            height=chart_height,
            x_min=-float(capacity),
            x_max=0.0,
        )

    async def step(self) -> PowerReading:
        """Run a single iteration: age the window, poll once, redraw."""
        self.window.shift()

        reading = await self.meter.read_power()
        self.window.append(reading.power_watts)

        self.output.write(CURSOR_HOME)
        self.output.flush()
        self.renderer.render(self.window.points(), self.chart_config)

        self.output.write(f"current power: {self.window.latest:g}W\n")
        self.output.flush()
        return reading

    async def run(self) -> None:
        """Loop until a poll fails or the task is cancelled."""
        logger.info(f"Starting live monitor (Window: {self.window.capacity}, Interval: {self.interval}s)")
        self.output.write(CLEAR_SCREEN)
        self.output.flush()

        while True:
            await self.step()
            await asyncio.sleep(self.interval)

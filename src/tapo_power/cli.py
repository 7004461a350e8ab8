"""Command-line interface for Tapo power measurements."""

import argparse
import asyncio
import ipaddress
import logging
import sys

from pydantic import ValidationError

from tapo_power import __version__
from tapo_power.adapters.mocks import MockPowerMeter
from tapo_power.adapters.plotext_chart import PlotextChartRenderer
from tapo_power.adapters.tapo import connect_tapo
from tapo_power.config import Settings, require_credentials
from tapo_power.exceptions import TapoPowerError
from tapo_power.ports.power_meter import PowerMeterPort
from tapo_power.services.monitor import LiveMonitor
from tapo_power.services.sampler import ProgressPrinter, collect, format_summary, summarize

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_parser():
    """Set up command-line argument parser."""
    parser = argparse.ArgumentParser(description="Measure and monitor the power draw of a Tapo smart plug")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Override LOG_LEVEL")
    parser.add_argument("--interval", type=float, help="Seconds to wait after each poll (default: POLL_INTERVAL)")
    parser.add_argument("ip", type=ipaddress.ip_address, help="IP address of the plug")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Measure command
    measure_parser = subparsers.add_parser(
        "measure", help="Take a measurement of current power consumption over multiple samples"
    )
    measure_parser.add_argument("-n", "--count", type=int, help="Number of samples (default: SAMPLE_COUNT)")

    # Monitor command
    monitor_parser = subparsers.add_parser(
        "monitor", help="Continuously monitor momentary power consumption from your terminal"
    )
    monitor_parser.add_argument("-w", "--window", type=int, help="Number of readings to plot (default: WINDOW_SIZE)")

    return parser


async def build_meter(settings: Settings, host: str) -> PowerMeterPort:
    if settings.METER_MODE == "mock":
        logger.info("Running in MOCK mode. Using a simulated power meter.")
        return MockPowerMeter()

    require_credentials(settings)
    return await connect_tapo(
        host,
        settings.TAPO_USERNAME,
        settings.TAPO_PASSWORD.get_secret_value(),
        model=settings.TAPO_DEVICE_MODEL,
    )


async def measure(meter: PowerMeterPort, count: int, interval: float):
    """
    Collect samples and print their statistics.

    Args:
        meter: Connected power meter
        count: Number of samples to take
        interval: Seconds to wait after each sample
    """
    progress = ProgressPrinter()
    try:
        samples = await collect(meter, count, interval, progress=progress)
    finally:
        progress.finish()

    stats = summarize(samples)
    print(format_summary(stats, samples))
    return stats


async def monitor(meter: PowerMeterPort, capacity: int, interval: float, settings: Settings):
    live = LiveMonitor(
        meter,
        PlotextChartRenderer(),
        capacity=capacity,
        interval=interval,
        chart_width=settings.CHART_WIDTH,
        chart_height=settings.CHART_HEIGHT,
    )
    await live.run()


def _positive(value, name):
    if value is not None and value <= 0:
        raise TapoPowerError(f"{name} must be positive, got {value}")
    return value


async def run(args, settings: Settings):
    # Validate all arguments before the handshake with the plug
    interval = _positive(args.interval, "--interval") or settings.POLL_INTERVAL
    count = _positive(getattr(args, "count", None), "--count") or settings.SAMPLE_COUNT
    capacity = _positive(getattr(args, "window", None), "--window") or settings.WINDOW_SIZE

    meter = await build_meter(settings, str(args.ip))

    if args.command == "measure":
        await measure(meter, count, interval)
    elif args.command == "monitor":
        await monitor(meter, capacity, interval, settings)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    # Initialize configuration
    try:
        settings = Settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logging.basicConfig(level=args.log_level or settings.LOG_LEVEL, format=LOG_FORMAT)

    try:
        asyncio.run(run(args, settings))
    except TapoPowerError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Stopped by user")


if __name__ == "__main__":
    main()

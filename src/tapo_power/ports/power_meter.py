from typing import Protocol

from tapo_power.domain.metrics import PowerReading


class PowerMeterPort(Protocol):
    async def read_power(self) -> PowerReading:
        """
        Fetch the current power reading from the meter.
        Raises DeviceError if the poll fails.
        """
        ...

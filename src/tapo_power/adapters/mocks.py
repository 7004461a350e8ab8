import logging
import random
from datetime import datetime, timezone

from tapo_power.domain.metrics import PowerReading

logger = logging.getLogger(__name__)


class MockPowerMeter:
    def __init__(self, baseline_watts: float = 60.0, jitter_watts: float = 15.0):
        self.baseline_watts = baseline_watts
        self.jitter_watts = jitter_watts

    async def read_power(self) -> PowerReading:
        logger.debug("Mock: Fetching power reading")

        watts = max(0.0, random.uniform(self.baseline_watts - self.jitter_watts, self.baseline_watts + self.jitter_watts))

        return PowerReading(
            timestamp=datetime.now(timezone.utc),
            power_watts=round(watts),
        )

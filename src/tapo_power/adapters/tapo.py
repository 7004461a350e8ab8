import logging
from datetime import datetime, timezone

from tapo import ApiClient

from tapo_power.domain.metrics import PowerReading
from tapo_power.exceptions import DeviceConnectionError, DeviceError

logger = logging.getLogger(__name__)

SUPPORTED_MODELS = ("p110", "p115")


async def connect_tapo(host: str, username: str, password: str, model: str = "p115") -> "TapoAdapter":
    """
    Authenticates against the plug at ``host`` and returns a connected adapter.
    """
    if model not in SUPPORTED_MODELS:
        raise DeviceConnectionError(f"Unsupported Tapo model '{model}', expected one of {', '.join(SUPPORTED_MODELS)}")

    try:
        client = ApiClient(username, password)
        handler = await getattr(client, model)(host)
    except Exception as e:
        logger.debug(f"Failed to connect to Tapo {model.upper()} at {host}: {e}")
        raise DeviceConnectionError(f"Connecting to the device at {host}: {e}") from e

    logger.info(f"Connected to Tapo {model.upper()} at {host}")
    return TapoAdapter(handler, host=host)


class TapoAdapter:
    def __init__(self, handler, host: str = ""):
        self.handler = handler
        self.host = host

    async def read_power(self) -> PowerReading:
        """
        Fetch the momentary power draw from the plug.
        """
        try:
            result = await self.handler.get_current_power()
        except Exception as e:
            logger.debug(f"Tapo poll failed: {e}")
            raise DeviceError(f"Polling the device at {self.host}: {e}") from e

        # None, non-numeric or negative watts are a malformed response
        try:
            reading = PowerReading(
                timestamp=datetime.now(timezone.utc),
                power_watts=float(result.current_power),
            )
        except (TypeError, ValueError) as e:
            logger.debug(f"Malformed Tapo response: {result!r}")
            raise DeviceError(
                f"Polling the device at {self.host}: malformed power reading {result.current_power!r}"
            ) from e

        logger.debug(f"Power reading: {reading.power_watts}W")
        return reading

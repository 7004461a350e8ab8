"""Exception hierarchy for tapo_power."""


class TapoPowerError(Exception):
    """Base class for all errors raised by tapo_power."""


class ConfigurationError(TapoPowerError):
    """Required configuration (e.g. credentials) is missing or invalid."""


class DeviceConnectionError(TapoPowerError):
    """The handshake with the plug failed."""


class DeviceError(TapoPowerError):
    """A single poll of the plug failed."""

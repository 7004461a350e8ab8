"""Measure and monitor the power draw of Tapo energy-monitoring smart plugs."""

__version__ = "0.1.0"

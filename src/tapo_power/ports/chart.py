from dataclasses import dataclass, field
from typing import Callable, Protocol, Sequence, Tuple


def format_time_offset(offset: float) -> str:
    if offset == 0:
        return "now"
    return f"{offset:.0f} seconds"


def format_watts(watts: float) -> str:
    return f"{watts:g} W"


@dataclass(frozen=True)
class ChartConfig:
    """Fixed layout of the live chart."""

    width: int = 200
    height: int = 50
    x_min: float = -100.0
    x_max: float = 0.0
    x_label: Callable[[float], str] = field(default=format_time_offset)
    y_label: Callable[[float], str] = field(default=format_watts)


class ChartRendererPort(Protocol):
    def render(self, points: Sequence[Tuple[float, float]], config: ChartConfig) -> None:
        """
        Draw the points as a line chart to the terminal.
        """
        ...

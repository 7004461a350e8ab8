import logging
from typing import List, Sequence, Tuple

import plotext as plt

from tapo_power.ports.chart import ChartConfig

logger = logging.getLogger(__name__)


def _ticks(lower: float, upper: float, count: int) -> List[float]:
    if upper <= lower or count < 2:
        return [lower]
    step = (upper - lower) / (count - 1)
    return [round(lower + i * step, 1) for i in range(count)]


class PlotextChartRenderer:
    """Terminal line chart backed by plotext."""

    def __init__(self, x_ticks: int = 5, y_ticks: int = 5):
        self.x_ticks = x_ticks
        self.y_ticks = y_ticks

    def render(self, points: Sequence[Tuple[float, float]], config: ChartConfig) -> None:
        xs = [x for x, _ in points]
        ys = [y for _, y in points]

        plt.clear_figure()
        plt.plot_size(config.width, config.height)
        plt.xlim(config.x_min, config.x_max)

        if points:
            plt.plot(xs, ys, marker="braille")

            y_ticks = _ticks(min(ys), max(ys), self.y_ticks)
            plt.yticks(y_ticks, [config.y_label(y) for y in y_ticks])

        x_ticks = _ticks(config.x_min, config.x_max, self.x_ticks)
        plt.xticks(x_ticks, [config.x_label(x) for x in x_ticks])

        plt.show()

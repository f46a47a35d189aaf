"""Bar charts."""

from __future__ import annotations

from typing import Iterable

from .data import DataPoint
from .linechart import _CartesianChart
from .options import Options
from .svg_builder import SVGBuilder


class BarChart(_CartesianChart):
    """One vertical bar per data point, rising from the bottom of the scale."""

    def __init__(self, data: Iterable[DataPoint], options: Options) -> None:
        super().__init__(data, options)

    def generate(self) -> str:
        """Return the bar chart as an SVG document."""
        return super().generate()

    def _label_x(self, index: int, chart_width: int) -> int:
        slot = chart_width / len(self.data)
        return self.options.margins.left + int((index + 0.5) * slot)

    def _draw_series(
        self,
        sb: SVGBuilder,
        chart_width: int,
        chart_height: int,
        y_min: float,
        y_max: float,
    ) -> None:
        margins = self.options.margins
        count = len(self.data)
        bar_width = chart_width / count * 0.8
        gap_width = chart_width / count * 0.2

        for index, point in enumerate(self.data):
            x = margins.left + index * chart_width / count + gap_width / 2
            if y_max == y_min:
                bar_height = chart_height / 2
            else:
                bar_height = (point.value - y_min) / (y_max - y_min) * chart_height
            y = margins.top + chart_height - bar_height
            sb.add_rect(
                int(x),
                int(y),
                int(bar_width),
                int(bar_height),
                {"fill": self.options.colors.bar, "stroke": "none"},
            )
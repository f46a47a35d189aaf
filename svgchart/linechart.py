"""Line charts, plus the axis and grid layout shared with bar charts."""

from __future__ import annotations

from typing import Iterable

from .data import DataPoint
from .options import Options
from .svg_builder import SVGBuilder
from .utils import empty_chart, format_number, y_min_max

_GRID_LINES = 5
_Y_LABELS = 5
_MAX_X_LABELS = 7
_POINT_RADIUS = 4


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class _CartesianChart:
    """Frame of a chart with axes: background, title, grid, axes and labels."""

    def __init__(self, data: Iterable[DataPoint], options: Options) -> None:
        self.data: list[DataPoint] = list(data)
        self.options = options

    def generate(self) -> str:
        """Return the chart as an SVG document."""
        opts = self.options
        if not self.data:
            return empty_chart(opts, "No data available")

        margins = opts.margins
        chart_width = opts.width - margins.left - margins.right
        chart_height = opts.height - margins.top - margins.bottom

        y_min, y_max = y_min_max(self.data)
        if y_min == y_max:
            padding = 1.0 if y_min == 0 else max(1.0, y_min * 0.1)
            y_min -= padding
            y_max += padding

        sb = SVGBuilder(opts.width, opts.height)
        sb.add_rect(0, 0, opts.width, opts.height, {"fill": opts.colors.background})

        if opts.title:
            sb.add_text(
                _tdiv(opts.width, 2),
                20,
                opts.title,
                {
                    "text-anchor": "middle",
                    "font-family": "Arial",
                    "font-size": "16px",
                    "font-weight": "bold",
                    "fill": opts.colors.title,
                },
            )

        if opts.show_grid:
            self._add_grid(sb, chart_width, chart_height)

        self._add_axes(sb, chart_width, chart_height, y_min, y_max)

        if opts.x_label:
            sb.add_text(
                margins.left + _tdiv(chart_width, 2),
                opts.height - 10,
                opts.x_label,
                {
                    "text-anchor": "middle",
                    "font-family": "Arial",
                    "font-size": "12px",
                    "fill": opts.colors.text,
                },
            )

        if opts.y_label:
            centre = margins.top + _tdiv(chart_height, 2)
            sb.add_text(
                15,
                centre,
                opts.y_label,
                {
                    "text-anchor": "middle",
                    "font-family": "Arial",
                    "font-size": "12px",
                    "fill": opts.colors.text,
                    "transform": f"rotate(-90, 15, {centre})",
                },
            )

        self._draw_series(sb, chart_width, chart_height, y_min, y_max)
        return sb.render()

    def _add_grid(self, sb: SVGBuilder, chart_width: int, chart_height: int) -> None:
        margins = self.options.margins
        for i in range(_GRID_LINES + 1):
            y = margins.top + chart_height - _tdiv(i * chart_height, _GRID_LINES)
            sb.add_line(
                margins.left,
                y,
                margins.left + chart_width,
                y,
                {
                    "stroke": self.options.colors.grid,
                    "stroke-width": "1",
                    "stroke-dasharray": "5,5",
                },
            )

    def _add_axes(
        self,
        sb: SVGBuilder,
        chart_width: int,
        chart_height: int,
        y_min: float,
        y_max: float,
    ) -> None:
        margins = self.options.margins
        colors = self.options.colors
        axis_style = {"stroke": colors.axis, "stroke-width": "2"}
        bottom = margins.top + chart_height

        sb.add_line(margins.left, bottom, margins.left + chart_width, bottom, axis_style)
        sb.add_line(margins.left, margins.top, margins.left, bottom, axis_style)

        label_style = {
            "text-anchor": "middle",
            "font-family": "Arial",
            "font-size": "10px",
            "fill": colors.text,
        }
        count = len(self.data)
        num_labels = min(_MAX_X_LABELS, count)
        if num_labels > 0:
            step = count // num_labels if count > num_labels else 1
            for index in range(0, count, step):
                sb.add_text(
                    self._label_x(index, chart_width),
                    bottom + 15,
                    self.data[index].label,
                    label_style,
                )

        for i in range(_Y_LABELS + 1):
            value = y_min + i * (y_max - y_min) / _Y_LABELS
            y = bottom - int(i * chart_height / _Y_LABELS)
            sb.add_text(
                margins.left - 5,
                y + 3,
                format_number(value),
                {
                    "text-anchor": "end",
                    "font-family": "Arial",
                    "font-size": "10px",
                    "fill": colors.text,
                },
            )

    def _label_x(self, index: int, chart_width: int) -> int:
        raise NotImplementedError

    def _draw_series(
        self,
        sb: SVGBuilder,
        chart_width: int,
        chart_height: int,
        y_min: float,
        y_max: float,
    ) -> None:
        raise NotImplementedError


class LineChart(_CartesianChart):
    """A line through the data points, with a marker on each point."""

    def __init__(self, data: Iterable[DataPoint], options: Options) -> None:
        super().__init__(data, options)

    def generate(self) -> str:
        """Return the line chart as an SVG document."""
        return super().generate()

    def _label_x(self, index: int, chart_width: int) -> int:
        left = self.options.margins.left
        count = len(self.data)
        if count == 1:
            return left + _tdiv(chart_width, 2)
        return left + _tdiv(index * chart_width, count - 1)

    def _draw_series(
        self,
        sb: SVGBuilder,
        chart_width: int,
        chart_height: int,
        y_min: float,
        y_max: float,
    ) -> None:
        top = self.options.margins.top
        points: list[tuple[int, int]] = []
        for index, point in enumerate(self.data):
            if y_max == y_min:
                scaled = chart_height / 2
            else:
                scaled = (point.value - y_min) / (y_max - y_min) * chart_height
            points.append(
                (self._label_x(index, chart_width), top + (chart_height - int(scaled)))
            )

        if not points:
            return

        (first_x, first_y), *rest = points
        path = f"M{first_x},{first_y} " + "".join(f"L{x},{y} " for x, y in rest)
        colour = self.options.colors.line
        sb.add_path(path, {"fill": "none", "stroke": colour, "stroke-width": "2"})
        for x, y in points:
            sb.add_circle(x, y, _POINT_RADIUS, {"fill": colour})
"""Helpers shared by the chart renderers."""

from __future__ import annotations

import math
from typing import Sequence

from .data import DataPoint
from .options import Options
from .svg_builder import SVGBuilder


def y_min_max(data: Sequence[DataPoint]) -> tuple[float, float]:
    """Return the smallest and largest value, or (0, 0) for no data."""
    if not data:
        return 0.0, 0.0
    values = [point.value for point in data]
    return min(values), max(values)


def format_number(value: float) -> str:
    """Format a value for an axis label, dropping needless decimals."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == math.floor(value):
        return f"{value:.0f}"
    return f"{value:.2f}".rstrip("0").rstrip(".")


def empty_chart(options: Options, message: str) -> str:
    """Render a blank chart showing only a centred message."""
    sb = SVGBuilder(options.width, options.height)
    sb.add_rect(0, 0, options.width, options.height, {"fill": options.colors.background})
    sb.add_text(
        options.width // 2,
        options.height // 2,
        message,
        {
            "text-anchor": "middle",
            "font-family": "Arial",
            "font-size": "14px",
            "fill": "#666666",
        },
    )
    return sb.render()
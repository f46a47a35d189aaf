"""Chart configuration: colours, margins, dimensions and option setters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable


class ChartType(str, Enum):
    """Kind of chart to draw."""

    LINE = "line"
    BAR = "bar"


@dataclass
class ColorScheme:
    """Colour palette for the parts of a chart."""

    background: str = ""
    axis: str = ""
    grid: str = ""
    line: str = ""
    text: str = ""
    title: str = ""
    bar: str = ""


@dataclass
class Margins:
    """Space between the plot area and the edges of the image."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0


def _default_colors() -> ColorScheme:
    return ColorScheme(
        background="#ffffff",
        axis="#333333",
        grid="#dddddd",
        line="#3366cc",
        bar="#3366cc",
        text="#333333",
        title="#000000",
    )


def _default_margins() -> Margins:
    return Margins(top=40, right=20, bottom=50, left=60)


@dataclass
class Options:
    """All configurable chart settings."""

    width: int = 500
    height: int = 300
    title: str = ""
    x_label: str = ""
    y_label: str = ""
    show_grid: bool = True
    chart_type: ChartType = ChartType.LINE
    colors: ColorScheme = field(default_factory=_default_colors)
    margins: Margins = field(default_factory=_default_margins)


Option = Callable[[Options], None]


def default_options() -> Options:
    """Return a fresh set of default options."""
    return Options()


def with_title(title: str) -> Option:
    """Set the title; the top margin grows when a title is present."""

    def apply(options: Options) -> None:
        options.title = title
        options.margins.top = 40 if title else 20

    return apply


def with_dimensions(width: int, height: int) -> Option:
    """Set the image width and height."""

    def apply(options: Options) -> None:
        options.width = width
        options.height = height

    return apply


def with_x_label(label: str) -> Option:
    """Set the X-axis label; the bottom margin grows when a label is present."""

    def apply(options: Options) -> None:
        options.x_label = label
        options.margins.bottom = 50 if label else 30

    return apply


def with_y_label(label: str) -> Option:
    """Set the Y-axis label; the left margin grows when a label is present."""

    def apply(options: Options) -> None:
        options.y_label = label
        options.margins.left = 60 if label else 40

    return apply


def with_grid(show: bool) -> Option:
    """Turn the background grid on or off."""

    def apply(options: Options) -> None:
        options.show_grid = show

    return apply


def with_colors(colors: ColorScheme) -> Option:
    """Replace the whole colour scheme."""

    def apply(options: Options) -> None:
        options.colors = replace(colors)

    return apply


def with_margins(margins: Margins) -> Option:
    """Replace the margins."""

    def apply(options: Options) -> None:
        options.margins = replace(margins)

    return apply
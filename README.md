# svgchart

Small, dependency-free SVG chart generation: line charts and bar charts
rendered straight to an SVG string.

## Installing

```
pip install .
```

## Using the library

```python
from svgchart.barchart import BarChart
from svgchart.data import convert_data
from svgchart.options import default_options, with_dimensions, with_title, with_x_label

options = default_options()
for option in (with_title("Monthly totals"), with_x_label("Month"), with_dimensions(640, 360)):
    option(options)

data = convert_data({"Jan": 12.0, "Feb": 17.5, "Mar": 9.0})
svg = BarChart(data, options).generate()
```

`LineChart` in `svgchart.linechart` takes the same arguments and draws a
line through the points with a marker on each one. Empty data gives a chart
showing "No data available".

### Data

`convert_data` in `svgchart.data` accepts:

- a mapping of label to value (the result is sorted by label),
- a list or tuple of `DataPoint(label, value)`,
- a list or tuple of `Point(x, y)`,
- a list or tuple of `[label, value]` pairs, where the value may be a number
  or a numeric string. Pairs shorter than two items are skipped; a value
  that cannot be read as a number raises `ValueError`.

Any other kind of data raises `TypeError`.

### Options

`default_options()` returns an `Options` dataclass: 500×300, grid shown,
blue line and bars, margins of 40/20/50/60 (top/right/bottom/left). The
option functions each return a callable that changes an `Options` in place:

- `with_title(title)` – sets the title; top margin 40 with a title, 20 without.
- `with_dimensions(width, height)`
- `with_x_label(label)` – bottom margin 50 with a label, 30 without.
- `with_y_label(label)` – left margin 60 with a label, 40 without.
- `with_grid(show)`
- `with_colors(colors)` – replaces the whole `ColorScheme`.
- `with_margins(margins)` – replaces the `Margins`.

The fields of `Options` may also be set directly.

### Lower-level pieces

`SVGBuilder` in `svgchart.svg_builder` assembles SVG documents from
rectangles, lines, circles, paths and text; `render()` (or `str()`) returns
the finished document. `svgchart.utils` holds `y_min_max`, `format_number`
(axis-label formatting such as `10.5` → `"10.5"`, `10.0` → `"10"`) and
`empty_chart`.

## What the package does not do

There is no single entry point that picks a chart class from a `ChartType`
value; choose `LineChart` or `BarChart` yourself. The package has no
command-line program and no HTTP service for rendering charts on request.

## Tests

```
pip install .[test]
pytest
```
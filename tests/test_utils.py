import pytest

from svgchart.data import DataPoint
from svgchart.options import default_options, with_dimensions
from svgchart.utils import empty_chart, format_number, y_min_max


@pytest.mark.parametrize(
    "value, expected",
    [
        (10.0, "10"),
        (10.5, "10.5"),
        (10.50, "10.5"),
        (0.01, "0.01"),
        (0.0, "0"),
        (-10.5, "-10.5"),
        (10.001, "10"),
        (3.14159, "3.14"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_non_finite():
    assert format_number(float("inf")) == "+Inf"
    assert format_number(float("-inf")) == "-Inf"
    assert format_number(float("nan")) == "NaN"


def test_y_min_max_empty():
    assert y_min_max([]) == (0.0, 0.0)


def test_y_min_max_values():
    data = [DataPoint("A", -10.0), DataPoint("B", 20.0), DataPoint("C", 5.0)]
    assert y_min_max(data) == (-10.0, 20.0)


def test_empty_chart_content():
    svg = empty_chart(default_options(), "No data available")
    assert svg.startswith('<svg width="500" height="300"')
    assert svg.endswith("</svg>")
    assert ">No data available</text>" in svg
    assert 'x="250" y="150"' in svg
    assert 'fill="#ffffff"' in svg


def test_empty_chart_uses_dimensions():
    opts = default_options()
    with_dimensions(101, 51)(opts)
    svg = empty_chart(opts, "nothing")
    assert '<svg width="101" height="51"' in svg
    assert 'x="50" y="25"' in svg
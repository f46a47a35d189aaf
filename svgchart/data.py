"""Data points and conversion of the accepted input shapes into chart data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DataPoint:
    """A labelled value to plot."""

    label: str
    value: float


@dataclass(frozen=True)
class Point:
    """An (x, y) pair where x is a category label."""

    x: str
    y: float


ChartData = list[DataPoint]


def _format_value(raw: Any) -> str:
    if raw is None:
        return "<nil>"
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, float):
        text = repr(raw)
        return text[:-2] if text.endswith(".0") else text
    return str(raw)


def _parse_value(raw: Any) -> float:
    if isinstance(raw, float):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        return float(raw)
    text = _format_value(raw)
    error = ValueError(f"invalid value type: {text}")
    if not text or text != text.strip() or "_" in text:
        raise error
    try:
        return float(text)
    except ValueError:
        raise error from None


def convert_data(data: Any) -> ChartData:
    """Turn a mapping or a sequence of points or pairs into chart data.

    Mappings are sorted by label. Pairs shorter than two items are skipped.
    Raises TypeError for unsupported input and ValueError for values that
    cannot be read as numbers.
    """
    if isinstance(data, Mapping):
        points = [DataPoint(label, float(value)) for label, value in data.items()]
        return sorted(points, key=lambda point: point.label)

    if not isinstance(data, (list, tuple)):
        raise TypeError("unsupported data type")

    points: ChartData = []
    for item in data:
        if isinstance(item, DataPoint):
            points.append(item)
        elif isinstance(item, Point):
            points.append(DataPoint(item.x, item.y))
        elif isinstance(item, (list, tuple)):
            if len(item) < 2:
                continue
            label = item[0] if isinstance(item[0], str) else _format_value(item[0])
            points.append(DataPoint(label, _parse_value(item[1])))
        else:
            raise TypeError("unsupported data type")
    return points
"""Generate SVG line and bar charts from labelled values."""

__version__ = "0.1.0"
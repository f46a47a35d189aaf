"""Incremental construction of SVG documents."""

from __future__ import annotations

from typing import Mapping, Optional

_SVG_NS = "http://www.w3.org/2000/svg"


class SVGBuilder:
    """Accumulates SVG elements inside a root <svg> element."""

    def __init__(self, width: int, height: int) -> None:
        self._parts: list[str] = [
            f'<svg width="{width}" height="{height}" xmlns="{_SVG_NS}">'
        ]

    def add_element(
        self,
        tag: str,
        attrs: Optional[Mapping[str, str]] = None,
        content: str = "",
    ) -> None:
        """Append an element; it is self-closing when content is empty."""
        rendered = "".join(f' {key}="{value}"' for key, value in (attrs or {}).items())
        if content:
            self._parts.append(f"<{tag}{rendered}>{content}</{tag}>")
        else:
            self._parts.append(f"<{tag}{rendered}/>")

    def add_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        attrs: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Append a rectangle."""
        merged = {**(attrs or {}), "x": str(x), "y": str(y),
                  "width": str(width), "height": str(height)}
        self.add_element("rect", merged)

    def add_text(
        self, x: int, y: int, text: str, attrs: Optional[Mapping[str, str]] = None
    ) -> None:
        """Append a text element."""
        merged = {**(attrs or {}), "x": str(x), "y": str(y)}
        self.add_element("text", merged, text)

    def add_line(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        attrs: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Append a straight line."""
        merged = {**(attrs or {}), "x1": str(x1), "x2": str(x2),
                  "y1": str(y1), "y2": str(y2)}
        self.add_element("line", merged)

    def add_path(self, d: str, attrs: Optional[Mapping[str, str]] = None) -> None:
        """Append a path with the given path data."""
        self.add_element("path", {**(attrs or {}), "d": d})

    def add_circle(
        self, cx: int, cy: int, r: int, attrs: Optional[Mapping[str, str]] = None
    ) -> None:
        """Append a circle."""
        merged = {**(attrs or {}), "cx": str(cx), "cy": str(cy), "r": str(r)}
        self.add_element("circle", merged)

    def render(self) -> str:
        """Return the complete SVG document."""
        return "".join(self._parts) + "</svg>"

    def __str__(self) -> str:
        return self.render()
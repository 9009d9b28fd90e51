"""SVG output for dot renderings."""

import io
from typing import TextIO

import svgwrite

from .pipeline import make_dots
from .raster import RasterImage
from .types import DotParams


class SvgCanvas:
    """
    Collects circles into an svgwrite Drawing and writes the document
    to a text stream when the drawing ends.
    """

    def __init__(self, writer: TextIO, pretty: bool = False):
        self.writer = writer
        self.pretty = pretty
        self.drawing: svgwrite.Drawing | None = None
        self._ended = False

    def start(self, width: int, height: int) -> None:
        if self.drawing is not None:
            raise RuntimeError("SVG canvas already started")
        self.drawing = svgwrite.Drawing(size=(width, height))

    def circle(self, cx: int, cy: int, r: int, style: str) -> None:
        self._check_open()
        self.drawing.add(self.drawing.circle(center=(cx, cy), r=r, style=style))

    def end(self) -> None:
        self._check_open()
        self._ended = True
        self.drawing.write(self.writer, pretty=self.pretty)

    def _check_open(self) -> None:
        if self.drawing is None:
            raise RuntimeError("SVG canvas not started")
        if self._ended:
            raise RuntimeError("SVG canvas already ended")


def render_svg(raster: RasterImage, params: DotParams = DotParams()) -> str:
    """Render an image to an SVG document held in memory."""
    buf = io.StringIO()
    make_dots(raster, params, SvgCanvas(buf))
    return buf.getvalue()

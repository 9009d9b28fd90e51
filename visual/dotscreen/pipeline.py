"""Dot halftone pipeline: regions in, circles out."""

import logging
from collections.abc import Iterator
from typing import Protocol

from .geometry import dot_center, dot_radius, is_visible
from .luma import luma
from .raster import RasterImage
from .sampler import grid_steps, iter_regions
from .types import Dot, DotParams

logger = logging.getLogger(__name__)


class DrawingSink(Protocol):
    """Receives the canvas size, then circles, then the end of the drawing."""

    def start(self, width: int, height: int) -> None: ...

    def circle(self, cx: int, cy: int, r: int, style: str) -> None: ...

    def end(self) -> None: ...


def iter_dots(raster: RasterImage, params: DotParams) -> Iterator[Dot]:
    """
    Generate the dots for an image.

    Each box of the grid is averaged, converted to luma and either
    dropped (luma at or above the threshold) or turned into a Dot whose
    radius grows as the region gets darker.

    Args:
        raster: Source image
        params: Rendering parameters

    Yields:
        Dot for every region that survives the threshold
    """
    for x, y, color in iter_regions(raster, params.box_size):
        value = luma(color.r, color.g, color.b, params.weighting)
        if not is_visible(value, params.luma_threshold):
            continue

        radius = dot_radius(value, params.box_size, params.scale, params.sizing)
        cx, cy = dot_center(x, y, params.box_size, params.scale)
        fill = color.hex() if params.color else "black"
        yield Dot(cx, cy, radius, fill)


def make_dots(raster: RasterImage, params: DotParams, sink: DrawingSink) -> int:
    """
    Draw the dots for an image onto a sink.

    The canvas is the source size multiplied by the scale so that
    coordinates line up with the original pixels.

    Returns:
        Number of dots drawn
    """
    width_steps, height_steps = grid_steps(raster.width, raster.height, params.box_size)
    logger.debug(
        "Rendering %dx%d image as %dx%d grid of %dpx boxes",
        raster.width, raster.height, width_steps, height_steps, params.box_size,
    )

    sink.start(raster.width * params.scale, raster.height * params.scale)

    count = 0
    for dot in iter_dots(raster, params):
        sink.circle(dot.cx, dot.cy, dot.radius, dot.style())
        count += 1

    sink.end()

    logger.debug("Drew %d of %d regions", count, width_steps * height_steps)
    return count

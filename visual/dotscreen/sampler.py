"""Region sampling: average color over square boxes of the image."""

from collections.abc import Iterator

import numpy as np

from .raster import CHANNEL_SCALE, RasterImage
from .types import RegionColor


def grid_steps(width: int, height: int, box_size: int) -> tuple[int, int]:
    """
    Number of whole boxes that fit across and down the image.

    Trailing pixels that don't fill a whole box are not covered.
    A non-positive box size gives an empty grid.
    """
    if box_size <= 0:
        return 0, 0
    return width // box_size, height // box_size


def average_color(raster: RasterImage, box_size: int, x: int, y: int) -> RegionColor:
    """
    Average color of one box.

    Channel sums are taken over 16-bit values, divided by the pixel
    count and then scaled down to 8 bits. Both divisions truncate.

    Args:
        raster: Source image
        box_size: Box edge length in pixels
        x, y: Box column and row in the grid

    Returns:
        RegionColor with 8-bit channels
    """
    block = raster.region(x * box_size, y * box_size, box_size)
    sums = block.sum(axis=(0, 1), dtype=np.uint64)

    means = sums // np.uint64(box_size * box_size)
    r, g, b = (int(c) for c in means // np.uint64(CHANNEL_SCALE))
    return RegionColor(r, g, b)


def iter_regions(raster: RasterImage, box_size: int) -> Iterator[tuple[int, int, RegionColor]]:
    """Yield (x, y, color) for every whole box, column by column."""
    width_steps, height_steps = grid_steps(raster.width, raster.height, box_size)

    for x in range(width_steps):
        for y in range(height_steps):
            yield x, y, average_color(raster, box_size, x, y)

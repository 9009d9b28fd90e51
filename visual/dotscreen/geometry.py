"""Mapping from luma to dot placement and size."""

import math

from .types import SizingPolicy

# Lets the area-based radius reach the size the linear policy gives
# to the darkest regions.
AREA_FACTOR = 1.7


def box_half(box_size: int) -> int:
    return box_size // 2


def is_visible(luma: float, threshold: float) -> bool:
    """A dot is only drawn when its luma is strictly below the threshold."""
    return luma < threshold


def dot_radius(luma: float, box_size: int, scale: int, sizing: SizingPolicy = SizingPolicy.LINEAR) -> int:
    """
    Radius of the dot for a region, truncated to an integer.

    Args:
        luma: Region luma, 0.0 is black
        box_size: Box edge length in source pixels
        scale: Output scale multiplier
        sizing: LINEAR treats darkness as radius, AREA as surface area

    Returns:
        Radius in output pixels. May be 0.
    """
    max_radius = float(box_half(box_size) * scale)

    if sizing == SizingPolicy.AREA:
        radius = math.sqrt((1.0 - luma) / math.pi) * AREA_FACTOR * max_radius
    elif sizing == SizingPolicy.LINEAR:
        radius = (1.0 - luma) * max_radius
    else:
        raise ValueError(f"Unknown sizing policy: {sizing}")

    return int(radius)


def dot_center(x: int, y: int, box_size: int, scale: int) -> tuple[int, int]:
    """Center of the box at grid column x, row y, in output pixels."""
    half = box_half(box_size)
    return ((x * box_size) + half) * scale, ((y * box_size) + half) * scale

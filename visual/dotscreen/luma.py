"""Luma calculations for 8-bit RGB values."""

from .types import LumaWeighting

# (red, green, blue) weights
BT601_WEIGHTS = (0.299, 0.587, 0.144)
BT709_WEIGHTS = (0.2126, 0.7152, 0.0722)

WEIGHTS = {
    LumaWeighting.BT601: BT601_WEIGHTS,
    LumaWeighting.BT709: BT709_WEIGHTS,
}


def luma_bt601(r: int, g: int, b: int) -> float:
    """
    Calculate luma using ITU BT.601 weights.

    Gives more weight to the red and blue components than BT.709.
    The blue weight of 0.144 is the value existing renderings were
    produced with, so the weights sum to 1.03 rather than 1.0.

    Args:
        r, g, b: Channel values (0-255)

    Returns:
        Luma, 0.0 for black
    """
    return luma(r, g, b, LumaWeighting.BT601)


def luma_bt709(r: int, g: int, b: int) -> float:
    """
    Calculate luma using ITU BT.709 weights.

    Args:
        r, g, b: Channel values (0-255)

    Returns:
        Luma between 0.0 and 1.0
    """
    return luma(r, g, b, LumaWeighting.BT709)


def luma(r: int, g: int, b: int, weighting: LumaWeighting = LumaWeighting.BT601) -> float:
    """Weighted sum of the channels, normalized by 255."""
    wr, wg, wb = WEIGHTS[weighting]
    return ((wr * r) + (wg * g) + (wb * b)) / 255.0

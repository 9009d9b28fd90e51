"""Dot halftone library: turns raster images into SVG circles."""

import logging
from pathlib import Path

from PIL import Image

from .geometry import box_half, dot_center, dot_radius, is_visible
from .luma import luma, luma_bt601, luma_bt709
from .pipeline import DrawingSink, iter_dots, make_dots
from .raster import ImageLoadError, RasterImage, load_image
from .sampler import average_color, grid_steps, iter_regions
from .svg import SvgCanvas, render_svg
from .types import (
    Dot,
    DotParams,
    LumaWeighting,
    RegionColor,
    SizingPolicy,
    all_sizing_names,
    all_weighting_names,
    parse_sizing_name,
    parse_weighting_name,
)

# Re-export for convenience
__all__ = [
    "Dot",
    "DotParams",
    "DrawingSink",
    "ImageLoadError",
    "LumaWeighting",
    "RasterImage",
    "RegionColor",
    "SizingPolicy",
    "SvgCanvas",
    "all_sizing_names",
    "all_weighting_names",
    "average_color",
    "box_half",
    "default_output_path",
    "dot_center",
    "dot_radius",
    "grid_steps",
    "is_visible",
    "iter_dots",
    "iter_regions",
    "load_image",
    "luma",
    "luma_bt601",
    "luma_bt709",
    "make_dots",
    "parse_sizing_name",
    "parse_weighting_name",
    "process",
    "process_file",
    "render_svg",
]

logger = logging.getLogger(__name__)


def process(image: Image.Image, params: DotParams = DotParams()) -> str:
    """
    Render a PIL image as an SVG document of dots.

    Args:
        image: Input PIL Image
        params: Rendering parameters

    Returns:
        SVG document text
    """
    return render_svg(RasterImage.from_pil(image), params)


def default_output_path(input_path: str | Path) -> Path:
    """Output path next to the input, with the extension replaced by .svg."""
    return Path(input_path).with_suffix(".svg")


def process_file(input_path: str | Path, output_path: str | Path | None = None,
                 params: DotParams = DotParams()) -> int:
    """
    Render an image file into an SVG file.

    Args:
        input_path: Image to read
        output_path: SVG to write; defaults to the input path with a .svg extension
        params: Rendering parameters

    Returns:
        Number of dots drawn

    Raises:
        ImageLoadError: If the input can't be decoded
        OSError: If the output can't be written
    """
    raster = load_image(input_path)
    if output_path is None:
        output_path = default_output_path(input_path)

    with open(output_path, "w", encoding="utf-8") as svg_file:
        count = make_dots(raster, params, SvgCanvas(svg_file))

    logger.debug("Wrote %d dots to %s", count, output_path)
    return count

"""Decoded image access with 16-bit, alpha-premultiplied channels."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

# 8-bit to 16-bit channel factor (0xffff / 0xff)
CHANNEL_SCALE = 0x101
MAX_16 = 0xFFFF

GRAY16_MODES = ("I;16", "I;16L", "I;16B", "I;16N")


class ImageLoadError(ValueError):
    """Raised when an input image cannot be read or decoded."""


class RasterImage:
    """
    Read-only RGB pixel grid with 16-bit channels.

    Pixels are stored as a (height, width, 3) uint16 array. Images with
    an alpha channel are premultiplied, so a fully transparent pixel
    reads as black.
    """

    def __init__(self, pixels: np.ndarray):
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected (height, width, 3) array, got shape {pixels.shape}")
        self._pixels = np.array(pixels, dtype=np.uint16)
        self._pixels.flags.writeable = False

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        """
        Build a raster from a PIL Image of any mode.

        Args:
            image: Input PIL Image

        Returns:
            RasterImage with 16-bit channels
        """
        mode = image.mode

        if mode in GRAY16_MODES:
            gray = np.asarray(image).astype(np.uint16)
            pixels = np.repeat(gray[:, :, np.newaxis], 3, axis=2)
        elif mode == "I":
            # 32-bit gray holding 16-bit samples; RGBA conversion would clip to 8 bits
            gray = np.clip(np.asarray(image), 0, MAX_16).astype(np.uint16)
            pixels = np.repeat(gray[:, :, np.newaxis], 3, axis=2)
        elif mode == "L":
            gray = np.asarray(image).astype(np.uint32) * CHANNEL_SCALE
            pixels = np.repeat(gray[:, :, np.newaxis], 3, axis=2)
        elif mode == "RGB":
            pixels = np.asarray(image).astype(np.uint32) * CHANNEL_SCALE
        else:
            # 0xffff * 0xffff still fits in uint32
            rgba = np.asarray(image.convert("RGBA")).astype(np.uint32) * CHANNEL_SCALE
            alpha = rgba[:, :, 3:4]
            pixels = rgba[:, :, :3] * alpha // MAX_16

        logger.debug("Decoded %s image %dx%d", mode, image.width, image.height)
        return cls(pixels)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def at(self, x: int, y: int) -> tuple[int, int, int]:
        """16-bit (r, g, b) of the pixel at column x, row y."""
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def region(self, x0: int, y0: int, size: int) -> np.ndarray:
        """Read-only view of the size x size block with top-left corner (x0, y0)."""
        return self._pixels[y0:y0 + size, x0:x0 + size]


def load_image(path: str | Path) -> RasterImage:
    """
    Read and decode an image file.

    Args:
        path: Path to a JPEG, PNG, GIF or any other format Pillow reads

    Returns:
        RasterImage

    Raises:
        ImageLoadError: If the file cannot be opened or decoded
    """
    try:
        with Image.open(path) as img:
            img.load()
            return RasterImage.from_pil(ImageOps.exif_transpose(img))
    except (FileNotFoundError, OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Error reading image {path}: {e}") from e

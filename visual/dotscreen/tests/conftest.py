import pytest
from PIL import Image

from visual.dotscreen import RasterImage


def solid(size, color, mode="RGB"):
    return RasterImage.from_pil(Image.new(mode, size, color))


@pytest.fixture
def black_100():
    return solid((100, 100), (0, 0, 0))


@pytest.fixture
def white_100():
    return solid((100, 100), (255, 255, 255))


@pytest.fixture
def gradient_image():
    """120x80 RGB image, brighter towards the right."""
    img = Image.new("RGB", (120, 80))
    for x in range(120):
        for y in range(80):
            v = x * 2
            img.putpixel((x, y), (v, v // 2, 255 - v))
    return img

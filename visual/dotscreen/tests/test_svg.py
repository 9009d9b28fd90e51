import io
import xml.etree.ElementTree as ET

import pytest
from PIL import Image

from visual.dotscreen import DotParams, RasterImage, SvgCanvas, process, process_file, render_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


# Test 1: canvas writes an SVG document with one circle element per call
def test_canvas_output():
    buf = io.StringIO()
    canvas = SvgCanvas(buf)
    canvas.start(100, 50)
    canvas.circle(25, 25, 10, "fill:#ff0000;stroke:none")
    canvas.end()

    text = buf.getvalue()
    assert text.startswith("<?xml")
    root = ET.fromstring(text.encode("utf-8"))
    assert root.tag == f"{SVG_NS}svg"
    assert (root.get("width"), root.get("height")) == ("100", "50")

    circles = root.findall(f"{SVG_NS}circle")
    assert [c.attrib for c in circles] == [
        {"cx": "25", "cy": "25", "r": "10", "style": "fill:#ff0000;stroke:none"}
    ]


# Test 2: drawing outside start/end is an error
def test_canvas_misuse():
    canvas = SvgCanvas(io.StringIO())
    with pytest.raises(RuntimeError):
        canvas.circle(0, 0, 1, "fill:black;stroke:none")

    canvas.start(10, 10)
    with pytest.raises(RuntimeError):
        canvas.start(10, 10)

    canvas.end()
    with pytest.raises(RuntimeError):
        canvas.circle(0, 0, 1, "fill:black;stroke:none")
    with pytest.raises(RuntimeError):
        canvas.end()


# Test 3: rendered document parses as SVG
def test_render_svg_parses(black_100):
    root = ET.fromstring(render_svg(black_100, DotParams(box_size=50, scale=2)).encode("utf-8"))

    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "200"
    assert root.get("height") == "200"

    circles = root.findall(f"{SVG_NS}circle")
    assert len(circles) == 4
    assert circles[0].attrib == {"cx": "50", "cy": "50", "r": "50", "style": "fill:#000000;stroke:none"}


# Test 4: empty grid still renders a valid document
def test_render_svg_empty():
    raster = RasterImage.from_pil(Image.new("RGB", (30, 30)))
    root = ET.fromstring(render_svg(raster, DotParams(box_size=50)).encode("utf-8"))
    assert root.get("width") == "30"
    assert root.findall(f"{SVG_NS}circle") == []


# Test 5: process takes a PIL image directly
def test_process_pil_image():
    svg = process(Image.new("RGB", (100, 100), (255, 0, 0)), DotParams(box_size=50))
    assert svg.count("<circle") == 4
    assert "fill:#ff0000;stroke:none" in svg


# Test 6: process_file writes next to the input by default
def test_process_file_default_output(tmp_path):
    src = tmp_path / "photo.jpeg"
    Image.new("RGB", (100, 100), (0, 0, 0)).save(src)

    count = process_file(src, params=DotParams(box_size=50))

    assert count == 4
    assert (tmp_path / "photo.svg").read_text().count("<circle") == 4


# Test 7: zero-radius dots are still written
def test_zero_radius_circle():
    buf = io.StringIO()
    canvas = SvgCanvas(buf)
    canvas.start(10, 10)
    canvas.circle(5, 5, 0, "fill:black;stroke:none")
    canvas.end()

    circles = ET.fromstring(buf.getvalue().encode("utf-8")).findall(f"{SVG_NS}circle")
    assert len(circles) == 1
    assert circles[0].get("r") == "0"

from __future__ import annotations

import argparse
import io
import json
import logging
from dataclasses import dataclass
from email.parser import BytesParser
from email.policy import default
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs, urlparse

from PIL import Image, ImageOps, UnidentifiedImageError

from visual.dotscreen import (
    DotParams,
    RasterImage,
    parse_sizing_name,
    parse_weighting_name,
    render_svg,
)

MAX_UPLOAD_BYTES = 20 * 1024 * 1024  # 20MB

INDEX_HTML = b"""<!doctype html>
<html>
<head><meta charset="utf-8"><title>dotscreen</title></head>
<body>
<form action="/api/dots" method="post" enctype="multipart/form-data">
  <input type="file" name="image" accept="image/*">
  <button type="submit">Render</button>
</form>
</body>
</html>
"""


@dataclass(frozen=True)
class Defaults:
    box_size: int = 50
    scale: int = 1
    threshold: float = 1.0
    color: bool = True
    weighting: str = "bt601"
    sizing: str = "linear"


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean: {value}")


def _params_from_query(query: str, defaults: Defaults) -> DotParams:
    """Build DotParams from URL query parameters, falling back to defaults."""
    qs = {k: v[-1] for k, v in parse_qs(query).items()}

    try:
        box_size = int(qs.get("box_size", defaults.box_size))
        scale = int(qs.get("scale", defaults.scale))
        threshold = float(qs.get("threshold", defaults.threshold))
    except ValueError as e:
        raise ValueError(f"Invalid numeric parameter: {e}") from e

    color = _parse_bool(qs["color"]) if "color" in qs else defaults.color

    return DotParams(
        box_size=box_size,
        scale=scale,
        luma_threshold=threshold,
        color=color,
        weighting=parse_weighting_name(qs.get("weighting", defaults.weighting)),
        sizing=parse_sizing_name(qs.get("sizing", defaults.sizing)),
    )


def _read_exact(handler: BaseHTTPRequestHandler, length: int) -> bytes:
    remaining = length
    chunks: list[bytes] = []
    while remaining > 0:
        chunk = handler.rfile.read(min(remaining, 64 * 1024))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _extract_multipart_field(body: bytes, content_type: str, field_name: str) -> bytes | None:
    header = f"Content-Type: {content_type}\r\nMIME-Version: 1.0\r\n\r\n".encode("utf-8")
    msg = BytesParser(policy=default).parsebytes(header + body)

    if not msg.is_multipart():
        return None

    for part in msg.iter_parts():
        disposition = part.get("Content-Disposition", "")
        if "form-data" not in disposition:
            continue
        name = part.get_param("name", header="content-disposition")
        if name != field_name:
            continue
        return part.get_payload(decode=True)

    return None


class DotscreenHandler(BaseHTTPRequestHandler):
    server_version = "DotscreenWeb/0.1"

    def log_message(self, fmt: str, *args: Any) -> None:
        logging.info("%s - %s", self.address_string(), fmt % args)

    def _send_bytes(self, status: int, content_type: str, data: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(data)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(data)

    def _send_json(self, status: int, payload: dict[str, Any]) -> None:
        data = json.dumps(payload).encode("utf-8")
        self._send_bytes(status, "application/json; charset=utf-8", data)

    def do_GET(self) -> None:  # noqa: N802 (stdlib naming)
        parsed = urlparse(self.path)
        if parsed.path in ("/", "/dots"):
            self._send_bytes(HTTPStatus.OK, "text/html; charset=utf-8", INDEX_HTML)
            return

        self.send_error(HTTPStatus.NOT_FOUND)

    def do_POST(self) -> None:  # noqa: N802 (stdlib naming)
        parsed = urlparse(self.path)
        if parsed.path != "/api/dots":
            self.send_error(HTTPStatus.NOT_FOUND)
            return

        try:
            params = _params_from_query(parsed.query, Defaults())
        except ValueError as e:
            self._send_json(HTTPStatus.BAD_REQUEST, {"ok": False, "error": str(e)})
            return

        try:
            length = int(self.headers.get("Content-Length", "0"))
        except ValueError:
            length = 0

        if length <= 0:
            self._send_json(HTTPStatus.BAD_REQUEST, {"ok": False, "error": "Missing Content-Length"})
            return
        if length > MAX_UPLOAD_BYTES:
            self._send_json(HTTPStatus.REQUEST_ENTITY_TOO_LARGE, {"ok": False, "error": "Upload too large"})
            return

        content_type = self.headers.get("Content-Type", "")
        if not content_type.startswith("multipart/form-data"):
            self._send_json(HTTPStatus.BAD_REQUEST, {"ok": False, "error": "Expected multipart/form-data"})
            return

        body = _read_exact(self, length)
        if len(body) != length:
            self._send_json(HTTPStatus.BAD_REQUEST, {"ok": False, "error": "Incomplete request body"})
            return

        file_bytes = _extract_multipart_field(body, content_type, "image")
        if not file_bytes:
            self._send_json(HTTPStatus.BAD_REQUEST, {"ok": False, "error": 'Missing "image" field'})
            return

        try:
            img = Image.open(io.BytesIO(file_bytes))
            img.load()
            img = ImageOps.exif_transpose(img)
        except (UnidentifiedImageError, OSError) as e:
            logging.warning("Invalid image upload: %s", e)
            self._send_json(HTTPStatus.BAD_REQUEST, {"ok": False, "error": "Invalid or unsupported image format."})
            return

        svg = render_svg(RasterImage.from_pil(img), params)
        logging.debug("Rendered %dx%d upload with %s", img.width, img.height, params)
        self._send_bytes(HTTPStatus.OK, "image/svg+xml; charset=utf-8", svg.encode("utf-8"))


def run_server(*, host: str, port: int, debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    with ThreadingHTTPServer((host, port), DotscreenHandler) as httpd:
        logging.info("Listening on http://%s:%d", host, port)
        try:
            httpd.serve_forever(poll_interval=0.2)
        except KeyboardInterrupt:
            logging.info("Shutting down")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dot halftone web server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", default=8080, type=int, help="Bind port (default: 8080)")
    parser.add_argument("--debug", action="store_true", help="Enable verbose request logging")
    return parser.parse_args(argv)


def main() -> None:
    args = _parse_args()
    run_server(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()

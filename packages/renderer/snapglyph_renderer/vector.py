"""Rasterizes standalone SVG documents for icon compositing."""

from __future__ import annotations

from io import BytesIO

from PIL import Image

from .errors import EncodingFailed, SourceNotFound


def rasterize_svg(document: str | None, size_px: int) -> Image.Image:
    if not document or "<svg" not in document:
        raise SourceNotFound("No SVG document to rasterize")

    import cairosvg

    png = cairosvg.svg2png(bytestring=document.encode("utf-8"), output_width=size_px, output_height=size_px)
    if not png:
        raise EncodingFailed("SVG rasterization produced no data")
    return Image.open(BytesIO(png)).convert("RGBA")


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodingFailed(f"PNG encoding failed: {exc}") from exc
    data = buf.getvalue()
    if not data:
        raise EncodingFailed("PNG encoding produced no data")
    return data

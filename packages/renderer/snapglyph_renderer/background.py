"""Surface backgrounds: solid fills and two-stop linear gradients."""

from __future__ import annotations

import math

import numpy as np
from PIL import Image

from .models import BackgroundSpec, Color, to_rgba


def linear_gradient(size: tuple[int, int], start: Color, end: Color, angle_deg: float) -> Image.Image:
    """CSS ``linear-gradient`` geometry: diagonal angles run corner to corner."""
    width, height = size
    angle = math.radians(angle_deg)
    dx, dy = math.sin(angle), -math.cos(angle)
    length = max(abs(width * dx) + abs(height * dy), 1e-9)

    xs = np.arange(width, dtype=np.float64) + 0.5 - width / 2
    ys = np.arange(height, dtype=np.float64) + 0.5 - height / 2
    t = (xs[None, :] * dx + ys[:, None] * dy) / length + 0.5
    t = np.clip(t, 0.0, 1.0)[..., None]

    c0 = np.asarray(start, dtype=np.float64)
    c1 = np.asarray(end, dtype=np.float64)
    pixels = c0 * (1.0 - t) + c1 * t
    return Image.fromarray(np.rint(pixels).astype(np.uint8))


def background_image(size: tuple[int, int], spec: BackgroundSpec) -> Image.Image:
    if spec.kind == "gradient":
        return linear_gradient(size, to_rgba(spec.gradient_from), to_rgba(spec.gradient_to), spec.angle_deg)
    if spec.kind == "solid":
        return Image.new("RGBA", size, to_rgba(spec.color))
    return Image.new("RGBA", size, (0, 0, 0, 0))


def paint_background(surface: Image.Image, spec: BackgroundSpec) -> None:
    if spec.kind == "none":
        return
    surface.paste(background_image(surface.size, spec), (0, 0))

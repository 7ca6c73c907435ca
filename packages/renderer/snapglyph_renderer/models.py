"""Typed renderer models."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from PIL import ImageColor

from .constants import GRADIENT_ANGLE_DEG

Color = tuple[int, int, int, int]

BACKGROUND_KINDS = ("solid", "gradient", "none")

_COLOR_STOP = r"((?:[^,()]|\([^()]*\))+?)"
_GRADIENT_RE = re.compile(r"linear-gradient\(\s*([\d.]+)deg\s*,\s*" + _COLOR_STOP + r"\s*,\s*" + _COLOR_STOP + r"\s*\)")


def to_rgba(value: str | Color) -> Color:
    if isinstance(value, tuple):
        if len(value) == 3:
            return (value[0], value[1], value[2], 255)
        return value  # type: ignore[return-value]
    return ImageColor.getcolor(value, "RGBA")  # type: ignore[return-value]


def flatten(overlay: Color, base: Color) -> Color:
    """Source-over blend of ``overlay`` onto an opaque ``base``."""
    alpha = overlay[3] / 255.0
    return (
        int(round(overlay[0] * alpha + base[0] * (1 - alpha))),
        int(round(overlay[1] * alpha + base[1] * (1 - alpha))),
        int(round(overlay[2] * alpha + base[2] * (1 - alpha))),
        base[3],
    )


@dataclass(frozen=True)
class BackgroundSpec:
    kind: str = "none"
    color: str | None = None
    gradient_from: str | None = None
    gradient_to: str | None = None
    angle_deg: float = GRADIENT_ANGLE_DEG

    def __post_init__(self) -> None:
        if self.kind not in BACKGROUND_KINDS:
            raise ValueError(f"Unknown background kind: {self.kind}")
        if self.kind == "solid" and not self.color:
            raise ValueError("Solid background requires a color")
        if self.kind == "gradient" and not (self.gradient_from and self.gradient_to):
            raise ValueError("Gradient background requires two colors")

    @classmethod
    def solid(cls, color: str) -> BackgroundSpec:
        return cls(kind="solid", color=color)

    @classmethod
    def gradient(cls, start: str, end: str, angle_deg: float = GRADIENT_ANGLE_DEG) -> BackgroundSpec:
        return cls(kind="gradient", gradient_from=start, gradient_to=end, angle_deg=angle_deg)

    @classmethod
    def none(cls) -> BackgroundSpec:
        return cls(kind="none")

    @classmethod
    def from_css(cls, value: str | None) -> BackgroundSpec:
        """Read the legacy CSS-like interchange form (``linear-gradient(...)`` or a color)."""
        text = (value or "").strip()
        if not text or text == "transparent":
            return cls.none()
        if "gradient" in text:
            match = _GRADIENT_RE.search(text)
            if not match:
                raise ValueError(f"Unsupported gradient: {text}")
            start, end = match.group(2), match.group(3)
            for stop in (start, end):
                to_rgba(stop)
            return cls.gradient(start, end, float(match.group(1)))
        to_rgba(text)
        return cls.solid(text)

    @property
    def css(self) -> str:
        if self.kind == "solid":
            return str(self.color)
        if self.kind == "gradient":
            return f"linear-gradient({self.angle_deg:g}deg, {self.gradient_from}, {self.gradient_to})"
        return "transparent"

    @property
    def opaque(self) -> bool:
        return self.kind != "none"


@dataclass(frozen=True)
class RenderSettings:
    font_family: str = "JetBrains Mono"
    font_size: float = 14
    padding: float = 32
    show_line_numbers: bool = True
    show_window_controls: bool = True
    theme: str = "amoled"
    language: str = "javascript"
    background: BackgroundSpec = field(default_factory=lambda: BackgroundSpec.gradient("#667eea", "#764ba2"))
    icon_size: int = 48
    stroke_width: float = 2.0
    icon_color: str = "#8b5cf6"
    corner_radius: float = 12


@dataclass(frozen=True)
class PositionedToken:
    text: str
    kind: str
    x: float
    y: float
    width: float
    color: Color


@dataclass(frozen=True)
class LayoutLine:
    index: int
    y: float
    tokens: tuple[PositionedToken, ...]


@dataclass(frozen=True)
class LayoutBox:
    """Geometry of one snippet export, in device pixels, relative to the surface."""

    content_width: float
    content_height: float
    line_number_gutter_width: float
    header_height: float
    line_height: float
    padding: float
    code_start_x: float
    code_start_y: float
    lines: tuple[LayoutLine, ...]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def surface_size(self) -> tuple[int, int]:
        return (
            int(math.ceil(self.content_width + 2 * self.padding)),
            int(math.ceil(self.content_height + 2 * self.padding)),
        )

    @property
    def content_rect(self) -> tuple[float, float, float, float]:
        return (self.padding, self.padding, self.padding + self.content_width, self.padding + self.content_height)

    @property
    def gutter_labels(self) -> list[tuple[str, float]]:
        return [(str(line.index + 1), line.y) for line in self.lines]

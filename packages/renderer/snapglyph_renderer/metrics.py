"""Font loading and text advance measurement."""

from __future__ import annotations

from typing import Protocol

from PIL import ImageFont

from .errors import MeasurementUnavailable

_FALLBACK_FONTS = ("DejaVuSansMono.ttf", "Menlo.ttc", "Consolas.ttf", "Arial.ttf")


class MetricsProvider(Protocol):
    def measure(self, text: str) -> float: ...


def _candidates(family: str) -> list[str]:
    compact = family.replace(" ", "")
    names = [family, f"{family}.ttf", f"{compact}.ttf", f"{compact}-Regular.ttf"]
    names.extend(_FALLBACK_FONTS)
    return names


def load_font(family: str, size_px: float):
    """Load ``family`` at ``size_px``; falls back to common monospace faces, then Pillow's default."""
    size = max(1, int(round(size_px)))
    for name in _candidates(family):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except OSError as exc:
        raise MeasurementUnavailable(f"No usable font for {family!r}") from exc


class FontMetrics:
    """Measures advances with the same font the compositor draws with."""

    def __init__(self, font) -> None:
        self.font = font

    def measure(self, text: str) -> float:
        if not text:
            return 0.0
        return float(self.font.getlength(text))


class FixedAdvanceMetrics:
    """Monospace metrics where every character advances by the same width."""

    def __init__(self, advance: float) -> None:
        self.advance = float(advance)

    def measure(self, text: str) -> float:
        return len(text) * self.advance

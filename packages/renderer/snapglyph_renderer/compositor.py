"""Paints layout results and icons onto export surfaces."""

from __future__ import annotations

import math

from PIL import Image, ImageDraw

from snapglyph_highlight import get_theme, language_label

from .background import background_image, paint_background
from .constants import (
    CORNER_RADIUS,
    DEVICE_SCALE,
    DOT_RADIUS,
    DOT_SPACING,
    DOT_START_X,
    GUTTER_TEXT_INSET,
    LABEL_BASELINE_OFFSET,
    LABEL_COLOR,
    LABEL_FONT_SIZE,
    LABEL_INSET,
    LINE_NUMBER_COLOR,
    SEPARATOR_COLOR,
    WINDOW_DOT_COLORS,
)
from .layout import LayoutEngine
from .metrics import FontMetrics, load_font
from .models import Color, LayoutBox, RenderSettings, flatten, to_rgba
from .vector import encode_png, rasterize_svg


def _box(x0: float, y0: float, x1: float, y1: float) -> tuple[int, int, int, int]:
    return (int(round(x0)), int(round(y0)), max(int(round(x1)) - 1, int(round(x0))), max(int(round(y1)) - 1, int(round(y0))))


class SnippetCompositor:
    """Draws tokenized code inside a themed window over a background."""

    def __init__(self, scale: int = DEVICE_SCALE) -> None:
        self.scale = scale

    def layout(self, text: str, settings: RenderSettings) -> LayoutBox:
        font = load_font(settings.font_family, settings.font_size * self.scale)
        return LayoutEngine(FontMetrics(font), self.scale).layout(text, settings)

    def render_image(self, text: str, settings: RenderSettings) -> Image.Image:
        font = load_font(settings.font_family, settings.font_size * self.scale)
        layout = LayoutEngine(FontMetrics(font), self.scale).layout(text, settings)
        return self.compose(layout, settings, font)

    def render_png(self, text: str, settings: RenderSettings) -> bytes:
        return encode_png(self.render_image(text, settings))

    def compose(self, layout: LayoutBox, settings: RenderSettings, font) -> Image.Image:
        theme = get_theme(settings.theme)
        base = to_rgba(theme.background)

        surface = Image.new("RGBA", layout.surface_size, (0, 0, 0, 0))
        paint_background(surface, settings.background)

        draw = ImageDraw.Draw(surface)
        draw.rounded_rectangle(_box(*layout.content_rect), radius=CORNER_RADIUS * self.scale, fill=base)

        if settings.show_window_controls:
            self._draw_window_chrome(draw, layout, settings, base)
        if settings.show_line_numbers:
            self._draw_gutter(draw, layout, font, base)

        for line in layout.lines:
            for token in line.tokens:
                draw.text((token.x, token.y), token.text, font=font, fill=token.color, anchor="la")

        if settings.background.opaque:
            return surface.convert("RGB")
        return surface

    def _draw_window_chrome(self, draw: ImageDraw.ImageDraw, layout: LayoutBox, settings: RenderSettings, base: Color) -> None:
        s = self.scale
        left, top, right, _ = layout.content_rect
        separator_y = top + layout.header_height - 1
        draw.rectangle(_box(left, separator_y, right, separator_y + 1), fill=flatten(SEPARATOR_COLOR, base))

        dot_y = top + layout.header_height / 2
        radius = DOT_RADIUS * s
        for i, color in enumerate(WINDOW_DOT_COLORS):
            cx = left + DOT_START_X * s + i * DOT_SPACING * s
            draw.ellipse((cx - radius, dot_y - radius, cx + radius, dot_y + radius), fill=to_rgba(color))

        label_font = load_font(settings.font_family, LABEL_FONT_SIZE * s)
        draw.text(
            (right - LABEL_INSET * s, dot_y + LABEL_BASELINE_OFFSET * s),
            language_label(settings.language),
            font=label_font,
            fill=flatten(LABEL_COLOR, base),
            anchor="rs",
        )

    def _draw_gutter(self, draw: ImageDraw.ImageDraw, layout: LayoutBox, font, base: Color) -> None:
        left, top, _, bottom = layout.content_rect
        x = left + layout.line_number_gutter_width
        draw.rectangle(_box(x - 1, top + layout.header_height, x, bottom), fill=flatten(SEPARATOR_COLOR, base))

        fill = flatten(LINE_NUMBER_COLOR, base)
        for label, y in layout.gutter_labels:
            draw.text((x - GUTTER_TEXT_INSET * self.scale, y), label, font=font, fill=fill, anchor="ra")


class IconCompositor:
    """Centers a rasterized icon inside a padded, rounded background tile."""

    def __init__(self, scale: int = DEVICE_SCALE) -> None:
        self.scale = scale

    def surface_size(self, settings: RenderSettings) -> int:
        return int(math.ceil((settings.icon_size + 2 * settings.padding) * self.scale))

    def render_image(self, document: str | None, settings: RenderSettings) -> Image.Image:
        s = self.scale
        total = self.surface_size(settings)
        surface = Image.new("RGBA", (total, total), (0, 0, 0, 0))

        if settings.background.opaque:
            fill = background_image((total, total), settings.background)
            radius = settings.corner_radius * s
            if radius > 0:
                mask = Image.new("L", (total, total), 0)
                ImageDraw.Draw(mask).rounded_rectangle((0, 0, total - 1, total - 1), radius=radius, fill=255)
                surface.paste(fill, (0, 0), mask)
            else:
                surface.paste(fill, (0, 0))

        icon_px = int(round(settings.icon_size * s))
        glyph = rasterize_svg(document, icon_px)
        inset = int(round(settings.padding * s))
        x = inset + (icon_px - glyph.width) // 2
        y = inset + (icon_px - glyph.height) // 2
        surface.alpha_composite(glyph, dest=(max(x, 0), max(y, 0)))
        return surface

    def render_png(self, document: str | None, settings: RenderSettings) -> bytes:
        return encode_png(self.render_image(document, settings))

"""Computes snippet geometry before any pixel is painted.

Positions are in device pixels relative to the export surface, so the
compositor can paint them directly.
"""

from __future__ import annotations

from snapglyph_highlight import Token, TokenKind, color_of, tokenize

from .constants import (
    CONTENT_MARGIN,
    DEVICE_SCALE,
    GUTTER_MARGIN,
    HEADER_HEIGHT,
    LINE_HEIGHT_RATIO,
    MIN_CONTENT_WIDTH,
)
from .errors import LayoutMismatch
from .metrics import MetricsProvider
from .models import Color, LayoutBox, LayoutLine, PositionedToken, RenderSettings, to_rgba


def count_lines(tokens: list[Token]) -> int:
    return 1 + sum(token.newlines for token in tokens)


class LayoutEngine:
    def __init__(self, metrics: MetricsProvider, scale: int = DEVICE_SCALE) -> None:
        self.metrics = metrics
        self.scale = scale

    def gutter_width(self, line_count: int) -> float:
        return self.metrics.measure(str(line_count)) + GUTTER_MARGIN * self.scale

    def line_width(self, line: str) -> float:
        return sum(self.metrics.measure(token.text) for token in tokenize(line))

    def layout(self, text: str, settings: RenderSettings) -> LayoutBox:
        s = self.scale
        line_height = settings.font_size * s * LINE_HEIGHT_RATIO
        padding = settings.padding * s
        margin = CONTENT_MARGIN * s

        tokens = list(tokenize(text))
        line_count = count_lines(tokens)
        raw_lines = text.split("\n")
        if len(raw_lines) != line_count:
            raise LayoutMismatch(f"token stream has {line_count} lines, raw text has {len(raw_lines)}")

        gutter = self.gutter_width(line_count) if settings.show_line_numbers else 0.0
        widest = max(self.line_width(line) for line in raw_lines)
        content_width = max(MIN_CONTENT_WIDTH * s, gutter + widest + 2 * margin)
        header = HEADER_HEIGHT * s if settings.show_window_controls else 0.0
        content_height = header + line_count * line_height + 2 * margin

        code_start_x = padding + gutter + margin
        code_start_y = padding + header + margin
        rows = self._position(tokens, line_count, settings.theme, code_start_x, code_start_y, line_height)

        return LayoutBox(
            content_width=content_width,
            content_height=content_height,
            line_number_gutter_width=gutter,
            header_height=header,
            line_height=line_height,
            padding=padding,
            code_start_x=code_start_x,
            code_start_y=code_start_y,
            lines=tuple(
                LayoutLine(index=i, y=code_start_y + i * line_height, tokens=tuple(row))
                for i, row in enumerate(rows)
            ),
        )

    def _position(
        self,
        tokens: list[Token],
        line_count: int,
        theme: str,
        start_x: float,
        start_y: float,
        line_height: float,
    ) -> list[list[PositionedToken]]:
        rows: list[list[PositionedToken]] = [[] for _ in range(line_count)]
        colors: dict[TokenKind, Color] = {}
        line = 0
        x = start_x
        y = start_y

        for token in tokens:
            parts = token.text.split("\n")
            if token.kind is TokenKind.WHITESPACE:
                if len(parts) > 1:
                    line += len(parts) - 1
                    x = start_x
                    y = start_y + line * line_height
                x += self.metrics.measure(parts[-1])
                continue

            if token.kind not in colors:
                colors[token.kind] = to_rgba(color_of(theme, token.kind))
            # Block comments and template literals may span lines.
            for i, part in enumerate(parts):
                if i:
                    line += 1
                    x = start_x
                    y = start_y + line * line_height
                if not part:
                    continue
                width = self.metrics.measure(part)
                rows[line].append(
                    PositionedToken(text=part, kind=token.kind.value, x=x, y=y, width=width, color=colors[token.kind])
                )
                x += width

        return rows

"""Fixed geometry of exported images, in CSS pixels unless noted.

Every value is multiplied by ``DEVICE_SCALE`` when painted.
"""

from __future__ import annotations

DEVICE_SCALE = 2
LINE_HEIGHT_RATIO = 1.7

MIN_CONTENT_WIDTH = 400
CONTENT_MARGIN = 24
CORNER_RADIUS = 16

GUTTER_MARGIN = 24
GUTTER_TEXT_INSET = 12

HEADER_HEIGHT = 48
DOT_RADIUS = 6
DOT_SPACING = 16
DOT_START_X = 24
LABEL_FONT_SIZE = 12
LABEL_INSET = 24
LABEL_BASELINE_OFFSET = 4

GRADIENT_ANGLE_DEG = 135.0

# RGBA overlays, painted over the theme background.
SEPARATOR_COLOR = (255, 255, 255, 26)
LINE_NUMBER_COLOR = (255, 255, 255, 102)
LABEL_COLOR = (255, 255, 255, 153)

WINDOW_DOT_COLORS = ("#ef4444", "#eab308", "#22c55e")

"""Renderer package for snippet and icon image composition."""

from .background import linear_gradient, paint_background
from .constants import DEVICE_SCALE, GUTTER_MARGIN, LINE_HEIGHT_RATIO, MIN_CONTENT_WIDTH
from .errors import (
    ClipboardUnavailable,
    EncodingFailed,
    ExportError,
    LayoutMismatch,
    MeasurementUnavailable,
    SourceNotFound,
)
from .layout import LayoutEngine, count_lines
from .metrics import FixedAdvanceMetrics, FontMetrics, MetricsProvider, load_font
from .models import BackgroundSpec, LayoutBox, LayoutLine, PositionedToken, RenderSettings, to_rgba
from .vector import encode_png, rasterize_svg
from .compositor import IconCompositor, SnippetCompositor

__all__ = [
    "BackgroundSpec",
    "ClipboardUnavailable",
    "DEVICE_SCALE",
    "EncodingFailed",
    "ExportError",
    "FixedAdvanceMetrics",
    "FontMetrics",
    "GUTTER_MARGIN",
    "IconCompositor",
    "LINE_HEIGHT_RATIO",
    "LayoutBox",
    "LayoutEngine",
    "LayoutLine",
    "LayoutMismatch",
    "MIN_CONTENT_WIDTH",
    "MeasurementUnavailable",
    "MetricsProvider",
    "PositionedToken",
    "RenderSettings",
    "SnippetCompositor",
    "SourceNotFound",
    "count_lines",
    "encode_png",
    "linear_gradient",
    "load_font",
    "paint_background",
    "rasterize_svg",
    "to_rgba",
]

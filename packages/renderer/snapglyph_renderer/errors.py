"""Export failure types. Each one is terminal for the export it occurs in."""

from __future__ import annotations


class ExportError(RuntimeError):
    pass


class MeasurementUnavailable(ExportError):
    """No font could be loaded to measure or draw text."""


class SourceNotFound(ExportError):
    """The vector document for an icon could not be produced."""


class EncodingFailed(ExportError):
    """The raster surface could not be encoded to image bytes."""


class ClipboardUnavailable(ExportError):
    """The host has no image-capable clipboard."""


class LayoutMismatch(ExportError):
    """Token-derived and raw line counts disagree."""

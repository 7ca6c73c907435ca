"""Image clipboard sinks."""

from __future__ import annotations

from typing import Protocol

from snapglyph_renderer import ClipboardUnavailable, EncodingFailed


class ClipboardSink(Protocol):
    def write_image(self, png: bytes) -> None: ...


class QtClipboard:
    """Writes PNG bytes to the clipboard of the running Qt application."""

    def write_image(self, png: bytes) -> None:
        try:
            from PySide6.QtGui import QGuiApplication, QImage
        except ImportError as exc:
            raise ClipboardUnavailable(f"Qt clipboard is not available: {exc}") from exc

        app = QGuiApplication.instance()
        if app is None:
            raise ClipboardUnavailable("No running Qt application owns a clipboard")

        image = QImage.fromData(png, "PNG")
        if image.isNull():
            raise EncodingFailed("Clipboard image could not be decoded")
        app.clipboard().setImage(image)

"""Export pipeline: render to PNG bytes, then hand them to a file or clipboard sink."""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from snapglyph_renderer import IconCompositor, RenderSettings, SnippetCompositor

from .clipboard import ClipboardSink
from .icons import IconCatalog
from .logging_setup import get_logger


def generate_filename(prefix: str, extension: str = "png", now: datetime | None = None) -> str:
    """``{prefix}-YYYY-MM-DDTHH-MM-SS.{extension}`` in UTC, without milliseconds or zone."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{prefix}-{now.strftime('%Y-%m-%dT%H-%M-%S')}.{extension}"


def millis_timestamp(now: datetime | None = None) -> int:
    now = now or datetime.now(timezone.utc)
    return int(now.timestamp() * 1000)


def write_atomic(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return path


class ExportService:
    def __init__(
        self,
        catalog: IconCatalog | None = None,
        snippet_compositor: SnippetCompositor | None = None,
        icon_compositor: IconCompositor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.catalog = catalog or IconCatalog()
        self.snippet_compositor = snippet_compositor or SnippetCompositor()
        self.icon_compositor = icon_compositor or IconCompositor()
        self.logger = logger or get_logger()

    def render_snippet(self, text: str, settings: RenderSettings) -> bytes:
        return self.snippet_compositor.render_png(text, settings)

    def export_snippet(
        self,
        text: str,
        settings: RenderSettings,
        directory: Path,
        prefix: str = "code-snippet",
        now: datetime | None = None,
    ) -> Path:
        png = self.render_snippet(text, settings)
        path = write_atomic(Path(directory) / generate_filename(prefix, now=now), png)
        self.logger.info("snippet exported", extra={"event": "snippet_exported", "path": str(path)})
        return path

    def copy_snippet(self, text: str, settings: RenderSettings, clipboard: ClipboardSink) -> int:
        png = self.render_snippet(text, settings)
        clipboard.write_image(png)
        self.logger.info("snippet copied", extra={"event": "snippet_copied", "count": len(png)})
        return len(png)

    def render_icon(self, namespace: str, name: str, settings: RenderSettings) -> bytes:
        document = self.catalog.render_svg(namespace, name, settings)
        return self.icon_compositor.render_png(document, settings)

    def export_icon(
        self,
        namespace: str,
        name: str,
        settings: RenderSettings,
        directory: Path,
        now: datetime | None = None,
    ) -> Path:
        png = self.render_icon(namespace, name, settings)
        filename = f"icon-{name.lower()}-{millis_timestamp(now)}.png"
        path = write_atomic(Path(directory) / filename, png)
        self.logger.info("icon exported", extra={"event": "icon_exported", "item": name, "path": str(path)})
        return path

    def copy_icon(self, namespace: str, name: str, settings: RenderSettings, clipboard: ClipboardSink) -> int:
        png = self.render_icon(namespace, name, settings)
        clipboard.write_image(png)
        self.logger.info("icon copied", extra={"event": "icon_copied", "item": name})
        return len(png)

"""Bulk icon export into a single zip archive."""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from snapglyph_renderer import IconCompositor, RenderSettings

from .export import millis_timestamp, write_atomic
from .icons import IconCatalog
from .logging_setup import get_logger

ProgressCallback = Callable[[int, int], None]


@dataclass
class BulkExportResult:
    archive: Path
    succeeded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.skipped)


class BulkIconExporter:
    """Renders icons one at a time; a failing icon is logged and skipped."""

    def __init__(
        self,
        catalog: IconCatalog,
        compositor: IconCompositor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.catalog = catalog
        self.compositor = compositor or IconCompositor()
        self.logger = logger or get_logger()

    def export_zip(
        self,
        namespace: str,
        names: Sequence[str],
        settings: RenderSettings,
        output_dir: Path,
        on_progress: ProgressCallback | None = None,
        now: datetime | None = None,
    ) -> BulkExportResult:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        result = BulkExportResult(archive=output_dir / f"icons-{millis_timestamp(now)}.zip")
        total = len(names)
        written: set[str] = set()

        # The archive only reaches disk once the whole batch has run.
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for index, name in enumerate(names, start=1):
                entry = f"{name.lower()}.png"
                if entry in written:
                    self.logger.warning("duplicate icon skipped", extra={"event": "bulk_duplicate", "item": name})
                    result.skipped.append(name)
                else:
                    try:
                        document = self.catalog.render_svg(namespace, name, settings)
                        png = self.compositor.render_png(document, settings)
                    except Exception:
                        self.logger.warning(
                            "icon export failed", exc_info=True, extra={"event": "bulk_item_failed", "item": name}
                        )
                        result.skipped.append(name)
                    else:
                        zf.writestr(entry, png)
                        written.add(entry)
                        result.succeeded.append(name)

                if on_progress is not None:
                    on_progress(index, total)

        write_atomic(result.archive, buffer.getvalue())
        self.logger.info(
            "bulk export finished",
            extra={"event": "bulk_finished", "path": str(result.archive), "count": len(result.succeeded)},
        )
        return result

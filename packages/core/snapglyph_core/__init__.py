"""Core app services for settings, logging, icon sources, and exports."""

from .bulk import BulkExportResult, BulkIconExporter
from .clipboard import ClipboardSink, QtClipboard
from .config import AppConfig, icon_settings, load_config, save_config, snippet_settings
from .export import ExportService, generate_filename
from .icons import IconCatalog, SvgIconLibrary

__all__ = [
    "AppConfig",
    "BulkExportResult",
    "BulkIconExporter",
    "ClipboardSink",
    "ExportService",
    "IconCatalog",
    "QtClipboard",
    "SvgIconLibrary",
    "generate_filename",
    "icon_settings",
    "load_config",
    "save_config",
    "snippet_settings",
]

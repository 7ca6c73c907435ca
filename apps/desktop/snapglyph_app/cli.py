"""CLI entrypoints for snippet and icon exports."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from pathlib import Path

from snapglyph_core import (
    BulkIconExporter,
    ExportService,
    IconCatalog,
    QtClipboard,
    icon_settings,
    load_config,
    snippet_settings,
)
from snapglyph_core.config import icon_background
from snapglyph_core.logging_setup import configure_logging
from snapglyph_highlight import list_themes
from snapglyph_highlight.themes import BACKGROUNDS, LANGUAGES
from snapglyph_renderer import BackgroundSpec, ClipboardUnavailable, ExportError


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _output_dir(args: argparse.Namespace, configured: str | None) -> Path:
    raw = args.out_dir or configured or "."
    return Path(raw).expanduser().resolve()


def _catalog(args: argparse.Namespace, paths: dict[str, str]) -> IconCatalog:
    merged = dict(paths)
    if args.library_path:
        merged[args.library] = args.library_path
    return IconCatalog.from_paths(merged)


def _copy_with_qt(copy) -> int:
    try:
        from PySide6.QtGui import QGuiApplication
    except ImportError as exc:
        raise ClipboardUnavailable(f"Qt clipboard is not available: {exc}") from exc

    app = QGuiApplication.instance() or QGuiApplication(["snapglyph"])
    size = copy(QtClipboard())
    app.processEvents()
    return size


def cmd_snippet(args: argparse.Namespace) -> int:
    cfg = load_config()
    settings = snippet_settings(cfg)
    overrides = {
        k: v
        for k, v in {
            "theme": args.theme,
            "language": args.language,
            "font_size": args.font_size,
            "padding": args.padding,
        }.items()
        if v is not None
    }
    if args.no_line_numbers:
        overrides["show_line_numbers"] = False
    if args.no_window_controls:
        overrides["show_window_controls"] = False
    if args.background:
        overrides["background"] = BackgroundSpec.from_css(args.background)
    settings = replace(settings, **overrides)

    text = Path(args.input).read_text(encoding="utf-8") if args.input else sys.stdin.read()
    service = ExportService()

    if args.copy:
        size = _copy_with_qt(lambda clip: service.copy_snippet(text, settings, clip))
        _print_json({"success": True, "copied_bytes": size})
        return 0

    path = service.export_snippet(text, settings, _output_dir(args, cfg.export.output_dir), prefix=cfg.export.snippet_prefix)
    _print_json({"success": True, "path": path})
    return 0


def _icon_settings(args: argparse.Namespace):
    cfg = load_config()
    settings = icon_settings(cfg)
    overrides = {
        k: v
        for k, v in {
            "icon_size": args.size,
            "stroke_width": args.stroke_width,
            "icon_color": args.color,
            "padding": args.padding,
            "corner_radius": args.radius,
        }.items()
        if v is not None
    }
    if args.background:
        overrides["background"] = BackgroundSpec.from_css(args.background)
    return cfg, replace(settings, **overrides)


def cmd_icon(args: argparse.Namespace) -> int:
    cfg, settings = _icon_settings(args)
    service = ExportService(catalog=_catalog(args, cfg.icon.library_paths))

    if args.copy:
        size = _copy_with_qt(lambda clip: service.copy_icon(args.library, args.name, settings, clip))
        _print_json({"success": True, "copied_bytes": size})
        return 0

    path = service.export_icon(args.library, args.name, settings, _output_dir(args, cfg.export.output_dir))
    _print_json({"success": True, "path": path})
    return 0


def cmd_bulk(args: argparse.Namespace) -> int:
    cfg, settings = _icon_settings(args)
    catalog = _catalog(args, cfg.icon.library_paths)
    names = args.names or catalog.library(args.library).names()

    def progress(current: int, total: int) -> None:
        if not args.quiet:
            print(f"{current}/{total}", file=sys.stderr)

    result = BulkIconExporter(catalog).export_zip(
        args.library, names, settings, _output_dir(args, cfg.export.output_dir), on_progress=progress
    )
    _print_json(
        {
            "success": not result.skipped,
            "archive": result.archive,
            "succeeded": result.succeeded,
            "skipped": result.skipped,
        }
    )
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json(
        {
            "themes": list_themes(),
            "backgrounds": {name: preset.css for name, preset in BACKGROUNDS.items()},
            "languages": LANGUAGES,
        }
    )
    return 0


def cmd_config(_args: argparse.Namespace) -> int:
    cfg = load_config()
    payload = asdict(cfg)
    payload["icon_background"] = icon_background(cfg.icon).css
    _print_json(payload)
    return 0


def _add_icon_style_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--library", default="lucide", help="Icon library namespace")
    cmd.add_argument("--library-path", default=None, help="Directory of SVG files for the library")
    cmd.add_argument("--size", type=int, default=None)
    cmd.add_argument("--stroke-width", type=float, default=None)
    cmd.add_argument("--color", default=None)
    cmd.add_argument("--padding", type=int, default=None)
    cmd.add_argument("--radius", type=int, default=None)
    cmd.add_argument("--background", default=None, help="CSS color or linear-gradient(...)")
    cmd.add_argument("--out-dir", default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snapglyph", description="Render code snippets and icons to PNG")
    sub = parser.add_subparsers(dest="command", required=True)

    snippet_cmd = sub.add_parser("snippet", help="Render a code snippet")
    snippet_cmd.add_argument("--input", default=None, help="Source file (default: stdin)")
    snippet_cmd.add_argument("--theme", choices=list_themes(), default=None)
    snippet_cmd.add_argument("--language", default=None)
    snippet_cmd.add_argument("--font-size", type=int, default=None)
    snippet_cmd.add_argument("--padding", type=int, default=None)
    snippet_cmd.add_argument("--background", default=None, help="CSS color or linear-gradient(...)")
    snippet_cmd.add_argument("--no-line-numbers", action="store_true")
    snippet_cmd.add_argument("--no-window-controls", action="store_true")
    snippet_cmd.add_argument("--copy", action="store_true", help="Copy to clipboard instead of writing a file")
    snippet_cmd.add_argument("--out-dir", default=None)
    snippet_cmd.set_defaults(func=cmd_snippet)

    icon_cmd = sub.add_parser("icon", help="Render a single icon")
    icon_cmd.add_argument("name", help="Icon name, e.g. ArrowRight")
    icon_cmd.add_argument("--copy", action="store_true", help="Copy to clipboard instead of writing a file")
    _add_icon_style_args(icon_cmd)
    icon_cmd.set_defaults(func=cmd_icon)

    bulk_cmd = sub.add_parser("bulk", help="Render many icons into a zip archive")
    bulk_cmd.add_argument("names", nargs="*", help="Icon names (default: whole library)")
    bulk_cmd.add_argument("--quiet", action="store_true")
    _add_icon_style_args(bulk_cmd)
    bulk_cmd.set_defaults(func=cmd_bulk)

    themes_cmd = sub.add_parser("themes", help="List themes, backgrounds and languages")
    themes_cmd.set_defaults(func=cmd_themes)

    config_cmd = sub.add_parser("config", help="Print effective configuration")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (ExportError, ValueError) as exc:
        _print_json({"success": False, "error": type(exc).__name__, "detail": str(exc)})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

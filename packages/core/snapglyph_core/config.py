"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from snapglyph_highlight import get_background, get_theme
from snapglyph_renderer import BackgroundSpec, RenderSettings


CONFIG_VERSION = 2


@dataclass
class SnippetConfig:
    theme: str = "amoled"
    background: str = "purple"
    padding: int = 32
    show_line_numbers: bool = True
    show_window_controls: bool = True
    language: str = "javascript"
    font_family: str = "JetBrains Mono"
    font_size: int = 14


@dataclass
class IconConfig:
    size: int = 48
    stroke_width: float = 2.0
    color: str = "#8b5cf6"
    background_type: str = "solid"
    background_color: str = "#ffffff"
    gradient_from: str = "#8b5cf6"
    gradient_to: str = "#ec4899"
    padding: int = 16
    border_radius: int = 12
    library: str = "lucide"
    library_paths: dict[str, str] = field(default_factory=dict)


@dataclass
class ExportConfig:
    output_dir: str | None = None
    snippet_prefix: str = "code-snippet"


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    snippet: SnippetConfig = field(default_factory=SnippetConfig)
    icon: IconConfig = field(default_factory=IconConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


DEFAULT_CONFIG = AppConfig()


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "SnapGlyph"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "SnapGlyph"
    return Path.home() / ".config" / "snapglyph"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_snippet(cfg: AppConfig) -> None:
    cfg.snippet.theme = get_theme(cfg.snippet.theme).name
    cfg.snippet.background = get_background(cfg.snippet.background).name
    cfg.snippet.padding = max(0, min(128, int(cfg.snippet.padding)))
    cfg.snippet.font_size = max(8, min(48, int(cfg.snippet.font_size)))


def _normalize_icon(cfg: AppConfig) -> None:
    if cfg.icon.background_type not in ("none", "solid", "gradient"):
        cfg.icon.background_type = "solid"
    cfg.icon.size = max(8, min(1024, int(cfg.icon.size)))
    cfg.icon.stroke_width = float(max(0.25, min(8.0, cfg.icon.stroke_width)))
    cfg.icon.padding = max(0, int(cfg.icon.padding))
    cfg.icon.border_radius = max(0, int(cfg.icon.border_radius))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the icon background as a CSS string.
        icon = data.get("icon")
        icon = dict(icon) if isinstance(icon, dict) else {}
        legacy = icon.pop("background", None)
        if isinstance(legacy, str):
            try:
                spec = BackgroundSpec.from_css(legacy)
            except ValueError:
                spec = BackgroundSpec.none()
            icon["background_type"] = spec.kind
            if spec.kind == "solid":
                icon["background_color"] = spec.color
            elif spec.kind == "gradient":
                icon["gradient_from"] = spec.gradient_from
                icon["gradient_to"] = spec.gradient_to
        data["icon"] = icon
        data.setdefault("diagnostics", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        data = _migrate(raw)
        cfg = AppConfig(
            config_version=int(data.get("config_version", CONFIG_VERSION)),
            snippet=_merge(SnippetConfig, data.get("snippet")),
            icon=_merge(IconConfig, data.get("icon")),
            export=_merge(ExportConfig, data.get("export")),
            diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics")),
        )
        _normalize_snippet(cfg)
        _normalize_icon(cfg)
    except (TypeError, ValueError, AttributeError):
        return AppConfig()
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def snippet_settings(cfg: AppConfig) -> RenderSettings:
    s = cfg.snippet
    preset = get_background(s.background)
    return RenderSettings(
        font_family=s.font_family,
        font_size=s.font_size,
        padding=s.padding,
        show_line_numbers=s.show_line_numbers,
        show_window_controls=s.show_window_controls,
        theme=s.theme,
        language=s.language,
        background=BackgroundSpec.gradient(preset.gradient_from, preset.gradient_to, preset.angle_deg),
    )


def icon_background(icon: IconConfig) -> BackgroundSpec:
    if icon.background_type == "solid":
        return BackgroundSpec.solid(icon.background_color)
    if icon.background_type == "gradient":
        return BackgroundSpec.gradient(icon.gradient_from, icon.gradient_to)
    return BackgroundSpec.none()


def icon_settings(cfg: AppConfig) -> RenderSettings:
    i = cfg.icon
    return RenderSettings(
        padding=i.padding,
        background=icon_background(i),
        icon_size=i.size,
        stroke_width=i.stroke_width,
        icon_color=i.color,
        corner_radius=i.border_radius,
    )

from __future__ import annotations

import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for _sub in ("apps/desktop", "packages/highlight", "packages/renderer", "packages/core"):
    sys.path.insert(0, str(ROOT / _sub))

import snapglyph_app.__main__ as desktop_main


def test_main_without_args_prints_help(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(desktop_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = desktop_main.main([])
    assert rc == 0
    assert calls == [["--help"]]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(desktop_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = desktop_main.main(["icon", "Star", "--size", "64"])
    assert rc == 0
    assert calls == [["icon", "Star", "--size", "64"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "desktop" / "snapglyph_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result

"""On-disk SVG icon libraries standing in for component-based icon packs.

Each library is a directory of ``<kebab-name>.svg`` files, the layout the
Lucide and Feather packages ship. Documents are restyled per export (size,
stroke width, color) so the compositor receives a standalone SVG with a
deterministic intrinsic size.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from snapglyph_renderer import RenderSettings, SourceNotFound

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)

_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])")


def icon_stem(name: str) -> str:
    """``ArrowRight`` -> ``arrow-right``; kebab-case names pass through."""
    return _WORD_BOUNDARY_RE.sub("-", name).lower()


def icon_name(stem: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in stem.split("-") if part)


def _fmt(value: float) -> str:
    return f"{value:g}"


class SvgIconLibrary:
    def __init__(self, namespace: str, root: Path, prefix: str = "") -> None:
        self.namespace = namespace
        self.root = Path(root)
        self.prefix = prefix

    def names(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return sorted(self.prefix + icon_name(p.stem) for p in self.root.glob("*.svg"))

    def path_for(self, name: str) -> Path | None:
        if not _NAME_RE.match(name):
            return None
        bare = name[len(self.prefix) :] if self.prefix and name.startswith(self.prefix) else name
        for stem in (name, bare, icon_stem(bare)):
            candidate = self.root / f"{stem}.svg"
            if candidate.is_file():
                return candidate
        return None

    def render_svg(self, name: str, settings: RenderSettings) -> str:
        path = self.path_for(name)
        if path is None:
            raise SourceNotFound(f"Icon not found: {self.namespace}:{name}")
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as exc:
            raise SourceNotFound(f"Icon is not valid SVG: {self.namespace}:{name}") from exc
        if root.tag not in ("svg", f"{{{SVG_NS}}}svg"):
            raise SourceNotFound(f"Icon has no <svg> root: {self.namespace}:{name}")

        self._apply_style(root, settings)
        return ET.tostring(root, encoding="unicode")

    @staticmethod
    def _apply_style(root: ET.Element, settings: RenderSettings) -> None:
        root.set("width", _fmt(settings.icon_size))
        root.set("height", _fmt(settings.icon_size))
        root.set("color", settings.icon_color)
        if root.get("stroke") is not None or root.get("stroke-width") is not None:
            root.set("stroke-width", _fmt(settings.stroke_width))
        for element in root.iter():
            for key, value in list(element.attrib.items()):
                if "currentColor" in value:
                    element.set(key, value.replace("currentColor", settings.icon_color))


class IconCatalog:
    def __init__(self, libraries: list[SvgIconLibrary] | None = None) -> None:
        self._libraries: dict[str, SvgIconLibrary] = {}
        for library in libraries or []:
            self.add(library)

    @classmethod
    def from_paths(cls, paths: dict[str, str]) -> IconCatalog:
        return cls([SvgIconLibrary(namespace, Path(root).expanduser()) for namespace, root in paths.items()])

    def add(self, library: SvgIconLibrary) -> None:
        self._libraries[library.namespace] = library

    def namespaces(self) -> list[str]:
        return sorted(self._libraries)

    def library(self, namespace: str) -> SvgIconLibrary:
        library = self._libraries.get(namespace)
        if library is None:
            raise SourceNotFound(f"Unknown icon library: {namespace}")
        return library

    def render_svg(self, namespace: str, name: str, settings: RenderSettings) -> str:
        return self.library(namespace).render_svg(name, settings)

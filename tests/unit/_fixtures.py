from pathlib import Path

LUCIDE_ARROW = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M5 12h14"/><path d="m12 5 7 7-7 7"/></svg>'
)

FILLED_STAR = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16" fill="currentColor">'
    '<path d="M8 0l2 6h6l-5 4 2 6-5-4-5 4 2-6-5-4h6z"/></svg>'
)


def write_library(root: Path, icons: dict[str, str]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for stem, body in icons.items():
        (root / f"{stem}.svg").write_text(body, encoding="utf-8")
    return root

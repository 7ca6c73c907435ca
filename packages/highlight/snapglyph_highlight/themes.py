"""Built-in code themes, background presets and language labels."""

from __future__ import annotations

from .models import BackgroundPreset, CodeTheme, TokenKind

DEFAULT_THEME_NAME = "amoled"
DEFAULT_BACKGROUND_NAME = "purple"

THEMES: dict[str, CodeTheme] = {
    "amoled": CodeTheme(
        name="amoled",
        label="AMOLED",
        background="#000000",
        foreground="#eeffff",
        colors={
            "keyword": "#c792ea",
            "function": "#82aaff",
            "string": "#c3e88d",
            "template-literal": "#c3e88d",
            "number": "#f78c6c",
            "comment": "#697098",
            "operator": "#89ddff",
            "identifier": "#eeffff",
            "other": "#eeffff",
        },
    ),
    "github": CodeTheme(
        name="github",
        label="GitHub",
        background="#ffffff",
        foreground="#24292e",
        colors={
            "keyword": "#d73a49",
            "function": "#6f42c1",
            "string": "#032f62",
            "template-literal": "#032f62",
            "number": "#005cc5",
            "comment": "#6a737d",
            "operator": "#d73a49",
            "identifier": "#24292e",
            "other": "#24292e",
        },
    ),
    "dracula": CodeTheme(
        name="dracula",
        label="Dracula",
        background="#282a36",
        foreground="#f8f8f2",
        colors={
            "keyword": "#ff79c6",
            "function": "#50fa7b",
            "string": "#f1fa8c",
            "template-literal": "#f1fa8c",
            "number": "#bd93f9",
            "comment": "#6272a4",
            "operator": "#ff79c6",
            "identifier": "#f8f8f2",
            "other": "#f8f8f2",
        },
    ),
    "monokai": CodeTheme(
        name="monokai",
        label="Monokai",
        background="#272822",
        foreground="#f8f8f2",
        colors={
            "keyword": "#f92672",
            "function": "#a6e22e",
            "string": "#e6db74",
            "template-literal": "#e6db74",
            "number": "#ae81ff",
            "comment": "#75715e",
            "operator": "#f92672",
            "identifier": "#f8f8f2",
            "other": "#f8f8f2",
        },
    ),
}

BACKGROUNDS: dict[str, BackgroundPreset] = {
    "purple": BackgroundPreset("purple", "Purple Haze", "#667eea", "#764ba2"),
    "sunset": BackgroundPreset("sunset", "Sunset", "#f093fb", "#f5576c"),
    "ocean": BackgroundPreset("ocean", "Ocean", "#4facfe", "#00f2fe"),
    "forest": BackgroundPreset("forest", "Forest", "#43e97b", "#38f9d7"),
    "midnight": BackgroundPreset("midnight", "Midnight", "#232526", "#414345"),
}

LANGUAGES: dict[str, str] = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "python": "Python",
    "jsx": "JSX",
    "tsx": "TSX",
    "json": "JSON",
    "bash": "Bash",
    "html": "HTML",
    "css": "CSS",
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> CodeTheme:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])


def get_background(name: str | None) -> BackgroundPreset:
    if not name:
        return BACKGROUNDS[DEFAULT_BACKGROUND_NAME]
    return BACKGROUNDS.get(name, BACKGROUNDS[DEFAULT_BACKGROUND_NAME])


def language_label(language: str) -> str:
    return LANGUAGES.get(language, language)


def color_of(theme: str | None, kind: TokenKind | str) -> str:
    """Display color for a token kind; unknown kinds use the theme's identifier color."""
    colors = get_theme(theme).colors
    key = kind.value if isinstance(kind, TokenKind) else str(kind)
    return colors.get(key, colors[TokenKind.IDENTIFIER.value])

"""Lexical highlighting for code snippets: tokenizer and theme palettes."""

from .models import BackgroundPreset, CodeTheme, Token, TokenKind
from .themes import (
    DEFAULT_BACKGROUND_NAME,
    DEFAULT_THEME_NAME,
    color_of,
    get_background,
    get_theme,
    language_label,
    list_themes,
)
from .tokenizer import KEYWORDS, OPERATORS, TokenStream, highlight_markup, tokenize

__all__ = [
    "BackgroundPreset",
    "CodeTheme",
    "DEFAULT_BACKGROUND_NAME",
    "DEFAULT_THEME_NAME",
    "KEYWORDS",
    "OPERATORS",
    "Token",
    "TokenKind",
    "TokenStream",
    "color_of",
    "get_background",
    "get_theme",
    "highlight_markup",
    "language_label",
    "list_themes",
    "tokenize",
]

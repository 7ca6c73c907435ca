"""Typed token models shared by the highlighter and the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    FUNCTION = "function"
    STRING = "string"
    TEMPLATE_LITERAL = "template-literal"
    NUMBER = "number"
    OPERATOR = "operator"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int
    end: int

    @property
    def offset(self) -> range:
        return range(self.start, self.end)

    @property
    def newlines(self) -> int:
        return self.text.count("\n")


@dataclass(frozen=True)
class CodeTheme:
    name: str
    label: str
    background: str
    foreground: str
    colors: dict[str, str]


@dataclass(frozen=True)
class BackgroundPreset:
    name: str
    label: str
    gradient_from: str
    gradient_to: str
    angle_deg: float = 135.0

    @property
    def css(self) -> str:
        return f"linear-gradient({self.angle_deg:g}deg, {self.gradient_from}, {self.gradient_to})"

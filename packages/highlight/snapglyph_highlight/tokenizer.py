"""Language-agnostic lexical scanner used for code colorization.

The scanner does not parse a declared language. It pattern-matches a union
vocabulary of JavaScript, TypeScript and Python so any pasted snippet gets a
reasonable coloring. Scanning never fails: characters nothing else claims
come out as single ``OTHER`` tokens, and unterminated strings or block
comments run to the end of the buffer.
"""

from __future__ import annotations

import html
from collections.abc import Iterator

from .models import Token, TokenKind

KEYWORDS = frozenset(
    {
        "const", "let", "var", "function", "if", "else", "for", "while", "do", "switch", "case", "default",
        "try", "catch", "finally", "throw", "return", "break", "continue", "class", "extends", "import",
        "export", "from", "as", "async", "await", "yield", "new", "this", "super", "static", "public",
        "private", "protected", "abstract", "interface", "type", "enum", "namespace", "module", "declare",
        "implements", "keyof", "typeof", "instanceof", "in", "of", "delete", "void", "undefined",
        "null", "true", "false", "boolean", "string", "number", "object", "any", "unknown", "never",
        "def", "lambda", "with", "pass", "elif", "and", "or", "not", "is", "None", "True", "False",
        "print", "len", "range", "str", "int", "float", "list", "dict", "tuple", "set",
    }
)

_OPERATOR_TABLE = (
    "===", "!==", "==", "!=", "<=", ">=", "=>", "...", "?.", "??", "??=",
    "+=", "-=", "*=", "/=", "%=", "++", "--", "<<", ">>", ">>>",
    "&&", "||", "+", "-", "*", "/", "%", "=", "<", ">", "!", "&", "|", "^", "~", "?", ":",
    ">>>=", "<<=", ">>=", "**", "**=", "->", "&=", "|=", "^=", "&&=", "||=",
)

# Longest first so ">>>" is never split into ">>" + ">".
OPERATORS: tuple[str, ...] = tuple(sorted(set(_OPERATOR_TABLE), key=len, reverse=True))
_MAX_OPERATOR = len(OPERATORS[0])

_QUOTES = {'"': TokenKind.STRING, "'": TokenKind.STRING, "`": TokenKind.TEMPLATE_LITERAL}
_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_$")
_IDENT_PART = _IDENT_START | frozenset("0123456789")
_DIGITS = frozenset("0123456789")
_NUMBER_PART = _DIGITS | frozenset("._")


class TokenStream:
    """Lazy, restartable view of ``text`` as tokens. Each iteration rescans."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        return _scan(self.text)

    def __repr__(self) -> str:
        return f"TokenStream({self.text!r})"


def tokenize(text: str) -> TokenStream:
    return TokenStream(text)


def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


def _scan(code: str) -> Iterator[Token]:
    n = len(code)
    i = 0
    while i < n:
        start = i
        ch = code[i]

        if ch.isspace():
            while i < n and code[i].isspace():
                i += 1
            yield Token(TokenKind.WHITESPACE, code[start:i], start, i)
            continue

        if ch == "/" and i + 1 < n and code[i + 1] in "/*":
            if code[i + 1] == "/":
                i = _line_end(code, i)
            else:
                close = code.find("*/", i + 2)
                i = n if close < 0 else close + 2
            yield Token(TokenKind.COMMENT, code[start:i], start, i)
            continue

        if ch == "#":
            i = _line_end(code, i)
            yield Token(TokenKind.COMMENT, code[start:i], start, i)
            continue

        if ch in _QUOTES:
            i += 1
            while i < n:
                if code[i] == ch:
                    i += 1
                    break
                if code[i] == "\\":
                    i = min(i + 2, n)
                else:
                    i += 1
            yield Token(_QUOTES[ch], code[start:i], start, i)
            continue

        if _is_digit(ch) or (ch == "." and i + 1 < n and _is_digit(code[i + 1])):
            i = _number_end(code, i)
            yield Token(TokenKind.NUMBER, code[start:i], start, i)
            continue

        op = _match_operator(code, i)
        if op:
            i += len(op)
            yield Token(TokenKind.OPERATOR, op, start, i)
            continue

        if ch in _IDENT_START:
            while i < n and code[i] in _IDENT_PART:
                i += 1
            word = code[start:i]
            yield Token(_classify(word, code, i), word, start, i)
            continue

        i += 1
        yield Token(TokenKind.OTHER, ch, start, i)


def _line_end(code: str, i: int) -> int:
    end = code.find("\n", i)
    return len(code) if end < 0 else end


def _number_end(code: str, i: int) -> int:
    n = len(code)
    while i < n:
        ch = code[i]
        if ch in _NUMBER_PART:
            i += 1
        elif ch in "eE" and i + 1 < n and _is_digit(code[i + 1]):
            i += 2
        elif ch in "eE" and i + 2 < n and code[i + 1] in "+-" and _is_digit(code[i + 2]):
            i += 3
        else:
            break
    return i


def _match_operator(code: str, i: int) -> str | None:
    window = code[i : i + _MAX_OPERATOR]
    for op in OPERATORS:
        if window.startswith(op):
            return op
    return None


def _classify(word: str, code: str, end: int) -> TokenKind:
    if word in KEYWORDS:
        return TokenKind.KEYWORD
    j = end
    while j < len(code) and code[j].isspace():
        j += 1
    if j < len(code) and code[j] == "(":
        return TokenKind.FUNCTION
    return TokenKind.IDENTIFIER


def highlight_markup(text: str) -> str:
    """Render ``text`` as ``<span class="token-...">`` fragments for HTML previews."""
    return "".join(
        f'<span class="token-{token.kind.value}">{html.escape(token.text)}</span>' for token in tokenize(text)
    )

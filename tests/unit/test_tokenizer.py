import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "highlight"))

from snapglyph_highlight import TokenKind, highlight_markup, tokenize


SAMPLES = [
    "",
    "const x = 1;\n",
    "def greet(name):\n    return f'hi {name}'\n",
    "a >>>= b >> c > d ?? e?.f ... g",
    "/* open comment",
    '"unterminated string',
    "`multi\nline ${x}`",
    "x = 1.2.3 + .5 + 1e-5 + 0xFF # trailing\n",
    "café = 'été'  // ☃\r\n",
    "\\",
    '"ends with backslash\\',
]


def kinds(text):
    return [(t.kind, t.text) for t in tokenize(text)]


class TokenizerTests(unittest.TestCase):
    def test_empty_input(self):
        self.assertEqual(list(tokenize("")), [])

    def test_lossless(self):
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                self.assertEqual("".join(t.text for t in tokenize(sample)), sample)

    def test_offsets_cover_source(self):
        for sample in SAMPLES:
            expected_start = 0
            for token in tokenize(sample):
                self.assertEqual(token.start, expected_start)
                self.assertEqual(sample[token.start : token.end], token.text)
                self.assertEqual(len(token.offset), len(token.text))
                expected_start = token.end
            self.assertEqual(expected_start, len(sample))

    def test_stream_is_restartable(self):
        stream = tokenize("let a = b(1)")
        self.assertEqual(list(stream), list(stream))

    def test_unterminated_string_runs_to_end(self):
        self.assertEqual(kinds('"abc'), [(TokenKind.STRING, '"abc')])

    def test_unterminated_block_comment_runs_to_end(self):
        self.assertEqual(kinds("/* abc"), [(TokenKind.COMMENT, "/* abc")])
        self.assertEqual(kinds("/* a *"), [(TokenKind.COMMENT, "/* a *")])

    def test_longest_operator_wins(self):
        self.assertEqual(kinds(">>>"), [(TokenKind.OPERATOR, ">>>")])
        self.assertEqual(kinds(">>>="), [(TokenKind.OPERATOR, ">>>=")])
        self.assertEqual(kinds("==="), [(TokenKind.OPERATOR, "===")])
        self.assertEqual(
            kinds("a>>b"),
            [(TokenKind.IDENTIFIER, "a"), (TokenKind.OPERATOR, ">>"), (TokenKind.IDENTIFIER, "b")],
        )

    def test_function_identifier_keyword(self):
        self.assertEqual(kinds("foo(")[0], (TokenKind.FUNCTION, "foo"))
        self.assertEqual(kinds("foo  (x)")[0], (TokenKind.FUNCTION, "foo"))
        self.assertEqual(kinds("foo ")[0], (TokenKind.IDENTIFIER, "foo"))
        self.assertEqual(kinds("if"), [(TokenKind.KEYWORD, "if")])
        self.assertEqual(kinds("if (x)")[0], (TokenKind.KEYWORD, "if"))
        self.assertEqual(kinds("$el_2")[0], (TokenKind.IDENTIFIER, "$el_2"))

    def test_function_lookahead_does_not_consume_whitespace(self):
        self.assertEqual(
            kinds("foo (")[:2],
            [(TokenKind.FUNCTION, "foo"), (TokenKind.WHITESPACE, " ")],
        )

    def test_numbers_are_greedy(self):
        self.assertEqual(kinds("1.2.3"), [(TokenKind.NUMBER, "1.2.3")])
        self.assertEqual(kinds("1_000"), [(TokenKind.NUMBER, "1_000")])
        self.assertEqual(kinds("1e10"), [(TokenKind.NUMBER, "1e10")])
        self.assertEqual(kinds("2.5E-3"), [(TokenKind.NUMBER, "2.5E-3")])
        self.assertEqual(kinds(".5"), [(TokenKind.NUMBER, ".5")])
        self.assertEqual(
            kinds("1e+x"),
            [
                (TokenKind.NUMBER, "1"),
                (TokenKind.IDENTIFIER, "e"),
                (TokenKind.OPERATOR, "+"),
                (TokenKind.IDENTIFIER, "x"),
            ],
        )

    def test_spread_is_operator(self):
        self.assertEqual(kinds("..."), [(TokenKind.OPERATOR, "...")])

    def test_strings_and_templates(self):
        self.assertEqual(kinds('"a\\"b"'), [(TokenKind.STRING, '"a\\"b"')])
        self.assertEqual(kinds("'x'"), [(TokenKind.STRING, "'x'")])
        self.assertEqual(kinds("`t`"), [(TokenKind.TEMPLATE_LITERAL, "`t`")])

    def test_comments(self):
        self.assertEqual(
            kinds("// note\nx"),
            [(TokenKind.COMMENT, "// note"), (TokenKind.WHITESPACE, "\n"), (TokenKind.IDENTIFIER, "x")],
        )
        self.assertEqual(kinds("# hash")[0], (TokenKind.COMMENT, "# hash"))
        self.assertEqual(kinds("/* a */b")[0], (TokenKind.COMMENT, "/* a */"))

    def test_whitespace_run_keeps_newlines(self):
        tokens = list(tokenize("a\n\n  b"))
        self.assertEqual(tokens[1].kind, TokenKind.WHITESPACE)
        self.assertEqual(tokens[1].text, "\n\n  ")
        self.assertEqual(tokens[1].newlines, 2)

    def test_unknown_characters_are_single_other_tokens(self):
        self.assertEqual(kinds("@é"), [(TokenKind.OTHER, "@"), (TokenKind.OTHER, "é")])

    def test_highlight_markup_escapes(self):
        markup = highlight_markup("a<b")
        self.assertEqual(
            markup,
            '<span class="token-identifier">a</span>'
            '<span class="token-operator">&lt;</span>'
            '<span class="token-identifier">b</span>',
        )


if __name__ == "__main__":
    unittest.main()

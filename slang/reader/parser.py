"""
  slang Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits slang values directly:

    - ( ... )        -> List
    - [ ... ]        -> Vector
    - 'x             -> (quote x)
    - numbers        -> float (decimal, exponent, 0x hex; optional sign)
    - "strings"      -> str (\\" \\\\ \\n \\t \\r escapes, may span lines)
    - true / false   -> True / False
    - nil            -> Nil
    - anything else  -> Symbol
    - ; comment      -> skipped to end of line
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from slang import SExpression
from slang.errors import SlangSyntaxError
from slang.types.nil import Nil
from slang.types.sequence import List, Vector
from slang.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote that never closes
    r"|(?P<atom>[\w!$%&*+\-=<>?/.]+)"  # numbers and symbols
    r"|(?P<unknown>.)",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:0[xX][0-9a-fA-F]+|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

CLOSERS: dict[str, str] = {
    "lparen": "rparen",
    "lbracket": "rbracket",
}

Token = tuple[str, str, int, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, line, column) tuples."""
    pos = 0
    line = 1
    line_start = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group(kind)
        column = pos - line_start + 1

        if kind == "unterminated":
            raise SlangSyntaxError("Unterminated string", line, column)
        if kind == "unknown":
            raise SlangSyntaxError(f"Unexpected character {text!r}", line, column)
        if kind not in ("whitespace", "comment"):
            yield kind, text, line, column

        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()


def _unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def parse_atom(text: str) -> SExpression:
    if text == "true":
        return True
    if text == "false":
        return False
    if text == "nil":
        return Nil
    if NUMBER_RE.fullmatch(text):
        if "x" in text or "X" in text:
            return float(int(text, 16))
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        """Parse the next expression; returns None at end of input."""
        tok = self.advance()
        if tok is None:
            return None
        kind, text, line, column = tok

        if kind == "atom":
            return parse_atom(text)

        if kind == "string":
            return _unescape(text[1:-1])

        if kind == "quote":
            if self.peek() is None:
                raise SlangSyntaxError("Unexpected EOF after quote", line, column)
            return List.of(Symbol("quote"), self.parse_expr())

        if kind in CLOSERS:
            items = self._parse_sequence(CLOSERS[kind], text, line, column)
            return List.from_iterable(items) if kind == "lparen" else Vector(items)

        raise SlangSyntaxError(f"Unexpected '{text}'", line, column)

    def _parse_sequence(self, closer: str, opener: str, line: int, column: int) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                close = ")" if opener == "(" else "]"
                raise SlangSyntaxError(f"Unbalanced '{opener}{close}'", line, column)
            if tok[0] == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Read every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())

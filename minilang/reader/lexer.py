"""
  Lexer

Splits source text into a flat stream of ``(token_type, value)`` tuples:

    - (            -> ("lparen", "(")
    - )            -> ("rparen", ")")
    - "text"       -> ("string", "text")   no escapes, a quote always ends it
    - 42           -> ("number", 42)       unsigned decimal, u32 range
    - + fn let ... -> ("keyword", "+")
    - anything else that is not whitespace, a bracket or a quote
                   -> ("symbol", "name")

A digit always starts a number, so ``0foo`` lexes as a number then a symbol.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Union

from minilang.config import KEYWORDS, U32_MAX
from minilang.errors import MinilangSyntaxError

Token = tuple[str, Union[str, int]]

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*"?)'  # strings; unterminated ones run to end of input
    r"|(?P<number>[0-9]+)"  # unsigned decimal integers
    r'|(?P<symbol>[^\s()"]+)'  # keywords and names
    r")",
)


def lex(source: str, keywords: Iterable[str] = KEYWORDS) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    keywords = frozenset(keywords)
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "string":
            body = text[1:]
            yield "string", body[:-1] if body.endswith('"') else body
        elif kind == "number":
            digits = text.lstrip("0") or "0"
            # u32 has at most 10 digits
            if len(digits) > 10 or int(digits) > U32_MAX:
                raise MinilangSyntaxError(f"Number literal out of range ({len(digits)} digits)")
            yield "number", int(digits)
        elif kind == "symbol" and text in keywords:
            yield "keyword", text
        else:
            yield kind, text


def tokenize(source: str, keywords: Iterable[str] = KEYWORDS) -> list[Token]:
    return list(lex(source, keywords))


def format_tokens(tokens: Iterable[Token]) -> str:
    """Display form: each token's text joined by single spaces."""
    return " ".join(str(value) for _, value in tokens)

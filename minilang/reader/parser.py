"""
  Tree builder

Turns the flat token stream from the lexer into a single Program node.

The builder keeps an explicit stack of in-progress child lists instead of
recursing: `(` saves the current list and starts a new form, `)` freezes the
current form and appends it to the list it interrupted. Every other token
appends a leaf. One left-to-right pass, no lookahead.
"""

from __future__ import annotations

import logging
from typing import Iterable

from minilang.config import KEYWORDS
from minilang.errors import MinilangSyntaxError
from minilang.reader.lexer import Token, lex
from minilang.types.node import (
    KEYWORD_NODES,
    Form,
    Ident,
    Node,
    NumberLiteral,
    Program,
    StringLiteral,
)

logger = logging.getLogger(__name__)


def _leaf(tok_type: str, tok_val) -> Node:
    if tok_type == "keyword":
        try:
            return KEYWORD_NODES[tok_val]
        except KeyError:
            raise MinilangSyntaxError(f"Unknown keyword: {tok_val}") from None
    if tok_type == "symbol":
        return Ident(tok_val)
    if tok_type == "number":
        return NumberLiteral(tok_val)
    if tok_type == "string":
        return StringLiteral(tok_val)
    raise MinilangSyntaxError(f"Unknown token: {tok_type} {tok_val!r}")


def parse(tokens: Iterable[Token]) -> Program:
    """Build a Program from `tokens`.

    Raises MinilangSyntaxError on an unexpected `)` or an unclosed `(`.
    """
    # Each stack entry is the child list of a node that was interrupted by `(`.
    expr_stack: list[list[Node]] = []
    current: list[Node] = []

    for tok_type, tok_val in tokens:
        if tok_type == "lparen":
            expr_stack.append(current)
            current = []
        elif tok_type == "rparen":
            if not expr_stack:
                # the current node is the Program itself
                raise MinilangSyntaxError("Unexpected `)`")
            closed = Form(tuple(current))
            current = expr_stack.pop()
            current.append(closed)
        else:
            current.append(_leaf(tok_type, tok_val))

    if expr_stack:
        raise MinilangSyntaxError(f"Unexpected EOF: {len(expr_stack)} unclosed form(s)")

    program = Program(tuple(current))
    logger.debug("parsed: %r", program)
    return program


def read(source: str, keywords: Iterable[str] = KEYWORDS) -> Program:
    """Tokenize and parse `source` in one step."""
    return parse(lex(source, keywords))

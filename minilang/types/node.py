"""Syntax tree shared by the reader, the macro expander and the evaluator.

A Program is an s-expression without the surrounding parentheses; it only
occurs at the top level. Everywhere else a bracketed group is a Form, whose
first child decides what the form means. Evaluated values are nodes as well:
literals, the empty form and function-literal forms are self-evaluating.

All node classes are frozen dataclasses holding tuples, so a tree is
immutable once the reader has finished building it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from minilang.errors import MinilangSyntaxError, MinilangTypeError


def _write_node_list(children: tuple[Node, ...]) -> str:
    return " ".join(str(child) for child in children)


@dataclass(frozen=True)
class Program:
    children: tuple[Node, ...] = ()

    def __str__(self) -> str:
        return _write_node_list(self.children)

    def __repr__(self) -> str:
        return f"Program({', '.join(repr(c) for c in self.children)})"


@dataclass(frozen=True)
class Form:
    children: tuple[Node, ...] = ()

    def __str__(self) -> str:
        return f"({_write_node_list(self.children)})"

    def __repr__(self) -> str:
        return f"Form({', '.join(repr(c) for c in self.children)})"


class Keyword:
    """Base for the atomic keyword leaves. Instances carry no payload."""

    __slots__ = ()
    text: str = ""

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return type(self).__name__


class Plus(Keyword):
    __slots__ = ()
    text = "+"


class Fn(Keyword):
    __slots__ = ()
    text = "fn"


class Let(Keyword):
    __slots__ = ()
    text = "let"


class Print(Keyword):
    __slots__ = ()
    text = "print"


class Macro(Keyword):
    __slots__ = ()
    text = "macro"


@dataclass(frozen=True)
class Ident:
    name: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Ident({self.name!r})"


@dataclass(frozen=True)
class NumberLiteral:
    value: int

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"NumberLiteral({self.value})"


@dataclass(frozen=True)
class StringLiteral:
    text: str

    def __str__(self) -> str:
        # reads back to an equal StringLiteral
        return f'"{self.text}"'

    def __repr__(self) -> str:
        return f"StringLiteral({self.text!r})"


Node = Union[Program, Form, Plus, Fn, Let, Print, Macro, Ident, NumberLiteral, StringLiteral]

PLUS = Plus()
FN = Fn()
LET = Let()
PRINT = Print()
MACRO = Macro()

KEYWORD_NODES: dict[str, Keyword] = {k.text: k for k in (PLUS, FN, LET, PRINT, MACRO)}

EMPTY_FORM = Form(())


def is_keyword(node: Node) -> bool:
    return isinstance(node, Keyword)


def is_fn_form(node: Node) -> bool:
    """True for a function literal: a form headed by `fn`."""
    return isinstance(node, Form) and bool(node.children) and node.children[0] == FN


def is_value(node: Node) -> bool:
    """Self-evaluating nodes: literals, the empty form and function literals."""
    match node:
        case NumberLiteral() | StringLiteral():
            return True
        case Form(children):
            return not children or children[0] == FN
    return False


def expect_ident(node: Node) -> str:
    if isinstance(node, Ident):
        return node.name
    raise MinilangSyntaxError(f"expected Ident, found {node!r}")


def expect_number(node: Node) -> int:
    if isinstance(node, NumberLiteral):
        return node.value
    raise MinilangTypeError(f"expected NumberLiteral, found {node!r}")


def display(node: Node) -> str:
    """Text written by `print`: strings unquoted, everything else as surface form."""
    if isinstance(node, StringLiteral):
        return node.text
    return str(node)

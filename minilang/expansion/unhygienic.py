"""Unhygienic macro expander.

    (macro name param... body)   records the macro and becomes ()
    (name arg...)                is replaced by body with each param
                                 replaced by the raw argument tree

Substitution does no renaming, so an argument identifier that matches a
name bound inside the body is captured by that binding. Expansion is a
single pass: an instantiated body is not expanded again.
"""

from __future__ import annotations

from minilang import SExpression
from minilang.errors import MinilangSyntaxError
from minilang.expansion.fold import Folder, fold, fold_children
from minilang.types.macro_environment import MacroEnvironment
from minilang.types.node import EMPTY_FORM, expect_ident


class UnhygienicExpander(Folder):
    def __init__(self, macros: MacroEnvironment | None = None):
        self.macros = macros if macros is not None else MacroEnvironment()

    def fold_ident(self, children: tuple[SExpression, ...]) -> SExpression:
        name = expect_ident(children[0])
        if self.macros.is_macro(name):
            return self.macros.expand_1(name, children[1:])
        return fold_children(children, self)

    def fold_macro(self, children: tuple[SExpression, ...]) -> SExpression:
        if len(children) < 3:
            raise MinilangSyntaxError("macro requires a name and a body")
        name = expect_ident(children[1])
        params = tuple(expect_ident(p) for p in children[2:-1])
        body = children[-1]
        self.macros.define_macro(name, params, body)
        return EMPTY_FORM


def expand(tree: SExpression) -> SExpression:
    """Expand `tree` with a fresh macro table."""
    return fold(tree, UnhygienicExpander())

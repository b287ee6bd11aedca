"""Structural tree-to-tree fold.

`fold` rebuilds a tree bottom-up, recursing into every Program and Form.
Forms headed by the `macro` keyword or by an identifier are handed to the
folder's hooks instead, which decide whether (and how) to recurse further.
Leaves pass through unchanged.
"""

from __future__ import annotations

from minilang import SExpression
from minilang.types.node import Form, Ident, Macro, Program


class Folder:
    """Hooks called by `fold` for the two head shapes it does not handle itself."""

    def fold_ident(self, children: tuple[SExpression, ...]) -> SExpression:
        """Fold `(ident ...)`; `children` includes the identifier."""
        raise NotImplementedError

    def fold_macro(self, children: tuple[SExpression, ...]) -> SExpression:
        """Fold `(macro ...)`; `children` includes the keyword."""
        raise NotImplementedError


def fold_children(children: tuple[SExpression, ...], folder: Folder) -> Form:
    return Form(tuple(fold(c, folder) for c in children))


def fold(node: SExpression, folder: Folder) -> SExpression:
    match node:
        case Program(children):
            return Program(tuple(fold(c, folder) for c in children))
        case Form((Macro(), *_)):
            return folder.fold_macro(node.children)
        case Form((Ident(), *_)):
            return folder.fold_ident(node.children)
        case Form(children):
            return fold_children(children, folder)
    return node


class NoopFolder(Folder):
    """Identity fold: rebuilds every form unchanged."""

    def fold_ident(self, children):
        return fold_children(children, self)

    def fold_macro(self, children):
        return fold_children(children, self)

from __future__ import annotations

import logging
from dataclasses import dataclass

from minilang import SExpression
from minilang.errors import MinilangArityError
from minilang.types.node import Form, Ident, Program

logger = logging.getLogger(__name__)


def substitute(body: SExpression, bindings: dict[str, SExpression]) -> SExpression:
    """Copy `body`, replacing every Ident named in `bindings` with its tree.

    Pure syntactic replacement with no renaming: a parameter is replaced
    wherever it appears, including binding positions of `let` and `fn`.
    """
    match body:
        case Ident(name) if name in bindings:
            return bindings[name]
        case Form(children):
            return Form(tuple(substitute(c, bindings) for c in children))
        case Program(children):
            return Program(tuple(substitute(c, bindings) for c in children))
    return body


@dataclass(frozen=True)
class MacroDefinition:
    params: tuple[str, ...]
    body: SExpression

    def instantiate(self, name: str, args: tuple[SExpression, ...]) -> SExpression:
        if len(args) != len(self.params):
            raise MinilangArityError(
                f"Macro `{name}` expects {len(self.params)} argument(s), found {len(args)}"
            )
        return substitute(self.body, dict(zip(self.params, args)))


class MacroEnvironment:
    """
    Macro table mapping macro names to (parameter names, raw body).

    One table belongs to one expansion run; it is never shared between runs.
    """

    def __init__(self):
        self.macros: dict[str, MacroDefinition] = {}

    def define_macro(self, name: str, params: tuple[str, ...], body: SExpression) -> None:
        if name in self.macros:
            logger.debug("redefining macro %s", name)
        self.macros[name] = MacroDefinition(tuple(params), body)
        logger.debug("defined macro %s %s -> %s", name, " ".join(params), body)

    def is_macro(self, name: str) -> bool:
        return name in self.macros

    def expand_1(self, name: str, args: tuple[SExpression, ...]) -> SExpression:
        """Substitute `args` into the body of macro `name`. No re-expansion."""
        expansion = self.macros[name].instantiate(name, args)
        logger.debug("expanded (%s ...) -> %s", name, expansion)
        return expansion

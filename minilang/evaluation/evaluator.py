"""Core evaluator for minilang.

Reduces a node to a value under an Environment. Rules, in order:

1. values (literals, `()`, `(fn ...)`) evaluate to themselves
2. identifiers are looked up in the environment
3. forms headed by a keyword dispatch to the special form registry
4. forms headed by a function literal are applied
5. any other head is evaluated and the form is tried again with the result
"""

from __future__ import annotations

from minilang import SExpression, LispValue
from minilang.errors import MinilangSyntaxError, MinilangTypeError, MinilangUnboundSymbol
from minilang.evaluation.apply import apply
from minilang.evaluation.special_forms import SPECIAL_FORMS
from minilang.types.environment import Environment
from minilang.types.node import Form, Ident, Keyword, Program, is_fn_form, is_value


def run_program(program: SExpression) -> list[LispValue]:
    """Evaluate each top-level entry in a fresh environment, collecting results."""
    match program:
        case Program(children):
            return [evaluate(entry, Environment()) for entry in children]
    raise MinilangSyntaxError(f"Expected Program, found: {program!r}")


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    if is_value(expr):
        return expr

    match expr:
        case Form((head, *tail_args)):
            if isinstance(head, Keyword) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            if is_fn_form(head):
                return apply(head, tail_args, env, evaluate)

            # Reduce the head and re-dispatch the rebuilt form.
            reduced = evaluate(head, env)
            if not is_fn_form(reduced):
                raise MinilangTypeError(f"Cannot apply non-function {reduced!r}")
            return evaluate(Form((reduced, *tail_args)), env)

        case Ident(name):
            value = env.lookup(name)
            if value is None:
                raise MinilangUnboundSymbol(f"Unknown identifier: {name}")
            return value

        case Program():
            raise MinilangSyntaxError("Program may only appear at the top level")

    raise MinilangSyntaxError(f"Unexpected node: {expr!r}")

"""Special form: let.

    (let name expr name expr ... body)

Bindings are stored one at a time in a single new rib, so a later
expression can see an earlier name but no expression can see its own.
"""

from __future__ import annotations

from minilang import EvaluatorFn, SExpression, LispValue
from minilang.errors import MinilangArityError
from minilang.types.environment import Environment
from minilang.types.node import expect_ident


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise MinilangArityError("let requires a body")
    *bindings, body = tail
    if len(bindings) % 2 != 0:
        raise MinilangArityError("Argument without a value in `let`")

    with env.push_rib():
        for name_node, expr in zip(bindings[::2], bindings[1::2]):
            name = expect_ident(name_node)
            env.store(name, evaluate_fn(expr, env))
        return evaluate_fn(body, env)

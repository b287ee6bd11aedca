"""Function application for minilang.

A function is a literal form `(fn param... body)`. There are no closures:
the body runs in the caller's environment extended by one rib that holds
the parameters, so any name visible at the call site is visible in the body.
"""

from __future__ import annotations

from minilang import EvaluatorFn, LispValue, SExpression
from minilang.errors import MinilangArityError, MinilangSyntaxError
from minilang.types.environment import Environment
from minilang.types.node import Form, expect_ident


def function_parts(fn: Form) -> tuple[list[str], SExpression]:
    """Split a function literal into (formal names, body)."""
    if len(fn.children) < 2:
        raise MinilangSyntaxError(f"No body for function: {fn}")
    *formals, body = fn.children[1:]
    return [expect_ident(f) for f in formals], body


def apply(
    fn: Form,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply function literal `fn` to unevaluated `arg_exprs`.

    Arguments are evaluated left to right in the caller's environment before
    the parameter rib is pushed. The argument count must equal the number of
    parameters.
    """
    formals, body = function_parts(fn)
    args = [evaluate_fn(arg, env) for arg in arg_exprs]
    if len(args) != len(formals):
        raise MinilangArityError(
            "Mismatch in number of function arguments. "
            f"Expected: {len(formals)}, found: {len(args)}"
        )

    with env.push_rib():
        for formal, actual in zip(formals, args):
            env.store(formal, actual)
        return evaluate_fn(body, env)

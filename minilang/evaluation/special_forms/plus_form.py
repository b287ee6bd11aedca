from minilang import EvaluatorFn
from minilang import SExpression, LispValue
from minilang.config import U32_MAX
from minilang.errors import MinilangOverflowError
from minilang.types.environment import Environment
from minilang.types.node import NumberLiteral, expect_number


def plus_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    total = 0
    for arg in tail:
        total += expect_number(evaluate_fn(arg, env))
    if total > U32_MAX:
        raise MinilangOverflowError(f"Sum {total} does not fit in an unsigned 32-bit number")
    return NumberLiteral(total)

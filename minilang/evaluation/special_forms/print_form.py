from minilang import EvaluatorFn
from minilang import SExpression, LispValue
from minilang.types.environment import Environment
from minilang.types.node import EMPTY_FORM, display


def print_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Every argument is evaluated before anything is written.
    args = [evaluate_fn(arg, env) for arg in tail]
    for arg in args:
        print(display(arg))
    return EMPTY_FORM

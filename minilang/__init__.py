# Core type aliases for minilang's data model.
# Every stage (reader, expander, evaluator) shares one closed set of node
# classes defined in minilang.types.node. Evaluated values are nodes too:
# literals, the empty form and function-literal forms.
#
# Naming guidance:
# - SExpression: use in reader/expander code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same Node union; the split is documentation.

from typing import Callable

from minilang.types.node import Node

SExpression = Node
LispValue = Node

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"

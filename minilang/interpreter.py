from __future__ import annotations

from minilang import SExpression, LispValue
from minilang.config import keywords
from minilang.errors import MinilangError
from minilang.evaluation.evaluator import run_program
from minilang.expansion.unhygienic import expand
from minilang.reader.lexer import Token, tokenize
from minilang.reader.parser import parse
from minilang.types.node import Program


class Interpreter:
    """
    Orchestrates the pipeline: tokens -> tree -> (expanded tree) -> values.
    Holds no state between calls; every run gets fresh environments and a
    fresh macro table.
    """

    # Class-level default for the macro feature flag
    MacrosEnabled: bool = True

    def __init__(self, macros: bool | None = None):
        self.macros_enabled: bool = self.MacrosEnabled if macros is None else macros
        self.keywords = keywords(self.macros_enabled)

    def tokenize(self, source: str) -> list[Token]:
        return tokenize(source, self.keywords)

    def parse(self, source: str) -> Program:
        return parse(self.tokenize(source))

    def expand(self, tree: SExpression) -> SExpression:
        if not self.macros_enabled:
            raise MinilangError("macro support is disabled")
        return expand(tree)

    def run(self, source: str, *, expand: bool = False) -> list[LispValue]:
        tree = self.parse(source)
        if expand:
            tree = self.expand(tree)
        return run_program(tree)

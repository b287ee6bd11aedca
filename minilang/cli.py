"""
minilang command line.

Reads the whole of standard input and runs one action over it:

  lex      print the tokens, then their debug form
  parse    print the debug form of the tree
  print    print the tree as s-expression text
  expand   expand macros, print the expanded tree, then run it
  run      run the tree without expansion
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from minilang.config import DEFAULT_LOG_LEVEL, resolve_log_level
from minilang.errors import MinilangError
from minilang.evaluation.evaluator import run_program
from minilang.interpreter import Interpreter
from minilang.reader.lexer import format_tokens

logger = logging.getLogger(__name__)


def lex_action(interp: Interpreter, source: str) -> None:
    tokens = interp.tokenize(source)
    print(format_tokens(tokens))
    print(repr(tokens))


def parse_action(interp: Interpreter, source: str) -> None:
    print(repr(interp.parse(source)))


def print_action(interp: Interpreter, source: str) -> None:
    print(str(interp.parse(source)))


def expand_action(interp: Interpreter, source: str) -> None:
    tree = interp.expand(interp.parse(source))
    print(str(tree))
    print(repr(run_program(tree)))


def run_action(interp: Interpreter, source: str) -> None:
    print(repr(interp.run(source)))


def available_actions(interp: Interpreter) -> dict[str, Callable[[Interpreter, str], None]]:
    actions = {
        "lex": lex_action,
        "parse": parse_action,
        "print": print_action,
        "run": run_action,
    }
    if interp.macros_enabled:
        actions["expand"] = expand_action
    return actions


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="Tokenize, parse, expand or run a minilang program read from stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("action", nargs="?", help="one of: lex, parse, print, expand, run")
    parser.add_argument(
        "--no-macros",
        action="store_true",
        help="build without macro support (`macro` is an ordinary name, no expand action)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help=f"logging level for diagnostics on stderr (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args.log_level),
        format="%(message)s",
        stream=sys.stderr,
    )

    if args.action is None:
        print("no action provided")
        print(parser.format_usage(), end="")
        return 0

    interp = Interpreter(macros=not args.no_macros)
    action = available_actions(interp).get(args.action)
    if action is None:
        print(f"unknown action: `{args.action}`")
        return 0

    source = sys.stdin.read()
    try:
        action(interp, source)
    except MinilangError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    except RecursionError:
        logger.error("RecursionError: program nested too deeply")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Runtime environment for minilang.

The Environment is a stack of ribs. Each rib maps names to already-evaluated
nodes. `let` and function application push one rib for their body and pop it
on the way out; lookup walks the ribs innermost first, so inner bindings
shadow outer ones.

A fresh Environment (with no ribs) is created for every top-level entry of a
program, so no binding survives from one entry to the next.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from minilang import LispValue
from minilang.errors import MinilangNameError

logger = logging.getLogger(__name__)

Rib = dict[str, LispValue]


class RibGuard:
    """Handle returned by Environment.push_rib.

    Releasing the guard pops the rib it pushed, exactly once. Use it as a
    context manager so the rib is popped on every exit path.
    """

    __slots__ = ("env", "depth", "released")

    def __init__(self, env: Environment, depth: int):
        self.env = env
        self.depth = depth
        self.released = False

    def release(self) -> None:
        if self.released:
            raise MinilangNameError("Rib already released")
        if len(self.env.ribs) != self.depth:
            raise MinilangNameError(
                f"Rib released out of order: depth {len(self.env.ribs)}, expected {self.depth}"
            )
        self.env.ribs.pop()
        self.released = True
        logger.debug("pop rib -> depth %d", len(self.env.ribs))

    def __enter__(self) -> RibGuard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class Environment:
    """Stack of ribs with single-assignment store and shadowed lookup."""

    __slots__ = ("ribs",)

    def __init__(self):
        self.ribs: list[Rib] = []

    @classmethod
    def with_value(cls, name: str, value: LispValue) -> Environment:
        """Environment with a single rib holding one binding."""
        env = cls()
        env.ribs.append({name: value})
        return env

    @property
    def depth(self) -> int:
        return len(self.ribs)

    def push_rib(self) -> RibGuard:
        """Push an empty rib and return the guard that pops it."""
        self.ribs.append({})
        logger.debug("push rib -> depth %d", len(self.ribs))
        return RibGuard(self, len(self.ribs))

    def store(self, name: str, value: LispValue) -> None:
        """Bind `name` in the innermost rib.

        Raises MinilangNameError if there is no rib, or if `name` is already
        bound in the innermost rib. Outer ribs may hold the same name.
        """
        if not self.ribs:
            raise MinilangNameError("No ribs in environment")
        rib = self.ribs[-1]
        if name in rib:
            raise MinilangNameError(f"Identifier already exists in rib: {name}")
        rib[name] = value

    def lookup(self, name: str) -> Optional[LispValue]:
        """Value bound to `name` in the innermost rib that has it, else None."""
        for rib in reversed(self.ribs):
            if name in rib:
                return rib[name]
        return None

    def _write_rib(self, buffer: StringIO, rib: Rib) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in rib.items()))
        buffer.write("}")

    def __repr__(self) -> str:
        """Chain representation, innermost rib first."""
        with StringIO() as buffer:
            buffer.write("<Environment ribs: ")
            for i, rib in enumerate(reversed(self.ribs)):
                if i:
                    buffer.write(" -> ")
                self._write_rib(buffer, rib)
            buffer.write(">")
            return buffer.getvalue()

import pytest

from minilang.interpreter import Interpreter
from minilang.types.environment import Environment


# Most tests build an Interpreter() directly. The `macros_disabled` fixture
# flips the class-level default so those tests run against the build
# variant without macro support, without changing individual test files.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def env():
    """Fresh environment with no ribs."""
    return Environment()


@pytest.fixture
def macros_disabled(monkeypatch):
    monkeypatch.setattr(Interpreter, "MacrosEnabled", False)

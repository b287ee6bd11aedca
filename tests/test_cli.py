import io
import logging

import pytest

from minilang.cli import main


@pytest.fixture
def stdin(monkeypatch):
    def _set(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _set


def test_lex(stdin, capsys):
    stdin('(print "hi" 42)')
    assert main(["lex"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "( print hi 42 )\n"
        "[('lparen', '('), ('keyword', 'print'), ('string', 'hi'), ('number', 42), ('rparen', ')')]\n"
    )


def test_parse(stdin, capsys):
    stdin("(+ 1 x)")
    assert main(["parse"]) == 0
    assert capsys.readouterr().out == "Program(Form(Plus, NumberLiteral(1), Ident('x')))\n"


def test_print(stdin, capsys):
    stdin('(let  x\n 1\n (print "a" x))  y')
    assert main(["print"]) == 0
    assert capsys.readouterr().out == '(let x 1 (print "a" x)) y\n'


def test_run(stdin, capsys):
    stdin('(print "hello") (+ 3 1 1 1)')
    assert main(["run"]) == 0
    assert capsys.readouterr().out == "hello\n[Form(), NumberLiteral(6)]\n"


def test_expand(stdin, capsys):
    stdin("(macro inc x (+ x 1)) (inc 41)")
    assert main(["expand"]) == 0
    assert capsys.readouterr().out == "() (+ 41 1)\n[Form(), NumberLiteral(42)]\n"


def test_expand_unavailable_without_macros(stdin, capsys):
    stdin("(+ 1 2)")
    assert main(["--no-macros", "expand"]) == 0
    assert capsys.readouterr().out == "unknown action: `expand`\n"


def test_macro_is_a_name_without_macros(stdin, capsys):
    stdin("macro")
    assert main(["--no-macros", "parse"]) == 0
    assert capsys.readouterr().out == "Program(Ident('macro'))\n"


def test_unknown_action(stdin, capsys):
    stdin("")
    assert main(["frobnicate"]) == 0
    assert capsys.readouterr().out == "unknown action: `frobnicate`\n"


def test_missing_action(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("no action provided\n")
    assert "usage:" in out


@pytest.mark.parametrize(
    "action,source,message",
    [
        ("parse", "(baz 42))", "Unexpected `)`"),
        ("run", "(let x (+ x 0) x)", "Unknown identifier: x"),
        ("run", "((fn x x) 42 42)", "Mismatch in number of function arguments"),
        ("expand", "(macro m x x) (m)", "expects 1 argument(s)"),
    ],
)
def test_errors_fail_the_run(stdin, capsys, caplog, action, source, message):
    stdin(source)
    with caplog.at_level(logging.ERROR):
        assert main([action]) == 1
    assert message in caplog.text


def test_expand_prints_tree_before_failing(stdin, capsys):
    stdin("(macro m x (let x 1 x)) (m 5)")
    assert main(["expand"]) == 1
    assert capsys.readouterr().out == "() (let 5 1 5)\n"


def test_long_zero_padded_numeral(stdin, capsys):
    stdin("0" * 5000 + "42")
    assert main(["parse"]) == 0
    assert capsys.readouterr().out == "Program(NumberLiteral(42))\n"


def test_over_long_numeral_fails_the_run(stdin, capsys, caplog):
    stdin("1" * 5000)
    with caplog.at_level(logging.ERROR):
        assert main(["parse"]) == 1
    assert "Number literal out of range" in caplog.text


@pytest.mark.parametrize("action", ["print", "parse", "run"])
def test_deep_nesting_fails_the_run(stdin, capsys, caplog, action):
    stdin("(" * 3000 + ")" * 3000)
    with caplog.at_level(logging.ERROR):
        assert main([action]) == 1
    assert "nested too deeply" in caplog.text

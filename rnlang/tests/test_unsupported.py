"""
Tests for constructs that parse but have no evaluation in rnlang.
"""
import pytest

from rnlang.exceptions import UnsupportedOperationError
from rnlang.tests.utils import run_source


@pytest.mark.parametrize(
    "source, description",
    [
        ("if (True) { println(1); }", "`if` statement"),
        ("if (True) { } else { println(2); }", "`if` statement"),
        ("while (True) { println(1); }", "`while` loop"),
        ("for (xs : x) { println(x); }", "`for` loop"),
        ("match x { 1 => { println(1); } }", "`match` statement"),
        ("class A { let n; }", "`class` declaration"),
        ("parent A(1)", "`parent` call"),
        ("use a, b;", "`use` statement"),
    ],
)
def test_statements_without_evaluation(source, description, capsys):
    with pytest.raises(UnsupportedOperationError) as exc_info:
        run_source(source)
    assert str(exc_info.value) == f"Unsupported operation {description} on line 1 in <test>"
    assert isinstance(exc_info.value, NotImplementedError)
    assert capsys.readouterr().out == ""


def test_statements_run_until_unsupported(capsys):
    with pytest.raises(UnsupportedOperationError):
        run_source('println("before");\nwhile (True) { }\nprintln("after");')
    assert capsys.readouterr().out == "before\n"


def test_unsupported_statement_in_uncalled_function(capsys):
    run_source("fn f() {\n    if (True) { }\n}\nprintln(\"ok\");")
    assert capsys.readouterr().out == "ok\n"


@pytest.mark.parametrize(
    "source",
    [
        "println(a.b);",
        "let xs = [1];\nprintln(xs[0]);",
        "break;",
        "continue;",
        ".. => { println(1); }",
        "a.b();",
    ],
)
def test_expressions_without_evaluation(source):
    with pytest.raises(UnsupportedOperationError):
        run_source(source)


def test_declaration_of_property_path():
    with pytest.raises(UnsupportedOperationError, match="declaration of `a.b`"):
        run_source("let a.b = 1;")

"""
Tests for function definitions and calls in rnlang.
"""
import pytest

from rnlang.exceptions import ArityError, DivisionByZeroError, UndefinedFunctionError
from rnlang.interpreter import Interpreter
from rnlang.tests.utils import parse_source, run_source


def test_call_returns_value(capsys):
    source = (
        "fn add(a, b) {\n"
        "    rn a + b;\n"
        "}\n"
        "println(add(2, 3));\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "5\n"


def test_nested_calls(capsys):
    source = (
        "fn inner() { rn 2; }\n"
        "fn outer() { rn inner() + 1; }\n"
        "println(outer());\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "3\n"


def test_arity_error():
    """
    Calling with too few arguments reports expected and provided counts.
    """
    source = (
        "fn add(a, b) {\n"
        "    rn a + b;\n"
        "}\n"
        "add(1);\n"
    )
    with pytest.raises(ArityError) as exc_info:
        run_source(source)
    err = exc_info.value
    assert err.func_name == 'add'
    assert err.expected == 2
    assert err.provided == 1
    assert str(err) == (
        "Function 'add(..)' expects 2 arguments, but 1 was provided on line 4 in <test>"
    )
    assert isinstance(err, TypeError)


def test_arity_error_for_function_without_parameters():
    with pytest.raises(ArityError) as exc_info:
        run_source("fn f() { rn 1; }\nf(1, 2);")
    assert str(exc_info.value).startswith(
        "Function 'f()' expects 0 arguments, but 2 were provided"
    )


def test_arity_checked_before_arguments_are_evaluated(capsys):
    source = (
        "fn f(a) { rn a; }\n"
        "f(println(\"evaluated\"), 2);\n"
    )
    with pytest.raises(ArityError):
        run_source(source)
    assert capsys.readouterr().out == ""


def test_undefined_function():
    with pytest.raises(UndefinedFunctionError) as exc_info:
        run_source("g();")
    assert exc_info.value.func_name == 'g'
    assert str(exc_info.value) == "Function 'g' not found on line 1 in <test>"


def test_function_without_return_yields_none(capsys):
    source = (
        "fn f() { let x = 1; }\n"
        "fn g() { rn; }\n"
        "println(f());\n"
        "println(g());\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['None', 'None']


def test_return_multiple_values_as_list(capsys):
    run_source("fn pair() { rn 1, \"a\"; }\nprintln(pair());")
    assert capsys.readouterr().out == '[1, "a"]\n'


def test_return_stops_the_body(capsys):
    source = (
        "fn f() {\n"
        "    rn 1;\n"
        "    println(\"unreached\");\n"
        "}\n"
        "println(f());\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "1\n"


def test_redefinition_replaces_function(capsys):
    run_source("fn f() { rn 1; }\nfn f() { rn 2; }\nprintln(f());")
    assert capsys.readouterr().out == "2\n"


def test_output_parameters_do_not_count_towards_arity(capsys):
    run_source("fn f(a : r) { rn a; }\nprintln(f(4));")
    assert capsys.readouterr().out == "4\n"


def test_top_level_return_is_ignored(capsys):
    """
    An `rn` outside a function does not stop the program or leak into later calls.
    """
    source = (
        "rn 5;\n"
        "fn f() {\n"
        "    println(\"a\");\n"
        "    println(\"b\");\n"
        "}\n"
        "f();\n"
        "println(\"after\");\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['a', 'b', 'after']


def test_arguments_are_evaluated_in_the_caller(capsys):
    source = (
        "let x = 3;\n"
        "fn double(x) { rn x * 2; }\n"
        "println(double(x + 1));\n"
        "println(x);\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['8', '3']


def test_scope_restored_after_failed_call():
    """
    A call that raises still restores the caller's scope.
    """
    ast = parse_source(
        "let g = 1;\n"
        "fn bad() {\n"
        "    let local = 2;\n"
        "    rn 1 / 0;\n"
        "}\n"
        "bad();\n"
    )
    interpreter = Interpreter('<test>')
    with pytest.raises(DivisionByZeroError):
        interpreter.execute(ast)

    context = interpreter.context
    assert context.scopes == []
    assert context.current_scope == {'g': 1}

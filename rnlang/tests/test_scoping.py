"""
Tests for scoping rules in rnlang.
"""
import pytest

from rnlang.environment import ExecutionContext
from rnlang.exceptions import (
    IntegerOverflowError,
    OperandTypeError,
    UndefinedVariableError,
    UnsupportedOperationError,
)
from rnlang.tests.utils import run_source


def test_functions_have_fresh_env(capsys):
    """
    Test that a function's locals do not leak into the caller.
    """
    source = (
        "fn inner() {\n"
        "    let x = 1;\n"
        "    rn x;\n"
        "}\n"
        "println(inner());\n"
        "println(x);\n"
    )
    with pytest.raises(UndefinedVariableError):
        run_source(source)
    assert capsys.readouterr().out == "1\n"


def test_callee_reads_caller_locals(capsys):
    """
    Names not bound in the callee resolve through the calling frames.
    """
    source = (
        "fn inner() { rn y; }\n"
        "fn outer() {\n"
        "    let y = 7;\n"
        "    rn inner();\n"
        "}\n"
        "println(outer());\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "7\n"


def test_nearest_frame_wins(capsys):
    source = (
        "let y = 1;\n"
        "fn inner() { rn y; }\n"
        "fn outer() {\n"
        "    let y = 2;\n"
        "    rn inner();\n"
        "}\n"
        "println(outer());\n"
        "println(inner());\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['2', '1']


def test_parameters_shadow_globals(capsys):
    source = (
        "let x = 1;\n"
        "fn f(x) { rn x; }\n"
        "println(f(9));\n"
        "println(x);\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['9', '1']


def test_increment_and_decrement(capsys):
    source = (
        "let i = 0;\n"
        "i++;\n"
        "i++;\n"
        "println(i);\n"
        "let f = 1.5;\n"
        "f--;\n"
        "println(f);\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['2', '0.5']


def test_increment_writes_only_the_current_scope(capsys):
    """
    Incrementing a caller's variable creates a local copy in the callee.
    """
    source = (
        "let i = 0;\n"
        "fn bump() {\n"
        "    i++;\n"
        "    rn i;\n"
        "}\n"
        "println(bump());\n"
        "println(i);\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['1', '0']


def test_assignment_writes_only_the_current_scope(capsys):
    source = (
        "let x = 1;\n"
        "fn f() {\n"
        "    x = 5;\n"
        "    rn x;\n"
        "}\n"
        "println(f());\n"
        "println(x);\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['5', '1']


def test_increment_deferred_binding():
    with pytest.raises(OperandTypeError, match="Wrong use of `\\+\\+` on 'b'"):
        run_source("let a = 1;\nlet b = a + 1;\nb++;")


@pytest.mark.parametrize("initializer", ['"x"', 'True', 'None'])
def test_increment_non_numeric(initializer):
    with pytest.raises(OperandTypeError):
        run_source(f"let v = {initializer};\nv++;")


def test_increment_undefined_variable():
    with pytest.raises(UndefinedVariableError):
        run_source("n--;")


def test_increment_property_access():
    with pytest.raises(UnsupportedOperationError):
        run_source("a.b++;")


def test_increment_overflow():
    with pytest.raises(IntegerOverflowError):
        run_source("let m = 2147483647;\nm++;")


def test_context_lookup_order():
    context = ExecutionContext()
    context.bind('a', 1)
    context.bind('b', 1)
    context.push_frame({'b': 2})
    context.push_frame({'c': 3})

    assert context.lookup('a') == 1
    assert context.lookup('b') == 2
    assert context.lookup('c') == 3
    assert context.is_bound('a')
    assert not context.is_bound('d')

    context.pop_frame()
    context.pop_frame()
    assert context.current_scope == {'a': 1, 'b': 1}
    assert context.scopes == []

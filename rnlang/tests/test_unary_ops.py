"""
Tests for prefix unary operators in rnlang.
"""
import pytest

from rnlang.exceptions import OperandTypeError, UnsupportedOperationError
from rnlang.operations import Op
from rnlang.tests.utils import parse_source, run_source


def test_unary_ops_parse_and_runtime(capsys):
    source = (
        "println(-5);\n"
        "println(!True);\n"
        "println(!False);\n"
        "println(!None);\n"
        "println(!5);\n"
        "println(![]);\n"
        "println(![1]);\n"
    )
    ast = parse_source(source)

    neg = ast[0][1][2][0]
    assert neg == ('unary', Op.SUB, ('int', 5, 1), 1)

    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['-5', 'false', 'true', 'true', '-6', 'true', 'false']


def test_not_on_parenthesised_literal(capsys):
    run_source("println(!(False));")
    assert capsys.readouterr().out == "true\n"


@pytest.mark.parametrize(
    "expr, message",
    [
        ("-1.5", "Cannot apply unary operator `-` to type Float"),
        ('-"a"', "Cannot apply unary operator `-` to type Str"),
        ("-True", "Cannot apply unary operator `-` to type Bool"),
        ("-None", "Cannot apply unary operator `-` to type None"),
        ("-[1]", "Cannot apply unary operator `-` to type List"),
        ("!1.5", "Cannot apply unary operator `!` to type Float"),
        ('!"a"', "Cannot apply unary operator `!` to type Str"),
    ],
)
def test_unary_operand_type_errors(expr, message):
    with pytest.raises(OperandTypeError) as exc_info:
        run_source(f"println({expr});")
    assert str(exc_info.value) == f"{message} on line 1 in <test>"


@pytest.mark.parametrize(
    "source",
    [
        "let x = 1;\nprintln(-x);",
        "let x = True;\nprintln(!x);",
        "println(+5);",
        "println(-5 + 3);",
        "println(-(2 * 3));",
    ],
)
def test_unary_on_non_literal_operand(source):
    """
    Prefix operators only inspect literal operands; anything else has no evaluation.
    """
    with pytest.raises(UnsupportedOperationError):
        run_source(source)

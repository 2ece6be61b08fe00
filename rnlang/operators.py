"""Binary operator dispatch.

Arithmetic is looked up in :data:`BINARY_TABLE`, keyed by the operator and the
type names of both operands. A pair that is not in the table has no meaning
and raises :class:`~rnlang.exceptions.OperandTypeError` naming the pair.

Numbers promote Int to Float when the operand types are mixed, never the
reverse. Integer results must stay inside the 32-bit signed range.


File: operators.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import operator
from typing import Callable

from rnlang.exceptions import (
    DivisionByZeroError,
    IntegerOverflowError,
    OperandTypeError,
    UnsupportedOperationError,
)
from rnlang.operations import Op
from rnlang.values import INT_MAX, fits_int, type_name

ARITHMETIC_OPS = (Op.ADD, Op.SUB, Op.MUL, Op.DIV)

SCALAR_TYPES = ("Int", "Float", "Bool", "Str", "None")


def _int_div(lhs: int, rhs: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _promoted(func: Callable) -> Callable:
    """Wrap ``func`` so both operands are converted to float first."""
    def apply(lhs, rhs):
        return func(float(lhs), float(rhs))
    return apply


def _append(items: list, item) -> list:
    """List + value: a new list with the value as its last element."""
    return [*items, item]


def _extend(items: list, other: list) -> list:
    """List + List: a new list holding the elements of both."""
    return [*items, *other]


def _repeat(lhs, rhs) -> str:
    """
    Int * Str or Str * Int: the string repeated n times.

    Raises:
        OverflowError: If the result would be longer than INT_MAX characters.
    """
    text, count = (lhs, rhs) if isinstance(lhs, str) else (rhs, lhs)
    if count > 0 and len(text) * count > INT_MAX:
        raise OverflowError("repeated string too long")
    return text * count


def _build_table() -> dict[tuple[Op, str, str], Callable]:
    table: dict[tuple[Op, str, str], Callable] = {}

    numeric = (
        (Op.ADD, operator.add, operator.add),
        (Op.SUB, operator.sub, operator.sub),
        (Op.MUL, operator.mul, operator.mul),
        (Op.DIV, _int_div, operator.truediv),
    )
    for op, int_func, float_func in numeric:
        table[(op, "Int", "Int")] = int_func
        for pair in (("Int", "Float"), ("Float", "Int"), ("Float", "Float")):
            table[(op, *pair)] = _promoted(float_func)

    table[(Op.ADD, "Str", "Str")] = operator.add
    for scalar in SCALAR_TYPES:
        table[(Op.ADD, "List", scalar)] = _append
    table[(Op.ADD, "List", "List")] = _extend

    table[(Op.MUL, "Int", "Str")] = _repeat
    table[(Op.MUL, "Str", "Int")] = _repeat
    return table


BINARY_TABLE = _build_table()


def apply_binary(op: Op, lhs, rhs, line=None, file=None):
    """
    Apply a binary operator to two evaluated operands.

    Parameters:
        op (Op): The operator.
        lhs: The left operand value.
        rhs: The right operand value.
        line (int): Source line for error messages.
        file (str): Script name for error messages.

    Returns:
        The resulting value.

    Raises:
        UnsupportedOperationError: For operators without an evaluation.
        OperandTypeError: For operand types the operator does not support.
        DivisionByZeroError: For a zero divisor.
        IntegerOverflowError: For integer results outside 32 bits, or repeated
            strings longer than INT_MAX characters.
    """
    if op not in ARITHMETIC_OPS:
        raise UnsupportedOperationError(f"`{op.value}`", line, file)

    lhs_type, rhs_type = type_name(lhs), type_name(rhs)
    handler = BINARY_TABLE.get((op, lhs_type, rhs_type))
    if handler is None:
        raise OperandTypeError(
            f"No implementation for `{lhs_type} {op.value} {rhs_type}`", line, file
        )

    try:
        result = handler(lhs, rhs)
    except ZeroDivisionError:
        raise DivisionByZeroError(
            f"Division by zero in `{lhs_type} {op.value} {rhs_type}`", line, file
        ) from None
    except OverflowError:
        raise IntegerOverflowError(
            f"Result of `{lhs_type} {op.value} {rhs_type}` is longer than {INT_MAX} characters",
            line,
            file,
        ) from None

    if isinstance(result, int) and not fits_int(result):
        raise IntegerOverflowError(
            f"Integer overflow in `{lhs_type} {op.value} {rhs_type}`", line, file
        )
    return result

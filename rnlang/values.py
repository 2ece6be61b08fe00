"""Runtime values.

Script values are plain Python objects, one payload per value:

    Int    -> int (32-bit signed range)
    Float  -> float
    Bool   -> bool
    Str    -> str
    List   -> list of values
    None   -> None

A scope binding is either one of those values, a :class:`Deferred` expression
that is evaluated again on every read, or :data:`UNSET` for a name declared
without a value.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from dataclasses import dataclass
from decimal import Decimal

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# AST tags of the literal nodes bound eagerly by `let`.
LITERAL_NODES = ('int', 'float', 'bool', 'string', 'none')


class _Unset:
    """Marker for "no value": an empty binding or no pending return."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class Deferred:
    """A binding holding an unevaluated expression."""
    expr: tuple


def type_name(value) -> str:
    """
    Return the script type name of a value.

    Raises:
        TypeError: If the object is not a script value.
    """
    if value is None:
        return "None"
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "Bool"
    if isinstance(value, int):
        return "Int"
    if isinstance(value, float):
        return "Float"
    if isinstance(value, str):
        return "Str"
    if isinstance(value, list):
        return "List"
    raise TypeError(f"Not a script value: {value!r}")


def fits_int(value: int) -> bool:
    """Return True if ``value`` is inside the 32-bit signed range."""
    return INT_MIN <= value <= INT_MAX


def format_float(value: float) -> str:
    """
    Format a float the way scripts print it.

    The shortest round-trip digits, never in exponent form, and without a
    trailing ``.0`` for whole numbers.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def to_text(value) -> str:
    """
    Return the canonical text of a value, as written by print and println.

    Lists are rendered with :func:`debug_text`.
    """
    kind = type_name(value)
    if kind == "Bool":
        return "true" if value else "false"
    if kind == "Float":
        return format_float(value)
    if kind == "None":
        return "None"
    if kind == "List":
        return debug_text(value)
    return str(value)


def _quote(text: str) -> str:
    """Double-quote a string, escaping backslash, quote, newline and tab."""
    escaped = (
        text.replace('\\', '\\\\')
        .replace('"', '\\"')
        .replace('\n', '\\n')
        .replace('\t', '\\t')
    )
    return f'"{escaped}"'


def debug_text(value) -> str:
    """
    Return the debug form of a value.

    Strings are quoted, whole floats keep their ``.0`` and lists are
    bracketed with their elements in debug form.
    """
    kind = type_name(value)
    if kind == "List":
        return "[" + ", ".join(debug_text(item) for item in value) + "]"
    if kind == "Str":
        return _quote(value)
    if kind == "Float":
        text = format_float(value)
        if text.lstrip('-').isdigit():
            text += ".0"
        return text
    return to_text(value)

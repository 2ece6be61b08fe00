"""Shared definitions for AST operation identifiers.

This module centralizes the operator labels used by the parser and
interpreter to tag operator nodes in the abstract syntax tree. Keeping them in
one place prevents the two components from drifting apart when operators are
added or renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.

    The value of each member is the operator as written in source.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Power tier
    MOD = "%"
    POW = "^"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Boolean
    AND = "&"
    OR = "|"

    # Unary
    NOT = "!"
    INC = "++"
    DEC = "--"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Binary operators by the token type that introduces them.
BINARY_OPS = {
    'AND': Op.AND,
    'OR': Op.OR,
    'LT': Op.LT,
    'LE': Op.LE,
    'GT': Op.GT,
    'GE': Op.GE,
    'EQ': Op.EQ,
    'NE': Op.NE,
    'MOD': Op.MOD,
    'CARET': Op.POW,
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'DIV': Op.DIV,
}

# Prefix operators by token type.
UNARY_OPS = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'NOT': Op.NOT,
}


__all__ = ["Op", "BINARY_OPS", "UNARY_OPS"]

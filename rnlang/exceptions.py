"""Errors.

Every error raised while lexing, parsing or evaluating a script derives from
:class:`ScriptError` and from the closest Python builtin, so callers can catch
either family. The command-line driver is the only place that turns one of
these into a diagnostic and an exit status.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ScriptError(Exception):
    """
    Base class for errors raised by a running script.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class LexError(ScriptError, SyntaxError):
    """
    Error for characters the lexer does not recognise.
    """
    def __init__(self, char, line, column, source_line, file=None):
        self.char = char
        self.column = column
        self.source_line = source_line
        super().__init__(f"Unknown character '{char}' at column {column}", line, file)


class ParseError(ScriptError, SyntaxError):
    """
    Error for token sequences that do not fit the grammar.
    """
    def __init__(self, message, line=None, file=None, expected=None, found=None):
        self.expected = expected
        self.found = found
        super().__init__(message, line, file)


class UndefinedVariableError(ScriptError, NameError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class UnboundVariableError(UndefinedVariableError):
    """
    Error for variables declared with ``let name;`` and read before a value is given.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        ScriptError.__init__(
            self, f"Variable '{varname}' was declared without a value", line, file
        )


class UndefinedFunctionError(ScriptError, NameError):
    """
    Error for calls to functions that were never declared.
    """
    def __init__(self, func_name, line=None, file=None):
        self.func_name = func_name
        super().__init__(f"Function '{func_name}' not found", line, file)


class ArityError(ScriptError, TypeError):
    """
    Error for calls with the wrong number of arguments.
    """
    def __init__(self, func_name, expected, provided, line=None, file=None):
        self.func_name = func_name
        self.expected = expected
        self.provided = provided
        marker = ".." if expected > 0 else ""
        verb = "were" if provided > 1 else "was"
        super().__init__(
            f"Function '{func_name}({marker})' expects {expected} arguments, "
            f"but {provided} {verb} provided",
            line,
            file,
        )


class OperandTypeError(ScriptError, TypeError):
    """
    Error for operators applied to operand types they do not support.
    """


class DivisionByZeroError(ScriptError, ZeroDivisionError):
    """
    Error for division by zero.
    """


class IntegerOverflowError(ScriptError, OverflowError):
    """
    Error for integer results outside the 32-bit signed range, and for strings
    whose length would exceed it.
    """


class UnsupportedOperationError(ScriptError, NotImplementedError):
    """
    Error for constructs that parse but have no evaluation.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        super().__init__(f"Unsupported operation {op}", line, file)

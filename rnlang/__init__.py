"""rnlang.

A small dynamically typed scripting language: lexer, recursive descent parser and
tree-walk interpreter.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from rnlang.interpreter import Interpreter
from rnlang.lexer import tokenize
from rnlang.parser import Parser

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def run_source(code: str, file: str = "<script>", out=None) -> Interpreter:
    """
    Tokenize, parse and execute source code.

    Parameters:
        code (str): The script source.
        file (str): Script name used in error messages.
        out: Text stream for print/println; standard output when None.

    Returns:
        Interpreter: The interpreter after execution, for inspecting its state.
    """
    tokens = tokenize(code, file)
    ast = Parser(tokens, file).parse()
    interpreter = Interpreter(file, out)
    interpreter.execute(ast)
    return interpreter


__all__ = ["Interpreter", "Parser", "tokenize", "run_source", "__version__"]

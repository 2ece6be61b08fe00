"""
Utility functions shared across rnlang tests.
"""
from rnlang.lexer import tokenize
from rnlang.parser import Parser
from rnlang.interpreter import Interpreter


def token_pairs(source: str) -> list[tuple[str, str]]:
    """
    Tokenize source code and return (type, value) pairs without the EOF token.
    """
    return [(tok.type, tok.value) for tok in tokenize(source)[:-1]]


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens = tokenize(source, "<test>")
    parser = Parser(tokens, "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    ast = parse_source(source)
    interpreter = Interpreter("<test>")
    interpreter.execute(ast)
    return interpreter

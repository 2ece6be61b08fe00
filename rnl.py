"""
rnl - rnlang interpreter

This is the main entry point for the rnlang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Any error from those stages is printed to stderr as ``<ErrorName>: <message>``
and the process exits with status 1.


File: rnl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import argparse
import logging
import sys

from rnlang import __version__
from rnlang.config import Settings
from rnlang.exceptions import ScriptError
from rnlang.interpreter import Interpreter
from rnlang.lexer import tokenize
from rnlang.parser import Parser

logger = logging.getLogger("rnl")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.
    """
    parser = argparse.ArgumentParser(
        prog="rnl",
        description="Run an rnlang script.",
        epilog="Example: rnl hello.rn",
    )
    parser.add_argument("script", help="path to an rnlang source file to execute")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print the tokens and AST before running (same as RNL_DEBUG=1)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(ast, file=sys.stderr)
    print(" ", file=sys.stderr)


def run_script(script_name: str, debug: bool = False) -> int:
    """
    Run an rnlang script and return the process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Cannot read source file '{script_name}': {e.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(
            f"Cannot read source file '{script_name}': not valid UTF-8 "
            f"(byte 0x{e.object[e.start]:02x} at offset {e.start})",
            file=sys.stderr,
        )
        return 1

    try:
        tokens = tokenize(code, script_name)
        parser = Parser(tokens, script_name)
        ast = parser.parse()

        if debug:
            debug_print_tokens_ast(tokens, ast)

        interpreter = Interpreter(script_name)
        interpreter.execute(ast)
    except (ScriptError, RecursionError) as e:
        sys.stdout.flush()
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument that is not an option: treat it as the path to a script and run it.
    - ``-h``/``--help`` or ``--version``: print and exit.
    - No script, or an invalid RNL_* setting: print usage and exit with status 2.
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        settings = Settings.from_env()
    except ValueError as e:
        parser.error(str(e))
    debug = args.debug or settings.debug

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.setrecursionlimit(settings.recursion_limit)
    logger.debug("Running %s", args.script)

    return run_script(args.script, debug)


if __name__ == "__main__":
    sys.exit(main())

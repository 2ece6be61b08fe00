"""
Main parser entry point for rnlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`rnlang.parser.expressions` and `rnlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging

from rnlang.exceptions import ParseError
from rnlang.lexer import TOKEN_LITERALS, Token

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)


class Parser:
    """rnlang parser."""

    def __init__(self, tokens: list[Token], file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            file (str): The name of the script.
        """
        if not tokens or tokens[-1].type != 'EOF':
            line = tokens[-1].line if tokens else 1
            tokens = [*tokens, Token('EOF', 'EOF', line)]
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def peek(self, offset: int = 1) -> Token:
        """
        Return the token ``offset`` places ahead without consuming anything.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            self.error(token_type)
        if self.position < len(self.tokens) - 1:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def error(self, expected: str):
        """
        Raise a ParseError for the current token.

        Parameters:
            expected (str): The token type, or a description, that was expected.
        """
        tok = self.curr_token
        expd_value = TOKEN_LITERALS.get(expected)
        expd = f"'{expd_value}' of type {expected}" if expd_value else expected
        raise ParseError(
            f"Expected {expd}, but got value '{tok.value}' of type {tok.type}",
            tok.line,
            self.source_file,
            expected=expected,
            found=tok,
        )

    def at_keyword(self, *names: str) -> bool:
        """
        Return True if the current token is one of the given keywords.
        """
        return self.curr_token.type == 'KEYWORD' and self.curr_token.value in names


    # Expression wrappers
    def expr(self) -> tuple:
        """
        Parse a full expression starting from the logical operators.
        """
        return _expr.parse_expr(self)

    def comparison(self) -> tuple:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def power(self) -> tuple:
        """
        Parse a modulus or caret expression.
        """
        return _expr.parse_power(self)

    def add_sub(self) -> tuple:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_add_sub(self)

    def term(self) -> tuple:
        """
        Parse a term in an expression, multiplication or division.
        """
        return _expr.parse_term(self)

    def primary(self) -> tuple:
        """
        Parse a primary expression such as a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)

    def id_path(self) -> tuple:
        """
        Parse an identifier with optional ``.property`` accessors.
        """
        return _expr.parse_id_path(self)

    def arguments(self) -> list:
        """
        Parse a comma separated argument list, stopping before ``)``.
        """
        return _expr.parse_arguments(self)


    # Statement wrappers
    def block(self) -> list:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)


    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while self.curr_token.type != 'EOF':
            statements.append(self.statement())
        logger.debug("Parsed %d top-level statements", len(statements))
        return statements

"""
Expression parsing utilities for rnlang.

These functions operate on a `rnlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Every binary level is
left-associative.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from rnlang.exceptions import ParseError
from rnlang.operations import BINARY_OPS, UNARY_OPS, Op
from rnlang.values import INT_MAX

if TYPE_CHECKING:
    from rnlang.parser import Parser


def _binary_level(parser: 'Parser', token_types: tuple, operand) -> tuple:
    """
    Parse ``operand (op operand)*`` for the operator tokens of one level.
    """
    result = operand()
    while parser.curr_token.type in token_types:
        op_tok = parser.eat(parser.curr_token.type)
        result = (BINARY_OPS[op_tok.type], result, operand(), op_tok.line)
    return result


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse logical expressions using '&' and '|'."""
    return _binary_level(parser, ('AND', 'OR'), parser.comparison)


def parse_comparison(parser: 'Parser') -> tuple:
    """Parse comparison expressions (<, <=, >, >=, ==, !=)."""
    return _binary_level(parser, ('LT', 'LE', 'GT', 'GE', 'EQ', 'NE'), parser.power)


def parse_power(parser: 'Parser') -> tuple:
    """Parse '%' and '^' expressions."""
    return _binary_level(parser, ('MOD', 'CARET'), parser.add_sub)


def parse_add_sub(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    return _binary_level(parser, ('PLUS', 'MINUS'), parser.term)


def parse_term(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    return _binary_level(parser, ('MUL', 'DIV'), parser.primary)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """
    Parse a primary expression.

    Syntax:
        <id_path> [<suffix>]
        | <int> | <float> | <string> | True | False | None | <keyword>
        | ( <expression> )
        | [ <expression>, ... ]
        | .. => { <block> }
        | + <expression> | - <expression> | ! <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token

    if tok.type == 'ID':
        node = parser.id_path()
        if parser.curr_token.type in ('LPAREN', 'LBRACKET', 'INCREMENT', 'DECREMENT'):
            return parse_suffix(parser, node)
        return node

    if tok.type == 'INT':
        parser.eat('INT')
        value = int(tok.value)
        if value > INT_MAX:
            raise ParseError(
                f"Integer literal {tok.value} does not fit in 32 bits",
                tok.line,
                parser.source_file,
                expected='INT',
                found=tok,
            )
        return ('int', value, tok.line)

    if tok.type == 'FLOAT':
        parser.eat('FLOAT')
        return ('float', float(tok.value), tok.line)

    if tok.type == 'STRING':
        parser.eat('STRING')
        return ('string', tok.value, tok.line)

    if tok.type == 'KEYWORD':
        parser.eat('KEYWORD')
        if tok.value == 'None':
            return ('none', tok.line)
        if tok.value in ('True', 'False'):
            return ('bool', tok.value == 'True', tok.line)
        return ('flow', tok.value, tok.line)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    if tok.type == 'LBRACKET':
        parser.eat('LBRACKET')
        elements = []
        if parser.curr_token.type != 'RBRACKET':
            elements.append(parser.expr())
            while parser.curr_token.type == 'COMMA':
                parser.eat('COMMA')
                elements.append(parser.expr())
        parser.eat('RBRACKET')
        return ('list', elements, tok.line)

    if tok.type == 'DEFAULT':
        parser.eat('DEFAULT')
        parser.eat('ARROW')
        return ('option', ('default', tok.line), parser.block(), tok.line)

    if tok.type in UNARY_OPS:
        parser.eat(tok.type)
        # The operand is a whole expression: -5 + 3 is -(5 + 3).
        return ('unary', UNARY_OPS[tok.type], parser.expr(), tok.line)

    parser.error("an expression")


def parse_id_path(parser: 'Parser') -> tuple:
    """
    Parse an identifier followed by any number of property accessors.

    Syntax:
        <identifier> (. <identifier>)*

    Returns:
        tuple: ('ident', name, line) or nested ('dot', object, property, line)
    """
    tok = parser.eat('ID')
    node = ('ident', tok.value, tok.line)
    while parser.curr_token.type == 'DOT':
        parser.eat('DOT')
        prop_tok = parser.eat('ID')
        node = ('dot', node, prop_tok.value, prop_tok.line)
    return node


def parse_suffix(parser: 'Parser', node: tuple) -> tuple:
    """
    Parse the suffix after an identifier path.

    Syntax:
        <id_path> ( <arguments> )
        | <id_path> [ <expression> ]
        | <id_path> ++ ;
        | <id_path> -- ;
    """
    tok = parser.curr_token
    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        args = parser.arguments()
        parser.eat('RPAREN')
        return ('func_call', node, args, node[-1])

    if tok.type == 'LBRACKET':
        parser.eat('LBRACKET')
        index = parser.expr()
        parser.eat('RBRACKET')
        return ('index', node, index, node[-1])

    op = Op.INC if tok.type == 'INCREMENT' else Op.DEC
    parser.eat(tok.type)
    parser.eat('SEMI')
    return ('unary', op, node, tok.line)


def parse_arguments(parser: 'Parser') -> list:
    """Parse call arguments up to, but not including, the closing ')'."""
    args = []
    if parser.curr_token.type == 'RPAREN':
        return args
    args.append(parser.expr())
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        args.append(parser.expr())
    return args

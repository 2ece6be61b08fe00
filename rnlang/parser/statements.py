"""Statement parsing utilities for rnlang.

These functions operate on a `rnlang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
declarations, conditionals, loops, function and class definitions.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rnlang.parser import Parser


def parse_block(parser: 'Parser') -> list:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        list: the statements of the block.
    """
    parser.eat('LBRACE')
    statements = []
    while parser.curr_token.type != 'RBRACE':
        statements.append(parser.statement())
    parser.eat('RBRACE')
    return statements


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Keywords select the statement form; anything else is an assignment or an
    expression statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'KEYWORD' and tok.value in STATEMENT_KEYWORDS:
        return STATEMENT_KEYWORDS[tok.value](parser)
    if tok.type == 'ID' and parser.peek().type == 'ASSIGN':
        return parse_assignment(parser)
    return parse_expression_statement(parser)


def parse_expression_statement(parser: 'Parser') -> tuple:
    """
    Parse an expression used as a statement.

    Syntax:
        <expression> [;]
    """
    tok = parser.curr_token
    expr_node = parser.expr()
    if parser.curr_token.type == 'SEMI':
        parser.eat('SEMI')
    return ('expr_stmt', expr_node, tok.line)


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `let` variable declaration.

    Syntax:
        let <id_path> ;
        let <id_path> = <expression> ;

    Returns:
        tuple: ('let', name_node, expr_or_None, line)
    """
    tok = parser.eat('KEYWORD')
    name = parser.id_path()
    if parser.curr_token.type == 'SEMI':
        parser.eat('SEMI')
        return ('let', name, None, tok.line)
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    parser.eat('SEMI')
    return ('let', name, expr_node, tok.line)


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse reassignment of an existing variable.

    Syntax:
        <identifier> = <expression> ;
    """
    id_tok = parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    parser.eat('SEMI')
    return ('assign', id_tok.value, expr_node, id_tok.line)


def parse_func_def(parser: 'Parser') -> tuple:
    """
    Parse a function definition.

    Syntax:
        fn <id_path> ( [<inputs>] [: <outputs>] ) { <block> }

    Returns:
        tuple: ('func_def', name_node, (inputs, outputs), body, line)
    """
    tok = parser.eat('KEYWORD')
    name = parser.id_path()
    params = _parse_parameters(parser)
    body = parser.block()
    return ('func_def', name, params, body, tok.line)


def _parse_parameters(parser: 'Parser') -> tuple[list, list]:
    """
    Parse a parameter list with an optional ``:``-separated output half.

    Inputs are identifier paths, outputs are expressions.
    """
    parser.eat('LPAREN')
    inputs: list = []
    outputs: list = []
    if parser.curr_token.type not in ('RPAREN', 'COLON'):
        inputs.append(parser.id_path())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            inputs.append(parser.id_path())
    if parser.curr_token.type == 'COLON':
        parser.eat('COLON')
        if parser.curr_token.type != 'RPAREN':
            outputs = parser.arguments()
    parser.eat('RPAREN')
    return inputs, outputs


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse an `rn` (return) statement.

    Syntax:
        rn ;
        rn <expression> (, <expression>)* ;
    """
    tok = parser.eat('KEYWORD')
    values = []
    if parser.curr_token.type != 'SEMI':
        values.append(parser.expr())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            values.append(parser.expr())
    parser.eat('SEMI')
    return ('return', values, tok.line)


def _parse_condition(parser: 'Parser') -> tuple:
    """Parse a parenthesised condition."""
    parser.eat('LPAREN')
    condition = parser.expr()
    parser.eat('RPAREN')
    return condition


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional `if` statement with an optional else block.

    Syntax:
        if ( <condition> ) { <block> }
        else { <block> }
    """
    tok = parser.eat('KEYWORD')
    condition = _parse_condition(parser)
    then_block = parser.block()
    else_block = None
    if parser.at_keyword('else'):
        parser.eat('KEYWORD')
        else_block = parser.block()
    return ('if', condition, then_block, else_block, tok.line)


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a `while` loop.

    Syntax:
        while ( <condition> ) { <block> }
    """
    tok = parser.eat('KEYWORD')
    condition = _parse_condition(parser)
    body = parser.block()
    return ('while', condition, body, tok.line)


def parse_for(parser: 'Parser') -> tuple:
    """
    Parse a `for` loop.

    Syntax:
        for ( <object> : <var> (, <var>)* ) { <block> }
    """
    tok = parser.eat('KEYWORD')
    parser.eat('LPAREN')
    obj = parser.id_path()
    parser.eat('COLON')
    loop_vars = [parser.id_path()]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        loop_vars.append(parser.id_path())
    parser.eat('RPAREN')
    body = parser.block()
    return ('for', obj, loop_vars, body, tok.line)


def parse_match(parser: 'Parser') -> tuple:
    """
    Parse a `match` statement.

    Syntax:
        match <id_path> {
            <expression> => { <block> },
            ...
            .. => { <block> }
        }

    The default option must come last; nothing after it is read as an option.
    """
    tok = parser.eat('KEYWORD')
    subject = parser.id_path()
    parser.eat('LBRACE')
    cases = [_parse_option(parser)]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        if parser.curr_token.type == 'DEFAULT':
            cases.append(parser.expr())
            break
        cases.append(_parse_option(parser))
    parser.eat('RBRACE')
    return ('match', subject, cases, tok.line)


def _parse_option(parser: 'Parser') -> tuple:
    """Parse one ``<expression> => { <block> }`` match option."""
    condition = parser.expr()
    parser.eat('ARROW')
    return ('option', condition, parser.block(), condition[-1])


def parse_class(parser: 'Parser') -> tuple:
    """
    Parse a class declaration.

    Syntax:
        class <id_path> [( <parent> (, <parent>)* )] { <block> }
    """
    tok = parser.eat('KEYWORD')
    name = parser.id_path()
    parents = None
    if parser.curr_token.type == 'LPAREN':
        parser.eat('LPAREN')
        parents = []
        if parser.curr_token.type != 'RPAREN':
            parents.append(parser.id_path())
            while parser.curr_token.type == 'COMMA':
                parser.eat('COMMA')
                parents.append(parser.id_path())
        parser.eat('RPAREN')
    body = parser.block()
    return ('class', name, parents, body, tok.line)


def parse_parent(parser: 'Parser') -> tuple:
    """
    Parse a parent-constructor call.

    Syntax:
        parent <id_path> ( <arguments> )
    """
    tok = parser.eat('KEYWORD')
    name = parser.id_path()
    parser.eat('LPAREN')
    args = parser.arguments()
    parser.eat('RPAREN')
    return ('parent', name, args, tok.line)


def parse_use(parser: 'Parser') -> tuple:
    """
    Parse a `use` statement.

    Syntax:
        use <id_path> (, <id_path>)* ;
    """
    tok = parser.eat('KEYWORD')
    modules = [parser.id_path()]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        modules.append(parser.id_path())
    parser.eat('SEMI')
    return ('use', modules, tok.line)


STATEMENT_KEYWORDS = {
    'class': parse_class,
    'fn': parse_func_def,
    'while': parse_while,
    'for': parse_for,
    'if': parse_if,
    'match': parse_match,
    'let': parse_declaration,
    'rn': parse_return,
    'parent': parse_parent,
    'use': parse_use,
}

"""Lexer for rnlang.

The lexer walks the source one line at a time and matches a combined regular
expression of named groups at each position of the line. Each match yields a
:class:`Token` containing its type, its text and the source line number.

Tokens never span a line break: a string that is not closed before the end of
its line simply ends there. Comment text beginning with ``#`` is skipped.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
import re

from rnlang.exceptions import LexError

logger = logging.getLogger(__name__)

KEYWORDS = frozenset({
    "let",
    "fn",
    "for",
    "while",
    "if",
    "else",
    "match",
    "True",
    "False",
    "None",
    "class",
    "parent",
    "rn",
    "break",
    "continue",
    "use",
    "as",
})

ESCAPES = {
    'n': '\n',
    't': '\t',
    '"': '"',
    '\\': '\\',
}


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (str): The token text.
            line (int): The source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('ID',        r'[^\W\d]\w*'),
    ('NUMBER',    r'\d+(?:\.\d*)?'),
    ('STRING',    r'"(?:[^"\\]|\\.?)*"?' r"|'(?:[^'\\]|\\.?)*'?"),

    # Two character operators
    ('GE',        r'>='),
    ('LE',        r'<='),
    ('EQ',        r'=='),
    ('ARROW',     r'=>'),
    ('DEFAULT',   r'\.\.'),
    ('INCREMENT', r'\+\+'),
    ('DECREMENT', r'--'),
    ('NE',        r'!='),

    # Delimiters
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('LBRACKET',  r'\['),
    ('RBRACKET',  r'\]'),
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('COMMA',     r','),
    ('COLON',     r':'),
    ('SEMI',      r';'),
    ('DOT',       r'\.'),

    # Single character operators
    ('ASSIGN',    r'='),
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),
    ('MOD',       r'%'),
    ('CARET',     r'\^'),
    ('NOT',       r'!'),
    ('AND',       r'&'),
    ('OR',        r'\|'),
    ('GT',        r'>'),
    ('LT',        r'<'),

    # Miscellaneous
    ('COMMENT',   r'\#.*'),
    ('SKIP',      r'\s+'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)

# Maps a token type back to the text it stands for, used in parser messages.
TOKEN_LITERALS: dict[str, str] = {
    name: re.sub(r'\\', '', pattern)
    for name, pattern in TOKEN_SPECIFICATION
    if name not in ('ID', 'NUMBER', 'STRING', 'COMMENT', 'SKIP', 'MISMATCH')
}


def unescape(body: str) -> str:
    """
    Resolve backslash escapes in the body of a string literal.

    ``\\n``, ``\\t``, ``\\"`` and ``\\\\`` map to their characters; any other
    escaped character is kept as is and a trailing lone backslash is dropped.
    """
    result = []
    chars = iter(body)
    for char in chars:
        if char == '\\':
            escaped = next(chars, None)
            if escaped is not None:
                result.append(ESCAPES.get(escaped, escaped))
        else:
            result.append(char)
    return ''.join(result)


def _string_body(text: str) -> str:
    """Strip the quotes from a matched string literal."""
    quote = text[0]
    body = text[1:]
    # The closing quote is missing when the literal runs to the end of the line.
    if len(body) > 0 and body[-1] == quote and not _escapes_last_char(body[:-1]):
        body = body[:-1]
    return body


def _escapes_last_char(body: str) -> bool:
    """Return True if ``body`` ends with an odd run of backslashes."""
    run = len(body) - len(body.rstrip('\\'))
    return run % 2 == 1


def source_lines(code: str) -> list[str]:
    """
    Split source code into lines.

    Only ``\\n`` ends a line and a ``\\r`` before it is dropped. Other line
    separators such as form feed or U+2028 stay part of the line.
    """
    lines = code.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Optional script name used in error messages.

    Returns:
        list[Token]: A list of Token instances ending with an EOF token.

    Raises:
        LexError: If an unexpected character is encountered.
    """
    tokens: list[Token] = []
    line_num = 0

    for line_num, line in enumerate(source_lines(code), start=1):
        for match_obj in TOKEN_REGEX.finditer(line):
            kind = match_obj.lastgroup
            value = match_obj.group()

            if kind in ('SKIP', 'COMMENT'):
                continue
            if kind == 'MISMATCH':
                raise LexError(value, line_num, match_obj.start() + 1, line, file)

            if kind == 'ID':
                kind = 'KEYWORD' if value in KEYWORDS else 'ID'
            elif kind == 'NUMBER':
                kind = 'FLOAT' if '.' in value else 'INT'
            elif kind == 'STRING':
                value = unescape(_string_body(value))

            tokens.append(Token(kind, value, line_num))

    tokens.append(Token('EOF', 'EOF', max(line_num, 1)))
    logger.debug("Tokenized %d tokens from %d lines", len(tokens), line_num)
    return tokens

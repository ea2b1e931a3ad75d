"""
  Expression lexer

- Left-to-right scan, whitespace skipped
- Emits tagged token objects (longhand.types.token):

    - 12, 3.5, .5, 1e-3   -> NumberToken (text kept verbatim; parsed by the evaluator)
    - sin, sqrt, ...      -> FunctionToken (names in tables.FUNCTIONS)
    - pi, e, i, j, x1     -> VariableToken (constants are resolved at evaluation)
    - + - * / % ^ **      -> OperatorToken
    - ( )                 -> LeftParen / RightParen

 Any other character is dropped (logged), unless strict mode is on, in
 which case it raises MalformedExpression.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from longhand.config import strict_tokens
from longhand.errors import MalformedExpression
from longhand.tables import FUNCTIONS, OPERATORS
from longhand.types.token import (
    Token,
    NumberToken,
    OperatorToken,
    FunctionToken,
    VariableToken,
    LeftParen,
    RightParen,
)

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<number>[0-9.](?:[0-9.]|[eE][+-]?)*)"  # 12, 3.5, .5, 1e-3
    r"|(?P<name>[A-Za-z][A-Za-z0-9]*)"  # functions and variables
    r"|(?P<operator>\*\*|[-+*/%^])"  # '**' before '*'
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r")"
)


def lex(source: str, strict: Optional[bool] = None) -> Iterator[Token]:
    """Token generator over an infix expression."""
    if strict is None:
        strict = strict_tokens()
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos].isspace():
                pos += 1
                continue
            if strict:
                raise MalformedExpression(f"Unexpected character at {pos}: {source[pos]!r}")
            logger.warning("Skipping unrecognised character at %d: %r", pos, source[pos])
            pos += 1
            continue

        text = m.group(m.lastgroup)
        match m.lastgroup:
            case "number":
                yield NumberToken(text)
            case "name":
                yield FunctionToken(text) if text in FUNCTIONS else VariableToken(text)
            case "operator":
                spec = OPERATORS[text]
                yield OperatorToken(text, spec.precedence, spec.right_assoc)
            case "lparen":
                yield LeftParen()
            case "rparen":
                yield RightParen()
        pos = m.end()


def tokenize(source: str, strict: Optional[bool] = None) -> list[Token]:
    return list(lex(source, strict))

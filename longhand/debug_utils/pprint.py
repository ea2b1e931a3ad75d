"""Compact renderers used by debug logging."""

from __future__ import annotations

from typing import Iterable

from longhand.types.token import (
    Token,
    NumberToken,
    OperatorToken,
    FunctionToken,
    VariableToken,
)


def format_token(token: Token) -> str:
    match token:
        case NumberToken(text=text):
            return text
        case OperatorToken(symbol=symbol):
            return symbol
        case FunctionToken(name=name) | VariableToken(name=name):
            return name
    return str(token)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Space-separated token stream, e.g. '2 3 4 * +' for a postfix sequence."""
    return " ".join(format_token(t) for t in tokens)

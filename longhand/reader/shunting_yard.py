"""Infix to postfix conversion (shunting yard).

Numbers and variables go straight to the output. Functions wait on the
operator stack and bind tighter than any operator. A closing parenthesis
flushes back to its opening one and then releases a function sitting
directly beneath it, which is how func(arg) ends up as `arg func`.
"""

from __future__ import annotations

from typing import Iterable

from longhand.errors import MalformedExpression
from longhand.types.token import (
    Token,
    NumberToken,
    OperatorToken,
    FunctionToken,
    VariableToken,
    LeftParen,
    RightParen,
)


def _yields_to(top: Token, incoming: OperatorToken) -> bool:
    """True when the stack top must be output before `incoming` is pushed."""
    if isinstance(top, FunctionToken):
        return True
    if isinstance(top, OperatorToken):
        if top.precedence > incoming.precedence:
            return True
        return top.precedence == incoming.precedence and not incoming.right_assoc
    return False


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        match token:
            case NumberToken() | VariableToken():
                output.append(token)

            case FunctionToken() | LeftParen():
                stack.append(token)

            case OperatorToken():
                while stack and _yields_to(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)

            case RightParen():
                while stack and not isinstance(stack[-1], LeftParen):
                    output.append(stack.pop())
                if not stack:
                    raise MalformedExpression("Unmatched ')'")
                stack.pop()
                if stack and isinstance(stack[-1], FunctionToken):
                    output.append(stack.pop())

            case _:
                raise MalformedExpression(f"Unexpected token: {token!r}")

    while stack:
        top = stack.pop()
        if isinstance(top, LeftParen):
            raise MalformedExpression("Unmatched '('")
        output.append(top)
    return output

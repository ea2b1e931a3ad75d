"""Postfix evaluator.

One pass over the postfix tokens with a value stack that lives only for
the duration of the call. Values are ComplexValue, or Unevaluated for
results that are deliberately left symbolic.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from longhand.arithmetic import complex_ops, engine
from longhand.config import DEFAULT_LIMITS, Limits
from longhand.errors import InvalidNumber, MalformedExpression, UnknownOperator, Unsupported
from longhand.evaluation.functions import Value, apply_function, resolve_variable
from longhand.types.complex_value import ComplexValue
from longhand.types.decimal_value import Decimal
from longhand.types.token import (
    Token,
    NumberToken,
    OperatorToken,
    FunctionToken,
    VariableToken,
    LeftParen,
    RightParen,
)
from longhand.types.unevaluated import Unevaluated

logger = logging.getLogger(__name__)


def _power(a: ComplexValue, b: ComplexValue, limits: Limits) -> Value:
    if not (a.is_real and b.is_real):
        return Unevaluated(f"complex_pow({a.render()}, {b.render()})")
    try:
        return ComplexValue(engine.power(a.real, b.real, limits))
    except Unsupported as exc:
        return Unevaluated(exc.marker)


BINARY_OPERATORS: Mapping[str, Callable[[ComplexValue, ComplexValue, Limits], Value]] = MappingProxyType({
    "+": lambda a, b, limits: complex_ops.add(a, b),
    "-": lambda a, b, limits: complex_ops.subtract(a, b),
    "*": lambda a, b, limits: complex_ops.multiply(a, b),
    "/": complex_ops.divide,
    "^": _power,
    "**": _power,
})


def apply_operator(symbol: str, a: Value, b: Value, limits: Limits) -> Value:
    handler = BINARY_OPERATORS.get(symbol)
    if handler is None:
        raise UnknownOperator(f"Unknown operator: {symbol}")
    for operand in (a, b):
        if isinstance(operand, Unevaluated):
            raise InvalidNumber(f"Cannot apply '{symbol}' to unevaluated value {operand}")
    return handler(a, b, limits)


def evaluate_postfix(tokens: Iterable[Token], limits: Limits | None = None) -> Value:
    """Run postfix tokens against a fresh stack; exactly one value must remain."""
    limits = limits or DEFAULT_LIMITS
    stack: list[Value] = []

    for token in tokens:
        match token:
            case NumberToken(text=text):
                stack.append(ComplexValue(Decimal.from_literal(text)))

            case VariableToken(name=name):
                stack.append(resolve_variable(name))

            case OperatorToken(symbol=symbol):
                if len(stack) < 2:
                    raise MalformedExpression(
                        f"Invalid expression: not enough operands for operator {symbol}"
                    )
                b = stack.pop()
                a = stack.pop()
                stack.append(apply_operator(symbol, a, b, limits))

            case FunctionToken(name=name):
                if not stack:
                    raise MalformedExpression(
                        f"Invalid expression: no operand for function {name}"
                    )
                stack.append(apply_function(name, stack.pop(), limits))

            case LeftParen() | RightParen():
                raise MalformedExpression(f"Unmatched '{token}' in postfix expression")

            case _:
                raise MalformedExpression(f"Unexpected token in postfix expression: {token!r}")

        logger.debug("%s -> stack depth %d", token, len(stack))

    if len(stack) != 1:
        raise MalformedExpression(
            f"Invalid expression: final stack size is {len(stack)}, expected 1"
        )
    return stack[0]

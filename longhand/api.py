"""Text-level scalar arithmetic.

Operands are decimal text; results are canonical decimal text. Malformed
operands raise InvalidNumber, and the other failures raise their own
LonghandError subclass. Results that are deliberately not computed (an
exponent over the cap, say) come back as their tagged marker text instead
of a number.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from longhand.arithmetic import engine
from longhand.config import Limits
from longhand.errors import InvalidNumber, UnknownOperator, Unsupported
from longhand.types.decimal_value import (
    Decimal,
    Ordering,
    canonicalize,
    compare_magnitude,
    is_valid,
)

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "power_decimal",
    "nth_root",
    "operate",
    "is_valid",
    "canonicalize",
    "compare_magnitude",
    "Ordering",
]


def _operands(a: str, b: str, first: str = "first operand", second: str = "second operand"):
    if not is_valid(a):
        raise InvalidNumber(f"Invalid {first}: {a!r}")
    if not is_valid(b):
        raise InvalidNumber(f"Invalid {second}: {b!r}")
    return Decimal.parse(a), Decimal.parse(b)


def add(a: str, b: str) -> str:
    x, y = _operands(a, b)
    return str(engine.add(x, y))


def subtract(a: str, b: str) -> str:
    x, y = _operands(a, b)
    return str(engine.subtract(x, y))


def multiply(a: str, b: str) -> str:
    x, y = _operands(a, b)
    return str(engine.multiply(x, y))


def divide(a: str, b: str, limits: Limits | None = None) -> str:
    x, y = _operands(a, b)
    return str(engine.divide(x, y, limits))


def power(base: str, exponent: str, limits: Limits | None = None) -> str:
    x, y = _operands(base, exponent, "base", "exponent")
    try:
        return str(engine.power(x, y, limits))
    except Unsupported as exc:
        return exc.marker


def power_decimal(base: str, exponent: str, limits: Limits | None = None) -> str:
    x, y = _operands(base, exponent, "base", "exponent")
    try:
        return str(engine.power_decimal(x, y, limits))
    except Unsupported as exc:
        return exc.marker


def nth_root(number: str, root: str, limits: Limits | None = None) -> str:
    x, y = _operands(number, root, "number", "root")
    try:
        return str(engine.nth_root(x, y, limits))
    except Unsupported as exc:
        return exc.marker


OPERATIONS: Mapping[str, Callable[..., str]] = MappingProxyType({
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "^": power,
})


def operate(a: str, op: str, b: str) -> str:
    """Dispatch a single binary operator over two decimal texts."""
    operation = OPERATIONS.get(op)
    if operation is None:
        raise UnknownOperator(f"Unknown operator: {op}")
    return operation(a, b)

"""Read-only lookup tables shared by the lexer, shunting yard and evaluator.

Built once at import; MappingProxyType keeps them immutable so concurrent
evaluations can share them without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from longhand.types.decimal_value import Decimal


@dataclass(frozen=True)
class OperatorSpec:
    precedence: int
    right_assoc: bool = False


OPERATORS = MappingProxyType({
    "+": OperatorSpec(1),
    "-": OperatorSpec(1),
    "*": OperatorSpec(2),
    "/": OperatorSpec(2),
    "%": OperatorSpec(2),
    "^": OperatorSpec(4, right_assoc=True),
    "**": OperatorSpec(4, right_assoc=True),
})

# name -> arity
FUNCTIONS = MappingProxyType({
    "sin": 1, "cos": 1, "tan": 1,
    "asin": 1, "acos": 1, "atan": 1,
    "sinh": 1, "cosh": 1, "tanh": 1,
    "log": 1, "ln": 1, "log10": 1,
    "sqrt": 1, "abs": 1, "inv": 1,
    "exp": 1, "floor": 1, "ceil": 1,
})

IMAGINARY_UNITS = frozenset({"i", "j"})

CONSTANTS = MappingProxyType({
    "pi": Decimal.parse(
        "3.141592653589793238462643383279502884197169399375105820974944592307816406286"
    ),
    "e": Decimal.parse(
        "2.718281828459045235360287471352662497757247093699959574966967627724076630353"
    ),
})

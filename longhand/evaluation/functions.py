"""Named functions and variables for the postfix evaluator.

Only `inv` and real `abs` have closed forms here. Every other function
produces an Unevaluated placeholder that records the call, e.g. `sin(2)`
for a real operand and `complex_sin(1+2i)` for a complex one.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Union

from longhand.arithmetic import complex_ops
from longhand.config import Limits
from longhand.errors import DomainError, InvalidNumber, UnknownFunction
from longhand.tables import CONSTANTS, FUNCTIONS, IMAGINARY_UNITS
from longhand.types.complex_value import ComplexValue
from longhand.types.decimal_value import ONE, ZERO
from longhand.types.unevaluated import Unevaluated

logger = logging.getLogger(__name__)

Value = Union[ComplexValue, Unevaluated]
FunctionHandler = Callable[[str, Value, Limits], Value]


def resolve_variable(name: str) -> ComplexValue:
    """i/j -> 0+1i, pi/e -> fixed constants, anything else -> 0."""
    if name in IMAGINARY_UNITS:
        return ComplexValue(ZERO, ONE)
    if name in CONSTANTS:
        return ComplexValue(CONSTANTS[name])
    logger.warning("Unknown variable %r evaluates to 0", name)
    return ComplexValue(ZERO)


# -------------------------------
# Closed forms
# -------------------------------
def inv_function(name: str, operand: Value, limits: Limits) -> Value:
    if isinstance(operand, Unevaluated):
        raise InvalidNumber(f"Cannot take inverse of unevaluated value {operand}")
    return complex_ops.reciprocal(operand, limits)


def abs_function(name: str, operand: Value, limits: Limits) -> Value:
    if isinstance(operand, Unevaluated):
        raise InvalidNumber(f"Cannot take absolute value of unevaluated value {operand}")
    if operand.is_real:
        return ComplexValue(operand.real.abs())
    # |a+bi| = sqrt(a²+b²), left unevaluated
    return Unevaluated(f"sqrt({complex_ops.magnitude_squared(operand)})")


# -------------------------------
# Placeholders
# -------------------------------
def _placeholder(tag: str, operand: Value) -> Unevaluated:
    if isinstance(operand, Unevaluated) or operand.is_real:
        text = operand.text if isinstance(operand, Unevaluated) else str(operand.real)
        return Unevaluated(f"{tag}({text})")
    return Unevaluated(f"complex_{tag}({operand.render()})")


def placeholder_function(name: str, operand: Value, limits: Limits) -> Value:
    return _placeholder(name, operand)


def log10_function(name: str, operand: Value, limits: Limits) -> Value:
    return _placeholder("log10", operand)


def real_only_function(name: str, operand: Value, limits: Limits) -> Value:
    if isinstance(operand, ComplexValue) and not operand.is_real:
        raise DomainError(f"{name} not defined for complex numbers")
    return _placeholder(name, operand)


FUNCTION_HANDLERS: Mapping[str, FunctionHandler] = MappingProxyType({
    "inv": inv_function,
    "abs": abs_function,
    "sqrt": placeholder_function,
    "ln": placeholder_function,
    "log": log10_function,
    "log10": log10_function,
    "sin": placeholder_function,
    "cos": placeholder_function,
    "tan": placeholder_function,
    "asin": placeholder_function,
    "acos": placeholder_function,
    "atan": placeholder_function,
    "sinh": placeholder_function,
    "cosh": placeholder_function,
    "tanh": placeholder_function,
    "exp": placeholder_function,
    "floor": real_only_function,
    "ceil": real_only_function,
})


def apply_function(name: str, operand: Value, limits: Limits) -> Value:
    handler = FUNCTION_HANDLERS.get(name)
    if handler is None or name not in FUNCTIONS:
        raise UnknownFunction(f"Unknown function: {name}")
    return handler(name, operand, limits)

"""Complex arithmetic expressed entirely through the scalar engine.

An absent imaginary part is read as zero; a zero imaginary result collapses
back to the real-only form.
"""

from __future__ import annotations

from longhand.arithmetic import engine
from longhand.config import Limits
from longhand.errors import DivisionByZero
from longhand.types.complex_value import ComplexValue
from longhand.types.decimal_value import Decimal, ONE


def add(a: ComplexValue, b: ComplexValue) -> ComplexValue:
    return ComplexValue.collapse(engine.add(a.real, b.real), engine.add(a.imag, b.imag))


def subtract(a: ComplexValue, b: ComplexValue) -> ComplexValue:
    return ComplexValue.collapse(
        engine.subtract(a.real, b.real), engine.subtract(a.imag, b.imag)
    )


def multiply(a: ComplexValue, b: ComplexValue) -> ComplexValue:
    # (a+bi)(c+di) = (ac-bd) + (ad+bc)i
    ar, ai, br, bi = a.real, a.imag, b.real, b.imag
    real = engine.subtract(engine.multiply(ar, br), engine.multiply(ai, bi))
    imag = engine.add(engine.multiply(ar, bi), engine.multiply(ai, br))
    return ComplexValue.collapse(real, imag)


def magnitude_squared(value: ComplexValue) -> Decimal:
    return engine.add(
        engine.multiply(value.real, value.real), engine.multiply(value.imag, value.imag)
    )


def divide(a: ComplexValue, b: ComplexValue, limits: Limits | None = None) -> ComplexValue:
    # (a+bi)/(c+di) = ((ac+bd) + (bc-ad)i) / (c²+d²)
    denominator = magnitude_squared(b)
    if denominator.is_zero:
        raise DivisionByZero("Division by zero")
    ar, ai, br, bi = a.real, a.imag, b.real, b.imag
    real = engine.add(engine.multiply(ar, br), engine.multiply(ai, bi))
    imag = engine.subtract(engine.multiply(ai, br), engine.multiply(ar, bi))
    return ComplexValue.collapse(
        engine.divide(real, denominator, limits), engine.divide(imag, denominator, limits)
    )


def reciprocal(value: ComplexValue, limits: Limits | None = None) -> ComplexValue:
    """1 / value; raises DivisionByZero for zero."""
    if value.is_real:
        if value.real.is_zero:
            raise DivisionByZero("Cannot take inverse of zero")
        return ComplexValue(engine.divide(ONE, value.real, limits))
    return divide(ComplexValue(ONE), value, limits)

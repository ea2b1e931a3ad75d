"""Arbitrary-precision signed decimal values and the text utilities behind them.

A Decimal holds a sign, the integer digits and the fractional digits as
tuples of ints. Instances are always canonical:

- no leading zeros in the integer part (zero is the single digit 0)
- no trailing zeros in the fractional part
- zero is never negative

Text enters through parse()/from_literal() and leaves through str().
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from longhand.errors import InvalidNumber


DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
LITERAL_RE = re.compile(r"(?P<mantissa>[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE](?P<exponent>[+-]?[0-9]+))?")

# Scientific-notation exponents beyond this are rejected rather than expanded.
MAX_LITERAL_EXPONENT = 10000


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _strip_leading(digits: tuple[int, ...]) -> tuple[int, ...]:
    i = 0
    while i < len(digits) - 1 and digits[i] == 0:
        i += 1
    return digits[i:] or (0,)


def _strip_trailing(digits: tuple[int, ...]) -> tuple[int, ...]:
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return digits[:end]


@dataclass(frozen=True)
class Decimal:
    negative: bool
    integer: tuple[int, ...]
    fraction: tuple[int, ...] = ()

    # -------------------------------
    # Construction
    # -------------------------------
    @classmethod
    def of(cls, negative: bool, integer, fraction=()) -> Decimal:
        """Build a canonical value from possibly non-canonical digit sequences."""
        integer = _strip_leading(tuple(integer))
        fraction = _strip_trailing(tuple(fraction))
        if integer == (0,) and not fraction:
            negative = False
        return cls(negative, integer, fraction)

    @classmethod
    def from_scaled(cls, digits, scale: int, negative: bool = False) -> Decimal:
        """The value digits / 10**scale, where digits is an unsigned integer digit array."""
        digits = list(digits)
        if scale <= 0:
            return cls.of(negative, digits + [0] * (-scale))
        if len(digits) <= scale:
            digits = [0] * (scale - len(digits) + 1) + digits
        return cls.of(negative, digits[:-scale], digits[-scale:])

    @classmethod
    def from_int(cls, value: int) -> Decimal:
        return cls.of(value < 0, [int(c) for c in str(abs(value))])

    @classmethod
    def parse(cls, text: str) -> Decimal:
        """Parse plain decimal text: optional sign, digits, at most one point."""
        if not isinstance(text, str) or not DECIMAL_RE.fullmatch(text):
            raise InvalidNumber(f"Invalid number: {text!r}")
        negative = text[0] == '-'
        body = text.lstrip('+-')
        whole, _, frac = body.partition('.')
        return cls.of(negative, [int(c) for c in whole or '0'], [int(c) for c in frac])

    @classmethod
    def from_literal(cls, text: str) -> Decimal:
        """Parse an unsigned expression literal, expanding scientific notation (1.5e3)."""
        m = LITERAL_RE.fullmatch(text)
        if not m:
            raise InvalidNumber(f"Invalid number literal: {text!r}")
        value = cls.parse(m.group("mantissa"))
        if m.group("exponent") is None:
            return value
        shift = int(m.group("exponent"))
        if abs(shift) > MAX_LITERAL_EXPONENT:
            raise InvalidNumber(f"Exponent out of range in literal: {text!r}")
        return cls.from_scaled(value.digits, value.scale - shift)

    # -------------------------------
    # Properties
    # -------------------------------
    @property
    def digits(self) -> list[int]:
        """Integer and fractional digits run together, point removed."""
        return list(self.integer + self.fraction)

    @property
    def scale(self) -> int:
        """Number of digits after the point."""
        return len(self.fraction)

    @property
    def is_zero(self) -> bool:
        return self.integer == (0,) and not self.fraction

    @property
    def is_integer(self) -> bool:
        return not self.fraction

    def negate(self) -> Decimal:
        if self.is_zero:
            return self
        return Decimal(not self.negative, self.integer, self.fraction)

    def abs(self) -> Decimal:
        return Decimal(False, self.integer, self.fraction) if self.negative else self

    def __int__(self) -> int:
        value = int(''.join(map(str, self.integer)))
        return -value if self.negative else value

    def __str__(self) -> str:
        text = ''.join(map(str, self.integer))
        if self.fraction:
            text += '.' + ''.join(map(str, self.fraction))
        return '-' + text if self.negative else text


ZERO = Decimal.of(False, [0])
ONE = Decimal.of(False, [1])


def compare_magnitudes(a: Decimal, b: Decimal) -> Ordering:
    """Compare |a| and |b|: integer length, then digits, then zero-padded fractions."""
    if len(a.integer) != len(b.integer):
        return Ordering.LESS if len(a.integer) < len(b.integer) else Ordering.GREATER
    if a.integer != b.integer:
        return Ordering.LESS if a.integer < b.integer else Ordering.GREATER
    width = max(a.scale, b.scale)
    frac_a = a.fraction + (0,) * (width - a.scale)
    frac_b = b.fraction + (0,) * (width - b.scale)
    if frac_a == frac_b:
        return Ordering.EQUAL
    return Ordering.LESS if frac_a < frac_b else Ordering.GREATER


# -------------------------------
# Text utilities
# -------------------------------
def is_valid(text: str) -> bool:
    """True for an optional sign followed by digits with at most one decimal point."""
    return isinstance(text, str) and DECIMAL_RE.fullmatch(text) is not None


def canonicalize(text: str) -> str:
    """Canonical decimal text: '007.50' -> '7.5', '-0.0' -> '0'."""
    return str(Decimal.parse(text))


def compare_magnitude(a: str, b: str) -> Ordering:
    """Compare the absolute values of two decimal texts."""
    return compare_magnitudes(Decimal.parse(a), Decimal.parse(b))

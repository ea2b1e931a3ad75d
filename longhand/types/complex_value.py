from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from longhand.types.decimal_value import Decimal, ZERO


@dataclass(frozen=True)
class ComplexValue:
    """A real part plus an optional imaginary part.

    imaginary=None marks a value that was never complex; it renders and
    computes as a plain real. Arithmetic treats it as zero.
    """

    real: Decimal
    imaginary: Optional[Decimal] = None

    @classmethod
    def collapse(cls, real: Decimal, imaginary: Decimal) -> ComplexValue:
        """Drop a zero imaginary part back to the real-only form."""
        if imaginary.is_zero:
            return cls(real)
        return cls(real, imaginary)

    @property
    def is_real(self) -> bool:
        return self.imaginary is None or self.imaginary.is_zero

    @property
    def imag(self) -> Decimal:
        """Imaginary part with the absent state normalised to zero."""
        return ZERO if self.imaginary is None else self.imaginary

    def render(self) -> str:
        if self.is_real:
            return str(self.real)
        imag = str(self.imaginary)
        if self.real.is_zero:
            if imag == "1":
                return "i"
            if imag == "-1":
                return "-i"
            return imag + "i"
        if imag == "1":
            return f"{self.real}+i"
        if imag == "-1":
            return f"{self.real}-i"
        sign = "" if self.imaginary.negative else "+"
        return f"{self.real}{sign}{imag}i"

    def __str__(self) -> str:
        return self.render()

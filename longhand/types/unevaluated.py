from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Unevaluated:
    """A tagged, deliberately uncomputed result such as 'sin(2)' or a power marker."""

    text: str

    def render(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

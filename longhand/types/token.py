"""Token variants produced by the lexer and consumed by the shunting yard and evaluator.

Each kind carries only its own fields; all are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberToken:
    text: str


@dataclass(frozen=True)
class OperatorToken:
    symbol: str
    precedence: int
    right_assoc: bool = False


@dataclass(frozen=True)
class FunctionToken:
    name: str


@dataclass(frozen=True)
class VariableToken:
    name: str


@dataclass(frozen=True)
class LeftParen:
    def __str__(self):
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self):
        return ")"


Token = Union[NumberToken, OperatorToken, FunctionToken, VariableToken, LeftParen, RightParen]

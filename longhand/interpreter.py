from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from longhand.config import DEFAULT_LIMITS, Limits
from longhand.debug_utils.pprint import format_tokens
from longhand.errors import LonghandError
from longhand.evaluation.evaluator import evaluate_postfix
from longhand.reader.lexer import tokenize
from longhand.reader.shunting_yard import to_postfix

logger = logging.getLogger(__name__)

RESULT_LABEL = "Result: "


@dataclass(frozen=True)
class Result:
    """Outcome of one evaluation: either a value or the error that stopped it."""

    value: Optional[str] = None
    error: Optional[LonghandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.value


class Interpreter:
    """
    Evaluates infix expressions: text -> tokens -> postfix -> value text.
    Holds only configuration; every call gets its own tokens and stack.
    """
    def __init__(self, limits: Limits | None = None, strict: bool | None = None):
        self.limits = limits or DEFAULT_LIMITS
        self.strict = strict

    def eval(self, expression: str) -> str:
        """Evaluate and return the rendered value, raising LonghandError on failure."""
        logger.debug("Received expression: %s", expression)
        tokens = tokenize(expression, self.strict)
        logger.debug("Tokenization complete: %d tokens", len(tokens))
        postfix = to_postfix(tokens)
        logger.debug("Postfix: %s", format_tokens(postfix))
        value = evaluate_postfix(postfix, self.limits).render()
        logger.debug("Result: %s", value)
        return value

    def evaluate(self, expression: str, labelled: bool = False) -> Result:
        """Evaluate without raising: failures come back as Result.error."""
        try:
            value = self.eval(expression)
        except LonghandError as exc:
            logger.debug("Evaluation of %r failed: %s", expression, exc)
            return Result(error=exc)
        return Result(value=RESULT_LABEL + value if labelled else value)


def evaluate(expression: str, labelled: bool = False, limits: Limits | None = None) -> Result:
    return Interpreter(limits).evaluate(expression, labelled)

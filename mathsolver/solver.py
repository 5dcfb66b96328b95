import logging
from dataclasses import dataclass
from typing import Optional

from mathsolver.errors import EmptyExpression, MathSolverError
from mathsolver.evaluate import evaluate as evaluate_postfix
from mathsolver.parse import parse
from mathsolver.tokenize import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    expression: str
    value: Optional[int] = None
    error: Optional[MathSolverError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MathSolver:
    """Tokenize, parse and evaluate one expression per call.

    ``strict`` rejects substrings outside the token vocabulary instead of
    dropping them. ``left_associative`` groups chains of equal precedence
    from the left; turning it off keeps every operator of equal precedence
    on the stack, which groups such chains from the right.
    """

    def __init__(self, strict: bool = True, left_associative: bool = True) -> None:
        self.strict = strict
        self.left_associative = left_associative

    def evaluate(self, expression: str) -> int:
        try:
            tokens = tokenize(expression, strict=self.strict)
            if not tokens:
                raise EmptyExpression("no tokens to evaluate")
            postfix = parse(tokens, left_associative=self.left_associative)
            value = evaluate_postfix(postfix)
        except MathSolverError as err:
            if err.expression is None:
                err.expression = expression
            raise
        logger.debug("%r = %d", expression, value)
        return value

    def solve(self, expression: str) -> Solution:
        try:
            value = self.evaluate(expression)
        except MathSolverError as err:
            logger.info("failed to evaluate %r: %s", expression, err.describe())
            return Solution(expression, error=err)
        return Solution(expression, value=value)


def evaluate(expression: str, strict: bool = True, left_associative: bool = True) -> int:
    return MathSolver(strict, left_associative).evaluate(expression)


def solve(expression: str, strict: bool = True, left_associative: bool = True) -> Solution:
    return MathSolver(strict, left_associative).solve(expression)

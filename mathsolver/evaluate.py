import logging
import operator
from typing import Callable

from mathsolver.errors import (
    DivisionByZero,
    EmptyExpression,
    IntegerOverflow,
    InvalidToken,
    MalformedExpression,
    StackUnderflow,
)
from mathsolver.token import Token, TokenType
from mathsolver.utils import in_int64_range

logger = logging.getLogger(__name__)


def truncate_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


OPERATIONS: dict[TokenType, Callable[[int, int], int]] = {
    TokenType.Plus: operator.add,
    TokenType.Minus: operator.sub,
    TokenType.Multiply: operator.mul,
    TokenType.Divide: truncate_div,
}


def apply_operator(token: Token, stack: list[int]) -> int:
    if len(stack) < 2:
        raise StackUnderflow(
            f"not enough operands for '{token}'", location=token.location
        )
    right = stack.pop()
    left = stack.pop()
    if token.kind == TokenType.Divide and right == 0:
        raise DivisionByZero(
            f"division of {left} by zero", location=token.location
        )
    value = OPERATIONS[token.kind](left, right)
    if not in_int64_range(value):
        raise IntegerOverflow(
            f"{left} {token} {right} does not fit in 64 bits", location=token.location
        )
    logger.debug("%d %s %d = %d", left, token, right, value)
    return value


def evaluate(postfix: list[Token]) -> int:
    stack: list[int] = []
    for token in postfix:
        match token.kind:
            case TokenType.Number:
                if not in_int64_range(token.value):
                    raise IntegerOverflow(
                        f"literal {token} does not fit in 64 bits",
                        location=token.location,
                    )
                stack.append(token.value)
            case TokenType.OpenParen | TokenType.CloseParen:
                raise InvalidToken(
                    f"'{token}' cannot appear in a postfix sequence",
                    location=token.location,
                )
            case _:
                stack.append(apply_operator(token, stack))
    if not stack:
        raise EmptyExpression("nothing to evaluate")
    if len(stack) > 1:
        raise MalformedExpression(
            f"{len(stack)} values left without operators to combine them"
        )
    return stack[0]

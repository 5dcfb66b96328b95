from enum import IntEnum
from typing import Optional

from mathsolver.helper import error_message


class ErrorKind(IntEnum):
    MalformedNumber = 1
    UnrecognizedToken = 2
    UnbalancedParenthesis = 3
    StackUnderflow = 4
    DivisionByZero = 5
    EmptyExpression = 6
    MalformedExpression = 7
    InvalidToken = 8
    IntegerOverflow = 9


class MathSolverError(Exception):
    """Base class for every failure the pipeline reports.

    ``expression`` is the literal input line and ``location`` the character
    offset of the offending substring. Either may be unknown when the error
    is raised from a stage that only sees tokens; the driver fills in the
    expression before surfacing the error.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        expression: Optional[str] = None,
        location: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.expression = expression
        self.location = location

    def describe(self) -> str:
        header = f"{self.kind.name}: {self.message}"
        if self.expression is None:
            return header
        return error_message(self.expression, self.location, header).rstrip("\n")


class MalformedNumber(MathSolverError):
    kind = ErrorKind.MalformedNumber


class UnrecognizedToken(MathSolverError):
    kind = ErrorKind.UnrecognizedToken


class UnbalancedParenthesis(MathSolverError):
    kind = ErrorKind.UnbalancedParenthesis


class StackUnderflow(MathSolverError):
    kind = ErrorKind.StackUnderflow


class DivisionByZero(MathSolverError):
    kind = ErrorKind.DivisionByZero


class EmptyExpression(MathSolverError):
    kind = ErrorKind.EmptyExpression


class MalformedExpression(MathSolverError):
    kind = ErrorKind.MalformedExpression


class InvalidToken(MathSolverError):
    kind = ErrorKind.InvalidToken


class IntegerOverflow(MathSolverError):
    kind = ErrorKind.IntegerOverflow

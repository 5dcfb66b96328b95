from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Minus = 3
    Multiply = 4
    Divide = 5
    OpenParen = 6
    CloseParen = 7


PUNCTUATORS = {
    "+": TokenType.Plus,
    "-": TokenType.Minus,
    "*": TokenType.Multiply,
    "/": TokenType.Divide,
    "(": TokenType.OpenParen,
    ")": TokenType.CloseParen,
}

SYMBOLS = {kind: symbol for symbol, kind in PUNCTUATORS.items()}

PRECEDENCE = {
    TokenType.Plus: 1,
    TokenType.Minus: 1,
    TokenType.Multiply: 2,
    TokenType.Divide: 2,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    value: Optional[int] = None
    location: Optional[int] = field(default=None, compare=False)

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.kind, 0)

    @property
    def is_operator(self) -> bool:
        return self.kind in PRECEDENCE

    @property
    def expression(self) -> str:
        if self.kind == TokenType.Number:
            return str(self.value)
        return SYMBOLS[self.kind]

    def __str__(self) -> str:
        return self.expression


def new_number(value: int, location: Optional[int] = None) -> Token:
    return Token(TokenType.Number, value, location)


def new_token(kind: TokenType, location: Optional[int] = None) -> Token:
    if kind == TokenType.Number:
        raise ValueError("number tokens need a value, use new_number")
    return Token(kind, None, location)


def from_punctuator(expression: str, location: Optional[int] = None) -> Optional[Token]:
    kind = PUNCTUATORS.get(expression)
    if kind is None:
        return None
    return new_token(kind, location)


def format_tokens(tokens: list[Token]) -> str:
    return " ".join(str(token) for token in tokens)


# Shorthands used when building token sequences by hand.
Plus = new_token(TokenType.Plus)
Minus = new_token(TokenType.Minus)
Multiply = new_token(TokenType.Multiply)
Divide = new_token(TokenType.Divide)
OpenParen = new_token(TokenType.OpenParen)
CloseParen = new_token(TokenType.CloseParen)
Number = new_number

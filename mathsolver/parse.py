import logging

from mathsolver.errors import UnbalancedParenthesis
from mathsolver.token import Token, TokenType, format_tokens

logger = logging.getLogger(__name__)


class Parse:
    """Shunting-yard conversion of an infix token sequence to postfix.

    Only parenthesis balance is checked here. Operand and operator counts
    are left to the evaluator, so ``1 + + 2`` parses without complaint.
    """

    tokens: list[Token]
    output: list[Token]
    operator_stack: list[Token]

    def __init__(self, tokens: list[Token], left_associative: bool = True) -> None:
        self.tokens = tokens
        self.left_associative = left_associative
        self.output = []
        self.operator_stack = []

    def should_pop(self, token: Token) -> bool:
        if not self.operator_stack:
            return False
        top = self.operator_stack[-1]
        if top.kind == TokenType.OpenParen:
            return False
        if self.left_associative:
            return top.precedence >= token.precedence
        return top.precedence > token.precedence

    def push_operator(self, token: Token) -> None:
        while self.should_pop(token):
            self.output.append(self.operator_stack.pop())
        self.operator_stack.append(token)

    def close_paren(self, token: Token) -> None:
        while self.operator_stack:
            top = self.operator_stack.pop()
            if top.kind == TokenType.OpenParen:
                return
            self.output.append(top)
        raise UnbalancedParenthesis(
            "')' without matching '('", location=token.location
        )

    def drain(self) -> None:
        while self.operator_stack:
            top = self.operator_stack.pop()
            if top.kind == TokenType.OpenParen:
                raise UnbalancedParenthesis(
                    "'(' without matching ')'", location=top.location
                )
            self.output.append(top)

    def parse(self) -> list[Token]:
        for token in self.tokens:
            match token.kind:
                case TokenType.Number:
                    self.output.append(token)
                case TokenType.OpenParen:
                    self.operator_stack.append(token)
                case TokenType.CloseParen:
                    self.close_paren(token)
                case _:
                    self.push_operator(token)
        self.drain()
        logger.debug("postfix: %s", format_tokens(self.output))
        return self.output


def parse(tokens: list[Token], left_associative: bool = True) -> list[Token]:
    return Parse(tokens, left_associative).parse()

import logging
import re
from typing import Optional

from mathsolver.errors import MalformedNumber, MathSolverError, UnrecognizedToken
from mathsolver.token import Token, from_punctuator, new_number, format_tokens
from mathsolver.utils import in_int64_range

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"-?[0-9]+")


def parse_int(expression: str) -> Optional[int]:
    """Parse a base 10 literal covering the whole of ``expression``.

    Returns ``None`` when the text is not a literal or does not fit in a
    signed 64-bit integer.
    """
    if not NUMBER_PATTERN.fullmatch(expression):
        return None
    value = int(expression)
    if not in_int64_range(value):
        return None
    return value


def looks_numeric(expression: str) -> bool:
    if expression[0].isdigit():
        return True
    return len(expression) > 1 and expression[0] == "-" and expression[1].isdigit()


def split_words(expression: str) -> list[tuple[str, int]]:
    words = []
    index = 0
    while index < len(expression):
        if expression[index].isspace():
            index += 1
            continue
        start = index
        while index < len(expression) and not expression[index].isspace():
            index += 1
        words.append((expression[start:index], start))
    return words


def invalid_word(expression: str, word: str, location: int) -> MathSolverError:
    if looks_numeric(word):
        if NUMBER_PATTERN.fullmatch(word):
            message = f"integer literal '{word}' does not fit in 64 bits"
        else:
            message = f"invalid integer literal '{word}'"
        return MalformedNumber(message, expression, location)
    return UnrecognizedToken(f"unrecognized token '{word}'", expression, location)


def tokenize(expression: str, strict: bool = True) -> list[Token]:
    tokens = []
    for word, location in split_words(expression):
        value = parse_int(word)
        if value is not None:
            tokens.append(new_number(value, location))
            continue
        token = from_punctuator(word, location)
        if token is not None:
            tokens.append(token)
            continue
        if strict:
            raise invalid_word(expression, word, location)
        logger.debug("dropping unrecognized token %r at %d", word, location)
    logger.debug("tokenized %r: %s", expression, format_tokens(tokens))
    return tokens

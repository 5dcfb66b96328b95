import unittest

from mathsolver.errors import ErrorKind, MalformedNumber, UnrecognizedToken
from mathsolver.token import CloseParen, Minus, Number, OpenParen, Plus
from mathsolver.tokenize import parse_int, tokenize
from mathsolver.utils import maxsize, minsize


class TestParseInt(unittest.TestCase):
    def test_literals(self):
        self.assertEqual(parse_int("42"), 42)
        self.assertEqual(parse_int("-7"), -7)
        self.assertEqual(parse_int("007"), 7)

    def test_rejects_partial_and_foreign_forms(self):
        for text in ["+7", "1_000", "-", "12a", " 1", "1.5", "0x10"]:
            self.assertIsNone(parse_int(text), text)

    def test_int64_bounds(self):
        self.assertEqual(parse_int(str(maxsize)), maxsize)
        self.assertEqual(parse_int(str(minsize)), minsize)
        self.assertIsNone(parse_int(str(maxsize + 1)))
        self.assertIsNone(parse_int(str(minsize - 1)))


class TestTokenize(unittest.TestCase):
    def test_simple_sum(self):
        self.assertEqual(tokenize("1 + 2"), [Number(1), Plus, Number(2)])

    def test_whitespace_runs_and_locations(self):
        tokens = tokenize("  ( 1\t+ 2 )  ")
        self.assertEqual(tokens, [OpenParen, Number(1), Plus, Number(2), CloseParen])
        self.assertEqual([token.location for token in tokens], [2, 4, 6, 8, 10])

    def test_negative_literal_and_minus(self):
        self.assertEqual(tokenize("-5 - 3"), [Number(-5), Minus, Number(3)])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(" \t "), [])

    def test_unrecognized_token(self):
        with self.assertRaises(UnrecognizedToken) as ctx:
            tokenize("1 + x")
        self.assertEqual(ctx.exception.kind, ErrorKind.UnrecognizedToken)
        self.assertEqual(ctx.exception.location, 4)
        self.assertEqual(ctx.exception.expression, "1 + x")

    def test_operators_need_whitespace(self):
        with self.assertRaises(UnrecognizedToken):
            tokenize("( 1 + 2 )*3")
        with self.assertRaises(MalformedNumber):
            tokenize("1+2")

    def test_malformed_numbers(self):
        for text in ["12a", "-3b", "99999999999999999999"]:
            with self.assertRaises(MalformedNumber):
                tokenize(f"1 + {text}")

    def test_lenient_drops_unknown_words(self):
        tokens = tokenize("1 + x 2 12a", strict=False)
        self.assertEqual(tokens, [Number(1), Plus, Number(2)])

    def test_lenient_never_raises(self):
        self.assertEqual(tokenize("foo bar", strict=False), [])


if __name__ == "__main__":
    unittest.main()

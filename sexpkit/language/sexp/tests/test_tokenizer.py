#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of PRISM
# (see https://github.com/orgs/Radiance-Technologies/prism).
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Test suite for s-expression tokenization.
"""

import pickle
import unittest
from pathlib import Path

from sexpkit.language.location import Location
from sexpkit.language.sexp.exception import TokenizerError, TokenizerErrorKind
from sexpkit.language.sexp.tokenizer import SexpTokenizer
from sexpkit.language.token import TokenKind


class TestSexpTokenizer(unittest.TestCase):
    """
    Test suite for `SexpTokenizer`.
    """

    def assertTokens(self, text, expected) -> None:
        """
        Assert the kinds and values of the tokens of `text`.
        """
        tokens = SexpTokenizer.tokenize(text)
        self.assertEqual([(t.kind, t.value) for t in tokens], expected)

    def assertTokenizerError(self, text, kind, location=None) -> TokenizerError:
        """
        Assert that tokenizing `text` fails in the given manner.
        """
        with self.assertRaises(TokenizerError) as cm:
            SexpTokenizer.tokenize(text)
        self.assertEqual(cm.exception.kind, kind)
        if location is not None:
            self.assertEqual(cm.exception.location, location)
        return cm.exception

    def test_empty(self) -> None:
        """
        Verify that empty or blank text yields no tokens.
        """
        self.assertEqual(SexpTokenizer.tokenize(""), [])
        self.assertEqual(SexpTokenizer.tokenize(" \t\r\n"), [])

    def test_flat_list(self) -> None:
        """
        Verify tokens and locations of a simple list.
        """
        tokens = SexpTokenizer.tokenize("(+ 1 2)")
        self.assertEqual(
            [t.kind for t in tokens],
            [
                TokenKind.LIST_OPEN,
                TokenKind.IDENTIFIER,
                TokenKind.NUMBER,
                TokenKind.NUMBER,
                TokenKind.LIST_CLOSE
            ])
        self.assertEqual([t.raw for t in tokens], ["(", "+", "1", "2", ")"])
        self.assertEqual(
            [t.location for t in tokens],
            [
                Location(0, 0),
                Location(0, 1),
                Location(0, 3),
                Location(0, 5),
                Location(0, 6)
            ])
        self.assertEqual(tokens[2].value, 1.0)

    def test_locations_across_lines(self) -> None:
        """
        Verify that newlines advance the line and reset the column.
        """
        tokens = SexpTokenizer.tokenize("\t(a\r\n b)")
        self.assertEqual(
            [t.location for t in tokens],
            [Location(0, 1),
             Location(0, 2),
             Location(1, 1),
             Location(1, 2)])

    def test_path(self) -> None:
        """
        Verify that the path is attached to every token.
        """
        tokens = SexpTokenizer.tokenize("(x)", "file.sexp")
        for token in tokens:
            self.assertEqual(token.location.path, Path("file.sexp"))

    def test_comment(self) -> None:
        """
        Verify that comments run to the end of the line.
        """
        tokens = SexpTokenizer.tokenize("; Hello!\n(a)")
        self.assertEqual(tokens[0].kind, TokenKind.COMMENT)
        self.assertEqual(tokens[0].raw, "; Hello!")
        self.assertEqual(tokens[0].value, " Hello!")
        self.assertEqual(tokens[1].location, Location(1, 0))
        self.assertTokens("a ;trailing", [(TokenKind.IDENTIFIER,
                                           "a"),
                                          (TokenKind.COMMENT,
                                           "trailing")])
        self.assertTokens(";c\r\nb", [(TokenKind.COMMENT,
                                       "c"),
                                      (TokenKind.IDENTIFIER,
                                       "b")])

    def test_string(self) -> None:
        """
        Verify that string contents exclude quotes and keep escapes.
        """
        tokens = SexpTokenizer.tokenize('"a b" x')
        self.assertEqual(tokens[0].kind, TokenKind.STRING)
        self.assertEqual(tokens[0].raw, '"a b"')
        self.assertEqual(tokens[0].value, "a b")
        self.assertEqual(tokens[1].location, Location(0, 6))
        self.assertTokens(r'"a\"b"', [(TokenKind.STRING, r'a\"b')])
        self.assertTokens('"(;)"', [(TokenKind.STRING, "(;)")])
        self.assertTokens('foo"bar"', [(TokenKind.IDENTIFIER,
                                        "foo"),
                                       (TokenKind.STRING,
                                        "bar")])

    def test_multiline_string(self) -> None:
        """
        Verify that newlines inside strings are tracked.
        """
        tokens = SexpTokenizer.tokenize('"a\nb" c')
        self.assertEqual(tokens[0].value, "a\nb")
        self.assertEqual(tokens[1].location, Location(1, 3))

    def test_unclosed_string(self) -> None:
        """
        Verify that an unterminated string fails at the end of input.
        """
        error = self.assertTokenizerError(
            '(foo "bar',
            TokenizerErrorKind.STRING_UNCLOSED,
            Location(0, 9))
        self.assertEqual(error.partial_contents, "bar")
        self.assertEqual(str(error), '0:9: Unclosed string "bar')
        self.assertTokenizerError('"a\\"', TokenizerErrorKind.STRING_UNCLOSED)

    def test_numbers(self) -> None:
        """
        Verify numbers, including signs and decimal points.
        """
        self.assertTokens(
            "-5 +2.5 0.25 7. -x +",
            [
                (TokenKind.NUMBER,
                 -5.0),
                (TokenKind.NUMBER,
                 2.5),
                (TokenKind.NUMBER,
                 0.25),
                (TokenKind.NUMBER,
                 7.0),
                (TokenKind.IDENTIFIER,
                 "-x"),
                (TokenKind.IDENTIFIER,
                 "+"),
            ])
        self.assertTokens("(1)", [(TokenKind.LIST_OPEN,
                                   None),
                                  (TokenKind.NUMBER,
                                   1.0),
                                  (TokenKind.LIST_CLOSE,
                                   None)])

    def test_identifier_begins_with_number(self) -> None:
        """
        Verify that atoms starting with a number must be numbers.
        """
        error = self.assertTokenizerError(
            "1abc",
            TokenizerErrorKind.IDENTIFIER_BEGINS_WITH_NUMBER,
            Location(0, 0))
        self.assertEqual(error.got, "1abc")
        error = self.assertTokenizerError(
            "(a 1.2.3)",
            TokenizerErrorKind.IDENTIFIER_BEGINS_WITH_NUMBER,
            Location(0, 3))
        self.assertEqual(error.got, "1.2.3")

    def test_number_out_of_range(self) -> None:
        """
        Verify that literals too large for a float are rejected.
        """
        literal = "1" + "0" * 400
        error = self.assertTokenizerError(
            f"(a -{literal})",
            TokenizerErrorKind.NUMBER_OUT_OF_RANGE,
            Location(0, 3))
        self.assertEqual(error.got, f"-{literal}")
        self.assertEqual(error.message, f"Number out of range: -{literal}")
        # the largest magnitudes below the limit are still numbers
        self.assertTokens("1" + "0" * 300, [(TokenKind.NUMBER, 1e300)])

    def test_bools(self) -> None:
        """
        Verify that only complete boolean literals become booleans.
        """
        self.assertTokens(
            "true false trueish",
            [
                (TokenKind.BOOL,
                 True),
                (TokenKind.BOOL,
                 False),
                (TokenKind.IDENTIFIER,
                 "trueish"),
            ])

    def test_identifiers(self) -> None:
        """
        Verify that identifiers stop only at delimiters.
        """
        self.assertTokens(
            "(foo-bar? a1 <=)",
            [
                (TokenKind.LIST_OPEN,
                 None),
                (TokenKind.IDENTIFIER,
                 "foo-bar?"),
                (TokenKind.IDENTIFIER,
                 "a1"),
                (TokenKind.IDENTIFIER,
                 "<="),
                (TokenKind.LIST_CLOSE,
                 None),
            ])

    def test_helper_guards(self) -> None:
        """
        Verify that the reader helpers reject the wrong starting point.
        """
        with self.assertRaises(TokenizerError) as cm:
            SexpTokenizer("x")._read_comment()
        self.assertEqual(cm.exception.kind, TokenizerErrorKind.COMMENT_NOT_STARTED)
        with self.assertRaises(TokenizerError) as cm:
            SexpTokenizer("x")._read_string()
        self.assertEqual(cm.exception.kind, TokenizerErrorKind.STRING_NOT_STARTED)
        with self.assertRaises(TokenizerError) as cm:
            SexpTokenizer("(")._read_identifier()
        self.assertEqual(
            cm.exception.kind,
            TokenizerErrorKind.IDENTIFIER_NOT_STARTED)
        with self.assertRaises(TokenizerError) as cm:
            SexpTokenizer("x")._read_number()
        self.assertEqual(cm.exception.kind, TokenizerErrorKind.WRONG_TYPE)
        self.assertEqual(cm.exception.got, TokenKind.IDENTIFIER)
        with self.assertRaises(TokenizerError) as cm:
            SexpTokenizer("")._advance()
        self.assertEqual(cm.exception.kind, TokenizerErrorKind.STACK_UNDERFLOW)

    def test_error_pickling(self) -> None:
        """
        Verify that tokenizer errors survive pickling.
        """
        error = TokenizerError(
            TokenizerErrorKind.STRING_UNCLOSED,
            Location(1, 2),
            partial_contents="abc")
        copied = pickle.loads(pickle.dumps(error))
        self.assertEqual(copied, error)
        self.assertEqual(copied.kind, error.kind)
        self.assertEqual(copied.location, error.location)
        self.assertEqual(copied.partial_contents, "abc")


if __name__ == '__main__':
    unittest.main()

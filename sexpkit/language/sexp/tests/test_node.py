"""
Test suite for s-expression nodes.
"""

import copy
import unittest

from sexpkit.language.location import Location
from sexpkit.language.sexp.atom import (
    SexpBool,
    SexpComment,
    SexpIdentifier,
    SexpNumber,
    SexpString,
)
from sexpkit.language.sexp.exception import NodeError, NodeErrorKind
from sexpkit.language.sexp.list import SexpList
from sexpkit.language.sexp.node import AstType, SexpNode
from sexpkit.language.sexp.parser import SexpParser


class TestSexpNode(unittest.TestCase):
    """
    Test suite for `SexpNode` and its variants.
    """

    def setUp(self) -> None:
        """
        Parse a small tree shared between tests.
        """
        self.tree = SexpParser.parse_text(
            '(point\n  (x 1.5) (y -2) (label "origin") (visible true))')[0]

    def test_accessors(self) -> None:
        """
        Verify that each accessor unwraps its own variant.
        """
        self.assertTrue(SexpBool(True).as_bool())
        self.assertEqual(SexpNumber(2).as_number(), 2.0)
        self.assertEqual(SexpString("s").as_string(), "s")
        self.assertEqual(SexpIdentifier("i").as_identifier(), "i")
        self.assertEqual(SexpComment("c").as_comment(), "c")
        children = self.tree.as_list()
        self.assertEqual(len(children), 5)
        self.assertEqual(children[0].as_identifier(), "point")

    def test_accessor_type_mismatch(self) -> None:
        """
        Verify that accessors reject other variants with a location.
        """
        x = self.tree[1]
        with self.assertRaises(NodeError) as cm:
            x.as_string()
        self.assertEqual(cm.exception.kind, NodeErrorKind.INVALID_TYPE)
        self.assertEqual(cm.exception.expected, AstType.STRING)
        self.assertEqual(cm.exception.got, AstType.LIST)
        self.assertEqual(cm.exception.location, Location(1, 2))
        self.assertEqual(cm.exception.message, "Expected string, got list")
        with self.assertRaises(NodeError):
            SexpNumber(1).as_bool()
        with self.assertRaises(NodeError):
            SexpString("s").as_list()

    def test_assert_length(self) -> None:
        """
        Verify list length assertions.
        """
        self.tree.assert_length(5)
        with self.assertRaises(NodeError) as cm:
            self.tree.assert_length(2)
        self.assertEqual(cm.exception.kind, NodeErrorKind.LENGTH_MISMATCH)
        self.assertEqual(cm.exception.message, "Expected 2 values, got 5")
        with self.assertRaises(NodeError):
            SexpIdentifier("a").assert_length(0)

    def test_indexing(self) -> None:
        """
        Verify indexing into lists and its failure modes.
        """
        self.assertEqual(self.tree[-1], SexpParser.parse_text("(visible true)")[0])
        with self.assertRaises(NodeError):
            self.tree[5]
        with self.assertRaises(NodeError):
            SexpIdentifier("a")[0]
        self.assertEqual(len(SexpIdentifier("a")), 0)
        self.assertEqual([str(c) for c in self.tree[1]], ["x", "1.5"])

    def test_predicates(self) -> None:
        """
        Verify variant predicates.
        """
        self.assertTrue(self.tree.is_list())
        self.assertFalse(self.tree.is_atom())
        self.assertTrue(SexpComment("c").is_comment())
        self.assertTrue(SexpNumber(1).is_atom())
        self.assertTrue(SexpNumber(1).is_number())
        self.assertFalse(SexpIdentifier("true").is_bool())

    def test_equality(self) -> None:
        """
        Verify that equality is structural and ignores locations.
        """
        self.assertEqual(SexpString("a"), SexpString("a"))
        self.assertNotEqual(SexpString("a"), SexpIdentifier("a"))
        self.assertNotEqual(SexpBool(True), SexpNumber(1))
        self.assertNotEqual(SexpList(), SexpIdentifier("()"))
        moved = SexpParser.parse_text(
            '\n\n(point (x 1.5) (y -2) (label "origin") (visible true))')[0]
        self.assertEqual(self.tree, moved)
        self.assertNotEqual(self.tree.location, moved.location)

    def test_render(self) -> None:
        """
        Verify the rendering of each variant.
        """
        self.assertEqual(str(SexpBool(False)), "false")
        self.assertEqual(str(SexpNumber(2.0)), "2")
        self.assertEqual(str(SexpNumber(-0.125)), "-0.125")
        self.assertEqual(str(SexpNumber(0.00001)), "0.00001")
        self.assertEqual(str(SexpNumber(-2.5e-20)), "-0.000000000000000000025")
        self.assertEqual(str(SexpNumber(1e22)), "10000000000000000000000")
        self.assertEqual(str(SexpString('a \\"b\\"')), '"a \\"b\\""')
        self.assertEqual(str(SexpIdentifier("foo")), "foo")
        self.assertEqual(str(SexpComment(" note")), "; note\n")
        self.assertEqual(
            str(self.tree),
            '(point (x 1.5) (y -2) (label "origin") (visible true))')

    def test_default_location(self) -> None:
        """
        Verify that nodes built without tokens have the default location.
        """
        self.assertEqual(SexpList([SexpNumber(1)]).location, Location())
        self.assertEqual(SexpNumber(1).tokens, ())

    def test_modify_recur(self) -> None:
        """
        Verify out-of-place modification.
        """

        def _negate(node: SexpNode) -> SexpNode:
            if node.is_number():
                return SexpNumber(-node.as_number(), node.tokens)
            return node

        modified = self.tree.modify_recur(post_children_modify=_negate)
        self.assertEqual(
            str(modified),
            '(point (x -1.5) (y 2) (label "origin") (visible true))')
        self.assertEqual(str(self.tree[1]), "(x 1.5)")
        self.assertEqual(modified.location, self.tree.location)

    def test_deepcopy(self) -> None:
        """
        Verify that deep copies are equal but distinct.
        """
        copied = copy.deepcopy(self.tree)
        self.assertEqual(copied, self.tree)
        self.assertIsNot(copied, self.tree)
        self.assertIsNot(copied[1], self.tree[1])
        self.assertEqual(copied.location, self.tree.location)

    def test_to_python_ds(self) -> None:
        """
        Verify conversion to plain Python values.
        """
        self.assertEqual(
            self.tree.to_python_ds(),
            [
                "point",
                ["x",
                 1.5],
                ["y",
                 -2.0],
                ["label",
                 "origin"],
                ["visible",
                 True]
            ])


if __name__ == '__main__':
    unittest.main()

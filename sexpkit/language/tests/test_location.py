"""
Test suite for `sexpkit.language.location`.
"""
import unittest
from pathlib import Path

from sexpkit.language.location import Location, LocationCursor


class TestLocation(unittest.TestCase):
    """
    Tests for rendering and comparing locations.
    """

    def test_default(self) -> None:
        """
        Verify that the default location is the origin with no path.
        """
        self.assertEqual(Location(), Location(0, 0, None))
        self.assertEqual(str(Location()), "0:0")

    def test_str_with_path(self) -> None:
        """
        Verify that the path is rendered before the line and column.
        """
        location = Location(3, 7, Path("dir") / "file.sexp")
        self.assertEqual(str(location), f"{Path('dir') / 'file.sexp'}:3:7")

    def test_hashable(self) -> None:
        """
        Verify that equal locations hash equally.
        """
        self.assertEqual(
            len({Location(1, 2), Location(1, 2), Location(2, 1)}),
            2)


class TestLocationCursor(unittest.TestCase):
    """
    Tests for the mutable scan cursor.
    """

    def test_advance(self) -> None:
        """
        Verify that columns increase and newlines start a new line.
        """
        cursor = LocationCursor("a.sexp")
        for char in "ab\ncd":
            cursor.advance(char)
        self.assertEqual(cursor.location, Location(1, 2, Path("a.sexp")))

    def test_snapshots_are_independent(self) -> None:
        """
        Verify that earlier snapshots do not move with the cursor.
        """
        cursor = LocationCursor()
        before = cursor.location
        cursor.advance("x")
        self.assertEqual(before, Location(0, 0))
        self.assertEqual(cursor.location, Location(0, 1))


if __name__ == '__main__':
    unittest.main()

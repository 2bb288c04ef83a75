"""
Tests for Color and Region
"""

import unittest

from quadpress.color import Color, MAX_DIFFERENCE
from quadpress.region import Region


class TestColor(unittest.TestCase):
    """Test color arithmetic."""

    def test_default_is_black(self):
        """Test the default color."""
        self.assertEqual(Color(), (0, 0, 0))
        self.assertEqual(Color().red, 0)

    def test_average_truncates(self):
        """Test that averaging truncates instead of rounding."""
        colors = [Color(0, 0, 0), Color(0, 0, 0), Color(0, 0, 0), Color(3, 7, 255)]
        self.assertEqual(Color.average(colors), Color(0, 1, 63))

        colors = [Color(10, 20, 30), Color(11, 21, 31), Color(12, 22, 32), Color(13, 23, 33)]
        self.assertEqual(Color.average(colors), Color(11, 21, 31))

    def test_difference(self):
        """Test the sum of squared channel differences."""
        self.assertEqual(Color(1, 2, 3).difference(Color(4, 6, 3)), 9 + 16)
        self.assertEqual(Color(5, 5, 5).difference(Color(5, 5, 5)), 0)
        self.assertEqual(Color(0, 0, 0).difference(Color(255, 255, 255)), MAX_DIFFERENCE)
        self.assertEqual(MAX_DIFFERENCE, 195075)


class TestRegion(unittest.TestCase):
    """Test region structure helpers."""

    def setUp(self):
        """Create a split 4x4 region."""
        self.region = Region(0, 0, 4)
        self.region.split()

    def test_new_region_is_leaf(self):
        """Test that a fresh region has no children."""
        region = Region(2, 6, 2)
        self.assertTrue(region.is_leaf)
        self.assertEqual(region.children(), ())
        self.assertEqual(region.color, Color())

    def test_split_tiles_parent(self):
        """Test that the four children tile the parent exactly."""
        self.assertFalse(self.region.is_leaf)
        origins = [(c.x, c.y, c.size) for c in self.region.children()]
        self.assertEqual(origins, [(0, 0, 2), (2, 0, 2), (0, 2, 2), (2, 2, 2)])

        covered = set()
        for child in self.region.children():
            for x in range(child.x, child.x + child.size):
                for y in range(child.y, child.y + child.size):
                    self.assertNotIn((x, y), covered)
                    covered.add((x, y))
        self.assertEqual(len(covered), 16)

    def test_contains(self):
        """Test the half-open bounding box test."""
        northeast = self.region.northeast
        self.assertTrue(northeast.contains(2, 0))
        self.assertTrue(northeast.contains(3, 1))
        self.assertFalse(northeast.contains(4, 1))
        self.assertFalse(northeast.contains(1, 1))
        self.assertFalse(northeast.contains(3, 2))

    def test_average_children(self):
        """Test that an internal region averages its children."""
        for value, child in zip((10, 20, 30, 41), self.region.children()):
            child.color = Color(value, value, value)
        self.assertEqual(self.region.average_children(), Color(25, 25, 25))
        self.assertEqual(self.region.color, Color(25, 25, 25))

    def test_clear(self):
        """Test that clearing releases all descendants."""
        self.region.northwest.split()
        self.assertEqual(self.region.leaf_count(), 7)

        self.region.clear()
        self.assertTrue(self.region.is_leaf)
        self.assertEqual(self.region.leaf_count(), 1)

    def test_copy_is_deep(self):
        """Test that a copied region shares no nodes with the original."""
        self.region.northwest.split()
        duplicate = self.region.copy()

        self.assertEqual(duplicate.leaf_count(), self.region.leaf_count())
        self.assertIsNot(duplicate.northwest, self.region.northwest)
        self.assertIsNot(duplicate.northwest.southeast, self.region.northwest.southeast)

        duplicate.clear()
        self.assertEqual(self.region.leaf_count(), 7)

    def test_within_tolerance(self):
        """Test the all-leaves tolerance check."""
        for value, child in zip((10, 10, 10, 13), self.region.children()):
            child.color = Color(value, value, value)
        self.region.average_children()  # (10, 10, 10)

        # Farthest leaf is 3 away per channel: 3 * 9 = 27
        self.assertTrue(self.region.within_tolerance(27))
        self.assertFalse(self.region.within_tolerance(26))


if __name__ == '__main__':
    unittest.main()

"""
Region - a node of the region tree covering one square of the image
"""

from .color import Color


class Region:
    """
    A square area of the image and the color that represents it.

    A region is either a leaf or owns exactly four child regions, one per
    quadrant, which tile it without gap or overlap:

        northwest | northeast
        ----------+----------
        southwest | southeast
    """

    __slots__ = ('x', 'y', 'size', 'color',
                 'northwest', 'northeast', 'southwest', 'southeast')

    def __init__(self, x, y, size, color=None):
        """
        Initialize a leaf region.

        Args:
            x: X coordinate of the top-left corner
            y: Y coordinate of the top-left corner
            size: Side length, a power of two
            color: Representative color (defaults to black)
        """
        self.x = x
        self.y = y
        self.size = size
        self.color = color if color is not None else Color()

        self.northwest = None
        self.northeast = None
        self.southwest = None
        self.southeast = None

    def __repr__(self):
        kind = 'leaf' if self.is_leaf else 'node'
        return f"Region({kind}, x={self.x}, y={self.y}, size={self.size}, color={tuple(self.color)})"

    @property
    def is_leaf(self):
        return self.northwest is None

    def children(self):
        """Children in northwest, northeast, southwest, southeast order."""
        if self.is_leaf:
            return ()
        return (self.northwest, self.northeast, self.southwest, self.southeast)

    def contains(self, x, y):
        """Check whether (x, y) lies inside this region's square."""
        return (self.x <= x < self.x + self.size and
                self.y <= y < self.y + self.size)

    def split(self):
        """
        Create the four child quadrants of this region.

        Returns:
            tuple: The new children in northwest, northeast, southwest, southeast order
        """
        half = self.size // 2
        self.northwest = Region(self.x, self.y, half)
        self.northeast = Region(self.x + half, self.y, half)
        self.southwest = Region(self.x, self.y + half, half)
        self.southeast = Region(self.x + half, self.y + half, half)
        return self.children()

    def average_children(self):
        """Set this region's color to the truncated average of its children."""
        self.color = Color.average([child.color for child in self.children()])
        return self.color

    def place_children(self):
        """Recompute child origins from the slot each child occupies."""
        half = self.size // 2
        self.northwest.x, self.northwest.y = self.x, self.y
        self.northeast.x, self.northeast.y = self.x + half, self.y
        self.southwest.x, self.southwest.y = self.x, self.y + half
        self.southeast.x, self.southeast.y = self.x + half, self.y + half

    def clear(self):
        """Release every descendant, leaving this region a leaf."""
        for child in self.children():
            child.clear()
        self.northwest = None
        self.northeast = None
        self.southwest = None
        self.southeast = None

    def copy(self):
        """Deep node-for-node copy of this region and its subtree."""
        duplicate = Region(self.x, self.y, self.size, self.color)
        if not self.is_leaf:
            duplicate.northwest = self.northwest.copy()
            duplicate.northeast = self.northeast.copy()
            duplicate.southwest = self.southwest.copy()
            duplicate.southeast = self.southeast.copy()
        return duplicate

    def leaves(self):
        """Iterate over the leaves of this subtree."""
        if self.is_leaf:
            yield self
            return
        for child in self.children():
            yield from child.leaves()

    def leaf_count(self):
        return sum(1 for _ in self.leaves())

    def within_tolerance(self, tolerance):
        """
        Check whether every leaf below this region is close to its color.

        Args:
            tolerance: Largest allowed color difference

        Returns:
            bool: True if no leaf differs from this region's color by more than tolerance
        """
        return all(leaf.color.difference(self.color) <= tolerance
                   for leaf in self.leaves())

"""
Color - RGB pixel value stored at every region of the tree
"""

from collections import namedtuple


# Largest possible difference between two colors: every channel off by 255
MAX_DIFFERENCE = 3 * 255 * 255


class Color(namedtuple('Color', ['red', 'green', 'blue'])):
    """
    Three unsigned 8-bit channels. The default color is black.
    """

    __slots__ = ()

    def __new__(cls, red=0, green=0, blue=0):
        return super().__new__(cls, int(red), int(green), int(blue))

    @classmethod
    def average(cls, colors):
        """
        Channel-wise average of a sequence of colors, truncated to integers.

        Args:
            colors: non-empty sequence of Color

        Returns:
            Color: the averaged color
        """
        count = len(colors)
        return cls(
            sum(c.red for c in colors) // count,
            sum(c.green for c in colors) // count,
            sum(c.blue for c in colors) // count
        )

    def difference(self, other):
        """Sum of squared per-channel differences."""
        return ((self.red - other.red) ** 2 +
                (self.green - other.green) ** 2 +
                (self.blue - other.blue) ** 2)

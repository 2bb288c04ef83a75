"""
Region Tree - Quadtree compression of square images
"""

import logging
import numbers
import pickle

import numpy as np

from .color import Color, MAX_DIFFERENCE
from .pixels import as_image, pixel_at, new_image
from .region import Region


logger = logging.getLogger(__name__)


def _as_int(value, name):
    """Accept Python and numpy integers, but not bools or floats."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


class RegionTree:
    """
    Compresses the top-left square of an image into a tree of regions.

    The tree:
    1. Splits the square into quadrants down to single pixels
    2. Stores the exact pixel at every leaf
    3. Stores the truncated average of the four children at every other node
    4. Prunes subtrees whose leaves are all close to their average color

    A tree without a root is empty and represents no image.
    """

    def __init__(self, image=None, size=None):
        """
        Initialize the tree, building it when an image is given.

        Args:
            image: PIL Image or numpy array, or None for an empty tree
            size: Side length of the square to crop, a power of two
        """
        self.root = None
        if image is not None:
            self.build(image, size)

    def __repr__(self):
        if self.root is None:
            return "RegionTree(empty)"
        return f"RegionTree(size={self.size}, leaves={self.leaf_count()})"

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def size(self):
        """Side length of the represented image (0 when empty)."""
        return self.root.size if self.root is not None else 0

    def copy(self):
        """Return an independent deep copy of this tree."""
        duplicate = RegionTree()
        if self.root is not None:
            duplicate.root = self.root.copy()
        return duplicate

    def assign(self, other):
        """
        Replace this tree's contents with a copy of another tree.

        Args:
            other: RegionTree to copy from

        Returns:
            RegionTree: self
        """
        if other is self:
            return self
        self.clear()
        if other.root is not None:
            self.root = other.root.copy()
        return self

    def clear(self):
        """Release the whole hierarchy, leaving an empty tree."""
        if self.root is not None:
            self.root.clear()
            self.root = None

    def leaf_count(self):
        """Number of leaves currently in the tree."""
        if self.root is None:
            return 0
        return self.root.leaf_count()

    def build(self, image, size):
        """
        Rebuild the tree from the top-left size x size block of an image.

        Args:
            image: PIL Image or numpy array
            size: Side length of the square, a power of two no larger than the image
        """
        image = as_image(image)
        width, height = image.size

        size = _as_int(size, "Size")
        if size < 1 or size & (size - 1):
            raise ValueError(f"Size must be a positive power of two, got {size!r}")
        if size > width or size > height:
            raise ValueError(f"Size {size} exceeds image dimensions {width}x{height}")

        self.clear()
        self.root = Region(0, 0, size)
        self._build(image, self.root)

        logger.debug(f"Built {size}x{size} region tree from {width}x{height} image")

    def _build(self, image, region):
        """Fill a region from the image, recursing down to single pixels."""
        if region.size == 1:
            region.color = pixel_at(image, region.x, region.y)
            return

        for child in region.split():
            self._build(image, child)

        region.average_children()

    def get_pixel(self, x, y):
        """
        Get the color the decompressed image shows at (x, y).

        Where pruning removed the leaf for (x, y) this is the color of its
        deepest surviving ancestor.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            Color: Pixel color, black if the tree is empty or (x, y) is out of bounds
        """
        if self.root is None or not self.root.contains(x, y):
            return Color()

        region = self.root
        while not region.is_leaf:
            region = next(child for child in region.children()
                          if child.contains(x, y))
        return region.color

    def decompress(self):
        """
        Reconstruct the image the tree represents.

        Returns:
            PIL Image: size x size RGB image (0 x 0 if the tree is empty)
        """
        if self.root is None:
            return new_image(0, 0)

        pixels = np.zeros((self.size, self.size, 3), dtype=np.uint8)
        self._paint(self.root, pixels)
        return as_image(pixels)

    def _paint(self, region, pixels):
        """Fill each leaf's square of the pixel buffer with its color (preorder)."""
        if region.is_leaf:
            pixels[region.y:region.y + region.size,
                   region.x:region.x + region.size] = region.color
            return

        for child in region.children():
            self._paint(child, pixels)

    def clockwise_rotate(self):
        """Rotate the represented image 90 degrees clockwise by restructuring the tree."""
        if self.root is None:
            return

        self._rotate(self.root)
        logger.debug(f"Rotated {self.size}x{self.size} region tree clockwise")

    def _rotate(self, region):
        if region.is_leaf:
            return

        # northwest -> northeast -> southeast -> southwest -> northwest
        (region.northwest, region.northeast,
         region.southeast, region.southwest) = (region.southwest, region.northwest,
                                                region.northeast, region.southeast)
        region.place_children()

        for child in region.children():
            self._rotate(child)

    def prune(self, tolerance):
        """
        Merge every subtree whose leaves are all within tolerance of its color.

        Pruning starts at the root. A node that qualifies loses its children;
        a node that does not is left intact and each child is tried in turn.
        Every decision is made against the complete subtree below the node.

        Args:
            tolerance: Largest allowed color difference, a non-negative integer
        """
        tolerance = _as_int(tolerance, "Tolerance")
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        if self.root is None:
            return

        debug = logger.isEnabledFor(logging.DEBUG)
        before = self.leaf_count() if debug else None
        self._prune(self.root, tolerance)
        if debug:
            logger.debug(f"Pruned with tolerance {tolerance}: {before} -> {self.leaf_count()} leaves")

    def _prune(self, region, tolerance):
        if region.is_leaf:
            return

        if region.within_tolerance(tolerance):
            region.average_children()
            region.clear()
            return

        for child in region.children():
            self._prune(child, tolerance)

    def prune_size(self, tolerance):
        """
        Count the leaves a prune with this tolerance would leave, without pruning.

        Args:
            tolerance: Color difference tolerance

        Returns:
            int: Number of leaves (0 for an empty tree or a negative tolerance)
        """
        if self.root is None or tolerance < 0:
            return 0
        return self._prune_size(self.root, tolerance)

    def _prune_size(self, region, tolerance):
        if region.is_leaf or region.within_tolerance(tolerance):
            return 1
        return sum(self._prune_size(child, tolerance) for child in region.children())

    def ideal_prune(self, num_leaves):
        """
        Find the smallest tolerance that prunes the tree to at most num_leaves leaves.

        prune_size never increases as the tolerance grows, so the tolerance
        range is binary searched.

        Args:
            num_leaves: Leaf budget, a non-negative integer

        Returns:
            int: Minimum tolerance t with prune_size(t) <= num_leaves
        """
        if num_leaves < 0:
            raise ValueError(f"Number of leaves must be non-negative, got {num_leaves}")
        if self.root is None:
            return 0

        lower, upper = 0, MAX_DIFFERENCE
        while lower <= upper:
            mid = (lower + upper) // 2
            leaves = self.prune_size(mid)

            if leaves == num_leaves:
                if mid > 0 and self.prune_size(mid - 1) == num_leaves:
                    upper = mid - 1
                else:
                    lower = mid
                    break
            elif leaves > num_leaves:
                lower = mid + 1
            else:
                upper = mid - 1

        # A budget of zero leaves is unreachable; report the largest tolerance
        tolerance = min(lower, MAX_DIFFERENCE)
        logger.debug(f"Ideal tolerance for {num_leaves} leaves: {tolerance}")
        return tolerance

    def save(self, filepath):
        """Save the tree to a file."""
        with open(filepath, 'wb') as f:
            pickle.dump(self, f)
        logger.debug(f"Saved region tree to {filepath}")

    @classmethod
    def load(cls, filepath):
        """Load a tree saved with save()."""
        with open(filepath, 'rb') as f:
            tree = pickle.load(f)

        if not isinstance(tree, cls):
            raise ValueError(f"{filepath} does not contain a {cls.__name__}")

        logger.debug(f"Loaded region tree from {filepath}")
        return tree

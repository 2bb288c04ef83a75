"""
quadpress - Quadtree image compression
Lossy pruning, exact reconstruction and rotation of square images
"""

__version__ = "0.1.0"

from .color import Color, MAX_DIFFERENCE
from .region import Region
from .tree import RegionTree

__all__ = ["Color", "MAX_DIFFERENCE", "Region", "RegionTree"]

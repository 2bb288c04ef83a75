"""
Pixel access - the small slice of Pillow the region tree relies on
"""

import numpy as np
from PIL import Image

from .color import Color


def as_image(source):
    """
    Normalize an input image to a Pillow RGB image.

    Args:
        source: PIL Image or numpy array (H x W x 3 or H x W, uint8)

    Returns:
        PIL Image: RGB image
    """
    if isinstance(source, np.ndarray):
        if source.ndim not in (2, 3):
            raise TypeError(f"Expected a 2D or 3D array, got shape {source.shape}")
        if source.dtype != np.uint8:
            if not np.issubdtype(source.dtype, np.integer):
                raise ValueError(f"Expected integer pixel values, got dtype {source.dtype}")
            if source.size and (source.min() < 0 or source.max() > 255):
                raise ValueError(
                    f"Pixel values must lie in 0-255, got {source.min()}-{source.max()}"
                )
            source = source.astype(np.uint8)
        source = Image.fromarray(source)
    elif not isinstance(source, Image.Image):
        raise TypeError(f"Expected PIL Image or numpy array, got {type(source).__name__}")

    if source.mode != 'RGB':
        source = source.convert('RGB')
    return source


def pixel_at(image, x, y):
    """Read the pixel at (x, y) as a Color."""
    return Color(*image.getpixel((x, y))[:3])


def set_pixel_at(image, x, y, color):
    """Write a Color to (x, y)."""
    image.putpixel((x, y), tuple(color))


def new_image(width, height):
    """Create an all-black RGB image."""
    return Image.new('RGB', (width, height))

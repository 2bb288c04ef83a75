"""
Quality metrics for comparing an image with its reconstruction
"""

import numpy as np

from .pixels import as_image


def _as_array(image):
    return np.array(as_image(image)).astype(float)


def mse(original, reconstructed):
    """
    Mean squared error between two images of the same size.

    Args:
        original: PIL Image or numpy array
        reconstructed: PIL Image or numpy array

    Returns:
        float: Mean of the squared per-channel differences
    """
    original_array = _as_array(original)
    reconstructed_array = _as_array(reconstructed)

    if original_array.shape != reconstructed_array.shape:
        raise ValueError(
            f"Image shapes differ: {original_array.shape} vs {reconstructed_array.shape}"
        )

    return float(np.mean((original_array - reconstructed_array) ** 2))


def psnr(original, reconstructed):
    """Peak signal-to-noise ratio in dB (inf for identical images)."""
    error = mse(original, reconstructed)
    if error == 0:
        return float('inf')
    return float(10 * np.log10(255 ** 2 / error))

"""Mean removal ahead of the forward transform."""

from typing import Optional

import numpy as np

from models.pixel_buffer import PixelBuffer


def luminance_mean(luminance: PixelBuffer) -> float:
    return float(np.mean(luminance.plane()))


def subtract_mean(luminance: PixelBuffer, mean: Optional[float] = None) -> np.ndarray:
    """Zero-mean complex signal (imag = 0) laid out as (height, width)."""
    if mean is None:
        mean = luminance_mean(luminance)
    plane = luminance.plane()
    centered = np.empty(plane.shape, dtype=np.complex128)
    centered.real = plane - mean
    centered.imag = 0.0
    return centered

"""Move the DC term from the array origin to the visual center."""

import numpy as np

from models.pixel_buffer import PixelBuffer


def _roll_quadrants(plane: np.ndarray, off_y: int, off_x: int) -> np.ndarray:
    """out[(i + off_y) % h, (j + off_x) % w] = plane[i, j], as four block copies."""
    h, w = plane.shape
    out = np.empty_like(plane)
    keep_y, keep_x = h - off_y, w - off_x
    out[off_y:, off_x:] = plane[:keep_y, :keep_x]
    out[:off_y, :off_x] = plane[keep_y:, keep_x:]
    out[off_y:, :off_x] = plane[:keep_y, keep_x:]
    out[:off_y, off_x:] = plane[keep_y:, :keep_x]
    return out


def shift_quadrants(buffer: PixelBuffer) -> PixelBuffer:
    """
    Swap diagonally opposite quadrants so input (0, 0) lands on
    (height // 2, width // 2).
    
    For odd sizes the top-left input block holds the extra row/column
    (ceil(h/2) x ceil(w/2)) and moves to the bottom right, the same
    convention as numpy.fft.fftshift.
    """
    plane = buffer.plane()
    h, w = plane.shape
    return buffer.with_plane(_roll_quadrants(plane, h // 2, w // 2))


def unshift_quadrants(buffer: PixelBuffer) -> PixelBuffer:
    """Exact inverse of shift_quadrants for any size."""
    plane = buffer.plane()
    h, w = plane.shape
    return buffer.with_plane(_roll_quadrants(plane, h - h // 2, w - w // 2))

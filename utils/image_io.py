"""Image I/O using OpenCV."""

import cv2
import numpy as np

from models.pixel_buffer import PixelBuffer


def load_image(path: str) -> np.ndarray:
    """Load image as RGB or RGBA, keeping its sample depth."""
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def to_uint8(buffer: PixelBuffer) -> np.ndarray:
    """[0,1] single-channel buffer to a (height, width) uint8 image."""
    plane = np.clip(buffer.plane(), 0.0, 1.0)
    return np.round(plane * 255.0).astype(np.uint8)


def save_spectrum(buffer: PixelBuffer, path: str) -> None:
    """Save spectrum as 8-bit grayscale."""
    if not cv2.imwrite(str(path), to_uint8(buffer)):
        raise ValueError(f"Could not write image to {path}")

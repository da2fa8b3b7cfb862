"""Luminance extraction from RGB(A) pixels."""

import numpy as np

from models.errors import UnsupportedFormatError
from models.pixel_buffer import PixelBuffer

# ITU-R BT.709 luma weights (sum to 1.0)
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

SUPPORTED_CHANNELS = (3, 4)


def normalize_samples(samples: np.ndarray) -> np.ndarray:
    """Map integer samples to [0,1] using the limits of their dtype."""
    dtype = samples.dtype
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        lo, hi = float(info.min), float(info.max)
        return (samples.astype(np.float64) - lo) / (hi - lo)
    if np.issubdtype(dtype, np.floating):
        return samples.astype(np.float64)
    raise UnsupportedFormatError(f"Unsupported sample type: {dtype}")


def check_channels(pixels: PixelBuffer) -> None:
    if pixels.channels not in SUPPORTED_CHANNELS:
        raise UnsupportedFormatError(
            f"Unsupported number of channels: {pixels.channels} (expected 3 or 4)"
        )


def to_luminance(pixels) -> PixelBuffer:
    """RGB(A) buffer to single-channel BT.709 luminance. Alpha is ignored."""
    pixels = PixelBuffer.from_array(pixels)
    check_channels(pixels)
    rgb = normalize_samples(pixels.data[:, :, :3])
    luma = rgb @ LUMA_WEIGHTS
    return PixelBuffer(luma)

"""Spectrum magnitude and min/max normalization."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


@dataclass
class MagnitudeStats:
    """Global range of the magnitudes that were normalized."""
    
    minimum: float
    maximum: float
    degenerate: bool


def spectrum_magnitude(spectrum: np.ndarray) -> np.ndarray:
    """sqrt(re^2 + im^2) per cell."""
    return np.hypot(spectrum.real, spectrum.imag)


def normalize_magnitude(
    spectrum: np.ndarray,
    log_scale: bool = False,
    flat_tolerance: float = 1e-12
) -> Tuple[PixelBuffer, MagnitudeStats]:
    """
    Rescale spectrum magnitudes to [0, 1] by their global min and max.
    
    A flat spectrum cannot be rescaled; every output sample is then 0. The
    spectrum is flat when max - min <= flat_tolerance * cell count
    (flat_tolerance is per sample of unit-range input).
    """
    magnitude = spectrum_magnitude(spectrum)
    if log_scale:
        magnitude = np.log1p(magnitude)
    
    # Pass 1: global range
    lo = float(magnitude.min())
    hi = float(magnitude.max())
    span = hi - lo
    
    if span <= flat_tolerance * magnitude.size:
        logger.debug("Flat spectrum (min=%g, max=%g); output zero-filled", lo, hi)
        normalized = np.zeros_like(magnitude)
        return PixelBuffer(normalized), MagnitudeStats(lo, hi, True)
    
    # Pass 2: rescale
    normalized = (magnitude - lo) / span
    return PixelBuffer(normalized), MagnitudeStats(lo, hi, False)

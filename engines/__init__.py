"""DSP engines - pure computation, no GUI dependencies."""

from .luminance import to_luminance, normalize_samples, LUMA_WEIGHTS
from .centering import subtract_mean, luminance_mean
from .fft2d import fft1d, ifft1d, transform_rows, transform_columns, fft2d
from .magnitude import spectrum_magnitude, normalize_magnitude, MagnitudeStats
from .quadrant_shift import shift_quadrants, unshift_quadrants
from .pipeline import compute_spectrum

__all__ = [
    'to_luminance',
    'normalize_samples',
    'LUMA_WEIGHTS',
    'subtract_mean',
    'luminance_mean',
    'fft1d',
    'ifft1d',
    'transform_rows',
    'transform_columns',
    'fft2d',
    'spectrum_magnitude',
    'normalize_magnitude',
    'MagnitudeStats',
    'shift_quadrants',
    'unshift_quadrants',
    'compute_spectrum',
]

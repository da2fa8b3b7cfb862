"""Data models for spectrum buffers, parameters and results."""

from .errors import SpectrumError, UnsupportedFormatError, InvalidDimensionsError
from .pixel_buffer import PixelBuffer
from .spectrum_params import SpectrumParams
from .spectrum_result import SpectrumResult

__all__ = [
    'SpectrumError',
    'UnsupportedFormatError',
    'InvalidDimensionsError',
    'PixelBuffer',
    'SpectrumParams',
    'SpectrumResult',
]

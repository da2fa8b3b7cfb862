"""Separable 2D forward DFT (row-column decomposition)."""

import numpy as np
from scipy.fft import fft, ifft
from typing import Optional

from models.errors import InvalidDimensionsError


def fft1d(samples: np.ndarray, axis: int = -1, workers: Optional[int] = None) -> np.ndarray:
    """Forward 1D complex DFT along one axis, unnormalized."""
    return fft(samples, axis=axis, workers=workers)


def ifft1d(coeffs: np.ndarray, axis: int = -1, workers: Optional[int] = None) -> np.ndarray:
    """Inverse of fft1d (1/n scaling)."""
    return ifft(coeffs, axis=axis, workers=workers)


def transform_rows(signal: np.ndarray, workers: Optional[int] = None) -> np.ndarray:
    """Length-width DFT of every row."""
    return fft1d(signal, axis=1, workers=workers)


def transform_columns(signal: np.ndarray, workers: Optional[int] = None) -> np.ndarray:
    """Length-height DFT of every column."""
    # Gather columns into contiguous rows so each 1D transform reads unit-stride
    columns = np.ascontiguousarray(signal.T)
    return fft1d(columns, axis=1, workers=workers).T.copy()


def fft2d(signal: np.ndarray, workers: Optional[int] = None) -> np.ndarray:
    """
    2D DFT of a (height, width) complex signal.
    
    All rows are transformed before any column. A dimension of length 1
    passes through unchanged. The input array is not modified.
    """
    signal = np.asarray(signal, dtype=np.complex128)
    if signal.ndim != 2:
        raise InvalidDimensionsError(f"Expected a 2D signal, got {signal.ndim} dimensions")
    h, w = signal.shape
    if h <= 0 or w <= 0:
        raise InvalidDimensionsError(f"Width and height must be positive, got {w}x{h}")
    
    rows_done = transform_rows(signal, workers)
    return transform_columns(rows_done, workers)

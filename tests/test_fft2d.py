"""Tests for the separable 2D transform and its 1D primitive."""

import numpy as np
import pytest
from engines.fft2d import fft1d, ifft1d, transform_rows, transform_columns, fft2d
from models.errors import InvalidDimensionsError


def direct_dft(x: np.ndarray) -> np.ndarray:
    n = len(x)
    k = np.arange(n)
    return np.exp(-2j * np.pi * np.outer(k, k) / n) @ x


@pytest.mark.parametrize("n", [1, 2, 5, 8, 17, 64])
def test_fft1d_matches_direct_dft(n):
    x = np.random.randn(n) + 1j * np.random.randn(n)
    assert np.allclose(fft1d(x), direct_dft(x))


@pytest.mark.parametrize("n", [1, 3, 16, 31])
def test_forward_inverse_recovers_sequence(n):
    x = np.random.randn(n) + 1j * np.random.randn(n)
    assert np.allclose(ifft1d(fft1d(x)), x, atol=1e-12)


def test_fft1d_linearity():
    a = np.random.randn(12) + 1j * np.random.randn(12)
    b = np.random.randn(12) + 1j * np.random.randn(12)
    assert np.allclose(fft1d(2.0 * a + 3.0 * b), 2.0 * fft1d(a) + 3.0 * fft1d(b))


@pytest.mark.parametrize("shape", [(4, 4), (3, 5), (8, 1), (1, 8), (1, 1), (6, 10)])
def test_fft2d_matches_numpy(shape):
    signal = np.random.randn(*shape) + 1j * np.random.randn(*shape)
    result = fft2d(signal)
    assert result.shape == shape
    assert np.allclose(result, np.fft.fft2(signal))


def test_row_then_column_phases():
    signal = np.random.randn(5, 7).astype(np.complex128)
    rows = transform_rows(signal)
    assert np.allclose(rows, np.fft.fft(signal, axis=1))
    assert np.allclose(transform_columns(rows), np.fft.fft2(signal))


def test_single_sample_is_identity():
    signal = np.array([[0.75 - 0.5j]])
    assert np.allclose(fft2d(signal), signal)


def test_input_not_modified():
    signal = np.random.randn(4, 6).astype(np.complex128)
    before = signal.copy()
    fft2d(signal)
    assert np.array_equal(signal, before)


def test_workers_do_not_change_result():
    signal = np.random.randn(16, 12).astype(np.complex128)
    assert np.allclose(fft2d(signal, workers=2), fft2d(signal))


def test_rejects_non_2d_signal():
    with pytest.raises(InvalidDimensionsError):
        fft2d(np.zeros(8, dtype=np.complex128))

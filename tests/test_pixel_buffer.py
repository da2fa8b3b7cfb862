"""Tests for PixelBuffer shape invariants and accessors."""

import numpy as np
import pytest
from models.errors import InvalidDimensionsError
from models.pixel_buffer import PixelBuffer


def test_2d_array_becomes_single_channel():
    buf = PixelBuffer(np.zeros((3, 5)))
    assert (buf.width, buf.height, buf.channels) == (5, 3, 1)
    assert buf.plane().shape == (3, 5)


def test_from_flat_row_major_interleaved():
    buf = PixelBuffer.from_flat(np.arange(2 * 3 * 3), width=3, height=2, channels=3)
    assert buf.sample(1, 0, 2) == (1 * 3 + 0) * 3 + 2
    assert list(buf.pixel(0, 1)) == [3, 4, 5]


def test_from_flat_length_mismatch():
    with pytest.raises(InvalidDimensionsError):
        PixelBuffer.from_flat(np.zeros(10), width=3, height=3)


@pytest.mark.parametrize("shape", [(0, 3), (3, 0), (2, 2, 0), (2,), (2, 2, 2, 2)])
def test_invalid_shapes(shape):
    with pytest.raises(InvalidDimensionsError):
        PixelBuffer(np.zeros(shape))


def test_bounds_checked_access():
    buf = PixelBuffer(np.zeros((2, 2, 3)))
    with pytest.raises(IndexError):
        buf.sample(2, 0)
    with pytest.raises(IndexError):
        buf.sample(0, -1)
    with pytest.raises(IndexError):
        buf.sample(0, 0, 3)
    buf.set_sample(1, 1, 7.0, channel=2)
    assert buf.data[1, 1, 2] == 7.0


def test_plane_requires_single_channel():
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2, 3))).plane()


def test_with_plane_checks_shape():
    buf = PixelBuffer(np.zeros((2, 3)))
    assert buf.with_plane(np.ones((2, 3))).same_shape(buf)
    with pytest.raises(InvalidDimensionsError):
        buf.with_plane(np.ones((3, 2)))

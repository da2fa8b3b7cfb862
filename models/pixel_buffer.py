"""Owned, row-major pixel buffer with bounds-checked access."""

from dataclasses import dataclass
import numpy as np

from models.errors import InvalidDimensionsError


@dataclass(eq=False)
class PixelBuffer:
    """
    Dense height x width x channels grid of samples.
    
    The backing array is always 3D and C-contiguous. Shape is fixed after
    construction; contents may be written through `data`.
    """
    
    data: np.ndarray
    
    def __post_init__(self):
        data = np.asarray(self.data)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        if data.ndim != 3:
            raise InvalidDimensionsError(
                f"Expected a 2D or 3D array, got {data.ndim} dimensions"
            )
        h, w, c = data.shape
        if h <= 0 or w <= 0:
            raise InvalidDimensionsError(f"Width and height must be positive, got {w}x{h}")
        if c <= 0:
            raise InvalidDimensionsError("Buffer must have at least one channel")
        self.data = np.ascontiguousarray(data)
    
    @classmethod
    def from_array(cls, array) -> 'PixelBuffer':
        """Wrap an existing array (or pass a PixelBuffer through)."""
        if isinstance(array, PixelBuffer):
            return array
        return cls(np.asarray(array))
    
    @classmethod
    def from_flat(cls, samples, width: int, height: int, channels: int = 1) -> 'PixelBuffer':
        """Build from flat interleaved storage of exactly width*height*channels samples."""
        if width <= 0 or height <= 0 or channels <= 0:
            raise InvalidDimensionsError(
                f"Invalid shape {width}x{height}x{channels}"
            )
        flat = np.asarray(samples).reshape(-1)
        expected = width * height * channels
        if flat.size != expected:
            raise InvalidDimensionsError(
                f"Storage holds {flat.size} samples, expected {expected}"
            )
        return cls(flat.reshape(height, width, channels))
    
    @property
    def height(self) -> int:
        return self.data.shape[0]
    
    @property
    def width(self) -> int:
        return self.data.shape[1]
    
    @property
    def channels(self) -> int:
        return self.data.shape[2]
    
    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype
    
    @property
    def num_pixels(self) -> int:
        return self.width * self.height
    
    def _check_index(self, y: int, x: int, channel: int = 0):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"Pixel ({y}, {x}) outside {self.width}x{self.height} buffer")
        if not 0 <= channel < self.channels:
            raise IndexError(f"Channel {channel} outside 0..{self.channels - 1}")
    
    def sample(self, y: int, x: int, channel: int = 0):
        self._check_index(y, x, channel)
        return self.data[y, x, channel]
    
    def set_sample(self, y: int, x: int, value, channel: int = 0):
        self._check_index(y, x, channel)
        self.data[y, x, channel] = value
    
    def pixel(self, y: int, x: int) -> np.ndarray:
        """All channels of one pixel."""
        self._check_index(y, x)
        return self.data[y, x]
    
    def plane(self) -> np.ndarray:
        """(height, width) view of a single-channel buffer."""
        if self.channels != 1:
            raise ValueError(f"plane() needs a single-channel buffer, got {self.channels} channels")
        return self.data[:, :, 0]
    
    def with_plane(self, plane: np.ndarray) -> 'PixelBuffer':
        """New single-channel buffer of the same width/height."""
        plane = np.asarray(plane)
        if plane.shape != (self.height, self.width):
            raise InvalidDimensionsError(
                f"Plane shape {plane.shape} does not match {self.height}x{self.width}"
            )
        return PixelBuffer(plane)
    
    def same_shape(self, other: 'PixelBuffer') -> bool:
        return self.width == other.width and self.height == other.height

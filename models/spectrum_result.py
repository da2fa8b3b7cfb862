"""Spectrum result with statistics."""

from dataclasses import dataclass, field
from typing import Dict

from models.pixel_buffer import PixelBuffer


@dataclass(eq=False)
class SpectrumResult:
    """Results from one spectrum pipeline run."""
    
    luminance: PixelBuffer
    spectrum: PixelBuffer
    
    # Statistics
    mean: float
    magnitude_min: float
    magnitude_max: float
    degenerate: bool
    
    # Runtime
    stage_times_ms: Dict[str, float] = field(default_factory=dict)
    
    @property
    def width(self) -> int:
        return self.spectrum.width
    
    @property
    def height(self) -> int:
        return self.spectrum.height
    
    @property
    def total_time_ms(self) -> float:
        return sum(self.stage_times_ms.values())

"""Spectrum pipeline parameters."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SpectrumParams:
    """Options for a single spectrum run. Defaults give the plain linear spectrum."""
    
    log_scale: bool = False
    center: bool = True
    flat_tolerance: float = 1e-12
    workers: Optional[int] = None
    
    def __post_init__(self):
        if self.flat_tolerance < 0:
            raise ValueError(f"flat_tolerance must be >= 0, got {self.flat_tolerance}")
        if self.workers is not None and self.workers == 0:
            raise ValueError("workers must be a nonzero integer or None")

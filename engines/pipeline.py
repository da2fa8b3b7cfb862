"""Main spectrum pipeline: pixels -> centered, normalized magnitude."""

import logging
from typing import Optional

from models.pixel_buffer import PixelBuffer
from models.spectrum_params import SpectrumParams
from models.spectrum_result import SpectrumResult
from engines.luminance import to_luminance, check_channels
from engines.centering import subtract_mean, luminance_mean
from engines.fft2d import fft2d
from engines.magnitude import normalize_magnitude
from engines.quadrant_shift import shift_quadrants
from utils.timing import StageTimer

logger = logging.getLogger(__name__)


def compute_spectrum(image, params: Optional[SpectrumParams] = None) -> SpectrumResult:
    """
    Run the full spectrum pipeline on one decoded RGB(A) image.
    
    Shape and channel count are validated before any stage runs. A failing
    stage aborts the run and its exception propagates; nothing is cached
    between calls.
    """
    params = params or SpectrumParams()
    pixels = PixelBuffer.from_array(image)
    check_channels(pixels)
    
    timer = StageTimer()
    
    luminance = timer.measure('luminance', to_luminance, pixels)
    mean = luminance_mean(luminance)
    signal = timer.measure('centering', subtract_mean, luminance, mean)
    spectrum = timer.measure('transform', fft2d, signal, params.workers)
    magnitude, stats = timer.measure(
        'normalize', normalize_magnitude, spectrum, params.log_scale, params.flat_tolerance
    )
    
    if params.center:
        magnitude = timer.measure('shift', shift_quadrants, magnitude)
    
    logger.debug(
        "Spectrum %dx%d in %.2f ms (%s)",
        pixels.width, pixels.height, timer.total_ms,
        ", ".join(f"{k}={v:.2f}" for k, v in timer.times_ms.items())
    )
    
    return SpectrumResult(
        luminance=luminance,
        spectrum=magnitude,
        mean=mean,
        magnitude_min=stats.minimum,
        magnitude_max=stats.maximum,
        degenerate=stats.degenerate,
        stage_times_ms=timer.times_ms,
    )

"""Background worker for the spectrum pipeline."""

import numpy as np
from PySide6.QtCore import QObject, Signal

from models.spectrum_params import SpectrumParams
from engines.pipeline import compute_spectrum


class SpectrumWorker(QObject):
    """Runs compute_spectrum in a background thread."""
    
    finished = Signal(object)
    error = Signal(str)
    progress = Signal(str)
    
    def __init__(self, image: np.ndarray, params: SpectrumParams):
        super().__init__()
        self.image = image
        self.params = params
    
    def run(self):
        try:
            h, w = self.image.shape[:2]
            self.progress.emit(f"Transforming ({w}×{h})...")
            result = compute_spectrum(self.image, self.params)
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))

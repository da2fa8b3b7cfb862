"""GUI widgets for the spectrum viewer."""

from .spectrum_view import SpectrumView

__all__ = ['SpectrumView']

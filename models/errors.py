"""Pipeline error types."""


class SpectrumError(ValueError):
    """Base class for spectrum pipeline failures."""


class UnsupportedFormatError(SpectrumError):
    """Channel count or sample type the pipeline cannot read."""


class InvalidDimensionsError(SpectrumError):
    """Width/height not positive, or storage does not match the shape."""

"""Shared utilities."""

from .timing import StageTimer
from .test_images import (
    generate_constant,
    generate_single_pixel,
    generate_checkerboard,
    generate_stripes,
    generate_gradient,
    generate_rings,
    generate_demo_image,
    DEMO_IMAGES,
)
from .image_io import load_image, save_spectrum, to_uint8

__all__ = [
    'StageTimer',
    'generate_constant',
    'generate_single_pixel',
    'generate_checkerboard',
    'generate_stripes',
    'generate_gradient',
    'generate_rings',
    'generate_demo_image',
    'DEMO_IMAGES',
    'load_image',
    'save_spectrum',
    'to_uint8',
]

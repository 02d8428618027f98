"""Shared utilities."""

from .constants import HASH_SIZE, LOW_FREQ_SIZE, HASH_BITS, AC_COEFFS, LUMA_WEIGHTS
from .metrics import Timer
from .test_images import (
    generate_solid,
    generate_single_pixel,
    generate_gradient,
    generate_colored_checkerboard,
    generate_demo_image,
)
from .image_io import read_image_bytes

__all__ = [
    'HASH_SIZE',
    'LOW_FREQ_SIZE',
    'HASH_BITS',
    'AC_COEFFS',
    'LUMA_WEIGHTS',
    'Timer',
    'generate_solid',
    'generate_single_pixel',
    'generate_gradient',
    'generate_colored_checkerboard',
    'generate_demo_image',
    'read_image_bytes',
]

"""Hashing engines - pure computation plus the OpenCV preprocessing step."""

from .color_space import rgb_to_luma
from .dct_engine import dct_basis, dct_1d, dct2
from .hash_assembler import select_low_frequency, assemble_hash, hash_from_dct, hash_bits, format_hash
from .preprocess import PreprocessingError, decode_image, premultiply_alpha, to_hash_grid
from .pipeline import centred_dct, hash_luma, compute_phash, compute_phash_from_bytes, phash_pipeline

__all__ = [
    'rgb_to_luma',
    'dct_basis',
    'dct_1d',
    'dct2',
    'select_low_frequency',
    'assemble_hash',
    'hash_from_dct',
    'hash_bits',
    'format_hash',
    'PreprocessingError',
    'decode_image',
    'premultiply_alpha',
    'to_hash_grid',
    'centred_dct',
    'hash_luma',
    'compute_phash',
    'compute_phash_from_bytes',
    'phash_pipeline',
]

"""Main hashing pipeline."""

import logging
import math
from typing import Optional, Tuple

import numpy as np

from models.hash_params import HashParams
from models.hash_result import HashResult
from models.intermediate_data import IntermediateData
from engines.color_space import rgb_to_luma
from engines.dct_engine import dct2
from engines.hash_assembler import select_low_frequency, assemble_hash, hash_bits, format_hash
from engines.preprocess import decode_image, to_hash_grid
from utils.constants import HASH_SIZE
from utils.metrics import Timer


logger = logging.getLogger(__name__)


def _check_luma(luma: np.ndarray) -> None:
    if luma.shape != (HASH_SIZE, HASH_SIZE):
        raise ValueError(f"Luma matrix must be {HASH_SIZE}x{HASH_SIZE}, got shape {luma.shape}")


def centred_dct(luma: np.ndarray, method: str = 'direct') -> np.ndarray:
    """
    DCT of the luma with its mean removed first, DC term put back after.
    
    Only [0, 0] depends on the mean, so the AC coefficients are unchanged,
    and a uniform grid transforms to exact zeros rather than rounding
    noise. fsum over HASH_SIZE**2 samples divides by a power of two, so the
    mean of a uniform grid equals its value exactly.
    """
    n = luma.shape[0]
    offset = math.fsum(luma.ravel()) / luma.size
    coeffs = dct2(luma - offset, method=method)
    coeffs[0, 0] = offset * n
    return coeffs


def hash_luma(luma: np.ndarray, params: Optional[HashParams] = None) -> int:
    """DCT and bit assembly on an extracted HASH_SIZE x HASH_SIZE luma matrix."""
    params = params or HashParams()
    luma = np.asarray(luma, dtype=np.float64)
    _check_luma(luma)
    
    dct_matrix = centred_dct(luma, params.dct_method)
    hash_value, _ = assemble_hash(select_low_frequency(dct_matrix))
    return hash_value


def compute_phash(image: np.ndarray, params: Optional[HashParams] = None) -> int:
    """
    64-bit perceptual hash of a decoded image.
    
    Raises:
        PreprocessingError: If the image cannot be reduced to the hash grid
    """
    params = params or HashParams()
    grid = to_hash_grid(image, params.resize_size, params.interpolation)
    return hash_luma(rgb_to_luma(grid), params)


def compute_phash_from_bytes(data: bytes, params: Optional[HashParams] = None) -> int:
    """Decode encoded image bytes, then hash."""
    return compute_phash(decode_image(data), params)


def phash_pipeline(
    image: np.ndarray,
    params: Optional[HashParams] = None
) -> Tuple[HashResult, IntermediateData]:
    """Run the full pipeline and keep every stage's output."""
    params = params or HashParams()
    timer = Timer()
    
    # === PREPROCESS ===
    grid = timer.measure_preprocess(to_hash_grid, image, params.resize_size, params.interpolation)
    logger.debug("Preprocessed to %s grid in %.2f ms", grid.shape, timer.preprocess_time_ms)
    
    # === HASH ===
    luma = timer.measure_hash(rgb_to_luma, grid)
    _check_luma(luma)
    dct_matrix = timer.measure_hash(centred_dct, luma, params.dct_method)
    low_freq = timer.measure_hash(select_low_frequency, dct_matrix)
    hash_value, mean = timer.measure_hash(assemble_hash, low_freq)
    logger.debug(
        "DC=%.3f mean=%.4f hash=%s (%s DCT, %.2f ms)",
        dct_matrix[0, 0], mean, format_hash(hash_value), params.dct_method, timer.hash_time_ms
    )
    
    result = HashResult(
        hash_value=hash_value,
        hash_hex=format_hash(hash_value),
        mean=mean,
        preprocess_time_ms=timer.preprocess_time_ms,
        hash_time_ms=timer.hash_time_ms
    )
    
    intermediate = IntermediateData(
        preprocessed=grid,
        luma=luma,
        dct=dct_matrix,
        low_freq=low_freq,
        bits=hash_bits(hash_value)
    )
    
    return result, intermediate

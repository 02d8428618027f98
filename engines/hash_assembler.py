"""Low-frequency coefficient selection and bit assembly."""

from typing import Tuple

import numpy as np

from utils.constants import AC_COEFFS, HASH_BITS, LOW_FREQ_SIZE


def select_low_frequency(dct: np.ndarray, size: int = LOW_FREQ_SIZE) -> np.ndarray:
    """
    AC coefficients of the top-left size x size block, row-major, DC skipped.
    
    The coefficients are gathered into a buffer one slot wider than the AC
    count and cut back, so the default 8x8 block always yields 63 entries.
    Stored hashes depend on this exact selection.
    """
    if dct.ndim != 2 or dct.shape[0] < size or dct.shape[1] < size:
        raise ValueError(f"Need at least a {size}x{size} DCT matrix, got shape {dct.shape}")
    
    buffer = np.zeros(size * size, dtype=np.float64)
    ac = np.asarray(dct[:size, :size], dtype=np.float64).ravel()[1:]
    buffer[:ac.size] = ac
    return buffer[:size * size - 1].copy()


def assemble_hash(low_freq: np.ndarray) -> Tuple[int, float]:
    """
    Threshold coefficients against their mean into a 64-bit value.
    
    Coefficient i sets bit 63 - i when strictly above the mean; ties stay 0.
    Bit 0 is never written.
    """
    mean = float(np.mean(low_freq))
    hash_value = 0
    for i, val in enumerate(low_freq[:AC_COEFFS]):
        if val > mean:
            hash_value |= 1 << (HASH_BITS - 1 - i)
    return hash_value, mean


def hash_from_dct(dct: np.ndarray) -> int:
    """64-bit hash straight from a DCT matrix."""
    hash_value, _ = assemble_hash(select_low_frequency(dct))
    return hash_value


def hash_bits(hash_value: int) -> np.ndarray:
    """Hash as a 0/1 array, most significant bit first."""
    return np.array(
        [(hash_value >> (HASH_BITS - 1 - i)) & 1 for i in range(HASH_BITS)],
        dtype=np.uint8
    )


def format_hash(hash_value: int) -> str:
    """Zero-padded 16 digit lowercase hex."""
    if not (0 <= hash_value < 1 << HASH_BITS):
        raise ValueError(f"Hash must fit in {HASH_BITS} unsigned bits, got {hash_value}")
    return f"{hash_value:016x}"

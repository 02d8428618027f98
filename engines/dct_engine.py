"""Separable orthonormal DCT-II."""

import numpy as np
from scipy.fft import dct


def dct_basis(n: int) -> np.ndarray:
    """
    n x n DCT-II basis with orthonormal scaling.
    
    B[k, i] = scale(k) * cos(pi * (i + 0.5) * k / n), where
    scale(0) = sqrt(1/n) and scale(k) = sqrt(2/n) for k > 0.
    """
    k = np.arange(n, dtype=np.float64).reshape(-1, 1)
    i = np.arange(n, dtype=np.float64).reshape(1, -1)
    basis = np.cos(np.pi * (i + 0.5) * k / n)
    scale = np.full((n, 1), np.sqrt(2.0 / n))
    if n > 0:
        scale[0, 0] = np.sqrt(1.0 / n)
    return basis * scale


def dct_1d(x: np.ndarray) -> np.ndarray:
    """1D DCT-II of a sequence by direct summation."""
    x = np.asarray(x, dtype=np.float64)
    return dct_basis(len(x)) @ x


def dct2(matrix: np.ndarray, method: str = 'direct') -> np.ndarray:
    """
    2D DCT-II: transform every row, then every column of the result.
    
    'direct' sums against the basis matrix; 'scipy' uses scipy.fft and
    agrees with it up to rounding.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"DCT input must be a square matrix, got shape {matrix.shape}")
    
    if method == 'direct':
        basis = dct_basis(matrix.shape[0])
        rows = matrix @ basis.T
        return basis @ rows
    if method == 'scipy':
        rows = dct(matrix, type=2, norm='ortho', axis=1)
        return dct(rows, type=2, norm='ortho', axis=0)
    raise ValueError(f"Unknown DCT method: {method}")

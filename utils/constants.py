"""Fixed constants for the 64-bit perceptual hash."""

import numpy as np

# Side of the grayscale grid every image is reduced to before hashing.
HASH_SIZE = 32

# Top-left block of the DCT matrix the hash bits are drawn from.
LOW_FREQ_SIZE = 8

HASH_BITS = 64

# 8x8 minus the DC term.
AC_COEFFS = LOW_FREQ_SIZE * LOW_FREQ_SIZE - 1

# ITU-R BT.601 luma weights (R, G, B)
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)

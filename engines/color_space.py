"""Color to luma conversion."""

import numpy as np

from utils.constants import LUMA_WEIGHTS


def rgb_to_luma(image: np.ndarray) -> np.ndarray:
    """
    RGB(A) or grayscale grid to float64 luma using ITU-R BT.601.
    
    A 2D grid is read as R = G = B, so gray pixels go through the same
    weighting as color ones. Alpha is ignored.
    """
    if image.ndim == 2:
        gray = image.astype(np.float64)
        R = G = B = gray
    elif image.ndim == 3 and image.shape[2] >= 3:
        rgb = image.astype(np.float64)
        R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    else:
        raise ValueError(f"Expected (H, W) or (H, W, 3|4) image, got shape {image.shape}")
    
    wr, wg, wb = LUMA_WEIGHTS
    return wr * R + wg * G + wb * B

"""
Image decoding and reduction to the hash grid.

The hashing core only ever sees the HASH_SIZE x HASH_SIZE grayscale grid
produced here. Decoding and resampling are delegated to OpenCV.
"""

import logging

import cv2
import numpy as np

from utils.constants import HASH_SIZE


logger = logging.getLogger(__name__)


class PreprocessingError(Exception):
    """Raised when an image cannot be decoded or reduced to the hash grid."""
    pass


INTERPOLATIONS = {
    'lanczos': cv2.INTER_LANCZOS4,
    'cubic': cv2.INTER_CUBIC,
    'linear': cv2.INTER_LINEAR,
    'area': cv2.INTER_AREA,
}


def decode_image(data: bytes) -> np.ndarray:
    """
    Decode encoded image bytes to uint8 RGB, RGBA or grayscale.
    
    Alpha is kept so transparent pixels can be weighted later. 16-bit
    images are reduced to their high byte.
    
    Raises:
        PreprocessingError: If the bytes are empty or not a readable image
    """
    if not data:
        raise PreprocessingError("Cannot decode empty image data")
    
    buffer = np.frombuffer(data, np.uint8)
    try:
        decoded = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise PreprocessingError(f"Failed to decode image: {e}") from e
    
    if decoded is None:
        logger.warning("cv2.imdecode could not read %d bytes", len(data))
        raise PreprocessingError(
            f"Failed to decode image ({len(data)} bytes): unsupported or corrupt data"
        )
    
    if decoded.dtype == np.uint16:
        decoded = (decoded >> 8).astype(np.uint8)
    elif decoded.dtype != np.uint8:
        raise PreprocessingError(f"Unsupported image depth: {decoded.dtype}")
    
    if decoded.ndim == 2:
        return decoded
    if decoded.ndim == 3 and decoded.shape[2] == 1:
        return decoded[:, :, 0]
    if decoded.ndim == 3 and decoded.shape[2] == 3:
        return cv2.cvtColor(decoded, cv2.COLOR_BGR2RGB)
    if decoded.ndim == 3 and decoded.shape[2] == 4:
        return cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA)
    raise PreprocessingError(f"Unsupported decoded image shape: {decoded.shape}")


def premultiply_alpha(rgba: np.ndarray) -> np.ndarray:
    """RGBA to RGB with color scaled by alpha; transparent pixels read as black."""
    alpha = rgba[:, :, 3:4].astype(np.float64) / 255.0
    rgb = rgba[:, :, :3].astype(np.float64) * alpha
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


def to_hash_grid(
    image: np.ndarray,
    size: int = HASH_SIZE,
    interpolation: str = 'lanczos'
) -> np.ndarray:
    """
    Resize to size x size, then convert to single-channel grayscale.
    
    Accepts (H, W), (H, W, 3) RGB and (H, W, 4) RGBA arrays. RGBA is
    premultiplied by alpha first. Resizing happens before the grayscale
    conversion.
    
    Raises:
        PreprocessingError: On an empty or malformed image or an OpenCV failure
    """
    if interpolation not in INTERPOLATIONS:
        raise PreprocessingError(f"Unknown interpolation: {interpolation}")
    
    image = np.asarray(image)
    if image.ndim not in (2, 3) or (image.ndim == 3 and image.shape[2] not in (3, 4)):
        raise PreprocessingError(f"Unsupported image shape: {image.shape}")
    if image.shape[0] < 1 or image.shape[1] < 1:
        raise PreprocessingError(f"Image is empty: {image.shape}")
    
    if image.dtype != np.uint8:
        image = np.clip(image, 0, 255).astype(np.uint8)
    
    if image.ndim == 3 and image.shape[2] == 4:
        image = premultiply_alpha(image)
    
    try:
        resized = cv2.resize(image, (size, size), interpolation=INTERPOLATIONS[interpolation])
        if resized.ndim == 3:
            gray = cv2.cvtColor(resized, cv2.COLOR_RGB2GRAY)
        else:
            gray = resized
    except cv2.error as e:
        raise PreprocessingError(f"Failed to resize image to {size}x{size}: {e}") from e
    
    logger.debug("Reduced %s image to %dx%d (%s)", image.shape, size, size, interpolation)
    return gray

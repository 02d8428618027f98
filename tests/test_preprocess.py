"""Tests for decoding and reduction to the hash grid."""

import cv2
import numpy as np
import pytest
from engines.pipeline import compute_phash, compute_phash_from_bytes
from engines.preprocess import PreprocessingError, decode_image, premultiply_alpha, to_hash_grid


def test_decode_png_round_trip(png_bytes, random_image):
    """PNG is lossless, so decoding gives back the RGB pixels."""
    decoded = decode_image(png_bytes)
    assert decoded.dtype == np.uint8
    assert np.array_equal(decoded, random_image)


def test_decode_malformed_bytes():
    with pytest.raises(PreprocessingError):
        decode_image(b'definitely not an image')


def test_decode_truncated_png(png_bytes):
    with pytest.raises(PreprocessingError):
        decode_image(png_bytes[:20])


def test_decode_empty_bytes():
    with pytest.raises(PreprocessingError):
        decode_image(b'')


@pytest.mark.parametrize('shape', [(48, 64), (48, 64, 3), (48, 64, 4), (1, 1, 3)])
def test_grid_shape(shape):
    image = np.full(shape, 90, dtype=np.uint8)
    grid = to_hash_grid(image)
    assert grid.shape == (32, 32)
    assert grid.dtype == np.uint8


def test_uniform_image_stays_uniform():
    grid = to_hash_grid(np.full((100, 70, 3), 77, dtype=np.uint8))
    assert np.all(grid == 77)


def test_input_not_mutated(random_image):
    before = random_image.copy()
    to_hash_grid(random_image)
    assert np.array_equal(random_image, before)


@pytest.mark.parametrize('shape', [(0, 10, 3), (10, 0), (4, 4, 2), (2, 2, 2, 3)])
def test_rejects_bad_shapes(shape):
    with pytest.raises(PreprocessingError):
        to_hash_grid(np.zeros(shape, dtype=np.uint8))


def test_rejects_unknown_interpolation(random_image):
    with pytest.raises(PreprocessingError):
        to_hash_grid(random_image, interpolation='nearest-ish')


def half_transparent_white(size: int = 64) -> np.ndarray:
    """White RGBA image whose right half is fully transparent."""
    rgba = np.full((size, size, 4), 255, dtype=np.uint8)
    rgba[:, size // 2:, 3] = 0
    return rgba


def test_premultiply_alpha():
    rgba = np.array([[[200, 100, 50, 255], [200, 100, 50, 0], [200, 100, 50, 128]]], dtype=np.uint8)
    rgb = premultiply_alpha(rgba)
    assert rgb.shape == (1, 3, 3)
    assert rgb[0, 0].tolist() == [200, 100, 50]
    assert rgb[0, 1].tolist() == [0, 0, 0]
    assert rgb[0, 2].tolist() == [100, 50, 25]


def test_transparent_pixels_read_as_black():
    rgba = half_transparent_white()
    expected = np.zeros((64, 64, 3), dtype=np.uint8)
    expected[:, :32] = 255
    assert np.array_equal(to_hash_grid(rgba), to_hash_grid(expected))


def test_transparency_changes_hash():
    rgba = half_transparent_white()
    opaque = rgba.copy()
    opaque[..., 3] = 255
    assert compute_phash(opaque) == 0
    assert compute_phash(rgba) != compute_phash(opaque)
    assert compute_phash(rgba) == compute_phash(premultiply_alpha(rgba))


def test_decode_keeps_alpha():
    rgba = half_transparent_white()
    ok, encoded = cv2.imencode('.png', cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA))
    assert ok
    decoded = decode_image(encoded.tobytes())
    assert decoded.shape == (64, 64, 4)
    assert np.array_equal(decoded, rgba)
    assert compute_phash_from_bytes(encoded.tobytes()) == compute_phash(rgba)


def test_decode_grayscale_png():
    gray = np.tile(np.arange(0, 256, 4, dtype=np.uint8), (16, 1))
    ok, encoded = cv2.imencode('.png', gray)
    assert ok
    assert np.array_equal(decode_image(encoded.tobytes()), gray)

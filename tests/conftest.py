"""Shared fixtures for hashing tests."""

import cv2
import numpy as np
import pytest


@pytest.fixture
def random_image():
    """Seeded 64x48 RGB noise image."""
    rng = np.random.default_rng(2024)
    return rng.integers(0, 256, (48, 64, 3), dtype=np.uint8)


@pytest.fixture
def png_bytes(random_image):
    """random_image encoded as PNG."""
    ok, encoded = cv2.imencode('.png', cv2.cvtColor(random_image, cv2.COLOR_RGB2BGR))
    assert ok
    return encoded.tobytes()

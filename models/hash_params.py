"""Hashing parameters."""

from dataclasses import dataclass
from typing import Literal

from utils.constants import HASH_SIZE


@dataclass
class HashParams:
    """Perceptual hash parameters."""
    
    resize_size: int = HASH_SIZE
    interpolation: Literal['lanczos', 'cubic', 'linear', 'area'] = 'lanczos'
    dct_method: Literal['direct', 'scipy'] = 'direct'
    
    def __post_init__(self):
        # Other sizes would change every stored hash.
        if self.resize_size != HASH_SIZE:
            raise ValueError(f"Resize size must be {HASH_SIZE}, got {self.resize_size}")
        if self.interpolation not in ['lanczos', 'cubic', 'linear', 'area']:
            raise ValueError(f"Unknown interpolation: {self.interpolation}")
        if self.dct_method not in ['direct', 'scipy']:
            raise ValueError(f"DCT method must be 'direct' or 'scipy', got {self.dct_method}")

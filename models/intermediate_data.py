"""Intermediate data for inspection and debugging."""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class IntermediateData:
    """Matrices produced by each pipeline stage."""
    
    preprocessed: Optional[np.ndarray] = None
    luma: Optional[np.ndarray] = None
    dct: Optional[np.ndarray] = None
    low_freq: Optional[np.ndarray] = None
    bits: Optional[np.ndarray] = None

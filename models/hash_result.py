"""Hash result with timings."""

from dataclasses import dataclass


@dataclass
class HashResult:
    """Result of one pass through the hashing pipeline."""
    
    hash_value: int
    hash_hex: str
    
    # Low-frequency threshold the bits were decided against
    mean: float
    
    # Runtime
    preprocess_time_ms: float
    hash_time_ms: float
    
    @property
    def total_time_ms(self) -> float:
        return self.preprocess_time_ms + self.hash_time_ms

"""Stage timing for the hashing pipeline."""

import time


class Timer:
    """Simple timer for preprocess/hash runtime."""
    
    def __init__(self):
        self.preprocess_time_ms = 0.0
        self.hash_time_ms = 0.0
    
    def measure_preprocess(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.preprocess_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_hash(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.hash_time_ms += (time.perf_counter() - start) * 1000.0
        return result

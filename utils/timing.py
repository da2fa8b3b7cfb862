"""Per-stage runtime measurement."""

import time
from typing import Dict


class StageTimer:
    """Records wall time of named pipeline stages in milliseconds."""
    
    def __init__(self):
        self.times_ms: Dict[str, float] = {}
    
    def measure(self, stage: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.times_ms[stage] = (time.perf_counter() - start) * 1000.0
        return result
    
    @property
    def total_ms(self) -> float:
        return sum(self.times_ms.values())

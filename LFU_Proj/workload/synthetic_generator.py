# Synthetic request streams for exercising caches
import logging
from typing import List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class WorkloadGenerator:
    def __init__(self, key_space_size: int, num_requests: int, seed: Optional[int] = None):
        if key_space_size < 1:
            raise ValueError("key_space_size must be >= 1")
        if num_requests < 0:
            raise ValueError("num_requests must be >= 0")
        self.key_space_size = key_space_size
        self.num_requests = num_requests
        self.rng = np.random.default_rng(seed)

    def _to_requests(self, key_ids) -> List[Tuple[str, str]]:
        return [(f"key_{k}", f"value_{k}") for k in key_ids]

    def _zipf_ids(self, alpha: float, count: int) -> np.ndarray:
        if alpha <= 1:
            raise ValueError("zipf alpha must be > 1")
        # Ranks start at 1; fold the long tail back into the key space
        return (self.rng.zipf(alpha, size=count) - 1) % self.key_space_size

    def generate_uniform_workload(self) -> List[Tuple[str, str]]:
        """Every key equally likely."""
        ids = self.rng.integers(0, self.key_space_size, size=self.num_requests)
        return self._to_requests(ids)

    def generate_zipf_workload(self, alpha: float = 1.2) -> List[Tuple[str, str]]:
        """A few keys take most of the requests."""
        return self._to_requests(self._zipf_ids(alpha, self.num_requests))

    def generate_bursty_workload(self, burst_size: int = 5, burst_freq: float = 0.2) -> List[Tuple[str, str]]:
        """Uniform traffic with runs of ``burst_size`` repeats of one key."""
        if burst_size < 1:
            raise ValueError("burst_size must be >= 1")
        if not 0 <= burst_freq <= 1:
            raise ValueError("burst_freq must be between 0 and 1")
        ids = []
        while len(ids) < self.num_requests:
            key_id = int(self.rng.integers(0, self.key_space_size))
            if self.rng.random() < burst_freq:
                ids.extend([key_id] * burst_size)
            else:
                ids.append(key_id)
        return self._to_requests(ids[:self.num_requests])

    def generate_phase_workload(self, phase_length: int = 100, num_phases: int = 10) -> List[Tuple[str, str]]:
        """Requests cycle through phases, each concentrated on its own slice of keys."""
        if phase_length < 1 or num_phases < 1:
            raise ValueError("phase_length and num_phases must be >= 1")
        slice_size = max(1, self.key_space_size // num_phases)
        ids = np.empty(self.num_requests, dtype=np.int64)
        for start in range(0, self.num_requests, phase_length):
            phase = (start // phase_length) % num_phases
            low = (phase * slice_size) % self.key_space_size
            high = min(low + slice_size, self.key_space_size)
            end = min(start + phase_length, self.num_requests)
            ids[start:end] = self.rng.integers(low, high, size=end - start)
        return self._to_requests(ids)

    def generate_mixed_workload(self, zipf_alpha: float = 1.2, burst_freq: float = 0.1) -> List[Tuple[str, str]]:
        """Zipf traffic with occasional bursts on a random key."""
        if not 0 <= burst_freq <= 1:
            raise ValueError("burst_freq must be between 0 and 1")
        base = self._zipf_ids(zipf_alpha, self.num_requests)
        ids = []
        i = 0
        while len(ids) < self.num_requests:
            if self.rng.random() < burst_freq:
                key_id = int(self.rng.integers(0, self.key_space_size))
                ids.extend([key_id] * int(self.rng.integers(2, 6)))
            else:
                ids.append(int(base[i % len(base)]))
                i += 1
        logger.debug("Generated mixed workload of %d requests", self.num_requests)
        return self._to_requests(ids[:self.num_requests])

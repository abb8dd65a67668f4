from typing import Dict, Hashable, List
from time import time
import psutil
import os

class MetricsMonitor:
    def __init__(self, keep_history: bool = True):
        """Initialize the metrics monitor.

        With ``keep_history`` off only the counters are kept, which is enough
        for ``summary()`` and keeps long benchmark runs small.
        """
        self.keep_history = keep_history
        self.hits: int = 0
        self.misses: int = 0
        self.operations: List[Dict] = []
        self.evictions: List[Dict] = []
        self.expirations: List[Dict] = []
        self.removals: List[Dict] = []
        self.memory_usage: List[Dict] = []
        self.sizes: List[Dict] = []
        self.process = psutil.Process(os.getpid())
        self.operation_count = 0
        self.eviction_count = 0
        self.expiration_count = 0
        self.removal_count = 0

    def record_operation(self, op_type: str, key: Hashable, hit: bool) -> None:
        """Record a cache lookup."""
        if hit:
            self.hits += 1
        else:
            self.misses += 1
        self.operation_count += 1
        if self.keep_history:
            self.operations.append({
                "time": time(),
                "type": op_type,
                "key": key,
                "hit": hit,
                "total_ops": self.hits + self.misses
            })

    def record_eviction(self, key: Hashable, frequency: int = 0) -> None:
        """Record a capacity eviction and the frequency the victim had reached."""
        self.eviction_count += 1
        if self.keep_history:
            self.evictions.append({
                "time": time(),
                "key": key,
                "frequency": frequency
            })

    def record_expiration(self, key: Hashable) -> None:
        self.expiration_count += 1
        if self.keep_history:
            self.expirations.append({"time": time(), "key": key})

    def record_removal(self, key: Hashable) -> None:
        self.removal_count += 1
        if self.keep_history:
            self.removals.append({"time": time(), "key": key})

    def record_memory_usage(self) -> float:
        """Record current process memory usage and return it in MB."""
        memory_mb = self.process.memory_info().rss / 1024 / 1024  # Convert to MB
        self.memory_usage.append({
            "time": time(),
            "memory_mb": memory_mb
        })
        return memory_mb

    def record_size(self, size: int) -> None:
        self.sizes.append({
            "time": time(),
            "size": size
        })

    def get_hit_ratio(self) -> float:
        """Calculate the current hit ratio."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def get_eviction_count(self) -> int:
        return self.eviction_count

    def get_expiration_count(self) -> int:
        return self.expiration_count

    def reset(self) -> None:
        """Reset all metrics."""
        self.hits = 0
        self.misses = 0
        self.operations = []
        self.evictions = []
        self.expirations = []
        self.removals = []
        self.memory_usage = []
        self.sizes = []
        self.operation_count = 0
        self.eviction_count = 0
        self.expiration_count = 0
        self.removal_count = 0

    def summary(self) -> Dict:
        """Return a summary of collected metrics."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_ratio": self.get_hit_ratio(),
            "total_operations": self.operation_count,
            "evictions": self.eviction_count,
            "expirations": self.expiration_count,
            "removals": self.removal_count,
            "memory_samples": len(self.memory_usage),
            "avg_memory_mb": sum(m["memory_mb"] for m in self.memory_usage) / (len(self.memory_usage) or 1)
        }

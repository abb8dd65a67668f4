from typing import Any, Dict, Hashable
from cache.entry import MISS
from metrics.monitor import MetricsMonitor

class FIFOCache:
    def __init__(self, max_size: int, monitor: MetricsMonitor = None):
        """Initialize FIFO cache with a maximum size."""
        # Dicts keep insertion order, so the first key is always the oldest
        self.cache: Dict[Hashable, Any] = {}
        self.max_size = max_size
        self.monitor = monitor if monitor is not None else MetricsMonitor()

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        """Get a value from the cache."""
        try:
            value = self.cache[key]
        except KeyError:
            self.monitor.record_operation("get", key, False)
            return default
        self.monitor.record_operation("get", key, True)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        """Put a value into the cache."""
        if self.max_size == 0:
            return
        # Updating an existing key keeps its original position
        if key not in self.cache and len(self.cache) >= self.max_size:
            oldest_key = next(iter(self.cache))
            del self.cache[oldest_key]
            self.monitor.record_eviction(oldest_key)
        self.cache[key] = value

    def remove(self, key: Hashable) -> None:
        if self.cache.pop(key, MISS) is not MISS:
            self.monitor.record_removal(key)

    def size(self) -> int:
        return len(self.cache)

    def summary(self) -> dict:
        """Return cache performance summary."""
        result = self.monitor.summary()
        result["size"] = self.size()
        result["capacity"] = self.max_size
        return result

from cachetools import LRUCache as CacheToolsLRUCache
from typing import Any, Hashable
from cache.entry import MISS
from metrics.monitor import MetricsMonitor


class _RecordingLRUCache(CacheToolsLRUCache):
    """cachetools LRU that reports each evicted key to a monitor."""

    def __init__(self, maxsize: int, monitor: MetricsMonitor):
        super().__init__(maxsize=maxsize)
        self.monitor = monitor

    def popitem(self):
        key, value = super().popitem()
        self.monitor.record_eviction(key)
        return key, value


class LRUCache:
    def __init__(self, max_size: int, monitor: MetricsMonitor = None):
        """Initialize LRU cache with a maximum size."""
        self.monitor = monitor if monitor is not None else MetricsMonitor()
        self.max_size = max_size
        self.cache = _RecordingLRUCache(max_size, self.monitor)

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

from cachetools import TTLCache as CacheToolsTTLCache
from typing import Any, Hashable
import time
from cache.entry import MISS
from cache.exceptions import InvalidArgumentError
from metrics.monitor import MetricsMonitor


class _RecordingTTLCache(CacheToolsTTLCache):
    """cachetools TTL cache that reports evictions and expirations to a monitor."""

    def __init__(self, maxsize: int, ttl: float, timer, monitor: MetricsMonitor):
        super().__init__(maxsize=maxsize, ttl=ttl, timer=timer)
        self.monitor = monitor

    def popitem(self):
        key, value = super().popitem()
        self.monitor.record_eviction(key)
        return key, value

    def expire(self, time=None):
        expired = super().expire(time)
        for key, _ in expired:
            self.monitor.record_expiration(key)
        return expired


class TTLCache:
    """LRU with a fixed lifetime from insertion, as cachetools implements it."""

    def __init__(self, max_size: int, ttl: float = 3600, timer=time.monotonic, monitor: MetricsMonitor = None):
        if not ttl > 0:
            raise InvalidArgumentError(f"ttl must be positive, got {ttl!r}")
        self.monitor = monitor if monitor is not None else MetricsMonitor()
        self.max_size = max_size
        self.ttl = ttl
        self.cache = _RecordingTTLCache(max_size, ttl, timer, self.monitor)

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        try:
            value = self.cache[key]
        except KeyError:
            self.monitor.record_operation("get", key, False)
            return default
        self.monitor.record_operation("get", key, True)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        if self.max_size == 0:
            return
        self.cache[key] = value

    def remove(self, key: Hashable) -> None:
        if self.cache.pop(key, MISS) is not MISS:
            self.monitor.record_removal(key)

    def size(self) -> int:
        return len(self.cache)

    def summary(self) -> dict:
        result = self.monitor.summary()
        result["size"] = self.size()
        result["capacity"] = self.max_size
        result["ttl_seconds"] = self.ttl
        return result

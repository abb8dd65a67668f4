# Lock-guarded wrapper for sharing one cache between threads
from typing import Any, Hashable
import threading

from .entry import MISS
from .lfu_cache import FrequencyBucketCache


class SynchronizedCache:
    """Serializes every operation on a ``FrequencyBucketCache`` behind one lock.

    The entry map, the frequency buckets and the minimum frequency are only
    ever changed together while the lock is held, so other threads never see a
    half-applied update.
    """

    def __init__(self, cache: FrequencyBucketCache):
        self._cache = cache
        self._lock = threading.RLock()

    @property
    def cache(self) -> FrequencyBucketCache:
        return self._cache

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        with self._lock:
            return self._cache.get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache.put(key, value)

    def remove(self, key: Hashable) -> None:
        with self._lock:
            self._cache.remove(key)

    def size(self) -> int:
        with self._lock:
            return self._cache.size()

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def summary(self) -> dict:
        with self._lock:
            return self._cache.summary()

    def check_invariants(self) -> None:
        with self._lock:
            self._cache.check_invariants()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

# Least-frequently-used cache with lazy idle-time expiration
from datetime import timedelta
from typing import Any, Callable, Dict, Hashable, Optional, Union
import logging
import numbers
import time

from .bucket import FrequencyBucket
from .entry import CacheEntry, MISS
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


def _ttl_seconds(ttl: Union[float, timedelta]) -> float:
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    elif isinstance(ttl, numbers.Real) and not isinstance(ttl, bool):
        seconds = float(ttl)
    else:
        raise InvalidArgumentError(f"ttl must be a number of seconds or a timedelta, got {ttl!r}")
    if not seconds > 0:
        raise InvalidArgumentError(f"ttl must be positive, got {ttl!r}")
    return seconds


class FrequencyBucketCache:
    """
    LFU cache with FIFO tie-breaking and per-entry TTL.

    Entries live in ``_entries``; every key is also filed in exactly one
    frequency bucket of ``_buckets`` matching its entry's frequency, and
    ``_min_frequency`` names the smallest bucket present. All three are updated
    together inside each public method.

    Expiry is lazy: an entry idle for longer than ``ttl`` is only dropped when a
    ``get`` finds it. Until then it still occupies a slot and counts toward
    ``size()``.

    Not thread-safe; wrap in ``SynchronizedCache`` for shared use.
    """

    def __init__(
        self,
        capacity: int,
        ttl: Union[float, timedelta] = DEFAULT_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
        monitor=None,
        check_invariants: bool = False,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
            raise InvalidArgumentError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise InvalidArgumentError(f"capacity must be >= 0, got {capacity}")

        self._capacity = int(capacity)
        self._ttl = _ttl_seconds(ttl)
        self._clock = clock
        self.monitor = monitor
        self._check = check_invariants

        self._entries: Dict[Hashable, CacheEntry] = {}
        self._buckets: Dict[int, FrequencyBucket] = {}
        self._min_frequency: Optional[int] = None

        logger.debug("Created FrequencyBucketCache capacity=%d ttl=%.3fs", self._capacity, self._ttl)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl(self) -> float:
        """Idle time in seconds after which an entry expires."""
        return self._ttl

    @property
    def min_frequency(self) -> Optional[int]:
        return self._min_frequency

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        """Return the cached value and count the access, or ``default`` on a miss."""
        entry = self._entries.get(key)
        if entry is None:
            self._record_get(key, False)
            return default

        now = self._clock()
        if entry.is_expired(now, self._ttl):
            logger.debug("Expired key %r (idle %.3fs)", key, now - entry.last_accessed)
            self._delete(entry)
            if self.monitor is not None:
                self.monitor.record_expiration(key)
            self._record_get(key, False)
            self._after_mutation()
            return default

        self._promote(entry, now)
        self._record_get(key, True)
        self._after_mutation()
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or update ``key``; updating counts as a use of the entry."""
        if self._capacity == 0:
            return

        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None:
            entry.value = value
            self._promote(entry, now)
            self._after_mutation()
            return

        if len(self._entries) >= self._capacity:
            self._evict()

        self._entries[key] = CacheEntry(key, value, last_accessed=now)
        self._file(key, 1)
        self._min_frequency = 1
        self._after_mutation()

    def remove(self, key: Hashable) -> None:
        """Drop ``key`` if present; absent keys are ignored."""
        entry = self._entries.get(key)
        if entry is None:
            return
        self._delete(entry)
        if self.monitor is not None:
            self.monitor.record_removal(key)
        self._after_mutation()

    def size(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._buckets.clear()
        self._min_frequency = None
        self._after_mutation()

    def frequency_of(self, key: Hashable) -> Optional[int]:
        """Current access count for ``key`` without touching it."""
        entry = self._entries.get(key)
        return entry.frequency if entry is not None else None

    def summary(self) -> dict:
        if self.monitor is not None:
            result = self.monitor.summary()
        else:
            result = {"hits": 0, "misses": 0, "hit_ratio": 0.0, "evictions": 0, "expirations": 0, "removals": 0}
        result.update({
            "size": self.size(),
            "capacity": self._capacity,
            "ttl_seconds": self._ttl,
            "min_frequency": self._min_frequency,
        })
        return result

    def check_invariants(self) -> None:
        """Assert that the entry map, buckets and minimum frequency agree."""
        filed = set()
        for frequency, bucket in self._buckets.items():
            assert len(bucket) > 0, f"empty bucket {frequency} left in index"
            assert bucket.frequency == frequency, f"bucket {bucket.frequency} filed under {frequency}"
            for key in bucket:
                assert key not in filed, f"key {key!r} is in more than one bucket"
                filed.add(key)
                entry = self._entries.get(key)
                assert entry is not None, f"bucket {frequency} holds unknown key {key!r}"
                assert entry.frequency == frequency, (
                    f"key {key!r} has frequency {entry.frequency} but sits in bucket {frequency}"
                )
        assert filed == set(self._entries), "some entries are not filed in any bucket"
        expected_min = min(self._buckets) if self._buckets else None
        assert self._min_frequency == expected_min, (
            f"min_frequency is {self._min_frequency}, expected {expected_min}"
        )
        assert len(self._entries) <= self._capacity, "cache holds more entries than its capacity"

    def __contains__(self, key: Hashable) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(self._clock(), self._ttl)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (f"FrequencyBucketCache(capacity={self._capacity}, ttl={self._ttl}, "
                f"size={len(self._entries)}, min_frequency={self._min_frequency})")

    def _file(self, key: Hashable, frequency: int) -> None:
        bucket = self._buckets.get(frequency)
        if bucket is None:
            bucket = FrequencyBucket(frequency)
            self._buckets[frequency] = bucket
        bucket.add(key)

    def _unfile(self, key: Hashable, frequency: int) -> bool:
        """Take ``key`` out of its bucket; True if the bucket was dropped."""
        bucket = self._buckets[frequency]
        bucket.discard(key)
        if len(bucket) == 0:
            del self._buckets[frequency]
            return True
        return False

    def _promote(self, entry: CacheEntry, now: float) -> None:
        old_frequency = entry.frequency
        emptied = self._unfile(entry.key, old_frequency)
        entry.touch(now)
        self._file(entry.key, entry.frequency)
        # The promoted key now sits at old + 1, so that bucket is the next minimum
        if emptied and old_frequency == self._min_frequency:
            self._min_frequency = entry.frequency

    def _delete(self, entry: CacheEntry) -> None:
        del self._entries[entry.key]
        emptied = self._unfile(entry.key, entry.frequency)
        if emptied and entry.frequency == self._min_frequency:
            self._min_frequency = min(self._buckets) if self._buckets else None

    def _evict(self) -> None:
        bucket = self._buckets[self._min_frequency]
        key = bucket.pop_oldest()
        entry = self._entries.pop(key)
        logger.debug("Evicting key %r at frequency %d", key, entry.frequency)
        if len(bucket) == 0:
            del self._buckets[entry.frequency]
            self._min_frequency = min(self._buckets) if self._buckets else None
        if self.monitor is not None:
            self.monitor.record_eviction(key, entry.frequency)

    def _record_get(self, key: Hashable, hit: bool) -> None:
        if self.monitor is not None:
            self.monitor.record_operation("get", key, hit)

    def _after_mutation(self) -> None:
        if self._check:
            self.check_invariants()

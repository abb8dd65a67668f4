# Cache entry record and the miss sentinel returned by lookups
from dataclasses import dataclass
from typing import Any, Hashable


class _Miss:
    """Sentinel for a cache miss, distinct from a cached ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"

    def __reduce__(self):
        return (_Miss, ())


MISS = _Miss()


@dataclass
class CacheEntry:
    key: Hashable
    value: Any
    last_accessed: float
    frequency: int = 1

    def touch(self, now: float) -> None:
        """Count one use of the entry at time ``now``."""
        self.frequency += 1
        self.last_accessed = now

    def is_expired(self, now: float, ttl: float) -> bool:
        return now - self.last_accessed > ttl

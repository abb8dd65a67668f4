import pytest

from cache.lfu_cache import FrequencyBucketCache
from metrics.monitor import MetricsMonitor


class FakeClock:
    """Manually advanced clock for driving TTL expiry."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def monitor() -> MetricsMonitor:
    return MetricsMonitor()


@pytest.fixture
def make_cache(clock, monitor):
    """Build caches on the fake clock with the invariant self-check enabled."""

    def _make(capacity: int = 2, ttl=3600) -> FrequencyBucketCache:
        return FrequencyBucketCache(capacity, ttl, clock=clock, monitor=monitor, check_invariants=True)

    return _make

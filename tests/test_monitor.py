from metrics.monitor import MetricsMonitor


def test_hit_ratio_and_counters():
    monitor = MetricsMonitor()
    monitor.record_operation("get", "a", True)
    monitor.record_operation("get", "b", False)
    monitor.record_operation("get", "a", True)
    monitor.record_eviction("b", 1)
    monitor.record_expiration("c")
    monitor.record_removal("d")

    assert monitor.get_hit_ratio() == 2 / 3
    summary = monitor.summary()
    assert summary["hits"] == 2
    assert summary["misses"] == 1
    assert summary["total_operations"] == 3
    assert summary["evictions"] == 1
    assert summary["expirations"] == 1
    assert summary["removals"] == 1
    assert len(monitor.operations) == 3


def test_empty_monitor_reports_zero_ratio():
    assert MetricsMonitor().get_hit_ratio() == 0.0


def test_counters_only_mode_skips_history():
    monitor = MetricsMonitor(keep_history=False)
    monitor.record_operation("get", "a", False)
    monitor.record_eviction("a")

    assert monitor.operations == []
    assert monitor.evictions == []
    assert monitor.get_eviction_count() == 1
    assert monitor.summary()["total_operations"] == 1


def test_memory_and_size_samples():
    monitor = MetricsMonitor()
    memory_mb = monitor.record_memory_usage()
    monitor.record_size(3)

    assert memory_mb > 0
    assert monitor.summary()["memory_samples"] == 1
    assert monitor.summary()["avg_memory_mb"] == memory_mb
    assert monitor.sizes[0]["size"] == 3


def test_reset_clears_everything():
    monitor = MetricsMonitor()
    monitor.record_operation("get", "a", True)
    monitor.record_eviction("a")
    monitor.record_memory_usage()
    monitor.reset()

    summary = monitor.summary()
    assert summary["hits"] == 0
    assert summary["evictions"] == 0
    assert summary["memory_samples"] == 0
    assert monitor.operations == []

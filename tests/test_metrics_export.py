import pandas as pd

from metrics.excel_logger import ExcelLogger
from metrics.monitor import MetricsMonitor
from metrics.visualizer import MetricsVisualizer


def _log_rows(logger, cache_name, workload_name, steps):
    for step in steps:
        logger.log(step=step, hit_rate=0.5, hits=step, misses=step, memory_mb=10.0,
                   timestamp=step * 0.1, size=step, cache_name=cache_name,
                   workload_name=workload_name, evictions=0, expirations=0)


def test_export_writes_one_sheet_per_cache(tmp_path):
    path = tmp_path / "metrics.xlsx"
    logger = ExcelLogger(filename=str(path))
    _log_rows(logger, "lfu", "Zipf", [1, 0])
    _log_rows(logger, "lfu", "Uniform", [0])
    _log_rows(logger, "lru", "Uniform", [0, 1])
    logger.export()

    sheets = pd.read_excel(path, sheet_name=None)
    assert set(sheets) == {"lfu", "lru"}
    lfu = sheets["lfu"]
    assert list(lfu["workload_name"]) == ["Uniform", "Zipf", "Zipf"]
    assert list(lfu["step"]) == [0, 0, 1]


def test_second_export_merges_and_drops_duplicates(tmp_path):
    path = tmp_path / "metrics.xlsx"
    first = ExcelLogger(filename=str(path))
    _log_rows(first, "lfu", "Uniform", [0, 1])
    first.export()

    second = ExcelLogger(filename=str(path))
    _log_rows(second, "lfu", "Uniform", [1, 2])
    second.export()

    lfu = pd.read_excel(path, sheet_name="lfu")
    assert list(lfu["step"]) == [0, 1, 2]


def test_export_without_records_writes_nothing(tmp_path):
    path = tmp_path / "empty.xlsx"
    ExcelLogger(filename=str(path)).export()

    assert not path.exists()


def test_visualizer_saves_plots(tmp_path):
    monitor = MetricsMonitor()
    for i in range(10):
        monitor.record_operation("get", i, i % 2 == 0)
        monitor.record_size(i)
    monitor.record_memory_usage()
    monitor.record_memory_usage()
    visualizer = MetricsVisualizer(monitor, title="lfu")

    assert visualizer.plot_hit_ratio(str(tmp_path / "hits.png"))
    assert visualizer.plot_memory_usage(str(tmp_path / "memory.png"))
    assert visualizer.plot_cache_size(str(tmp_path / "size.png"))
    assert (tmp_path / "hits.png").exists()
    assert (tmp_path / "size.png").exists()


def test_visualizer_skips_empty_series(tmp_path):
    visualizer = MetricsVisualizer(MetricsMonitor())

    assert visualizer.plot_hit_ratio(str(tmp_path / "hits.png")) is False
    assert not (tmp_path / "hits.png").exists()

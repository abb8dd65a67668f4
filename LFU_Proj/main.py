from cache.entry import MISS
from cache.exceptions import InvalidArgumentError
from cache.lfu_cache import FrequencyBucketCache
from config import CONFIG, configure_logging
from workload.synthetic_generator import WorkloadGenerator
from metrics.monitor import MetricsMonitor
from metrics.visualizer import MetricsVisualizer
from benchmarks.lru import LRUCache
from benchmarks.fifo import FIFOCache
from benchmarks.ttl import TTLCache
from metrics.excel_logger import ExcelLogger
import logging
import os
import time
import gc
import click

logger = logging.getLogger(__name__)

CACHE_NAMES = ["lfu", "lru", "fifo", "ttl"]
WORKLOAD_NAMES = ["uniform", "zipf", "bursty", "phase", "mixed"]


def build_cache(cache_name: str, capacity: int, ttl: float, keep_history: bool = False):
    """Create a fresh cache of the given kind, each with its own monitor."""
    monitor = MetricsMonitor(keep_history=keep_history)
    if cache_name == "lfu":
        return FrequencyBucketCache(capacity, ttl, monitor=monitor,
                                    check_invariants=CONFIG["check_invariants"])
    if cache_name == "lru":
        return LRUCache(max_size=capacity, monitor=monitor)
    if cache_name == "fifo":
        return FIFOCache(max_size=capacity, monitor=monitor)
    if cache_name == "ttl":
        return TTLCache(max_size=capacity, ttl=ttl, monitor=monitor)
    raise ValueError(f"Unknown cache type: {cache_name}")


def build_workload(gen: WorkloadGenerator, workload_name: str) -> list:
    params = CONFIG["workloads"].get(workload_name, {})
    generators = {
        "uniform": gen.generate_uniform_workload,
        "zipf": gen.generate_zipf_workload,
        "bursty": gen.generate_bursty_workload,
        "phase": gen.generate_phase_workload,
        "mixed": gen.generate_mixed_workload,
    }
    if workload_name not in generators:
        raise ValueError(f"Unknown workload: {workload_name}")
    return generators[workload_name](**params)


def run_benchmark(cache, workload: list, cache_name: str, workload_name: str, excel_logger: ExcelLogger = None) -> dict:
    """Replay ``workload`` as read-through traffic: get each key, put it on a miss."""
    sample_interval = CONFIG["benchmark"]["memory_sample_interval"]
    monitor = cache.monitor
    gc.collect()
    start_time = time.perf_counter()
    memory_mb = monitor.record_memory_usage()

    for step, (key, value) in enumerate(workload):
        if cache.get(key) is MISS:
            cache.put(key, value)

        if (step + 1) % sample_interval == 0 or step + 1 == len(workload):
            memory_mb = monitor.record_memory_usage()
            monitor.record_size(cache.size())

        if excel_logger is not None:
            excel_logger.log(
                step=step,
                hit_rate=monitor.get_hit_ratio(),
                hits=monitor.hits,
                misses=monitor.misses,
                memory_mb=memory_mb,
                timestamp=time.perf_counter() - start_time,
                size=cache.size(),
                cache_name=cache_name,
                workload_name=workload_name,
                evictions=monitor.get_eviction_count(),
                expirations=monitor.get_expiration_count()
            )

    summary = cache.summary()
    summary["elapsed_seconds"] = time.perf_counter() - start_time
    logger.info("%s with %s finished %d requests", cache_name, workload_name, len(workload))
    return summary


def plot_run(cache, cache_name: str, workload_name: str, plot_dir: str) -> None:
    os.makedirs(plot_dir, exist_ok=True)
    visualizer = MetricsVisualizer(cache.monitor, title=f"{cache_name} / {workload_name}")
    prefix = os.path.join(plot_dir, f"{cache_name}_{workload_name}")
    visualizer.plot_hit_ratio(f"{prefix}_hit_ratio.png")
    visualizer.plot_memory_usage(f"{prefix}_memory.png")
    visualizer.plot_cache_size(f"{prefix}_size.png")


def _expand(selected, choices):
    if not selected or "all" in selected:
        return list(choices)
    return [name for name in choices if name in selected]


@click.command()
@click.option("--capacity", type=click.IntRange(min=0), default=CONFIG["cache_size"], show_default=True, help="Cache capacity in entries.")
@click.option("--ttl", type=click.FloatRange(min=0, min_open=True), default=CONFIG["ttl_seconds"], show_default=True, help="Idle TTL in seconds.")
@click.option("--keys", "key_space_size", type=click.IntRange(min=1), default=CONFIG["benchmark"]["key_space_size"], show_default=True,
              help="Number of distinct keys in generated workloads.")
@click.option("--requests", "num_requests", type=click.IntRange(min=0), default=CONFIG["benchmark"]["num_requests"], show_default=True,
              help="Requests per workload.")
@click.option("--seed", type=int, default=CONFIG["benchmark"]["seed"], help="Seed for workload generation.")
@click.option("--cache", "caches", multiple=True, type=click.Choice(CACHE_NAMES + ["all"]),
              help="Cache to benchmark (repeatable, default all).")
@click.option("--workload", "workloads", multiple=True, type=click.Choice(WORKLOAD_NAMES + ["all"]),
              help="Workload to run (repeatable, default all).")
@click.option("--excel", "excel_path", type=click.Path(dir_okay=False), default=None,
              help="Export per-step metrics to this .xlsx file.")
@click.option("--plot-dir", type=click.Path(file_okay=False), default=None, help="Save metric plots here.")
@click.option("--log-level", default=CONFIG["logging"]["level"], show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def main(capacity, ttl, key_space_size, num_requests, seed, caches, workloads, excel_path, plot_dir, log_level):
    """Benchmark the LFU-TTL cache against baseline caches on synthetic workloads."""
    configure_logging(log_level.upper())
    excel_logger = ExcelLogger(filename=excel_path) if excel_path else None

    for cache_name in _expand(caches, CACHE_NAMES):
        for workload_name in _expand(workloads, WORKLOAD_NAMES):
            try:
                cache = build_cache(cache_name, capacity, ttl, keep_history=plot_dir is not None)
            except InvalidArgumentError as e:
                raise click.BadParameter(str(e))
            gen = WorkloadGenerator(key_space_size=key_space_size, num_requests=num_requests, seed=seed)
            workload = build_workload(gen, workload_name)
            summary = run_benchmark(cache, workload, cache_name, workload_name, excel_logger)
            click.echo(f"{cache_name} with {workload_name} - {summary}")
            if plot_dir:
                plot_run(cache, cache_name, workload_name, plot_dir)
        click.echo("-" * 82)

    if excel_logger is not None:
        excel_logger.export()


if __name__ == "__main__":
    main()

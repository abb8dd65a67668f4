import logging
import matplotlib.pyplot as plt
from .monitor import MetricsMonitor
from typing import Optional

logger = logging.getLogger(__name__)

class MetricsVisualizer:
    def __init__(self, monitor: MetricsMonitor, title: str = ""):
        """Initialize with a MetricsMonitor instance."""
        self.monitor = monitor
        self.title = title

    def _finish(self, name: str, output_file: Optional[str]) -> None:
        plt.title(f"{self.title} {name}".strip())
        plt.grid(True)
        plt.legend()
        if output_file:
            plt.savefig(output_file)
        else:
            plt.show()
        plt.close()

    def plot_hit_ratio(self, output_file: Optional[str] = None) -> bool:
        """Plot the cumulative hit ratio against operation count."""
        operations = self.monitor.operations
        if not operations:
            logger.warning("No operations recorded, skipping hit ratio plot")
            return False
        hit_ratios = []
        hits = 0
        for i, op in enumerate(operations):
            hits += op["hit"]
            hit_ratios.append(hits / (i + 1))

        plt.figure(figsize=(10, 6))
        plt.plot(range(1, len(hit_ratios) + 1), hit_ratios, label="Hit Ratio")
        plt.xlabel("Operations")
        plt.ylabel("Hit Ratio")
        self._finish("Hit Ratio", output_file)
        return True

    def plot_memory_usage(self, output_file: Optional[str] = None) -> bool:
        """Plot memory usage over time."""
        if not self.monitor.memory_usage:
            logger.warning("No memory samples recorded, skipping memory plot")
            return False
        times = [m["time"] - self.monitor.memory_usage[0]["time"] for m in self.monitor.memory_usage]
        memory = [m["memory_mb"] for m in self.monitor.memory_usage]

        plt.figure(figsize=(10, 6))
        plt.plot(times, memory, label="Memory Usage (MB)")
        plt.xlabel("Time (seconds)")
        plt.ylabel("Memory Usage (MB)")
        self._finish("Memory Usage", output_file)
        return True

    def plot_cache_size(self, output_file: Optional[str] = None) -> bool:
        """Plot the number of held entries over time."""
        if not self.monitor.sizes:
            logger.warning("No size samples recorded, skipping size plot")
            return False
        times = [s["time"] - self.monitor.sizes[0]["time"] for s in self.monitor.sizes]
        sizes = [s["size"] for s in self.monitor.sizes]

        plt.figure(figsize=(10, 6))
        plt.plot(times, sizes, label="Entries")
        plt.xlabel("Time (seconds)")
        plt.ylabel("Entries")
        self._finish("Cache Size", output_file)
        return True

import logging

CONFIG = {
    # Total number of items the cache can hold
    "cache_size": 100,

    # Idle time in seconds before an entry is treated as expired
    "ttl_seconds": 3600,

    # Run the structural self-check after every mutating cache operation
    "check_invariants": False,

    # Benchmark harness parameters
    "benchmark": {
        "key_space_size": 5000,
        "num_requests": 50000,
        "memory_sample_interval": 50,  # Sample process memory every 50 steps
        "seed": None
    },

    # Parameters passed to each synthetic workload generator
    "workloads": {
        "uniform": {},
        "zipf": {"alpha": 1.2},
        "bursty": {"burst_size": 5, "burst_freq": 0.2},
        "phase": {"phase_length": 100, "num_phases": 10},
        "mixed": {"zipf_alpha": 1.2, "burst_freq": 0.1}
    },

    # Order of workload rows in exported spreadsheets
    "workload_order": ["Uniform", "Zipf", "Bursty", "Phase", "Mixed"],

    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s"
    }
}


def configure_logging(level=None) -> None:
    """Set up root logging for command line runs."""
    logging.basicConfig(
        level=level or CONFIG["logging"]["level"],
        format=CONFIG["logging"]["format"],
    )

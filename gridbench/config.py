"""
Configuration constants for gridbench.

Every tunable is defined here. Values can be overridden through
environment variables so the HTTP service and ad-hoc runs share defaults.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Benchmark Configuration
# =============================================================================

# Wall-clock budget per strategy run, in seconds
DEFAULT_TIMEOUT_S = float(os.environ.get("GRIDBENCH_TIMEOUT_S", "5.0"))

# Extra time the harness waits on a worker before giving up on it.
# Strategies stop themselves at their deadline; this only covers a stuck worker.
TIMEOUT_GRACE_S = float(os.environ.get("GRIDBENCH_TIMEOUT_GRACE_S", "1.0"))

# Thread pool size when strategies run in parallel
MAX_WORKERS = int(os.environ.get("GRIDBENCH_MAX_WORKERS", "4"))

# Sequential by default: parallel threads contend for the GIL and skew timings
DEFAULT_PARALLEL = _env_bool("GRIDBENCH_PARALLEL", False)

# Cap on the visited-order list returned when return_visited is requested
DEFAULT_MAX_VISITED = int(os.environ.get("GRIDBENCH_MAX_VISITED", "50000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

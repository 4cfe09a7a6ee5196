"""Worker-count helpers for parallel branch analysis."""

import os
import sys
from typing import Any, Dict, Optional


def is_free_threading_enabled() -> bool:
    """True on Python 3.13+ builds running with the GIL disabled."""
    is_gil_enabled = getattr(sys, "_is_gil_enabled", None)
    return is_gil_enabled is not None and not is_gil_enabled()


def get_optimal_worker_count(user_specified: Optional[int] = None) -> int:
    """Pick a worker count for per-branch git queries.

    Args:
        user_specified: Worker count from configuration, if any

    Returns:
        Number of workers to use
    """
    if user_specified is not None and user_specified > 0:
        return user_specified

    cpu_count = os.cpu_count() or 1

    # Each worker mostly waits on a git subprocess
    if is_free_threading_enabled():
        return min(64, cpu_count * 2)
    return min(32, cpu_count + 4)


def get_threading_info() -> Dict[str, Any]:
    """Describe the threading setup, for debug output."""
    return {
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "optimal_workers": get_optimal_worker_count(),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }

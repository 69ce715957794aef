"""CPU time of the current process, in microseconds."""

from __future__ import annotations

import os

try:
    import resource
except ImportError:  # not available on every platform
    resource = None


def user_time_us() -> int:
    """Return the user CPU time spent by this process, in microseconds."""
    if resource is not None:
        return int(resource.getrusage(resource.RUSAGE_SELF).ru_utime * 1_000_000)
    return int(os.times().user * 1_000_000)


def system_time_us() -> int:
    """Return the system CPU time spent by this process, in microseconds."""
    if resource is not None:
        return int(resource.getrusage(resource.RUSAGE_SELF).ru_stime * 1_000_000)
    return int(os.times().system * 1_000_000)
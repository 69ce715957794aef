"""Physical memory installed on the machine."""

from __future__ import annotations

import os


def total_memory_bytes() -> int:
    """Return the total physical memory in bytes."""
    sysconf = getattr(os, "sysconf", None)
    if sysconf is None:
        raise OSError("physical memory size is not available on this platform")
    try:
        pages = sysconf("SC_PHYS_PAGES")
        page_size = sysconf("SC_PAGE_SIZE")
    except (ValueError, OSError) as exc:
        raise OSError("physical memory size is not available on this platform") from exc
    return pages * page_size


def total_memory_megabytes() -> int:
    """Return the total physical memory in whole mebibytes."""
    return total_memory_bytes() >> 20


def total_memory_gigabytes() -> int:
    """Return the total physical memory in whole gibibytes."""
    return total_memory_bytes() >> 30
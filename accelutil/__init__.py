"""Utilities for accelerator configuration tools: diagnostics, paths, sizes,
bitmaps, logging, sysfs attributes, manual pages, command dispatch and
device names."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "dispatch",
    "help",
    "log",
    "names",
    "paths",
    "size",
    "sysfs",
    "usage",
]
"""
Fixed-point time durations with picosecond resolution.

This package contains the foundational time-arithmetic primitive for
scheduling and timestamp code: an exact (seconds, picoseconds) Duration,
free of floating-point drift.
"""

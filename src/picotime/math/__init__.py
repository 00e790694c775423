"""
Math modules для picotime

Целочисленные примитивы с гарантией отсутствия wraparound.
"""

from src.picotime.math.checked_arithmetic import (
    # Ranges
    PICOS_PER_SEC,
    U64_MAX,
    # Exceptions
    DurationError,
    DurationOverflow,
    DurationUnderflow,
    ErrorKind,
    InvalidComponent,
    # Checked operations
    checked_add,
    checked_mul,
    checked_sub,
    # Normalization
    Normalized,
    normalize_subsecond,
    # Validation
    validate_scale,
    validate_u64,
)

__all__ = [
    "PICOS_PER_SEC",
    "U64_MAX",
    "ErrorKind",
    "DurationError",
    "DurationOverflow",
    "DurationUnderflow",
    "InvalidComponent",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "Normalized",
    "normalize_subsecond",
    "validate_u64",
    "validate_scale",
]

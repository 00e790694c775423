"""
Domain models and value objects.

Contains fundamental time values: Duration, SignedDuration, PreciseTime,
RelativeTime, ClockDuration.
"""

from src.picotime.domain.clock import ClockDuration
from src.picotime.domain.duration import Duration
from src.picotime.domain.signed_duration import Sign, SignedDuration
from src.picotime.domain.units import (
    COARSE_UNIT_SECONDS,
    FINE_UNIT_SCALE,
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    PICOS_PER_MICRO,
    PICOS_PER_MILLI,
    PICOS_PER_NANO,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_WEEK,
    FineScale,
    PreciseTime,
    PreciseUnit,
    RelativeTime,
    RelativeUnit,
    is_coarse,
    max_magnitude,
)

__all__ = [
    # Units module
    "SECS_PER_MINUTE",
    "SECS_PER_HOUR",
    "SECS_PER_DAY",
    "SECS_PER_WEEK",
    "MILLIS_PER_SEC",
    "MICROS_PER_SEC",
    "NANOS_PER_SEC",
    "PICOS_PER_MILLI",
    "PICOS_PER_MICRO",
    "PICOS_PER_NANO",
    "COARSE_UNIT_SECONDS",
    "FINE_UNIT_SCALE",
    "FineScale",
    "PreciseUnit",
    "PreciseTime",
    "RelativeUnit",
    "RelativeTime",
    "is_coarse",
    "max_magnitude",
    # Clock interop
    "ClockDuration",
    # Duration model
    "Duration",
    # Signed variant
    "Sign",
    "SignedDuration",
]

"""
ClockDuration — пара (seconds, nanoseconds) для взаимодействия с часами хоста

Граничный формат: так длительность отдают time.monotonic_ns(),
time.perf_counter_ns() и datetime.timedelta. В доменную модель не входит,
Duration конвертируется в/из него через Duration.from_clock / to_clock.

Сам модуль часы не читает.
"""

from datetime import timedelta
from typing import Final

from pydantic import BaseModel, Field

from src.picotime.domain.units import MICROS_PER_SEC, NANOS_PER_SEC, SECS_PER_DAY
from src.picotime.math.checked_arithmetic import U64_MAX, validate_u64

NANOS_PER_MICRO: Final[int] = NANOS_PER_SEC // MICROS_PER_SEC


class ClockDuration(BaseModel):
    """
    Неотрицательная длительность с наносекундным разрешением.

    Immutable модель (frozen=True).
    """

    seconds: int = Field(..., ge=0, le=U64_MAX, description="Целые секунды")
    nanoseconds: int = Field(
        ..., ge=0, lt=NANOS_PER_SEC, description="Наносекунды внутри секунды"
    )

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_total_nanoseconds(cls, total_ns: int) -> "ClockDuration":
        """
        Построение из счётчика наносекунд (например, разности monotonic_ns()).

        Raises:
            TypeError: Если total_ns не int
            ValueError: Если total_ns < 0 или секунды вне U64
        """
        if isinstance(total_ns, bool) or not isinstance(total_ns, int):
            raise TypeError(f"total_ns must be an int, got {type(total_ns).__name__}")
        if total_ns < 0:
            raise ValueError(f"total_ns must be non-negative, got {total_ns}")

        seconds, nanoseconds = divmod(total_ns, NANOS_PER_SEC)
        validate_u64(seconds, "seconds")
        return cls(seconds=seconds, nanoseconds=nanoseconds)

    def total_nanoseconds(self) -> int:
        """Длительность в наносекундах"""
        return self.seconds * NANOS_PER_SEC + self.nanoseconds

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "ClockDuration":
        """
        Построение из datetime.timedelta (точное: микросекунды → наносекунды).

        Raises:
            ValueError: Если delta отрицательная
        """
        if delta < timedelta(0):
            raise ValueError(f"timedelta must be non-negative, got {delta!r}")

        seconds = delta.days * SECS_PER_DAY + delta.seconds
        return cls(seconds=seconds, nanoseconds=delta.microseconds * NANOS_PER_MICRO)

    def to_timedelta(self) -> timedelta:
        """
        Конверсия в datetime.timedelta.

        Разрешение timedelta — микросекунда: суб-микросекундный остаток
        отбрасывается (floor). Значения больше timedelta.max приводят
        к OverflowError из datetime.
        """
        return timedelta(
            seconds=self.seconds, microseconds=self.nanoseconds // NANOS_PER_MICRO
        )

"""
Duration — Длительность с пикосекундным разрешением

Immutable Pydantic модель, хранящая длительность как каноническую пару:
    (seconds, subsecond_picoseconds)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 <= subsecond_picoseconds < 10^12 для любого существующего значения
2. 0 <= seconds <= U64_MAX
3. Равенство, hash и порядок определены только на паре (seconds, subsecond_picoseconds);
   другого представления той же величины нет
4. Любая операция возвращает новый экземпляр; мутация запрещена (frozen=True)

Отрицательных длительностей нет: вычитание большего из меньшего даёт
DurationUnderflow, отрицания нет вовсе. Знаковый вариант — SignedDuration.

Крупные единицы фиксированной длины: неделя всегда 604800 секунд,
без календарных и DST-поправок.
"""

from datetime import timedelta
from typing import Callable, Final

from pydantic import BaseModel, Field

from src.picotime.domain.clock import ClockDuration
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
    PreciseTime,
    PreciseUnit,
    RelativeTime,
    is_coarse,
)
from src.picotime.math.checked_arithmetic import (
    PICOS_PER_SEC,
    U64_MAX,
    DurationOverflow,
    InvalidComponent,
    checked_add,
    checked_mul,
    checked_sub,
    normalize_subsecond,
    validate_scale,
    validate_u64,
)


class Duration(BaseModel):
    """
    Неотрицательная длительность с пикосекундным разрешением.

    Создаётся только конструкторами единиц, прямым конструктором new()
    или арифметикой над существующими Duration.
    """

    seconds: int = Field(..., ge=0, le=U64_MAX, description="Целые секунды")
    subsecond_picoseconds: int = Field(
        ..., ge=0, lt=PICOS_PER_SEC, description="Пикосекунды внутри секунды"
    )

    model_config = {"frozen": True, "strict": True}

    # =========================================================================
    # ПРЯМОЙ КОНСТРУКТОР
    # =========================================================================

    @classmethod
    def new(cls, seconds: int, subsecond_picoseconds: int) -> "Duration":
        """
        Построение из уже канонической пары.

        Нормализация НЕ выполняется: subsecond_picoseconds >= 10^12
        означает ошибку вызывающего кода.

        Raises:
            InvalidComponent: Если компонента вне диапазона
            TypeError: Если компонента не int
        """
        try:
            validate_u64(seconds, "seconds")
            validate_u64(subsecond_picoseconds, "subsecond_picoseconds")
        except ValueError as e:
            raise InvalidComponent(str(e)) from e

        if subsecond_picoseconds >= PICOS_PER_SEC:
            raise InvalidComponent(
                f"subsecond_picoseconds must be < {PICOS_PER_SEC}, "
                f"got {subsecond_picoseconds}"
            )

        return cls(seconds=seconds, subsecond_picoseconds=subsecond_picoseconds)

    @classmethod
    def zero(cls) -> "Duration":
        return cls(seconds=0, subsecond_picoseconds=0)

    @classmethod
    def max_value(cls) -> "Duration":
        """Наибольшая представимая длительность"""
        return cls(seconds=U64_MAX, subsecond_picoseconds=PICOS_PER_SEC - 1)

    # =========================================================================
    # КОНСТРУКТОРЫ ЕДИНИЦ
    # =========================================================================

    @classmethod
    def _from_coarse(cls, n: int, secs_per_unit: int, name: str) -> "Duration":
        validate_u64(n, name)
        return cls(seconds=checked_mul(n, secs_per_unit, name), subsecond_picoseconds=0)

    @classmethod
    def _from_fine(
        cls, n: int, units_per_sec: int, picos_per_unit: int, name: str
    ) -> "Duration":
        validate_u64(n, name)
        # остаток * масштаб < 10^12
        seconds, rest = divmod(n, units_per_sec)
        return cls(seconds=seconds, subsecond_picoseconds=rest * picos_per_unit)

    @classmethod
    def from_weeks(cls, n: int) -> "Duration":
        """
        n недель по 604800 секунд.

        Raises:
            DurationOverflow: Если n > U64_MAX // 604800
        """
        return cls._from_coarse(n, SECS_PER_WEEK, "weeks")

    @classmethod
    def from_days(cls, n: int) -> "Duration":
        """n суток по 86400 секунд (без DST)"""
        return cls._from_coarse(n, SECS_PER_DAY, "days")

    @classmethod
    def from_hours(cls, n: int) -> "Duration":
        return cls._from_coarse(n, SECS_PER_HOUR, "hours")

    @classmethod
    def from_minutes(cls, n: int) -> "Duration":
        return cls._from_coarse(n, SECS_PER_MINUTE, "minutes")

    @classmethod
    def from_seconds(cls, n: int) -> "Duration":
        return cls._from_coarse(n, 1, "seconds")

    @classmethod
    def from_milliseconds(cls, n: int) -> "Duration":
        return cls._from_fine(n, MILLIS_PER_SEC, PICOS_PER_MILLI, "milliseconds")

    @classmethod
    def from_microseconds(cls, n: int) -> "Duration":
        return cls._from_fine(n, MICROS_PER_SEC, PICOS_PER_MICRO, "microseconds")

    @classmethod
    def from_nanoseconds(cls, n: int) -> "Duration":
        return cls._from_fine(n, NANOS_PER_SEC, PICOS_PER_NANO, "nanoseconds")

    @classmethod
    def from_picoseconds(cls, n: int) -> "Duration":
        """Единственная единица с полностью обратимой конверсией"""
        return cls._from_fine(n, PICOS_PER_SEC, 1, "picoseconds")

    from_millis = from_milliseconds
    from_micros = from_microseconds
    from_nanos = from_nanoseconds
    from_picos = from_picoseconds

    @classmethod
    def from_precise(cls, value: PreciseTime) -> "Duration":
        """
        Конверсия tagged-магнитуды PreciseTime.

        Диспетчеризация через таблицу _FROM_PRECISE: единица без записи
        в таблице — явная ошибка, а не молчаливая обработка.

        Raises:
            TypeError: Если value не PreciseTime (в т.ч. RelativeTime)
            ValueError: Если для единицы нет конструктора
        """
        if isinstance(value, RelativeTime):
            raise TypeError(
                f"RelativeTime ({value.unit.value}) has no fixed length; "
                f"resolve it against an anchor date first"
            )
        if not isinstance(value, PreciseTime):
            raise TypeError(f"expected PreciseTime, got {type(value).__name__}")

        constructor = _FROM_PRECISE.get(value.unit)
        if constructor is None:
            raise ValueError(f"Unsupported precise unit: {value.unit!r}")

        return constructor(value.magnitude)

    # =========================================================================
    # ПРОЕКЦИИ
    # =========================================================================

    def as_weeks(self) -> int:
        """Целые недели (floor), sub-second отбрасывается"""
        return self.seconds // SECS_PER_WEEK

    def as_days(self) -> int:
        return self.seconds // SECS_PER_DAY

    def as_hours(self) -> int:
        return self.seconds // SECS_PER_HOUR

    def as_minutes(self) -> int:
        return self.seconds // SECS_PER_MINUTE

    def as_seconds(self) -> int:
        return self.seconds

    def as_milliseconds(self) -> int:
        return self.seconds * MILLIS_PER_SEC + self.subsecond_picoseconds // PICOS_PER_MILLI

    def as_microseconds(self) -> int:
        return self.seconds * MICROS_PER_SEC + self.subsecond_picoseconds // PICOS_PER_MICRO

    def as_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SEC + self.subsecond_picoseconds // PICOS_PER_NANO

    def as_picoseconds(self) -> int:
        """
        Точная длительность в пикосекундах.

        Результат может превышать 64 бита (до ~2^104), возвращается Python int.
        """
        return self.seconds * PICOS_PER_SEC + self.subsecond_picoseconds

    as_millis = as_milliseconds
    as_micros = as_microseconds
    as_nanos = as_nanoseconds
    as_picos = as_picoseconds

    def as_precise(self, unit: PreciseUnit) -> PreciseTime:
        """
        Проекция в PreciseTime заданной единицы (floor до её разрешения).

        Raises:
            DurationOverflow: Если магнитуда не помещается в U64
        """
        if is_coarse(unit):
            magnitude = self.seconds // COARSE_UNIT_SECONDS[unit]
        else:
            scale = FINE_UNIT_SCALE[unit]
            magnitude = (
                self.seconds * scale.units_per_sec
                + self.subsecond_picoseconds // scale.picos_per_unit
            )

        if magnitude > U64_MAX:
            raise DurationOverflow(
                f"{unit.value} magnitude {magnitude} exceeds {U64_MAX}"
            )

        return PreciseTime(unit=unit, magnitude=magnitude)

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.subsecond_picoseconds == 0

    # =========================================================================
    # CLOCK INTEROP
    # =========================================================================

    @classmethod
    def from_clock(cls, clock: ClockDuration) -> "Duration":
        """Точный апскейл наносекунд в пикосекунды"""
        return cls(
            seconds=clock.seconds,
            subsecond_picoseconds=clock.nanoseconds * PICOS_PER_NANO,
        )

    def to_clock(self) -> ClockDuration:
        """Суб-наносекундный остаток отбрасывается (floor)"""
        return ClockDuration(
            seconds=self.seconds,
            nanoseconds=self.subsecond_picoseconds // PICOS_PER_NANO,
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls.from_clock(ClockDuration.from_timedelta(delta))

    def to_timedelta(self) -> timedelta:
        """Floor до микросекунды"""
        return self.to_clock().to_timedelta()

    # =========================================================================
    # ПОРЯДОК
    # =========================================================================

    def _key(self) -> tuple[int, int]:
        return (self.seconds, self.subsecond_picoseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _coerce(other: object) -> "Duration | None":
        if isinstance(other, Duration):
            return other
        if isinstance(other, PreciseTime):
            return Duration.from_precise(other)
        return None

    def __add__(self, other: object) -> "Duration":
        """
        Сложение с Duration или PreciseTime.

        Raises:
            DurationOverflow: Если секунды превышают U64_MAX
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        norm = normalize_subsecond(self.subsecond_picoseconds + rhs.subsecond_picoseconds)
        seconds = checked_add(checked_add(self.seconds, rhs.seconds), norm.carry)
        return Duration(seconds=seconds, subsecond_picoseconds=norm.remainder)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Duration":
        """
        Вычитание, определённое только при self >= other.

        При self.sub < other.sub нормализация занимает одну секунду (borrow).

        Raises:
            DurationUnderflow: Если other > self
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        norm = normalize_subsecond(self.subsecond_picoseconds - rhs.subsecond_picoseconds)
        seconds = checked_add(checked_sub(self.seconds, rhs.seconds), norm.carry)
        return Duration(seconds=seconds, subsecond_picoseconds=norm.remainder)

    def __mul__(self, factor: object) -> "Duration":
        """
        Умножение на неотрицательный целый множитель.

        Carry может составлять много секунд (общий случай, не одна секунда).

        Raises:
            ValueError: Если factor < 0
            DurationOverflow: Если секунды превышают U64_MAX
        """
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        validate_scale(factor)

        norm = normalize_subsecond(self.subsecond_picoseconds * factor)
        seconds = checked_add(checked_mul(self.seconds, factor), norm.carry)
        return Duration(seconds=seconds, subsecond_picoseconds=norm.remainder)

    __rmul__ = __mul__


# Таблица диспетчеризации PreciseUnit → конструктор; полнота проверяется тестами
_FROM_PRECISE: Final[dict[PreciseUnit, Callable[[int], Duration]]] = {
    PreciseUnit.PICOSECONDS: Duration.from_picoseconds,
    PreciseUnit.NANOSECONDS: Duration.from_nanoseconds,
    PreciseUnit.MICROSECONDS: Duration.from_microseconds,
    PreciseUnit.MILLISECONDS: Duration.from_milliseconds,
    PreciseUnit.SECONDS: Duration.from_seconds,
    PreciseUnit.MINUTES: Duration.from_minutes,
    PreciseUnit.HOURS: Duration.from_hours,
    PreciseUnit.DAYS: Duration.from_days,
    PreciseUnit.WEEKS: Duration.from_weeks,
}

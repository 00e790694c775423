"""
TimeUnits — Централизованный модуль единиц времени

Единственный допустимый источник коэффициентов конверсии между:
- секундами и крупными единицами (minutes, hours, days, weeks)
- секундами и мелкими единицами (millis, micros, nanos, picos)

PreciseTime — единицы, которые конвертируются в секунды безусловно.
RelativeTime — единицы, длина которых зависит от даты-якоря и календаря;
здесь они только объявлены и в Duration не конвертируются.

ВАЖНО: week/day/hour — фиксированной длины (604800/86400/3600 секунд).
Календарные и DST-поправки не применяются. Это сознательное упрощение,
календарная логика принадлежит внешнему календарному слою.
"""

from enum import Enum
from typing import Final, NamedTuple

from pydantic import BaseModel, Field

from src.picotime.math.checked_arithmetic import PICOS_PER_SEC, U64_MAX

# =============================================================================
# КОЭФФИЦИЕНТЫ: КРУПНЫЕ ЕДИНИЦЫ (секунд в единице)
# =============================================================================

SECS_PER_MINUTE: Final[int] = 60
SECS_PER_HOUR: Final[int] = 60 * SECS_PER_MINUTE
SECS_PER_DAY: Final[int] = 24 * SECS_PER_HOUR
SECS_PER_WEEK: Final[int] = 7 * SECS_PER_DAY


# =============================================================================
# КОЭФФИЦИЕНТЫ: МЕЛКИЕ ЕДИНИЦЫ
# =============================================================================

# Единиц в секунде
MILLIS_PER_SEC: Final[int] = 10**3
MICROS_PER_SEC: Final[int] = 10**6
NANOS_PER_SEC: Final[int] = 10**9

# Пикосекунд в единице (масштаб остатка до пикосекунд)
PICOS_PER_MILLI: Final[int] = PICOS_PER_SEC // MILLIS_PER_SEC
PICOS_PER_MICRO: Final[int] = PICOS_PER_SEC // MICROS_PER_SEC
PICOS_PER_NANO: Final[int] = PICOS_PER_SEC // NANOS_PER_SEC


# =============================================================================
# ENUMS
# =============================================================================


class PreciseUnit(str, Enum):
    """Единица с фиксированной длиной в секундах"""

    PICOSECONDS = "picoseconds"
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"


class RelativeUnit(str, Enum):
    """Единица, длина которой зависит от даты-якоря"""

    MONTHS = "months"
    QUARTERS = "quarters"
    HALVES = "halves"
    YEARS = "years"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"


# =============================================================================
# ТАБЛИЦЫ КОНВЕРСИИ
# =============================================================================


class FineScale(NamedTuple):
    """Параметры мелкой единицы"""

    units_per_sec: int
    picos_per_unit: int


# Крупные единицы: n единиц = n * factor секунд, sub-second = 0
COARSE_UNIT_SECONDS: Final[dict[PreciseUnit, int]] = {
    PreciseUnit.SECONDS: 1,
    PreciseUnit.MINUTES: SECS_PER_MINUTE,
    PreciseUnit.HOURS: SECS_PER_HOUR,
    PreciseUnit.DAYS: SECS_PER_DAY,
    PreciseUnit.WEEKS: SECS_PER_WEEK,
}

# Мелкие единицы: n единиц = (n // units_per_sec) сек + (n % units_per_sec) * picos_per_unit пс
FINE_UNIT_SCALE: Final[dict[PreciseUnit, FineScale]] = {
    PreciseUnit.MILLISECONDS: FineScale(MILLIS_PER_SEC, PICOS_PER_MILLI),
    PreciseUnit.MICROSECONDS: FineScale(MICROS_PER_SEC, PICOS_PER_MICRO),
    PreciseUnit.NANOSECONDS: FineScale(NANOS_PER_SEC, PICOS_PER_NANO),
    PreciseUnit.PICOSECONDS: FineScale(PICOS_PER_SEC, 1),
}


def is_coarse(unit: PreciseUnit) -> bool:
    """Единица не мельче секунды"""
    return unit in COARSE_UNIT_SECONDS


def max_magnitude(unit: PreciseUnit) -> int:
    """
    Максимальная магнитуда единицы, конвертируемая в Duration без переполнения.

    Для мелких единиц ограничение задаёт только ширина магнитуды (U64_MAX).
    Для крупных — секунды результата: U64_MAX // factor.

    Args:
        unit: Единица PreciseUnit

    Returns:
        Максимальное допустимое n
    """
    if unit in COARSE_UNIT_SECONDS:
        return U64_MAX // COARSE_UNIT_SECONDS[unit]
    return U64_MAX


# =============================================================================
# TAGGED MAGNITUDES
# =============================================================================


class PreciseTime(BaseModel):
    """
    Магнитуда в единице с фиксированной длиной.

    Immutable модель (frozen=True). Конвертируется в Duration
    безусловно через Duration.from_precise.
    """

    unit: PreciseUnit = Field(..., description="Единица измерения")
    magnitude: int = Field(..., ge=0, le=U64_MAX, description="Количество единиц")

    model_config = {"frozen": True, "strict": True}


class RelativeTime(BaseModel):
    """
    Магнитуда в календарно-зависимой единице.

    Не имеет конверсии в Duration: перед этим её должен разрешить
    относительно даты-якоря календарный слой вне этого пакета.
    """

    unit: RelativeUnit = Field(..., description="Единица измерения")
    magnitude: int = Field(..., ge=0, le=U64_MAX, description="Количество единиц")

    model_config = {"frozen": True, "strict": True}

"""
Checked Arithmetic — Safe Integer Primitives

Модуль обеспечивает целочисленную безопасность всех операций над Duration:
- Проверка магнитуд на вхождение в 64-битный беззнаковый диапазон
- Checked сложение/вычитание/умножение с явной сигнализацией ошибок
- Нормализация sub-second компоненты (carry/borrow в секунды)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не оборачивается (wraparound) — только DurationOverflow
2. Отрицательный результат никогда не оборачивается — только DurationUnderflow
3. Промежуточные вычисления выполняются в Python int (неограниченная ширина),
   результат проверяется ДО сохранения в поле
4. Все операции детерминированы и не имеют побочных эффектов
"""

import logging
from enum import Enum
from typing import Final, NamedTuple

logger = logging.getLogger(__name__)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

# Максимальная магнитуда поля (unsigned 64-bit)
U64_MAX: Final[int] = 2**64 - 1

# Пикосекунд в секунде, модуль нормализации sub-second компоненты
PICOS_PER_SEC: Final[int] = 10**12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид арифметической ошибки Duration"""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    INVALID_COMPONENT = "invalid_component"


class DurationError(ArithmeticError):
    """
    Базовая ошибка арифметики Duration.

    Атрибут kind позволяет вызывающему коду различать вид ошибки
    без разбора текста сообщения.
    """

    kind: ErrorKind


class DurationOverflow(DurationError):
    """Накопление секунд превысило U64_MAX."""

    kind = ErrorKind.OVERFLOW


class DurationUnderflow(DurationError):
    """Вычитание дало бы отрицательный результат."""

    kind = ErrorKind.UNDERFLOW


class InvalidComponent(DurationError, ValueError):
    """
    Компонента, переданная в прямой конструктор, вне допустимого диапазона.

    Прямой конструктор не нормализует: вызывающий код обязан передавать
    уже каноническую пару (seconds, subsecond_picoseconds).
    """

    kind = ErrorKind.INVALID_COMPONENT


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_u64(value: int, name: str) -> None:
    """
    Валидация, что значение — целое в диапазоне [0, U64_MAX].

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool отклоняется)
        ValueError: Если value < 0 или value > U64_MAX
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        raise ValueError(f"{name} must be <= {U64_MAX}, got {value}")


def validate_scale(factor: int, name: str = "factor") -> None:
    """
    Валидация скалярного множителя.

    Raises:
        TypeError: Если factor не int
        ValueError: Если factor < 0
    """
    if isinstance(factor, bool) or not isinstance(factor, int):
        raise TypeError(f"{name} must be an int, got {type(factor).__name__}")

    if factor < 0:
        raise ValueError(f"{name} must be non-negative, got {factor}")


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int, name: str = "seconds") -> int:
    """
    Сложение с проверкой переполнения U64_MAX.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое (может быть отрицательным carry)
        name: Имя поля (для сообщения об ошибке)

    Returns:
        a + b

    Raises:
        DurationOverflow: Если a + b > U64_MAX
        DurationUnderflow: Если a + b < 0
    """
    result = a + b

    if result > U64_MAX:
        logger.debug("%s overflow: %d + %d", name, a, b)
        raise DurationOverflow(f"{name} overflow: {a} + {b} exceeds {U64_MAX}")

    if result < 0:
        logger.debug("%s underflow: %d + %d", name, a, b)
        raise DurationUnderflow(f"{name} underflow: {a} + {b} is negative")

    return result


def checked_sub(a: int, b: int, name: str = "seconds") -> int:
    """
    Вычитание без wraparound.

    Examples:
        >>> checked_sub(5, 3)
        2
        >>> checked_sub(1, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DurationUnderflow: ...
    """
    result = a - b

    if result < 0:
        logger.debug("%s underflow: %d - %d", name, a, b)
        raise DurationUnderflow(f"{name} underflow: {a} - {b} is negative")

    return result


def checked_mul(a: int, factor: int, name: str = "seconds") -> int:
    """
    Умножение с проверкой переполнения U64_MAX.

    Произведение вычисляется в Python int без ограничения ширины,
    поэтому проверка выполняется над точным значением.

    Raises:
        DurationOverflow: Если a * factor > U64_MAX
    """
    result = a * factor

    if result > U64_MAX:
        logger.debug("%s overflow: %d * %d", name, a, factor)
        raise DurationOverflow(f"{name} overflow: {a} * {factor} exceeds {U64_MAX}")

    return result


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


class Normalized(NamedTuple):
    """Результат нормализации sub-second кандидата"""

    remainder: int  # [0, PICOS_PER_SEC)
    carry: int  # целые секунды; отрицательный carry означает borrow


def normalize_subsecond(candidate: int) -> Normalized:
    """
    Нормализация сырого sub-second значения в [0, PICOS_PER_SEC).

    Используется всеми арифметическими операторами перед построением
    результата. Floor-деление Python гарантирует остаток в диапазоне
    даже для отрицательного кандидата (после вычитания):

        candidate >= PICOS_PER_SEC  →  carry > 0
        candidate < 0               →  carry < 0 (borrow)

    Carry не ограничен одной секундой (умножение на большой множитель).

    Examples:
        >>> normalize_subsecond(1_000_000_000_001)
        Normalized(remainder=1, carry=1)
        >>> normalize_subsecond(-1)
        Normalized(remainder=999999999999, carry=-1)
        >>> normalize_subsecond(5 * 10**12 + 7)
        Normalized(remainder=7, carry=5)
    """
    carry, remainder = divmod(candidate, PICOS_PER_SEC)
    return Normalized(remainder=remainder, carry=carry)

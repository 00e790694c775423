"""
Тесты для модуля Checked Arithmetic

Проверяет:
1. Валидацию магнитуд U64 и скалярных множителей
2. Checked сложение/вычитание/умножение без wraparound
3. Нормализацию sub-second (carry/borrow)
4. Иерархию ошибок и ErrorKind
"""

import logging

import pytest

from src.picotime.math.checked_arithmetic import (
    PICOS_PER_SEC,
    U64_MAX,
    DurationError,
    DurationOverflow,
    DurationUnderflow,
    ErrorKind,
    InvalidComponent,
    Normalized,
    checked_add,
    checked_mul,
    checked_sub,
    normalize_subsecond,
    validate_scale,
    validate_u64,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Тесты диапазонов"""

    def test_u64_max(self) -> None:
        """U64_MAX = 2^64 - 1"""
        assert U64_MAX == 18_446_744_073_709_551_615

    def test_picos_per_sec(self) -> None:
        assert PICOS_PER_SEC == 1_000_000_000_000


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateU64:
    """Тесты для validate_u64"""

    @pytest.mark.parametrize("value", [0, 1, 12345, U64_MAX])
    def test_valid_values_pass(self, value: int) -> None:
        """Значения в [0, U64_MAX] проходят"""
        validate_u64(value, "n")

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="n must be non-negative"):
            validate_u64(-1, "n")

    def test_above_max_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be <="):
            validate_u64(U64_MAX + 1, "n")

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_non_int_rejected(self, value: object) -> None:
        """float, str, None и bool отклоняются"""
        with pytest.raises(TypeError, match="n must be an int"):
            validate_u64(value, "n")  # type: ignore[arg-type]


class TestValidateScale:
    """Тесты для validate_scale"""

    def test_zero_and_large_pass(self) -> None:
        validate_scale(0)
        validate_scale(10**30)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="factor must be non-negative"):
            validate_scale(-2)

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError):
            validate_scale(2.0)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ CHECKED ОПЕРАЦИЙ
# =============================================================================


class TestCheckedAdd:
    """Тесты для checked_add"""

    def test_basic(self) -> None:
        assert checked_add(2, 3) == 5

    def test_exact_max(self) -> None:
        """Сумма ровно U64_MAX допустима"""
        assert checked_add(U64_MAX - 1, 1) == U64_MAX

    def test_overflow(self) -> None:
        with pytest.raises(DurationOverflow, match="seconds overflow"):
            checked_add(U64_MAX, 1)

    def test_negative_carry(self) -> None:
        """Отрицательный carry (borrow) уменьшает значение"""
        assert checked_add(5, -1) == 4

    def test_negative_result_underflow(self) -> None:
        with pytest.raises(DurationUnderflow):
            checked_add(0, -1)

    def test_overflow_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Переполнение пишется в DEBUG лог перед исключением"""
        with caplog.at_level(logging.DEBUG, logger="src.picotime.math.checked_arithmetic"):
            with pytest.raises(DurationOverflow):
                checked_add(U64_MAX, 10, name="weeks")
        assert "weeks overflow" in caplog.text


class TestCheckedSub:
    """Тесты для checked_sub"""

    def test_basic(self) -> None:
        assert checked_sub(5, 3) == 2

    def test_equal_gives_zero(self) -> None:
        assert checked_sub(7, 7) == 0

    def test_underflow_never_wraps(self) -> None:
        """1 - 2 → DurationUnderflow, а не U64_MAX"""
        with pytest.raises(DurationUnderflow, match="underflow"):
            checked_sub(1, 2)


class TestCheckedMul:
    """Тесты для checked_mul"""

    def test_basic(self) -> None:
        assert checked_mul(3, 604800) == 1_814_400

    def test_by_zero(self) -> None:
        assert checked_mul(U64_MAX, 0) == 0

    def test_boundary(self) -> None:
        """Наибольший множитель без переполнения"""
        k = U64_MAX // 604800
        assert checked_mul(k, 604800) <= U64_MAX

        with pytest.raises(DurationOverflow):
            checked_mul(k + 1, 604800)


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalizeSubsecond:
    """Тесты для normalize_subsecond"""

    def test_in_range_unchanged(self) -> None:
        assert normalize_subsecond(123) == Normalized(remainder=123, carry=0)

    def test_upper_bound_exclusive(self) -> None:
        """10^12 - 1 остаётся, 10^12 переносится"""
        assert normalize_subsecond(PICOS_PER_SEC - 1) == (PICOS_PER_SEC - 1, 0)
        assert normalize_subsecond(PICOS_PER_SEC) == (0, 1)

    def test_single_carry(self) -> None:
        result = normalize_subsecond(999_999_999_999 + 2)
        assert result.remainder == 1
        assert result.carry == 1

    def test_general_carry(self) -> None:
        """Carry больше одной секунды (умножение)"""
        result = normalize_subsecond(1_500_000_000_000 * 1000)
        assert result == Normalized(remainder=0, carry=1500)

    def test_negative_candidate_borrows(self) -> None:
        """Отрицательный кандидат → borrow (carry = -1)"""
        result = normalize_subsecond(-1)
        assert result.remainder == PICOS_PER_SEC - 1
        assert result.carry == -1

    @pytest.mark.parametrize(
        "candidate", [0, 1, 10**12 - 1, 10**12, 3 * 10**12 + 5, -(10**12) + 1, 10**30]
    )
    def test_remainder_always_in_range(self, candidate: int) -> None:
        """Инвариант: 0 <= remainder < 10^12 и восстановимость кандидата"""
        result = normalize_subsecond(candidate)
        assert 0 <= result.remainder < PICOS_PER_SEC
        assert result.carry * PICOS_PER_SEC + result.remainder == candidate


# =============================================================================
# ТЕСТЫ ИЕРАРХИИ ОШИБОК
# =============================================================================


class TestErrorHierarchy:
    """Тесты видов ошибок"""

    def test_kinds(self) -> None:
        assert DurationOverflow.kind is ErrorKind.OVERFLOW
        assert DurationUnderflow.kind is ErrorKind.UNDERFLOW
        assert InvalidComponent.kind is ErrorKind.INVALID_COMPONENT

    def test_common_base(self) -> None:
        for exc in (DurationOverflow, DurationUnderflow, InvalidComponent):
            assert issubclass(exc, DurationError)
            assert issubclass(exc, ArithmeticError)

    def test_invalid_component_is_value_error(self) -> None:
        assert issubclass(InvalidComponent, ValueError)

    def test_kind_available_on_instance(self) -> None:
        try:
            checked_sub(0, 1)
        except DurationError as e:
            assert e.kind is ErrorKind.UNDERFLOW
        else:
            pytest.fail("DurationUnderflow was not raised")

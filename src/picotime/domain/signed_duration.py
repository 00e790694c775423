"""
SignedDuration — Знаковая длительность

Duration неотрицательна по построению. Там, где нужна разность с любым
знаком, используется явная пара {Sign} × Duration, а не отрицание
беззнаковых полей.

Переходы знака при сложении:
    POSITIVE + POSITIVE → POSITIVE (сумма магнитуд)
    NEGATIVE + NEGATIVE → NEGATIVE (сумма магнитуд)
    разные знаки        → знак большей магнитуды, разность магнитуд

Ноль всегда POSITIVE: отрицательный ноль не канонический и отклоняется.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from src.picotime.domain.duration import Duration
from src.picotime.math.checked_arithmetic import DurationUnderflow

# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак длительности"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def flipped(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE


# =============================================================================
# SIGNED DURATION MODEL
# =============================================================================


class SignedDuration(BaseModel):
    """
    Длительность со знаком.

    Immutable модель (frozen=True). Строится фабриками of/positive/negative,
    которые приводят ноль к POSITIVE.
    """

    sign: Sign = Field(..., description="Знак")
    magnitude: Duration = Field(..., description="Абсолютная величина")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_canonical_zero(self) -> "SignedDuration":
        if self.sign is Sign.NEGATIVE and self.magnitude.is_zero():
            raise ValueError("negative zero is not canonical; zero is always POSITIVE")
        return self

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def of(cls, sign: Sign, magnitude: Duration) -> "SignedDuration":
        if magnitude.is_zero():
            sign = Sign.POSITIVE
        return cls(sign=sign, magnitude=magnitude)

    @classmethod
    def positive(cls, magnitude: Duration) -> "SignedDuration":
        return cls.of(Sign.POSITIVE, magnitude)

    @classmethod
    def negative(cls, magnitude: Duration) -> "SignedDuration":
        return cls.of(Sign.NEGATIVE, magnitude)

    from_duration = positive

    @classmethod
    def zero(cls) -> "SignedDuration":
        return cls.positive(Duration.zero())

    @classmethod
    def between(cls, start: Duration, end: Duration) -> "SignedDuration":
        """
        Разность end - start любого знака.

        Examples:
            >>> SignedDuration.between(Duration.from_seconds(5), Duration.from_seconds(2)).sign
            <Sign.NEGATIVE: 'negative'>
        """
        if end >= start:
            return cls.positive(end - start)
        return cls.negative(start - end)

    def to_duration(self) -> Duration:
        """
        Raises:
            DurationUnderflow: Если значение отрицательное
        """
        if self.sign is Sign.NEGATIVE:
            raise DurationUnderflow(
                f"cannot convert negative duration to unsigned Duration: -{self.magnitude!r}"
            )
        return self.magnitude

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    # =========================================================================
    # ПОРЯДОК
    # =========================================================================

    def _key(self) -> int:
        picos = self.magnitude.as_picoseconds()
        return -picos if self.sign is Sign.NEGATIVE else picos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _coerce(other: object) -> "SignedDuration | None":
        if isinstance(other, SignedDuration):
            return other
        if isinstance(other, Duration):
            return SignedDuration.positive(other)
        return None

    def __neg__(self) -> "SignedDuration":
        return SignedDuration.of(self.sign.flipped(), self.magnitude)

    def __abs__(self) -> "SignedDuration":
        return SignedDuration.positive(self.magnitude)

    def __add__(self, other: object) -> "SignedDuration":
        """
        Raises:
            DurationOverflow: Если сумма магнитуд одного знака превышает U64_MAX
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self.sign is rhs.sign:
            return SignedDuration.of(self.sign, self.magnitude + rhs.magnitude)

        # разные знаки: из большей магнитуды вычитается меньшая
        if self.magnitude >= rhs.magnitude:
            return SignedDuration.of(self.sign, self.magnitude - rhs.magnitude)
        return SignedDuration.of(rhs.sign, rhs.magnitude - self.magnitude)

    __radd__ = __add__

    def __sub__(self, other: object) -> "SignedDuration":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> "SignedDuration":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + (-self)

    def __mul__(self, factor: object) -> "SignedDuration":
        """Умножение на целое любого знака"""
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented

        sign = self.sign.flipped() if factor < 0 else self.sign
        return SignedDuration.of(sign, self.magnitude * abs(factor))

    __rmul__ = __mul__

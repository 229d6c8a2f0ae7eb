"""
ExactAngle — Точное рациональное представление угла

Угол θ = numerator / denominator радиан. Знаменатель определяет базовую
цепную дробь e^(i/denominator), числитель — показатель степени, в которую
возводятся её подходящие дроби.

Immutable Pydantic модель. Дробь хранится в том виде, в котором передана
(не сокращается): {2, 4} и {1, 2} — один и тот же угол, но разные пути
вычисления (e^(i/4))² и e^(i/2).
"""

import math
import sys
from fractions import Fraction
from typing import Final

from pydantic import BaseModel, Field

from cfrac_trig.core.math.numerical_safeguards import is_valid_float
from cfrac_trig.core.math.rational import Rational, to_float

# =============================================================================
# ПАРАМЕТРЫ АППРОКСИМАЦИИ FLOAT
# =============================================================================

# Максимальный знаменатель при переводе float-угла в дробь
ANGLE_MAX_DENOMINATOR: Final[int] = 10**15

# Максимальное число шагов разложения float в цепную дробь
ANGLE_MAX_ITERATIONS: Final[int] = 100

# Точность совпадения подходящей дроби с исходным float
FLOAT_EPSILON: Final[float] = sys.float_info.epsilon


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidAngle(ValueError):
    """Угол не число, NaN или ±Inf."""

    pass


# =============================================================================
# ANGLE MODEL
# =============================================================================


class ExactAngle(BaseModel):
    """
    Угол как точная дробь numerator/denominator (радианы).

    Поля строго целочисленные: float и bool отклоняются валидацией.
    """

    numerator: int = Field(..., strict=True, description="Числитель (знаковый)")
    denominator: int = Field(..., strict=True, gt=0, description="Знаменатель (> 0)")

    model_config = {"frozen": True}

    @classmethod
    def from_float(
        cls,
        x: float,
        max_denominator: int = ANGLE_MAX_DENOMINATOR,
        max_iterations: int = ANGLE_MAX_ITERATIONS,
    ) -> "ExactAngle":
        """
        Аппроксимация float-угла дробью через цепную дробь.

        Классическое разложение floor/reciprocal: подходящие дроби p/q
        строятся до тех пор, пока |x - p/q| > machine epsilon. Остановка также
        по лимиту итераций, при неконечном или нулевом остатке, или если
        следующий знаменатель превысил бы max_denominator (тогда остаётся
        предыдущая подходящая дробь).

        Args:
            x: Угол в радианах
            max_denominator: Ограничение знаменателя (default: 10^15)
            max_iterations: Лимит шагов разложения (default: 100)

        Returns:
            ExactAngle, ближайший к x в пределах ограничений

        Raises:
            InvalidAngle: Если x NaN или ±Inf

        Examples:
            >>> ExactAngle.from_float(0.75)
            ExactAngle(numerator=3, denominator=4)
            >>> ExactAngle.from_float(-2.0)
            ExactAngle(numerator=-2, denominator=1)
        """
        if not is_valid_float(x):
            raise InvalidAngle(f"Angle must be a finite number, got {x}")

        if x == 0:
            return cls(numerator=0, denominator=1)

        sign = -1 if x < 0 else 1
        x = abs(x)

        m = math.floor(x)
        if x == m:
            return cls(numerator=sign * m, denominator=1)

        remainder = 1 / (x - m)
        p_prev, q_prev, p, q = 1, 0, m, 1

        for _ in range(max_iterations):
            if abs(x - p / q) <= FLOAT_EPSILON:
                break
            if not is_valid_float(remainder) or remainder == 0:
                break

            m = math.floor(remainder)
            p_next = m * p + p_prev
            q_next = m * q + q_prev
            if q_next > max_denominator:
                break

            fractional = remainder - m
            remainder = 1 / fractional if fractional != 0 else math.inf
            p_prev, q_prev, p, q = p, q, p_next, q_next

        return cls(numerator=sign * p, denominator=q)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "ExactAngle":
        return cls(numerator=value.numerator, denominator=value.denominator)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def to_rational(self) -> Rational:
        """Сокращённая форма угла как Rational."""
        return Rational(self.numerator, self.denominator)

    def to_float(self) -> float:
        return to_float(self.to_rational())

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

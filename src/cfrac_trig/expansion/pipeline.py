"""
Expansion Pipeline — e^(iθ) через точные цепные дроби

Порядок:
1. Приведение угла к ExactAngle {numerator, denominator}
2. Нулевой угол → (ONE,) без генерации коэффициентов
3. generate_coefficients(denominator, terms)
4. compute_all_convergents(coefficients, numerator) → base + math_limit_index
5. pow_complex_stable(convergent, numerator) для каждой base подходящей дроби
6. ExpansionResult + IterationMetrics

Интеграция:
- Входной float угла переводится в дробь через ExactAngle.from_float
- Результат сериализуется через to_dict() и проверяется контрактом
  expansion_result (core.contracts)
- UI/HTTP слой ловит InvalidAngle, DivisionByZero и показывает сообщения
"""

import logging
import time
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Final

from cfrac_trig.core.domain.angle import (
    ANGLE_MAX_DENOMINATOR,
    ANGLE_MAX_ITERATIONS,
    ExactAngle,
    InvalidAngle,
)
from cfrac_trig.core.math.complex_rational import ONE, ComplexRational
from cfrac_trig.core.math.numerical_safeguards import is_strict_int, validate_positive_int
from cfrac_trig.expansion.coefficients import generate_coefficients
from cfrac_trig.expansion.convergents import compute_all_convergents
from cfrac_trig.expansion.exponentiation import exponent_iterations, pow_complex_stable

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Число коэффициентов цепной дроби по умолчанию
DEFAULT_TERMS: Final[int] = 12

# Число знаков после запятой в строковом представлении по умолчанию
DEFAULT_DISPLAY_PRECISION: Final[int] = 17


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ExpansionConfig:
    """Конфигурация разложения.

    Параметры перевода float-угла в дробь и число коэффициентов.
    """

    # Число коэффициентов (и подходящих дробей)
    terms: int = DEFAULT_TERMS

    # Ограничение знаменателя при переводе float-угла в дробь
    float_max_denominator: int = ANGLE_MAX_DENOMINATOR

    # Лимит шагов разложения float-угла в цепную дробь
    float_max_iterations: int = ANGLE_MAX_ITERATIONS


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class IterationMetrics:
    """Оценка объёма вычислений разложения."""

    convergent_iterations: int
    exponent_iterations: int
    total_iterations: int


ZERO_METRICS: Final[IterationMetrics] = IterationMetrics(
    convergent_iterations=0,
    exponent_iterations=0,
    total_iterations=0,
)


@dataclass(frozen=True)
class ExpansionResult:
    """Результат разложения e^(iθ)."""

    angle: ExactAngle
    terms: int
    coefficients: tuple[ComplexRational, ...]

    # Подходящие дроби e^(i/denominator)
    base_convergents: tuple[ComplexRational, ...]

    # base_convergents, возведённые в степень numerator: приближения e^(iθ)
    final_convergents: tuple[ComplexRational, ...]

    # Последний численно значимый индекс (None если предел не достигнут)
    math_limit_index: int | None

    iteration_metrics: IterationMetrics

    @property
    def redundant_start_index(self) -> int | None:
        """Первый индекс, начиная с которого подходящие дроби избыточны."""
        if self.math_limit_index is None:
            return None
        return self.math_limit_index + 1

    @property
    def trusted_convergents(self) -> tuple[ComplexRational, ...]:
        """Финальные подходящие дроби до math_limit_index включительно."""
        if self.math_limit_index is None:
            return self.final_convergents
        return self.final_convergents[: self.math_limit_index + 1]

    @property
    def value(self) -> ComplexRational:
        """Наиболее точное приближение e^(iθ) (последняя подходящая дробь)."""
        return self.final_convergents[-1]

    def to_dict(self, precision: int = DEFAULT_DISPLAY_PRECISION) -> dict[str, Any]:
        """
        JSON-совместимое представление (контракт expansion_result).

        Рациональные компоненты сериализуются строками "n/d", потому что их
        длина не ограничена диапазоном JSON-чисел.
        """
        return {
            "angle": {
                "numerator": self.angle.numerator,
                "denominator": self.angle.denominator,
            },
            "terms": self.terms,
            "math_limit_index": self.math_limit_index,
            "redundant_start_index": self.redundant_start_index,
            "iteration_metrics": {
                "convergent_iterations": self.iteration_metrics.convergent_iterations,
                "exponent_iterations": self.iteration_metrics.exponent_iterations,
                "total_iterations": self.iteration_metrics.total_iterations,
            },
            "base_convergents": [_convergent_to_dict(c, precision) for c in self.base_convergents],
            "final_convergents": [_convergent_to_dict(c, precision) for c in self.final_convergents],
        }


def _convergent_to_dict(z: ComplexRational, precision: int) -> dict[str, Any]:
    values = z.to_float()
    return {
        "re": f"{z.re.numerator}/{z.re.denominator}",
        "im": f"{z.im.numerator}/{z.im.denominator}",
        "re_float": values.re,
        "im_float": values.im,
        "magnitude": z.magnitude(),
        "display": z.format(precision),
    }


# =============================================================================
# ANGLE COERCION
# =============================================================================


def coerce_angle(angle: object, config: ExpansionConfig | None = None) -> ExactAngle:
    """
    Приведение входного угла к ExactAngle.

    - ExactAngle: без изменений
    - int: n/1
    - Fraction: точная дробь
    - float: ExactAngle.from_float (цепная дробь, знаменатель <= 10^15)

    Args:
        angle: Угол в радианах
        config: Параметры перевода float (опционально)

    Returns:
        ExactAngle

    Raises:
        InvalidAngle: Для NaN, ±Inf, bool и нечисловых значений
    """
    config = config or ExpansionConfig()

    if isinstance(angle, ExactAngle):
        return angle
    if is_strict_int(angle):
        return ExactAngle(numerator=angle, denominator=1)
    if isinstance(angle, Fraction):
        return ExactAngle.from_fraction(angle)
    if isinstance(angle, float):
        return ExactAngle.from_float(
            angle,
            max_denominator=config.float_max_denominator,
            max_iterations=config.float_max_iterations,
        )

    raise InvalidAngle(f"Angle must be a valid number, got {type(angle).__name__}: {angle!r}")


# =============================================================================
# PIPELINE
# =============================================================================


def exp_with_convergents(
    angle: object,
    terms: int | None = None,
    config: ExpansionConfig | None = None,
) -> ExpansionResult:
    """
    Разложение e^(iθ) в последовательность точных приближений.

    Args:
        angle: Угол в радианах (float, int, Fraction или ExactAngle)
        terms: Число коэффициентов (переопределяет config.terms)
        config: Конфигурация разложения (опционально)

    Returns:
        ExpansionResult с base/final подходящими дробями, math_limit_index
        и метриками итераций

    Raises:
        InvalidAngle: Если угол не число, NaN или ±Inf
        TypeError: Если terms не int
        ValueError: Если terms < 1
    """
    config = config or ExpansionConfig()
    terms = config.terms if terms is None else terms
    validate_positive_int(terms, "terms")

    exact = coerce_angle(angle, config)

    if exact.is_zero():
        logger.debug("exp_with_convergents: zero angle, returning ONE")
        return ExpansionResult(
            angle=exact,
            terms=terms,
            coefficients=(),
            base_convergents=(ONE,),
            final_convergents=(ONE,),
            math_limit_index=None,
            iteration_metrics=ZERO_METRICS,
        )

    started = time.perf_counter()

    coefficients = generate_coefficients(exact.denominator, terms)
    sequence = compute_all_convergents(coefficients, exact.numerator)
    final = tuple(pow_complex_stable(c, exact.numerator) for c in sequence.convergents)

    if sequence.math_limit_index is not None:
        convergent_iterations = sequence.math_limit_index + 1
    else:
        convergent_iterations = len(sequence.convergents)
    exponent_steps = exponent_iterations(exact.numerator)

    metrics = IterationMetrics(
        convergent_iterations=convergent_iterations,
        exponent_iterations=exponent_steps,
        total_iterations=convergent_iterations + exponent_steps,
    )

    logger.debug(
        "exp_with_convergents: angle=%s terms=%d math_limit_index=%s took %d msec",
        exact,
        terms,
        sequence.math_limit_index,
        round((time.perf_counter() - started) * 1000),
    )

    return ExpansionResult(
        angle=exact,
        terms=terms,
        coefficients=coefficients,
        base_convergents=sequence.convergents,
        final_convergents=final,
        math_limit_index=sequence.math_limit_index,
        iteration_metrics=metrics,
    )

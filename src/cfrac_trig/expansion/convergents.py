"""
Convergents — подходящие дроби комплексной цепной дроби

Рекуррентность Уоллиса–Эйлера (continuants):
    p₋₂ = 0, p₋₁ = 1, q₋₂ = 1, q₋₁ = 0
    pᵢ = aᵢ·p_{i-1} + p_{i-2}
    qᵢ = aᵢ·q_{i-1} + q_{i-2}
    convergentᵢ = pᵢ / qᵢ

Все величины точные (ComplexRational, raw_multiply): континуанты — гауссовы
целые, подходящие дроби — точные комплексные рациональные.

КРИТЕРИЙ ОСТАНОВКИ (math limit):
    LIMIT = 2^106 · n²
    |qᵢ|⁴ · |a_{i+1}|² > LIMIT

Погрешность i-й подходящей дроби ~ 1 / (|qᵢ|² · |a_{i+1}|). После возведения
в степень n она усиливается в ~n раз. Как только квадрат этой оценки падает
ниже 2^-106 (бюджет точности компонентов после ренормализации, ~10^-32),
дальнейшие подходящие дроби не улучшают результат. Они остаются в
последовательности, но помечаются избыточными начиная с индекса
math_limit_index + 1.

Сравнение выполняется перекрёстным умножением (product.n > LIMIT·product.d),
без деления и без float.
"""

from dataclasses import dataclass
from typing import Final, Iterator, Sequence

from cfrac_trig.core.math.complex_rational import ONE, ZERO, ComplexRational
from cfrac_trig.core.math.rational import multiply

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Бюджет точности в битах для критерия остановки
MATH_LIMIT_BITS: Final[int] = 106


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConvergentSequence:
    """Подходящие дроби и индекс последней численно значимой из них."""

    convergents: tuple[ComplexRational, ...]
    math_limit_index: int | None

    def __len__(self) -> int:
        return len(self.convergents)


# =============================================================================
# CONTINUANTS
# =============================================================================


def continuants(
    coefficients: Sequence[ComplexRational],
) -> Iterator[tuple[ComplexRational, ComplexRational]]:
    """
    Последовательность пар (pᵢ, qᵢ) для заданных коэффициентов.

    Args:
        coefficients: Неполные частные a₀, a₁, …

    Yields:
        (pᵢ, qᵢ) для i = 0, 1, …
    """
    p_prev_prev, p_prev = ZERO, ONE
    q_prev_prev, q_prev = ONE, ZERO

    for a in coefficients:
        p_n = a.raw_multiply(p_prev).add(p_prev_prev)
        q_n = a.raw_multiply(q_prev).add(q_prev_prev)

        yield p_n, q_n

        p_prev_prev, p_prev = p_prev, p_n
        q_prev_prev, q_prev = q_prev, q_n


# =============================================================================
# MATH LIMIT
# =============================================================================


def math_limit(numerator: int) -> int:
    """
    Порог критерия остановки: 2^106 · n² (2^106 при n = 0).

    Examples:
        >>> math_limit(3) == 9 * 2**106
        True
    """
    n_sq = numerator * numerator
    base = 1 << MATH_LIMIT_BITS
    return base * n_sq if n_sq > 0 else base


def exceeds_math_limit(
    q: ComplexRational,
    a_next: ComplexRational,
    numerator: int,
) -> bool:
    """
    Проверка |q|⁴ · |a_next|² > 2^106 · n² (точно, без деления).

    Args:
        q: Континуант qᵢ
        a_next: Следующий коэффициент a_{i+1}
        numerator: Числитель угла (показатель степени)

    Returns:
        True если подходящая дробь с этим qᵢ уже исчерпывает бюджет точности
    """
    q_mag_sq = q.magnitude_squared()
    product = multiply(multiply(q_mag_sq, q_mag_sq), a_next.magnitude_squared())
    return product.numerator > math_limit(numerator) * product.denominator


# =============================================================================
# CONVERGENTS
# =============================================================================


def compute_all_convergents(
    coefficients: Sequence[ComplexRational],
    numerator: int = 1,
) -> ConvergentSequence:
    """
    Все подходящие дроби и индекс математического предела.

    Args:
        coefficients: Неполные частные a₀ … a_{k-1}
        numerator: Числитель угла, масштабирует порог критерия остановки

    Returns:
        ConvergentSequence:
            - пустая последовательность, limit None для k = 0
            - (a₀,), limit None для k = 1
            - иначе k подходящих дробей; math_limit_index — первый i < k-1,
              для которого выполнен критерий, или None

    Raises:
        DivisionByZero: Если какой-либо континуант qᵢ равен нулю
    """
    if not coefficients:
        return ConvergentSequence(convergents=(), math_limit_index=None)

    if len(coefficients) == 1:
        return ConvergentSequence(convergents=(coefficients[0],), math_limit_index=None)

    convergents: list[ComplexRational] = []
    math_limit_index: int | None = None
    last = len(coefficients) - 1

    for i, (p_n, q_n) in enumerate(continuants(coefficients)):
        convergents.append(p_n.divide(q_n))

        if math_limit_index is None and i < last:
            if exceeds_math_limit(q_n, coefficients[i + 1], numerator):
                math_limit_index = i

    return ConvergentSequence(convergents=tuple(convergents), math_limit_index=math_limit_index)

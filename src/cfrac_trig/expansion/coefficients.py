"""
Coefficients — неполные частные цепной дроби e^(i/q)

Генерирует коэффициенты a₀, a₁, …, a_{k-1} комплексной цепной дроби

    e^(i/q) = a₀ + 1/(a₁ + 1/(a₂ + …))

ФОРМУЛЫ (q > 1):
    a₀ = 1
    a_c = i · c·q·(-1)^((c+1)/2)     для нечётного c
    a_c = 2·(-1)^(c/2)               для чётного c >= 2

Для q = 1 используется эмпирически быстрее сходящийся вариант (таблица
UNIT_DENOMINATOR_TABLE). После таблицы её закономерность продолжается
формулой, поэтому запрос любого числа коэффициентов выполняется полностью.

Все коэффициенты — точные гауссовы целые (знаменатели 1), float не
используется.
"""

from typing import Final

from cfrac_trig.core.math.complex_rational import ComplexRational
from cfrac_trig.core.math.numerical_safeguards import (
    validate_non_negative_int,
    validate_positive_int,
)


def _gaussian(re: int, im: int) -> ComplexRational:
    return ComplexRational.from_integers(re, 1, im, 1)


# =============================================================================
# ТАБЛИЦА ДЛЯ q = 1
# =============================================================================

UNIT_DENOMINATOR_TABLE: Final[tuple[ComplexRational, ...]] = (
    _gaussian(1, 1),
    _gaussian(-2, 1),
    _gaussian(1, 3),
    _gaussian(-2, 0),
    _gaussian(0, -5),
    _gaussian(2, 0),
    _gaussian(0, 7),
    _gaussian(-2, 0),
    _gaussian(0, -9),
    _gaussian(2, 0),
    _gaussian(0, 11),
    _gaussian(-2, 0),
    _gaussian(0, -13),
    _gaussian(2, 0),
    _gaussian(0, 15),
    _gaussian(-2, 0),
    _gaussian(0, -17),
    _gaussian(2, 0),
    _gaussian(0, 19),
    _gaussian(-2, 0),
    _gaussian(0, -21),
    _gaussian(2, 0),
    _gaussian(0, 23),
    _gaussian(-2, 0),
)


# =============================================================================
# ФОРМУЛЫ
# =============================================================================


def general_coefficient(index: int, denominator: int) -> ComplexRational:
    """
    Коэффициент a_index цепной дроби e^(i/denominator) по общей формуле.

    Args:
        index: Номер коэффициента (>= 0)
        denominator: Знаменатель угла q (>= 1)

    Returns:
        a_index как гауссово целое

    Examples:
        >>> general_coefficient(3, 2).format(0)
        '0 + 6i'
    """
    if index == 0:
        return _gaussian(1, 0)

    if index % 2 == 1:
        power = (index + 1) // 2
        sign = 1 if power % 2 == 0 else -1
        return _gaussian(0, sign * index * denominator)

    power = index // 2
    sign = 1 if power % 2 == 0 else -1
    return _gaussian(2 * sign, 0)


def unit_denominator_coefficient(index: int) -> ComplexRational:
    """
    Коэффициент a_index варианта для q = 1.

    Индексы 0..23 берутся из таблицы. Дальше закономерность таблицы:
        нечётный c: 2·(-1)^((c-1)/2)
        чётный c:   i · (c+1)·(-1)^(c/2 + 1)
    """
    if index < len(UNIT_DENOMINATOR_TABLE):
        return UNIT_DENOMINATOR_TABLE[index]

    if index % 2 == 1:
        sign = 1 if ((index - 1) // 2) % 2 == 0 else -1
        return _gaussian(2 * sign, 0)

    sign = 1 if (index // 2 + 1) % 2 == 0 else -1
    return _gaussian(0, sign * (index + 1))


def generate_coefficients(denominator: int, count: int) -> tuple[ComplexRational, ...]:
    """
    Первые count коэффициентов цепной дроби e^(i/denominator).

    Args:
        denominator: Знаменатель угла q (>= 1)
        count: Число коэффициентов k (>= 0)

    Returns:
        Кортеж (a₀, …, a_{k-1})

    Raises:
        TypeError: Если аргументы не int
        ValueError: Если denominator < 1 или count < 0

    Examples:
        >>> [c.format(0) for c in generate_coefficients(2, 3)]
        ['1 + 0i', '0 - 2i', '-2 + 0i']
    """
    validate_positive_int(denominator, "denominator")
    validate_non_negative_int(count, "count")

    if denominator == 1:
        return tuple(unit_denominator_coefficient(c) for c in range(count))

    return tuple(general_coefficient(c, denominator) for c in range(count))

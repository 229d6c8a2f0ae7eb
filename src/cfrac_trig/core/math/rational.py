"""
Rational — точная рациональная арифметика над целыми произвольной точности

Модуль реализует неизменяемые дроби numerator/denominator поверх встроенного
int (arbitrary precision):
- Нормализация (знак в числителе, сокращение на НОД)
- Арифметика (add/subtract/multiply/divide) без потери точности
- Конверсия в float с защитой от переполнения больших компонентов
- Аппроксимация float рациональным числом с ограниченным знаменателем
- Аппроксимация дроби через цепную дробь (approx_frac)
- Точный целочисленный квадратный корень (метод Ньютона)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 всегда
2. gcd(|numerator|, denominator) == 1 после каждой операции
3. Ноль представлен канонически как 0/1
4. Нулевой знаменатель → DivisionByZero (никогда не создаётся)
5. Потеря точности возможна только в approx_frac/from_float/to_float

ФОРМУЛЫ:
    a/b + c/d = (a·d + c·b) / (b·d)
    a/b - c/d = (a·d - c·b) / (b·d)
    a/b · c/d = (a·c) / (b·d)
    (a/b) / (c/d) = (a·d) / (b·c),  c != 0

    approx_frac: p₂ = k·p₁ + p₀, q₂ = k·q₁ + q₀,  k = floor(a/b)
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Final

from cfrac_trig.core.math.numerical_safeguards import (
    float_safe_shift,
    is_strict_int,
    is_valid_float,
    validate_int,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальный знаменатель при аппроксимации (баланс стабильность/точность).
# 10^30 даёт ~100 бит на компонент, чего хватает для показателей до ~10^15
MAX_DEN: Final[int] = 10**30

# Масштаб, с которым float переводится в целую пару перед approx_frac
FROM_FLOAT_SCALE: Final[int] = 10**15


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Нулевой знаменатель или деление на нулевое рациональное/комплексное."""

    pass


class NonFiniteInput(ValueError):
    """Попытка конвертировать NaN или ±Inf в рациональное число."""

    pass


class NegativeInput(ValueError):
    """Целочисленный квадратный корень из отрицательного числа."""

    pass


# =============================================================================
# НОД И НОРМАЛИЗАЦИЯ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        gcd(|a|, |b|); gcd(0, x) = |x|

    Examples:
        >>> gcd(12, -18)
        6
        >>> gcd(0, -7)
        7
    """
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def _reduce(n: int, d: int) -> tuple[int, int]:
    if d == 0:
        raise DivisionByZero("Division by zero: denominator cannot be zero")
    if n == 0:
        return 0, 1
    if d < 0:
        n = -n
        d = -d
    g = gcd(n, d)
    return n // g, d // g


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True)
class Rational:
    """
    Неизменяемая дробь numerator/denominator.

    Конструктор строгий: принимает только int (не bool, не float) и
    нормализует пару. Float попадает в Rational только через from_float().
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        validate_int(self.numerator, "numerator")
        validate_int(self.denominator, "denominator")
        n, d = _reduce(self.numerator, self.denominator)
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    # -------------------------------------------------------------------------
    # Предикаты и конверсии
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def to_float(self) -> float:
        return to_float(self)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return to_float(self)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divide(other, self)

    def __neg__(self) -> "Rational":
        return negate(self)

    def __abs__(self) -> "Rational":
        return Rational(abs(self.numerator), self.denominator)

    def __lt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) >= 0


def _coerce(value: object) -> Rational | None:
    # Только точные типы: int становится n/1, float не принимается
    if isinstance(value, Rational):
        return value
    if is_strict_int(value):
        return Rational(value, 1)
    return None


ZERO: Final[Rational] = Rational(0, 1)
ONE: Final[Rational] = Rational(1, 1)


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def normalize(n: int, d: int) -> Rational:
    """
    Нормализация пары (n, d) в Rational.

    Args:
        n: Числитель
        d: Знаменатель

    Returns:
        Rational с d > 0 и gcd(|n|, d) == 1; 0/1 для n == 0

    Raises:
        DivisionByZero: Если d == 0

    Examples:
        >>> normalize(4, -6)
        Rational(numerator=-2, denominator=3)
        >>> normalize(0, -5)
        Rational(numerator=0, denominator=1)
    """
    return Rational(n, d)


def from_integer(n: int) -> Rational:
    """Целое n как n/1."""
    return Rational(n, 1)


def add(a: Rational, b: Rational) -> Rational:
    return Rational(a.numerator * b.denominator + b.numerator * a.denominator, a.denominator * b.denominator)


def subtract(a: Rational, b: Rational) -> Rational:
    return Rational(a.numerator * b.denominator - b.numerator * a.denominator, a.denominator * b.denominator)


def multiply(a: Rational, b: Rational) -> Rational:
    return Rational(a.numerator * b.numerator, a.denominator * b.denominator)


def divide(a: Rational, b: Rational) -> Rational:
    """
    Деление a / b.

    Raises:
        DivisionByZero: Если b == 0
    """
    if b.numerator == 0:
        raise DivisionByZero("Division by zero")
    return Rational(a.numerator * b.denominator, a.denominator * b.numerator)


def negate(r: Rational) -> Rational:
    return Rational(-r.numerator, r.denominator)


def is_zero(r: Rational) -> bool:
    return r.numerator == 0


def compare(a: Rational, b: Rational) -> int:
    """
    Сравнение через перекрёстное умножение (без деления).

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    diff = a.numerator * b.denominator - b.numerator * a.denominator
    if diff < 0:
        return -1
    if diff > 0:
        return 1
    return 0


# =============================================================================
# КОНВЕРСИЯ FLOAT <-> RATIONAL
# =============================================================================


def to_float(r: Rational) -> float:
    """
    Конверсия Rational → float.

    Для компонентов длиннее FLOAT_OVERFLOW_BITS оба сдвигаются вправо на
    одинаковую величину (max_bits - FLOAT_SAFE_BITS), чтобы деление не
    переполнилось до inf.

    Args:
        r: Рациональное число

    Returns:
        Ближайшее float-приближение
    """
    if r.numerator == 0:
        return 0.0

    shift = float_safe_shift(r.numerator, r.denominator)
    if shift:
        # Сдвигается модуль: >> на отрицательном int округляет к -inf
        den = r.denominator >> shift
        if den == 0:
            return math.copysign(math.inf, r.numerator)
        return math.copysign((abs(r.numerator) >> shift) / den, r.numerator)

    return r.numerator / r.denominator


def from_float(x: float, max_denominator: int = MAX_DEN) -> Rational:
    """
    Конверсия float → Rational с ограниченным знаменателем.

    |x| масштабируется на FROM_FLOAT_SCALE, округляется до целого и
    приближается через approx_frac. Знак обрабатывается отдельно.

    Args:
        x: Конечное float значение
        max_denominator: Максимальный знаменатель (default: MAX_DEN)

    Returns:
        Рациональная аппроксимация x

    Raises:
        NonFiniteInput: Если x NaN или ±Inf

    Examples:
        >>> from_float(0.5)
        Rational(numerator=1, denominator=2)
        >>> from_float(-0.25)
        Rational(numerator=-1, denominator=4)
    """
    if not is_valid_float(x):
        raise NonFiniteInput(f"Cannot convert non-finite number to rational: {x}")

    if x == 0:
        return ZERO

    sign = -1 if x < 0 else 1
    magnitude = abs(x)

    scaled = magnitude * FROM_FLOAT_SCALE
    if is_valid_float(scaled):
        num = round(scaled)
        den = FROM_FLOAT_SCALE
    else:
        # |x| * 10^15 вне диапазона float: берём точную двоичную пару
        num, den = magnitude.as_integer_ratio()

    approx = approx_frac(num, den, max_denominator)
    return Rational(sign * approx.numerator, approx.denominator)


# =============================================================================
# ЦЕПНЫЕ ДРОБИ И КОРНИ
# =============================================================================


def approx_frac(num: int, den: int, max_denominator: int = MAX_DEN) -> Rational:
    """
    Лучшая аппроксимация num/den с знаменателем <= max_denominator.

    Разложение в цепную дробь алгоритмом Евклида над (num, den):
        k = floor(a / b)
        p₂ = k·p₁ + p₀,  q₂ = k·q₁ + q₀
    Останавливается перед шагом, на котором q₂ превысил бы max_denominator.

    Разложение выполняется над |num|/|den|, знак восстанавливается после,
    поэтому approx_frac(-a, b) == -approx_frac(a, b).

    Args:
        num: Числитель
        den: Знаменатель (!= 0)
        max_denominator: Ограничение на знаменатель (>= 1)

    Returns:
        Последняя подходящая дробь с q <= max_denominator

    Raises:
        DivisionByZero: Если den == 0
        ValueError: Если max_denominator < 1

    Examples:
        >>> approx_frac(314159, 100000, 100)
        Rational(numerator=22, denominator=7)
        >>> approx_frac(6, 4, 10)
        Rational(numerator=3, denominator=2)
    """
    if den == 0:
        raise DivisionByZero("Division by zero: denominator cannot be zero")
    if max_denominator < 1:
        raise ValueError(f"max_denominator must be >= 1, got {max_denominator}")

    sign = -1 if (num < 0) != (den < 0) else 1
    a = abs(num)
    b = abs(den)

    p0, q0 = 0, 1
    p1, q1 = 1, 0

    while b != 0:
        k = a // b
        p2 = k * p1 + p0
        q2 = k * q1 + q0

        if q2 > max_denominator:
            break

        p0, q0, p1, q1 = p1, q1, p2, q2
        a, b = b, a % b

    return Rational(sign * p1, q1)


def big_int_sqrt(value: int) -> int:
    """
    Точный целочисленный квадратный корень: floor(sqrt(value)).

    Метод Ньютона с начальным приближением 2^ceil(bitlen/2) (не меньше
    истинного корня), итерация y = (x + value // x) // 2 до y >= x.

    Args:
        value: Неотрицательное целое

    Returns:
        r такое, что r² <= value < (r + 1)²

    Raises:
        NegativeInput: Если value < 0

    Examples:
        >>> big_int_sqrt(10**20)
        10000000000
        >>> big_int_sqrt(15)
        3
    """
    if value < 0:
        raise NegativeInput(f"Square root of negative number: {value}")
    if value < 2:
        return value

    x = 1 << ((value.bit_length() + 1) >> 1)
    y = (x + value // x) >> 1

    while y < x:
        x = y
        y = (x + value // x) >> 1

    return x

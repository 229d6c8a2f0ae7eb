"""
ComplexRational — комплексные числа с точными рациональными компонентами

Модуль реализует неизменяемое комплексное число re + im·i, где re и im —
Rational. Точка на комплексной плоскости представлена без потери точности.

Два уровня умножения (контракт виден в месте вызова):
- raw_multiply: точное произведение БЕЗ ренормализации. Длина числителя и
  знаменателя компонентов растёт (примерно удваивается на каждое
  умножение). Подходит для коротких цепочек операций.
- normalized_multiply: произведение + normalize_complex. Результат имеет
  модуль ~1 и знаменатели <= MAX_DEN. Обязательно для длинных цепочек
  (возведение в степень).

Единственные операции с потерей точности:
- magnitude() — float, только для отображения/эвристик
- normalize_complex() — ограничивает знаменатели через approx_frac
- to_float() / format() — отображение

ФОРМУЛЫ:
    (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    (a + bi)/(c + di) = (a + bi)(c - di) / (c² + d²)
    normalize: S = isqrt(|z|²_den · scale² // |z|²_num)
               re' = re_num · S / (re_den · scale)
"""

import math
from dataclasses import dataclass
from typing import Final, NamedTuple

from cfrac_trig.core.math.rational import (
    MAX_DEN,
    DivisionByZero,
    Rational,
    add,
    approx_frac,
    big_int_sqrt,
    divide,
    from_float,
    multiply,
    subtract,
    to_float,
)

# =============================================================================
# ПАРАМЕТРЫ НОРМАЛИЗАЦИИ
# =============================================================================

# Фиксированная точность целочисленного масштаба в normalize_complex.
# 10^60 на порядки превышает MAX_DEN, поэтому ошибка округления sqrt
# пренебрежимо мала по сравнению с последующим approx_frac
NORMALIZE_PRECISION_SCALE: Final[int] = 10**60


# =============================================================================
# TYPES
# =============================================================================


class FloatPair(NamedTuple):
    """Float-представление комплексного числа (только для отображения)."""

    re: float
    im: float


@dataclass(frozen=True)
class ComplexRational:
    """
    Неизменяемое комплексное число с рациональными компонентами.

    Оба компонента нормализованы независимо (инвариант Rational).
    """

    re: Rational
    im: Rational

    def __post_init__(self) -> None:
        if not isinstance(self.re, Rational) or not isinstance(self.im, Rational):
            raise TypeError(
                f"ComplexRational components must be Rational, "
                f"got {type(self.re).__name__}, {type(self.im).__name__}"
            )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_integers(
        cls,
        re_num: int,
        re_den: int = 1,
        im_num: int = 0,
        im_den: int = 1,
    ) -> "ComplexRational":
        """
        Создание из четырёх целых компонентов.

        Args:
            re_num: Числитель вещественной части
            re_den: Знаменатель вещественной части (!= 0)
            im_num: Числитель мнимой части
            im_den: Знаменатель мнимой части (!= 0)

        Raises:
            DivisionByZero: Если какой-либо знаменатель равен 0
            TypeError: Если компонент не int
        """
        return cls(Rational(re_num, re_den), Rational(im_num, im_den))

    @classmethod
    def from_float(cls, real: float, imag: float = 0.0) -> "ComplexRational":
        """
        Явная конверсия float-пары в ComplexRational (через from_float).

        Raises:
            NonFiniteInput: Если real или imag NaN/Inf
        """
        return cls(from_float(real), from_float(imag))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "ComplexRational") -> "ComplexRational":
        return ComplexRational(add(self.re, other.re), add(self.im, other.im))

    def subtract(self, other: "ComplexRational") -> "ComplexRational":
        return ComplexRational(subtract(self.re, other.re), subtract(self.im, other.im))

    def raw_multiply(self, other: "ComplexRational") -> "ComplexRational":
        """
        Точное произведение без ренормализации.

        ВНИМАНИЕ: длина компонентов растёт с каждым умножением. Длинные
        цепочки умножений должны использовать normalized_multiply().
        """
        ac = multiply(self.re, other.re)
        bd = multiply(self.im, other.im)
        ad = multiply(self.re, other.im)
        bc = multiply(self.im, other.re)
        return ComplexRational(subtract(ac, bd), add(ad, bc))

    def normalized_multiply(self, other: "ComplexRational") -> "ComplexRational":
        """Произведение, приведённое к единичному модулю (normalize_complex)."""
        return normalize_complex(self.raw_multiply(other))

    def divide(self, other: "ComplexRational") -> "ComplexRational":
        """
        Комплексное деление через умножение на сопряжённое.

        Не ренормализует результат.

        Raises:
            DivisionByZero: Если |other|² == 0
        """
        denom = other.magnitude_squared()
        if denom.is_zero():
            raise DivisionByZero("Division by zero: complex divisor has zero magnitude")

        product = self.raw_multiply(other.conjugate())
        return ComplexRational(divide(product.re, denom), divide(product.im, denom))

    def conjugate(self) -> "ComplexRational":
        return ComplexRational(self.re, -self.im)

    def negate(self) -> "ComplexRational":
        return ComplexRational(-self.re, -self.im)

    def is_zero(self) -> bool:
        return self.re.is_zero() and self.im.is_zero()

    def __add__(self, other: object) -> "ComplexRational":
        if not isinstance(other, ComplexRational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ComplexRational":
        if not isinstance(other, ComplexRational):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "ComplexRational":
        # Оператор * это raw_multiply (без ренормализации)
        if not isinstance(other, ComplexRational):
            return NotImplemented
        return self.raw_multiply(other)

    def __truediv__(self, other: object) -> "ComplexRational":
        if not isinstance(other, ComplexRational):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ComplexRational":
        return self.negate()

    # -------------------------------------------------------------------------
    # Модуль
    # -------------------------------------------------------------------------

    def magnitude_squared(self) -> Rational:
        """Точный квадрат модуля re² + im² как Rational."""
        return add(multiply(self.re, self.re), multiply(self.im, self.im))

    def magnitude(self) -> float:
        """
        Евклидова норма через float.

        Единственная арифметическая операция типа, которая теряет точность;
        используется только для отображения и эвристик.
        """
        return math.hypot(to_float(self.re), to_float(self.im))

    def normalized(self) -> "ComplexRational":
        return normalize_complex(self)

    def normalize_float(self) -> "ComplexRational":
        """
        Нормализация к единичному модулю через float.

        Точность ограничена float (~1e-16). Не подходит для возведения в
        большие степени; normalize_complex() сохраняет ~1e-30.
        """
        mag = self.magnitude()
        if mag == 0:
            return ZERO
        values = self.to_float()
        return ComplexRational.from_float(values.re / mag, values.im / mag)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def to_float(self) -> FloatPair:
        return FloatPair(re=to_float(self.re), im=to_float(self.im))

    def format(self, precision: int = 17) -> str:
        """
        Строка вида "<re> ± <|im|>i" с заданным числом знаков.

        Examples:
            >>> ComplexRational.from_integers(1, 2, -3, 4).format(3)
            '0.500 - 0.750i'
        """
        values = self.to_float()
        sign = "-" if values.im < 0 else "+"
        return f"{values.re:.{precision}f} {sign} {abs(values.im):.{precision}f}i"

    def __str__(self) -> str:
        return self.format()


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[ComplexRational] = ComplexRational.from_integers(0, 1, 0, 1)
ONE: Final[ComplexRational] = ComplexRational.from_integers(1, 1, 0, 1)
I: Final[ComplexRational] = ComplexRational.from_integers(0, 1, 1, 1)


def zero() -> ComplexRational:
    return ZERO


def one() -> ComplexRational:
    return ONE


def imaginary_unit() -> ComplexRational:
    return I


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_complex(
    z: ComplexRational,
    max_denominator: int = MAX_DEN,
    scale: int = NORMALIZE_PRECISION_SCALE,
) -> ComplexRational:
    """
    Численно устойчивая ренормализация z к единичному модулю.

    Квадрат модуля считается точно (magSq = re² + im²). Целочисленное
    приближение S ≈ sqrt(magSq.den / magSq.num) · scale берётся через точный
    big_int_sqrt, затем каждый компонент умножается на S / scale и
    ограничивается по знаменателю через approx_frac.

    Это единственный механизм, ограничивающий рост длины числителей и
    знаменателей при повторных умножениях.

    Args:
        z: Комплексное число
        max_denominator: Ограничение знаменателя компонентов (default: MAX_DEN)
        scale: Целочисленный масштаб точности (default: 10^60)

    Returns:
        Комплексное число с |z'| ≈ 1 и знаменателями <= max_denominator;
        ZERO для z == 0
    """
    if z.is_zero():
        return ZERO

    mag_sq = z.magnitude_squared()
    if mag_sq.is_zero():
        return ZERO

    s = big_int_sqrt((mag_sq.denominator * scale * scale) // mag_sq.numerator)

    re = approx_frac(z.re.numerator * s, z.re.denominator * scale, max_denominator)
    im = approx_frac(z.im.numerator * s, z.im.denominator * scale, max_denominator)

    return ComplexRational(re, im)

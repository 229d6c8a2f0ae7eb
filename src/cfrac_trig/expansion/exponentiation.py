"""
Exponentiation — устойчивое возведение в целую степень

Бинарное возведение в степень base^n для комплексно-рациональных чисел
модуля ~1 (подходящих дробей e^(i/q)):

    result = 1, x = base, e = |n|
    while e > 0:
        if e & 1: result = normalize_complex(result · x)
        x = normalize_complex(x · x)
        e >>= 1
    n < 0 → conjugate(result)

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Ренормализация после КАЖДОГО умножения в result и КАЖДОГО возведения x в
квадрат. Без неё длина числителя/знаменателя удваивается на каждом шаге и
вычисление становится неподъёмным уже для показателей в десятки.

Для |z| ≈ 1: z^(-n) ≈ conj(z^n), поэтому отрицательный показатель
обрабатывается сопряжением, без деления.
"""

from cfrac_trig.core.math.complex_rational import ONE, ComplexRational, normalize_complex
from cfrac_trig.core.math.numerical_safeguards import validate_int


def pow_complex_stable(base: ComplexRational, exponent: int) -> ComplexRational:
    """
    base^exponent с ренормализацией на каждом шаге.

    Args:
        base: Комплексное число с модулем ~1
        exponent: Целый показатель (может быть отрицательным)

    Returns:
        Приближение base^exponent с модулем ~1 и знаменателями <= MAX_DEN
        (ONE при exponent == 0)

    Raises:
        TypeError: Если exponent не int (в том числе bool)
    """
    validate_int(exponent, "exponent")

    result = ONE
    x = base
    e = abs(exponent)

    while e > 0:
        if e & 1:
            result = normalize_complex(result.raw_multiply(x))
        x = normalize_complex(x.raw_multiply(x))
        e >>= 1

    return result.conjugate() if exponent < 0 else result


def exponent_iterations(exponent: int) -> int:
    """
    Оценка числа шагов возведения: ceil(log2 |n|), 0 для |n| <= 1.

    Examples:
        >>> exponent_iterations(1)
        0
        >>> exponent_iterations(5)
        3
        >>> exponent_iterations(-8)
        3
    """
    validate_int(exponent, "exponent")
    n = abs(exponent)
    if n <= 1:
        return 0
    return (n - 1).bit_length()

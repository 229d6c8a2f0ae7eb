"""
Numerical Safeguards — граничные проверки для точной арифметики

Модуль собирает всё, что стоит на границе между точной рациональной
арифметикой и машинным float:
- Проверка валидности float (NaN/Inf) на входе в рациональную арифметику
- Сравнение float с учётом машинной точности (только для отображения/тестов)
- Bit-budget для безопасной конверсии больших целых в float
- Строгая валидация целочисленных параметров (int, но не bool)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в Rational (ошибка на входе)
2. bool не принимается там, где ожидается int
3. Конверсия больших рациональных в float не переполняется до inf
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float-представлений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float-представлений
# Значения тригонометрических функций ограничены [-1, 1], поэтому
# абсолютная толерантность доминирует около нуля
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# BIT BUDGET ДЛЯ КОНВЕРСИИ В FLOAT
# =============================================================================

# Если числитель или знаменатель длиннее этого порога (в битах),
# прямое деление рискует переполнением (float max ~ 2^1024)
FLOAT_OVERFLOW_BITS: Final[int] = 1000

# Длина (в битах), до которой сдвигаются оба компонента перед делением
FLOAT_SAFE_BITS: Final[int] = 500


# =============================================================================
# FLOAT ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# BIT-LENGTH УТИЛИТЫ
# =============================================================================


def float_safe_shift(numerator: int, denominator: int) -> int:
    """
    Величина сдвига вправо, при которой numerator/denominator безопасно
    конвертируются в float.

    Если max(bitlen(|numerator|), bitlen(denominator)) > FLOAT_OVERFLOW_BITS,
    оба компонента сдвигаются на (max_bits - FLOAT_SAFE_BITS). Иначе 0.

    Args:
        numerator: Числитель (любого знака)
        denominator: Знаменатель (положительный)

    Returns:
        Неотрицательный сдвиг в битах

    Examples:
        >>> float_safe_shift(3, 4)
        0
        >>> float_safe_shift(1 << 1200, 1)
        701
    """
    max_bits = max(abs(numerator).bit_length(), abs(denominator).bit_length())
    if max_bits > FLOAT_OVERFLOW_BITS:
        return max_bits - FLOAT_SAFE_BITS
    return 0


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛЫХ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """
    Проверка, что значение — int, но не bool.

    bool является подклассом int в Python; для числителей, знаменателей и
    показателей степени он почти всегда означает ошибку вызывающего кода.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение — целое число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")


def validate_positive_int(value: object, name: str) -> None:
    """
    Валидация, что значение — целое число >= 1.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 1
    """
    validate_int(value, name)
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")


def validate_non_negative_int(value: object, name: str) -> None:
    """
    Валидация, что значение — целое число >= 0.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    validate_int(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

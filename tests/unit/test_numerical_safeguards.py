"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Валидацию float (NaN/Inf)
2. Epsilon-сравнения float
3. Bit-budget сдвиг для конверсии больших целых
4. Строгую валидацию целых (bool отклоняется)
"""

import math

import pytest

from cfrac_trig.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    FLOAT_OVERFLOW_BITS,
    FLOAT_SAFE_BITS,
    float_safe_shift,
    is_close,
    is_strict_int,
    is_valid_float,
    validate_int,
    validate_non_negative_int,
    validate_positive_int,
)

# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_relative(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.1)

    def test_absolute_near_zero(self) -> None:
        """Около нуля доминирует абсолютная толерантность"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-11)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)


# =============================================================================
# ТЕСТЫ BIT BUDGET
# =============================================================================


class TestFloatSafeShift:
    """Тесты для float_safe_shift"""

    def test_small_values_no_shift(self) -> None:
        assert float_safe_shift(3, 4) == 0
        assert float_safe_shift(-(1 << 999), 1) == 0

    def test_at_threshold_no_shift(self) -> None:
        assert float_safe_shift((1 << FLOAT_OVERFLOW_BITS) - 1, 1) == 0

    def test_large_numerator(self) -> None:
        assert float_safe_shift(1 << 1200, 1) == 1201 - FLOAT_SAFE_BITS

    def test_large_denominator(self) -> None:
        assert float_safe_shift(1, 1 << 2000) == 2001 - FLOAT_SAFE_BITS

    def test_negative_numerator_uses_magnitude(self) -> None:
        assert float_safe_shift(-(1 << 1200), 1) == float_safe_shift(1 << 1200, 1)

    def test_shifted_values_fit_float(self) -> None:
        n, d = 7**600, 3**1000
        shift = float_safe_shift(n, d)
        assert shift > 0
        assert math.isfinite((n >> shift) / (d >> shift))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ ЦЕЛЫХ
# =============================================================================


class TestStrictInt:
    """Тесты для is_strict_int / validate_*"""

    def test_is_strict_int(self) -> None:
        assert is_strict_int(0)
        assert is_strict_int(-10**40)
        assert not is_strict_int(True)
        assert not is_strict_int(1.0)
        assert not is_strict_int("1")

    def test_validate_int(self) -> None:
        validate_int(-5, "x")

        with pytest.raises(TypeError, match="x must be an int"):
            validate_int(False, "x")

        with pytest.raises(TypeError):
            validate_int(2.0, "x")

    def test_validate_positive_int(self) -> None:
        validate_positive_int(1, "terms")

        with pytest.raises(ValueError, match="terms must be >= 1"):
            validate_positive_int(0, "terms")

        with pytest.raises(TypeError):
            validate_positive_int(1.5, "terms")

    def test_validate_non_negative_int(self) -> None:
        validate_non_negative_int(0, "count")

        with pytest.raises(ValueError, match="count must be non-negative"):
            validate_non_negative_int(-1, "count")

        with pytest.raises(TypeError):
            validate_non_negative_int(None, "count")

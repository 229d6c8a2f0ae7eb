"""
Тесты для устойчивого возведения в степень

Проверяет:
1. Точность против cmath
2. Ограниченность знаменателей и модуль ~1 для больших показателей
3. Отрицательный показатель = сопряжение
4. Валидацию показателя
"""

import cmath

import pytest

from cfrac_trig.core.math.complex_rational import ONE, ComplexRational, normalize_complex
from cfrac_trig.core.math.rational import MAX_DEN
from cfrac_trig.expansion.coefficients import generate_coefficients
from cfrac_trig.expansion.convergents import compute_all_convergents
from cfrac_trig.expansion.exponentiation import exponent_iterations, pow_complex_stable


def _base(denominator: int, terms: int = 12) -> ComplexRational:
    return compute_all_convergents(generate_coefficients(denominator, terms)).convergents[-1]


def _complex(z: ComplexRational) -> complex:
    values = z.to_float()
    return complex(values.re, values.im)


class TestPowComplexStable:
    """Тесты pow_complex_stable"""

    def test_zero_exponent(self) -> None:
        assert pow_complex_stable(_base(3), 0) == ONE

    def test_first_power_is_normalized_base(self) -> None:
        base = _base(3)
        assert pow_complex_stable(base, 1) == normalize_complex(base)

    def test_exact_unit_small_power(self) -> None:
        """(3/5 + 4/5 i)³ = -117/125 + 44/125 i"""
        base = ComplexRational.from_integers(3, 5, 4, 5)
        assert pow_complex_stable(base, 3) == ComplexRational.from_integers(-117, 125, 44, 125)

    @pytest.mark.parametrize("exponent", [2, 7, 64, 1001])
    def test_matches_cmath(self, exponent: int) -> None:
        base = _base(2)
        result = _complex(pow_complex_stable(base, exponent))
        assert abs(result - cmath.exp(1j * exponent / 2)) < 1e-12

    @pytest.mark.parametrize("exponent", [3, 12345, 10**6])
    def test_bounded_and_unit_magnitude(self, exponent: int) -> None:
        result = pow_complex_stable(_base(1000), exponent)
        assert result.re.denominator <= MAX_DEN
        assert result.im.denominator <= MAX_DEN
        assert result.magnitude() == pytest.approx(1.0, abs=1e-12)

    def test_large_exponent_accuracy(self) -> None:
        result = _complex(pow_complex_stable(_base(1000), 10**6))
        assert abs(result - cmath.exp(1000j)) < 1e-9

    def test_negative_exponent_is_conjugate(self) -> None:
        base = _base(7)
        for n in (1, 2, 5, 77):
            assert pow_complex_stable(base, -n) == pow_complex_stable(base, n).conjugate()

    def test_negative_exponent_value(self) -> None:
        result = _complex(pow_complex_stable(_base(2), -3))
        assert abs(result - cmath.exp(-1.5j)) < 1e-12

    def test_base_not_mutated(self) -> None:
        base = _base(4)
        snapshot = ComplexRational(base.re, base.im)
        pow_complex_stable(base, 99)
        assert base == snapshot

    @pytest.mark.parametrize("exponent", [2.0, True, "3", None])
    def test_non_int_exponent(self, exponent: object) -> None:
        with pytest.raises(TypeError):
            pow_complex_stable(_base(2), exponent)


class TestExponentIterations:
    """Тесты exponent_iterations"""

    @pytest.mark.parametrize(
        "exponent,expected",
        [(0, 0), (1, 0), (-1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (8, 3), (9, 4), (-8, 3), (1024, 10)],
    )
    def test_values(self, exponent: int, expected: int) -> None:
        assert exponent_iterations(exponent) == expected

    def test_non_int(self) -> None:
        with pytest.raises(TypeError):
            exponent_iterations(2.5)

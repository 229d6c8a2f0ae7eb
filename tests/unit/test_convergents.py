"""
Тесты для подходящих дробей и критерия остановки

Проверяет:
1. Рекуррентность Уоллиса–Эйлера против независимого Fraction-оракула
2. Граничные случаи (0 и 1 коэффициент, первая подходящая = a₀)
3. Сходимость к e^(i/q)
4. math_limit / exceeds_math_limit и монотонность индекса предела по n
"""

import cmath
from fractions import Fraction

import pytest

from cfrac_trig.core.math.complex_rational import ONE, ZERO, ComplexRational
from cfrac_trig.core.math.rational import DivisionByZero
from cfrac_trig.expansion.coefficients import generate_coefficients
from cfrac_trig.expansion.convergents import (
    MATH_LIMIT_BITS,
    ConvergentSequence,
    compute_all_convergents,
    continuants,
    exceeds_math_limit,
    math_limit,
)

FPair = tuple[Fraction, Fraction]


def _pair(z: ComplexRational) -> FPair:
    return z.re.to_fraction(), z.im.to_fraction()


def _add(a: FPair, b: FPair) -> FPair:
    return a[0] + b[0], a[1] + b[1]


def _mul(a: FPair, b: FPair) -> FPair:
    return a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0]


def _div(a: FPair, b: FPair) -> FPair:
    d = b[0] * b[0] + b[1] * b[1]
    return (a[0] * b[0] + a[1] * b[1]) / d, (a[1] * b[0] - a[0] * b[1]) / d


def _reference_convergents(coefficients: list[ComplexRational]) -> list[FPair]:
    """Подходящие дроби обратной свёрткой a₀ + 1/(a₁ + 1/(…))"""
    a = [_pair(c) for c in coefficients]
    result = []
    for k in range(len(a)):
        value = a[k]
        for j in range(k - 1, -1, -1):
            value = _add(a[j], _div((Fraction(1), Fraction(0)), value))
        result.append(value)
    return result


# =============================================================================
# РЕКУРРЕНТНОСТЬ
# =============================================================================


class TestContinuants:
    """Тесты continuants / compute_all_convergents"""

    @pytest.mark.parametrize("denominator", [1, 2, 3, 10])
    def test_matches_backward_evaluation(self, denominator: int) -> None:
        coefficients = list(generate_coefficients(denominator, 8))
        sequence = compute_all_convergents(coefficients)
        expected = _reference_convergents(coefficients)
        assert [_pair(c) for c in sequence.convergents] == expected

    def test_continuant_seeds(self) -> None:
        a0, a1 = generate_coefficients(2, 2)
        pairs = list(continuants([a0, a1]))
        assert pairs[0] == (a0, ONE)
        assert pairs[1] == (a1.raw_multiply(a0).add(ONE), a1)

    def test_continuants_are_gaussian_integers(self) -> None:
        for p, q in continuants(generate_coefficients(5, 15)):
            for part in (p.re, p.im, q.re, q.im):
                assert part.denominator == 1

    def test_length_matches_coefficients(self) -> None:
        sequence = compute_all_convergents(generate_coefficients(4, 9))
        assert len(sequence) == 9
        assert isinstance(sequence, ConvergentSequence)


class TestEdgeCases:
    """Граничные случаи"""

    def test_empty(self) -> None:
        sequence = compute_all_convergents([])
        assert sequence.convergents == ()
        assert sequence.math_limit_index is None

    def test_single_coefficient(self) -> None:
        a0 = ComplexRational.from_integers(7, 1, -3, 1)
        sequence = compute_all_convergents([a0])
        assert sequence.convergents == (a0,)
        assert sequence.math_limit_index is None

    def test_first_convergent_equals_a0_for_unit_denominator(self) -> None:
        coefficients = generate_coefficients(1, 6)
        sequence = compute_all_convergents(coefficients)
        assert sequence.convergents[0] == coefficients[0]

    def test_second_convergent_general(self) -> None:
        """1 + 1/(-2i) = 1 + i/2"""
        sequence = compute_all_convergents(generate_coefficients(2, 2))
        assert sequence.convergents[1] == ComplexRational.from_integers(1, 1, 1, 2)

    def test_zero_continuant_raises(self) -> None:
        with pytest.raises(DivisionByZero):
            compute_all_convergents([ONE, ZERO])


# =============================================================================
# СХОДИМОСТЬ
# =============================================================================


class TestConvergence:
    """Подходящие дроби сходятся к e^(i/q)"""

    @pytest.mark.parametrize("denominator", [2, 3, 7, 1000])
    def test_last_convergent_close(self, denominator: int) -> None:
        sequence = compute_all_convergents(generate_coefficients(denominator, 12))
        target = cmath.exp(1j / denominator)
        last = sequence.convergents[-1].to_float()
        assert abs(complex(last.re, last.im) - target) < 1e-14

    def test_unit_denominator_variant(self) -> None:
        sequence = compute_all_convergents(generate_coefficients(1, 20))
        last = sequence.convergents[-1].to_float()
        assert abs(complex(last.re, last.im) - cmath.exp(1j)) < 1e-12

    def test_errors_decrease(self) -> None:
        sequence = compute_all_convergents(generate_coefficients(2, 10))
        target = cmath.exp(0.5j)
        errors = [abs(complex(*c.to_float()) - target) for c in sequence.convergents[:6]]
        assert all(later < earlier for earlier, later in zip(errors, errors[1:]))


# =============================================================================
# MATH LIMIT
# =============================================================================


class TestMathLimit:
    """Тесты критерия остановки"""

    def test_math_limit_values(self) -> None:
        assert math_limit(1) == 2**MATH_LIMIT_BITS
        assert math_limit(3) == 9 * 2**106
        assert math_limit(-3) == math_limit(3)
        assert math_limit(0) == 2**106

    def test_exceeds_math_limit_boundary(self) -> None:
        a_next = ComplexRational.from_integers(1)
        # |q|⁴ = 2^108 > 2^106
        assert exceeds_math_limit(ComplexRational.from_integers(2**27), a_next, 1)
        # |q|⁴ = 2^104 < 2^106
        assert not exceeds_math_limit(ComplexRational.from_integers(2**26), a_next, 1)
        # |q|⁴·|a|² = 2^104·4 = 2^106, не строго больше
        assert not exceeds_math_limit(
            ComplexRational.from_integers(2**26), ComplexRational.from_integers(0, 1, 2, 1), 1
        )

    def test_limit_scales_with_numerator(self) -> None:
        q = ComplexRational.from_integers(2**27)
        a_next = ComplexRational.from_integers(1)
        assert exceeds_math_limit(q, a_next, 1)
        assert not exceeds_math_limit(q, a_next, 4)

    def test_limit_reached_for_long_expansion(self) -> None:
        sequence = compute_all_convergents(generate_coefficients(2, 30))
        assert sequence.math_limit_index is not None
        assert sequence.math_limit_index < 29

    def test_limit_not_reached_for_short_expansion(self) -> None:
        sequence = compute_all_convergents(generate_coefficients(2, 3))
        assert sequence.math_limit_index is None

    def test_redundant_convergents_kept(self) -> None:
        sequence = compute_all_convergents(generate_coefficients(2, 30))
        assert len(sequence.convergents) == 30

    def test_limit_index_monotone_in_numerator(self) -> None:
        coefficients = generate_coefficients(3, 30)
        indices = [compute_all_convergents(coefficients, n).math_limit_index for n in (1, 10, 10**6)]
        assert all(i is not None for i in indices)
        assert indices == sorted(indices)

    @pytest.mark.parametrize("denominator", [1, 2, 3, 7, 1000])
    @pytest.mark.parametrize("numerator", [1, 5, 10**6])
    def test_criterion_holds_after_limit(self, denominator: int, numerator: int) -> None:
        """Сработав на индексе i, критерий выполняется и для всех j > i"""
        count = 40
        coefficients = generate_coefficients(denominator, count)
        sequence = compute_all_convergents(coefficients, numerator)
        pairs = list(continuants(coefficients))
        limit = sequence.math_limit_index
        assert limit is not None
        for j in range(limit, count - 1):
            assert exceeds_math_limit(pairs[j][1], coefficients[j + 1], numerator)

    def test_limit_index_is_first_hit(self) -> None:
        coefficients = generate_coefficients(5, 25)
        sequence = compute_all_convergents(coefficients)
        pairs = list(continuants(coefficients))
        limit = sequence.math_limit_index
        assert limit is not None
        assert exceeds_math_limit(pairs[limit][1], coefficients[limit + 1], 1)
        for i in range(limit):
            assert not exceeds_math_limit(pairs[i][1], coefficients[i + 1], 1)

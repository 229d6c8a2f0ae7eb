"""
Expansion — цепные дроби e^(iθ)

Коэффициенты, подходящие дроби, устойчивое возведение в степень и
тригонометрические обёртки.
"""

from cfrac_trig.core.domain.angle import InvalidAngle
from cfrac_trig.expansion.coefficients import (
    UNIT_DENOMINATOR_TABLE,
    general_coefficient,
    generate_coefficients,
    unit_denominator_coefficient,
)
from cfrac_trig.expansion.convergents import (
    MATH_LIMIT_BITS,
    ConvergentSequence,
    compute_all_convergents,
    continuants,
    exceeds_math_limit,
    math_limit,
)
from cfrac_trig.expansion.exponentiation import exponent_iterations, pow_complex_stable
from cfrac_trig.expansion.pipeline import (
    DEFAULT_DISPLAY_PRECISION,
    DEFAULT_TERMS,
    ExpansionConfig,
    ExpansionResult,
    IterationMetrics,
    coerce_angle,
    exp_with_convergents,
)
from cfrac_trig.expansion.trig import cos, exp, sin, tan

__all__ = [
    # Coefficients
    "UNIT_DENOMINATOR_TABLE",
    "general_coefficient",
    "generate_coefficients",
    "unit_denominator_coefficient",
    # Convergents
    "MATH_LIMIT_BITS",
    "ConvergentSequence",
    "compute_all_convergents",
    "continuants",
    "exceeds_math_limit",
    "math_limit",
    # Exponentiation
    "exponent_iterations",
    "pow_complex_stable",
    # Pipeline
    "DEFAULT_DISPLAY_PRECISION",
    "DEFAULT_TERMS",
    "ExpansionConfig",
    "ExpansionResult",
    "InvalidAngle",
    "IterationMetrics",
    "coerce_angle",
    "exp_with_convergents",
    # Trig
    "cos",
    "exp",
    "sin",
    "tan",
]

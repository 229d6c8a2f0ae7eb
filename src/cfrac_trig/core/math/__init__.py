"""
Core math modules для cfrac-trig

Точная рациональная и комплексно-рациональная арифметика.
"""

# Numerical Safeguards
from cfrac_trig.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Bit budget
    FLOAT_OVERFLOW_BITS,
    FLOAT_SAFE_BITS,
    float_safe_shift,
    # Float validation
    is_close,
    is_valid_float,
    # Int validation
    is_strict_int,
    validate_int,
    validate_non_negative_int,
    validate_positive_int,
)

# Rational
from cfrac_trig.core.math.rational import (
    FROM_FLOAT_SCALE,
    MAX_DEN,
    DivisionByZero,
    NegativeInput,
    NonFiniteInput,
    Rational,
    add,
    approx_frac,
    big_int_sqrt,
    compare,
    divide,
    from_float,
    from_integer,
    gcd,
    is_zero,
    multiply,
    negate,
    normalize,
    subtract,
    to_float,
)

# Complex Rational
from cfrac_trig.core.math.complex_rational import (
    NORMALIZE_PRECISION_SCALE,
    ComplexRational,
    FloatPair,
    imaginary_unit,
    normalize_complex,
    one,
    zero,
)

__all__ = [
    # Numerical Safeguards: Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "FLOAT_OVERFLOW_BITS",
    "FLOAT_SAFE_BITS",
    # Numerical Safeguards: Functions
    "float_safe_shift",
    "is_close",
    "is_valid_float",
    "is_strict_int",
    "validate_int",
    "validate_non_negative_int",
    "validate_positive_int",
    # Rational: Constants
    "FROM_FLOAT_SCALE",
    "MAX_DEN",
    # Rational: Exceptions
    "DivisionByZero",
    "NegativeInput",
    "NonFiniteInput",
    # Rational: Types
    "Rational",
    # Rational: Functions
    "add",
    "approx_frac",
    "big_int_sqrt",
    "compare",
    "divide",
    "from_float",
    "from_integer",
    "gcd",
    "is_zero",
    "multiply",
    "negate",
    "normalize",
    "subtract",
    "to_float",
    # Complex Rational: Constants
    "NORMALIZE_PRECISION_SCALE",
    # Complex Rational: Types
    "ComplexRational",
    "FloatPair",
    # Complex Rational: Functions
    "imaginary_unit",
    "normalize_complex",
    "one",
    "zero",
]

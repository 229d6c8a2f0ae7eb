"""
cfrac-trig — exact-rational continued fractions for e^(iθ), cos, sin, tan.

Точные рациональные цепные дроби для e^(iθ): значения с плавающей точкой
появляются только на шаге отображения.
"""

from cfrac_trig.expansion import (
    ExpansionConfig,
    ExpansionResult,
    InvalidAngle,
    IterationMetrics,
    cos,
    exp,
    exp_with_convergents,
    sin,
    tan,
)

__version__ = "0.1.0"

__all__ = [
    "ExpansionConfig",
    "ExpansionResult",
    "InvalidAngle",
    "IterationMetrics",
    "cos",
    "exp",
    "exp_with_convergents",
    "sin",
    "tan",
]

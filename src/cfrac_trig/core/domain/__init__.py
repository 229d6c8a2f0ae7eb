"""
Domain models and value objects.

Contains the angle representation consumed by the expansion pipeline.
"""

from cfrac_trig.core.domain.angle import (
    ANGLE_MAX_DENOMINATOR,
    ANGLE_MAX_ITERATIONS,
    FLOAT_EPSILON,
    ExactAngle,
    InvalidAngle,
)

__all__ = [
    "ANGLE_MAX_DENOMINATOR",
    "ANGLE_MAX_ITERATIONS",
    "FLOAT_EPSILON",
    "ExactAngle",
    "InvalidAngle",
]

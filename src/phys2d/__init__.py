"""
phys2d — generic 2D vector math.

A single parameterised vector type over any numeric scalar, plus the scalar
capability layer it relies on and a non-negative modulo helper.
"""

from phys2d.domain import Vec2D
from phys2d.math import (
    INT32_MAX,
    INT32_MIN,
    TAU,
    ScalarCapabilityError,
    ScalarDomainViolation,
    ScalarKind,
    sane_mod,
    wrap_angle,
)

__all__ = [
    # Vector type
    "Vec2D",
    # Modular helpers
    "TAU",
    "sane_mod",
    "wrap_angle",
    # Scalar capabilities
    "INT32_MAX",
    "INT32_MIN",
    "ScalarKind",
    "ScalarCapabilityError",
    "ScalarDomainViolation",
]

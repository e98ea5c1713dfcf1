"""
Core math modules для phys2d

Скалярные возможности, численные преобразования и модульная арифметика.
"""

# Scalar Capabilities
from phys2d.math.scalar import (
    # Constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT32_MAX,
    INT32_MIN,
    # Exceptions
    ScalarCapabilityError,
    ScalarDomainViolation,
    # Types
    ScalarKind,
    # Functions
    divide,
    ieee_divide,
    is_close,
    partial_compare,
    scalar_kind,
    widen,
    widen_int32,
)

# Modular Arithmetic
from phys2d.math.modular import (
    TAU,
    sane_mod,
    wrap_angle,
)

__all__ = [
    # Scalar Capabilities — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "INT32_MAX",
    "INT32_MIN",
    # Scalar Capabilities — Exceptions
    "ScalarCapabilityError",
    "ScalarDomainViolation",
    # Scalar Capabilities — Types
    "ScalarKind",
    # Scalar Capabilities — Functions
    "divide",
    "ieee_divide",
    "is_close",
    "partial_compare",
    "scalar_kind",
    "widen",
    "widen_int32",
    # Modular Arithmetic
    "TAU",
    "sane_mod",
    "wrap_angle",
]

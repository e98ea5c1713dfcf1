"""
Domain value types.

Contains the generic 2D vector.
"""

from phys2d.domain.vec2d import Vec2D

__all__ = [
    "Vec2D",
]

"""
Modular Arithmetic — Non-Negative Modulo & Angle Wrapping

Модуль не зависит от Vec2D; поставляется рядом как числовой helper
для клиентского кода (например, для нормализации углов после angle()).

ФОРМУЛА:
    sane_mod(a, b) = a - floor(a / b) * b

Для b > 0 результат всегда в [0, b), в том числе для отрицательных a.
"""

import math
from typing import Final

from phys2d.math.scalar import ieee_divide

# Полный оборот в радианах
TAU: Final[float] = 2.0 * math.pi


def sane_mod(a: float, b: float) -> float:
    """
    Modulo с неотрицательным результатом для отрицательного делимого.

    Деление на ноль следует IEEE-754: результат nan, исключение не бросается.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        a - floor(a / b) * b

    Examples:
        >>> sane_mod(5.0, 4.0)
        1.0
        >>> sane_mod(-6.0, 4.0)
        2.0
        >>> sane_mod(1.0, 0.0)
        nan
    """
    quotient = ieee_divide(a, b)

    # math.floor возвращает int и не принимает inf/nan
    if math.isfinite(quotient):
        quotient = float(math.floor(quotient))

    return a - quotient * b


def wrap_angle(theta: float) -> float:
    """
    Нормализация угла в диапазон [0, 2π).

    Args:
        theta: Угол в радианах (любой)

    Returns:
        Эквивалентный угол в [0, TAU)
    """
    wrapped = sane_mod(theta, TAU)

    # Для малых отрицательных theta округление даёт ровно TAU, а субнормальные
    # значения остаются отрицательными после floor(-0.0)
    if wrapped == TAU or wrapped < 0.0:
        return 0.0
    return wrapped

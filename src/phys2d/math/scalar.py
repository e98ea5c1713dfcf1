"""
Scalar Capabilities — Numeric Conversion Boundary

Модуль описывает, что вектор может делать со своим скалярным типом:
- Классификация скаляра (integral / floating / other)
- Расширяющее преобразование скаляра в float64 (widening)
- Точное преобразование int32 → float64
- Нативное деление: усечение для целых, IEEE-754 для float
- Частичное сравнение с учётом NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленное деление усекает к нулю (7 / 2 == 3, -7 / 2 == -3)
2. Float деление на ноль никогда не бросает исключение (inf / nan по IEEE-754)
3. NaN несравним ни с чем, включая себя (partial_compare → None)
4. Преобразование int32 → float64 всегда точное
"""

import math
import numbers
from enum import Enum
from typing import Any, Final

# =============================================================================
# ГРАНИЦЫ И EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Диапазон int32: любое значение из него точно представимо в float64
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScalarCapabilityError(TypeError):
    """
    Скалярный тип не поддерживает операцию, которую требует вектор.

    Возникает на границе преобразования в float64: например, complex
    не может быть расширен до вещественного float64.
    """

    pass


class ScalarDomainViolation(OverflowError):
    """
    Целочисленный компонент вне диапазона int32 при преобразовании int32 → float64.

    Преобразование определено только для значений, которые float64
    представляет точно; всё остальное отклоняется, а не округляется.
    """

    pass


# =============================================================================
# КЛАССИФИКАЦИЯ СКАЛЯРОВ
# =============================================================================


class ScalarKind(str, Enum):
    """Семейство скалярного типа"""

    INTEGRAL = "integral"
    FLOATING = "floating"
    OTHER = "other"


def scalar_kind(value: Any) -> ScalarKind:
    """
    Определение семейства скаляра.

    NumPy скаляры зарегистрированы в numbers ABC, поэтому numpy.int8 и
    numpy.int32 попадают в INTEGRAL, а numpy.float32/float64 в FLOATING.

    Args:
        value: Скалярное значение любого типа

    Returns:
        INTEGRAL для numbers.Integral,
        FLOATING для numbers.Real, не являющихся numbers.Rational,
        OTHER для всего остального (Fraction, Decimal, ...)

    Examples:
        >>> scalar_kind(3)
        <ScalarKind.INTEGRAL: 'integral'>
        >>> scalar_kind(3.0)
        <ScalarKind.FLOATING: 'floating'>
        >>> scalar_kind(Fraction(1, 3))
        <ScalarKind.OTHER: 'other'>
    """
    if isinstance(value, numbers.Integral):
        return ScalarKind.INTEGRAL
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational):
        return ScalarKind.FLOATING
    return ScalarKind.OTHER


# =============================================================================
# РАСШИРЯЮЩИЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def widen(value: Any) -> float:
    """
    Расширяющее преобразование скаляра в float64.

    Используется перед трансцендентными операциями (sqrt, atan2), где
    результат вещественный даже для целочисленных векторов.

    Целые конвертируются нативным float(): точно до 2**53,
    OverflowError за пределами диапазона float.

    Args:
        value: Вещественный скаляр (int, float, numpy scalar, Fraction)

    Returns:
        float(value)

    Raises:
        ScalarCapabilityError: Если value не является numbers.Real

    Examples:
        >>> widen(58)
        58.0
        >>> widen(1 + 2j)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ScalarCapabilityError: ...
    """
    if not isinstance(value, numbers.Real):
        raise ScalarCapabilityError(
            f"Scalar {value!r} of type {type(value).__name__} "
            f"cannot be widened to float64"
        )
    return float(value)


def widen_int32(value: Any) -> float:
    """
    Точное преобразование int32 → float64.

    Float компоненты проходят без изменений (рефлексивное float64 → float64).

    Args:
        value: Целое в диапазоне int32 или float

    Returns:
        float64 с тем же числовым значением

    Raises:
        ScalarDomainViolation: Если целое вне [INT32_MIN, INT32_MAX]
        ScalarCapabilityError: Если value не integral и не floating

    Examples:
        >>> widen_int32(-7)
        -7.0
        >>> widen_int32(2**31)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ScalarDomainViolation: ...
    """
    kind = scalar_kind(value)

    if kind is ScalarKind.INTEGRAL:
        if not INT32_MIN <= value <= INT32_MAX:
            raise ScalarDomainViolation(
                f"Integer {value} outside int32 range "
                f"[{INT32_MIN}, {INT32_MAX}]; float64 widening would not be exact"
            )
        return float(value)

    if kind is ScalarKind.FLOATING:
        return float(value)

    raise ScalarCapabilityError(
        f"Scalar {value!r} of type {type(value).__name__} "
        f"has no int32 -> float64 conversion"
    )


# =============================================================================
# НАТИВНОЕ ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: Any, denominator: Any) -> float:
    """
    Деление float64 по правилам IEEE-754.

    Python float бросает ZeroDivisionError при делении на ноль; здесь
    результат всегда представимое значение:
    - x / ±0 → ±inf (знак = sign(x) * sign(denominator))
    - 0 / 0 и nan / 0 → nan

    Args:
        numerator: Числитель (вещественный)
        denominator: Знаменатель (вещественный)

    Returns:
        Результат деления как float64

    Examples:
        >>> ieee_divide(7.0, 2.0)
        3.5
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    num = float(numerator)
    den = float(denominator)

    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)

    return num / den


def _truncating_divide(numerator: Any, denominator: Any) -> Any:
    # Python // округляет к -inf; усечение к нулю через модули и знак
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def divide(numerator: Any, denominator: Any) -> Any:
    """
    Нативное деление скаляров.

    Семантика определяется семейством операндов:
    - оба INTEGRAL → усечение к нулю, деление на ноль → ZeroDivisionError
    - хотя бы один FLOATING → IEEE-754 (inf/nan вместо исключения)
    - иначе → собственный оператор / типа

    Тип результата сохраняется: numpy.int32 / numpy.int32 → numpy.int32,
    numpy.float32 / 0 → numpy.float32(inf).

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Частное в семантике скалярного типа

    Raises:
        ZeroDivisionError: Целочисленное деление на ноль

    Examples:
        >>> divide(7, 2)
        3
        >>> divide(-7, 2)
        -3
        >>> divide(7.0, 2.0)
        3.5
        >>> divide(1.0, 0.0)
        inf
    """
    kind_num = scalar_kind(numerator)
    kind_den = scalar_kind(denominator)

    if kind_num is ScalarKind.INTEGRAL and kind_den is ScalarKind.INTEGRAL:
        return _truncating_divide(numerator, denominator)

    if ScalarKind.FLOATING in (kind_num, kind_den) and denominator == 0:
        quotient = ieee_divide(numerator, denominator)
        if kind_num is ScalarKind.FLOATING:
            return type(numerator)(quotient)
        return quotient

    return numerator / denominator


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def partial_compare(a: Any, b: Any) -> int | None:
    """
    Частичное сравнение двух скаляров.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b
        None если значения несравнимы (NaN)

    Examples:
        >>> partial_compare(1.0, 2.0)
        -1
        >>> partial_compare(2, 2)
        0
        >>> partial_compare(float("nan"), 1.0) is None
        True
    """
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение скаляров с учётом машинной точности.

    Оба значения расширяются до float64, затем math.isclose.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(widen(a), widen(b), rel_tol=rel_tol, abs_tol=abs_tol)

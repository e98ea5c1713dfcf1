"""
Vec2D — Обобщённый двумерный вектор

Вектор над произвольным скалярным типом: int, float, numpy.int8/int32/float64,
Fraction или любой тип с нужной арифметикой. Каждая операция требует от
скаляра только те возможности, которые использует сама:
- сложение/вычитание → + / - скаляра
- умножение на скаляр и dot product → * (и + для dot product)
- деление на скаляр → нативное деление (усечение для целых, IEEE для float)
- magnitude / angle / to_unit / project_onto → расширение скаляра до float64

Скаляр без нужной возможности даёт обычный TypeError Python при вызове
операции; переход в float64 проходит через явную границу widen/widen_int32.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конструктор — чистое присваивание (без параметризации нет валидации)
2. Равенство и порядок покомпонентные, NaN несравним (частичный порядок)
3. In-place операторы вычисляют те же значения, что и value-версии, но
   валидируют их классом изменяемого вектора (Vec2D[int] не хранит float)
4. Квадрат нормы считается в точности скаляра, затем расширяется до float64
"""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from phys2d.math.scalar import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    divide,
    ieee_divide,
    is_close,
    partial_compare,
    widen,
    widen_int32,
)

ScalarT = TypeVar("ScalarT")


class Vec2D(BaseModel, Generic[ScalarT]):
    """
    Точка или смещение на плоскости.

    Без параметризации (Vec2D(3, 7)) компоненты хранятся как есть.
    Параметризованная форма (Vec2D[float](3, 7)) валидирует и приводит
    компоненты через pydantic (lax mode), результаты арифметики сохраняют
    класс левого операнда.

    Модель изменяема только через +=, -=, *=, /=; остальные операции
    возвращают новый экземпляр.
    """

    x: ScalarT = Field(..., description="Компонента по оси X")
    y: ScalarT = Field(..., description="Компонента по оси Y")

    model_config = {"extra": "forbid"}

    def __init__(self, *args: Any, **data: Any) -> None:
        # Позиционная форма Vec2D(x, y); model_validate передаёт поля именами
        if len(args) > 2:
            raise TypeError(f"Vec2D takes at most 2 positional components, got {len(args)}")
        data.update(zip(("x", "y"), args))
        super().__init__(**data)

    # =========================================================================
    # ВСПОМОГАТЕЛЬНЫЕ
    # =========================================================================

    def _result_type(self, rhs: Any = None) -> type["Vec2D[Any]"]:
        # Класс сохраняется только если оба вектора одной параметризации
        if rhs is None or type(rhs) is type(self):
            return type(self)
        return Vec2D

    def _assign(self, x: Any, y: Any) -> "Vec2D[ScalarT]":
        # In-place оператор меняет self, поэтому проверка по его собственному классу
        checked = type(self)(x, y)
        self.x = checked.x
        self.y = checked.y
        return self

    # =========================================================================
    # РАВЕНСТВО И ЧАСТИЧНЫЙ ПОРЯДОК
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    def partial_cmp(self, other: "Vec2D[Any]") -> int | None:
        """
        Лексикографическое частичное сравнение.

        X решает, пока компоненты X не равны; при равных X решает Y.
        Несравнимый шаг (NaN) делает несравнимым весь вектор.

        Returns:
            -1, 0, +1 или None если векторы несравнимы

        Examples:
            >>> Vec2D(1, 9).partial_cmp(Vec2D(2, 0))
            -1
            >>> Vec2D(float("nan"), 0.0).partial_cmp(Vec2D(1.0, 0.0)) is None
            True
        """
        ordering = partial_compare(self.x, other.x)
        if ordering != 0:
            return ordering
        return partial_compare(self.y, other.y)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.partial_cmp(other) in (0, 1)

    def is_close(
        self,
        other: "Vec2D[Any]",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с учётом машинной точности.

        Args:
            other: Второй вектор
            rel_tol: Относительная толерантность (default: 1e-9)
            abs_tol: Абсолютная толерантность (default: 1e-12)

        Returns:
            True если обе компоненты близки
        """
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(
            self.y, other.y, rel_tol, abs_tol
        )

    # =========================================================================
    # ВЕКТОР ⊕ ВЕКТОР
    # =========================================================================

    def __add__(self, rhs: object) -> "Vec2D[Any]":
        if not isinstance(rhs, Vec2D):
            return NotImplemented
        return self._result_type(rhs)(self.x + rhs.x, self.y + rhs.y)

    def __iadd__(self, rhs: object) -> "Vec2D[Any]":
        if not isinstance(rhs, Vec2D):
            return NotImplemented
        x, y = self.x, self.y
        x += rhs.x
        y += rhs.y
        return self._assign(x, y)

    def __sub__(self, rhs: object) -> "Vec2D[Any]":
        if not isinstance(rhs, Vec2D):
            return NotImplemented
        return self._result_type(rhs)(self.x - rhs.x, self.y - rhs.y)

    def __isub__(self, rhs: object) -> "Vec2D[Any]":
        if not isinstance(rhs, Vec2D):
            return NotImplemented
        x, y = self.x, self.y
        x -= rhs.x
        y -= rhs.y
        return self._assign(x, y)

    def __neg__(self) -> "Vec2D[ScalarT]":
        """Отрицание; недоступно для скаляров без унарного минуса."""
        return type(self)(-self.x, -self.y)

    # =========================================================================
    # ВЕКТОР ⊗ СКАЛЯР
    # =========================================================================

    def __mul__(self, scalar: Any) -> "Vec2D[Any]":
        if isinstance(scalar, Vec2D):
            return NotImplemented
        return self._result_type()(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: Any) -> "Vec2D[Any]":
        if isinstance(scalar, Vec2D):
            return NotImplemented
        return self._result_type()(scalar * self.x, scalar * self.y)

    def __imul__(self, scalar: Any) -> "Vec2D[Any]":
        if isinstance(scalar, Vec2D):
            return NotImplemented
        x, y = self.x, self.y
        x *= scalar
        y *= scalar
        return self._assign(x, y)

    def __truediv__(self, scalar: Any) -> "Vec2D[Any]":
        """
        Деление на скаляр в нативной семантике скалярного типа.

        Целые усекаются к нулю (Vec2D(7, 7) / 2 == Vec2D(3, 3)),
        float делится непрерывно, деление float на ноль даёт inf/nan.

        Raises:
            ZeroDivisionError: Целочисленный вектор делится на целый ноль
        """
        if isinstance(scalar, Vec2D):
            return NotImplemented
        return self._result_type()(divide(self.x, scalar), divide(self.y, scalar))

    def __itruediv__(self, scalar: Any) -> "Vec2D[Any]":
        if isinstance(scalar, Vec2D):
            return NotImplemented
        return self._assign(divide(self.x, scalar), divide(self.y, scalar))

    def __abs__(self) -> "Vec2D[ScalarT]":
        """Покомпонентный модуль: семантика не определена, операция отложена."""
        raise NotImplementedError("Vec2D absolute value is not implemented")

    # =========================================================================
    # ГЕОМЕТРИЯ
    # =========================================================================

    @staticmethod
    def dot_product(a: "Vec2D[Any]", b: "Vec2D[Any]") -> Any:
        """
        Скалярное произведение: a.x * b.x + a.y * b.y.

        Результат в скалярном типе векторов, без продвижения до float.

        Examples:
            >>> Vec2D.dot_product(Vec2D(3, 3), Vec2D(3, 3))
            18
        """
        return a.x * b.x + a.y * b.y

    def magnitude(self) -> float:
        """
        Евклидова длина вектора, всегда float64.

        Квадрат нормы x*x + y*y считается в точности скаляра и только потом
        расширяется до float64: для узких целых (numpy.int8) он может
        переполниться до преобразования.

        Returns:
            sqrt(float64(x*x + y*y))

        Examples:
            >>> Vec2D(3, 7).magnitude()
            7.615773105863909
        """
        return math.sqrt(widen(self.x * self.x + self.y * self.y))

    def angle(self) -> float:
        """
        Угол вектора в радианах, диапазон (-π, π].

        Returns:
            atan2(float64(y), float64(x))
        """
        return math.atan2(widen(self.y), widen(self.x))

    def to_unit(self) -> "Vec2D[float]":
        """
        Единичный вектор того же направления.

        Результат всегда Vec2D[float]. Нулевой вектор не обрабатывается
        отдельно: 0 / 0 даёт (nan, nan).

        Returns:
            (float64(x) / magnitude, float64(y) / magnitude)
        """
        mag = self.magnitude()
        return Vec2D[float](ieee_divide(widen(self.x), mag), ieee_divide(widen(self.y), mag))

    def project_onto(self, b: "Vec2D[Any]") -> "Vec2D[float]":
        """
        Векторная проекция self на направление b.

        ФОРМУЛА:
            unit_b = b.to_unit()
            proj = unit_b * dot(float64(self), unit_b)

        Args:
            b: Вектор, задающий направление

        Returns:
            Vec2D[float]; для нулевого b компоненты nan

        Raises:
            ScalarDomainViolation: Целочисленная компонента self вне int32

        Examples:
            >>> Vec2D(5, 5).project_onto(Vec2D(0, 1))
            Vec2D[float](x=0.0, y=5.0)
        """
        unit_b = b.to_unit()
        return unit_b * Vec2D.dot_product(self.to_float64(), unit_b)

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def to_float64(self) -> "Vec2D[float]":
        """
        Явное расширение int32 → float64, покомпонентно.

        Для каждого int32 преобразование точное; float компоненты
        проходят без изменений.

        Raises:
            ScalarDomainViolation: Целочисленная компонента вне int32
            ScalarCapabilityError: Компонента не integral и не floating
        """
        return Vec2D[float](widen_int32(self.x), widen_int32(self.y))

"""
Тесты для модуля Modular Arithmetic

Проверяет:
1. Неотрицательный результат sane_mod для отрицательного делимого
2. IEEE поведение при делении на ноль
3. Нормализацию углов в [0, 2π)
"""

import math

import pytest

from phys2d import Vec2D
from phys2d.math.modular import TAU, sane_mod, wrap_angle


class TestSaneMod:
    """Тесты для sane_mod"""

    def test_positive_dividend(self) -> None:
        """Положительное делимое — обычный остаток"""
        assert sane_mod(5.0, 4.0) == 1.0
        assert sane_mod(7.5, 2.0) == 1.5
        assert sane_mod(8.0, 4.0) == 0.0

    def test_negative_dividend_wraps_to_positive(self) -> None:
        """Отрицательное делимое оборачивается в [0, b)"""
        assert sane_mod(-6.0, 4.0) == 2.0
        assert sane_mod(-0.5, 1.0) == 0.5
        assert sane_mod(-4.0, 4.0) == 0.0

    def test_result_in_range(self) -> None:
        """Для b > 0 результат в [0, b)"""
        for a in (-17.25, -3.0, -0.1, 0.0, 0.1, 3.0, 17.25):
            result = sane_mod(a, 3.0)
            assert 0.0 <= result < 3.0

    def test_negative_divisor(self) -> None:
        """Для b < 0 результат в (b, 0]"""
        assert sane_mod(5.0, -4.0) == -3.0
        assert sane_mod(-6.0, -4.0) == -2.0

    def test_integer_arguments(self) -> None:
        """Целые аргументы дают float"""
        result = sane_mod(5, 4)
        assert result == 1.0
        assert isinstance(result, float)

    def test_zero_divisor_is_nan(self) -> None:
        """Деление на ноль → nan без исключения"""
        assert math.isnan(sane_mod(1.0, 0.0))
        assert math.isnan(sane_mod(0.0, 0.0))


class TestWrapAngle:
    """Тесты для wrap_angle"""

    def test_angle_in_range_unchanged(self) -> None:
        """Угол в [0, 2π) не меняется"""
        assert wrap_angle(0.0) == 0.0
        assert wrap_angle(1.0) == pytest.approx(1.0)

    def test_negative_angle_wrapped(self) -> None:
        """Отрицательный угол переводится в [0, 2π)"""
        assert wrap_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)

    def test_large_angle_wrapped(self) -> None:
        """Угол больше 2π сворачивается"""
        assert wrap_angle(3 * math.pi) == pytest.approx(math.pi)
        assert wrap_angle(TAU + 0.25) == pytest.approx(0.25)

    def test_tiny_negative_angle_stays_below_tau(self) -> None:
        """Малый отрицательный угол не округляется до TAU"""
        for theta in (-1e-20, -1e-300, -5e-324):
            result = wrap_angle(theta)
            assert 0.0 <= result < TAU

    def test_vector_angle_wrapped(self) -> None:
        """Угол вектора из (-π, π] переводится в [0, 2π)"""
        angle = Vec2D(0, -1).angle()
        assert angle == pytest.approx(-math.pi / 2)
        assert wrap_angle(angle) == pytest.approx(3 * math.pi / 2)

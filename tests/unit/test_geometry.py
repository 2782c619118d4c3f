"""
Тесты для модуля Geometry (скалярные геометрические примитивы)

Проверяет:
1. isqrt (точный floor корня)
2. sqrt в containing float
3. sin / cos / atan2 в ширине containing float
4. Ошибки на отрицательных и нецелых аргументах
"""


import math

import numpy
import pytest

from src.premath.scalar.geometry import atan2, cos, into_float, isqrt, sin, sqrt

# =============================================================================
# ТЕСТЫ ПРОДВИЖЕНИЯ
# =============================================================================


class TestIntoFloat:
    """Тесты для into_float"""

    def test_small_integer(self) -> None:
        """u8 → f32 без потерь"""
        assert into_float(3, "u8") == 3.0
        assert isinstance(into_float(3, "u8"), float)

    def test_wide_integer_in_f64(self) -> None:
        """u32 → f64 точно"""
        assert into_float(16777217, "u32") == 16777217.0

    def test_f32_rounds(self) -> None:
        """f32 остаётся f32"""
        assert into_float(0.1, "f32") == float(numpy.float32(0.1))


# =============================================================================
# ТЕСТЫ КВАДРАТНЫХ КОРНЕЙ
# =============================================================================


class TestIsqrt:
    """Тесты для isqrt"""

    def test_floor_of_root(self) -> None:
        """Floor квадратного корня"""
        assert isqrt(0) == 0
        assert isqrt(1) == 1
        assert isqrt(24) == 4
        assert isqrt(25) == 5

    def test_large_value_exact(self) -> None:
        """Точно для 128-битных значений"""
        assert isqrt(2**128 - 1) == 2**64 - 1

    def test_negative_raises(self) -> None:
        """Отрицательное → ValueError"""
        with pytest.raises(ValueError, match="negative"):
            isqrt(-1)

    def test_float_raises(self) -> None:
        """Float → TypeError"""
        with pytest.raises(TypeError, match="integers only"):
            isqrt(2.0)  # type: ignore[arg-type]


class TestSqrt:
    """Тесты для sqrt"""

    def test_default_f64(self) -> None:
        """int без домена → f64"""
        assert sqrt(25) == 5.0
        assert sqrt(2) == math.sqrt(2)

    def test_small_integer_in_f32(self) -> None:
        """u8 → вычисление в f32"""
        assert sqrt(2, "u8") == float(numpy.sqrt(numpy.float32(2)))
        assert sqrt(2, "u8") != math.sqrt(2)

    def test_zero(self) -> None:
        """sqrt(0) == 0.0"""
        assert sqrt(0) == 0.0

    def test_negative_raises(self) -> None:
        """Отрицательное → ValueError"""
        with pytest.raises(ValueError, match="negative"):
            sqrt(-1.0)


# =============================================================================
# ТЕСТЫ ТРИГОНОМЕТРИИ
# =============================================================================


class TestTrigonometry:
    """Тесты для sin / cos / atan2"""

    def test_sin_cos_at_zero(self) -> None:
        """sin(0) == 0, cos(0) == 1"""
        assert sin(0) == 0.0
        assert cos(0) == 1.0

    def test_sin_f32(self) -> None:
        """f32 результат близок к f64"""
        assert sin(math.pi / 2, "f32") == pytest.approx(1.0, rel=1e-6)
        assert isinstance(sin(1, "u8"), float)

    def test_atan2_quadrants(self) -> None:
        """atan2 учитывает квадрант"""
        assert atan2(1, 1) == pytest.approx(math.pi / 4)
        assert atan2(0, -1) == pytest.approx(math.pi)
        assert atan2(-1, 0) == pytest.approx(-math.pi / 2)

    def test_atan2_f32(self) -> None:
        """Операнды продвигаются в один containing float"""
        assert atan2(1, 1, "u8") == pytest.approx(math.pi / 4, rel=1e-6)
        assert atan2(1, 1, "u8") == float(
            numpy.arctan2(numpy.float32(1), numpy.float32(1))
        )

"""
Тесты для Vector3

Проверяет:
1. Векторное и скалярное произведения
2. Перестановки и разбиения на (скаляр, Vector2)
3. Редукции: group_cnt, mid, count
4. Индексы плоского 3D хранилища
5. Сферические координаты по осям X/Y/Z
6. Кодек цвета 3-3-2
"""


import math

import pytest

from src.premath.vector import Vector2, Vector3

# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestVector3Construction:
    """Тесты для конструирования и алиасов"""

    def test_from_parts(self) -> None:
        """Из 2D вектора и скаляра"""
        assert Vector3.from_xy_z(Vector2(1, 2), 3) == (1, 2, 3)
        assert Vector3.from_x_yz(1, (2, 3)) == (1, 2, 3)

    def test_color_aliases(self) -> None:
        """r/g/b — алиасы x/y/z"""
        c = Vector3(10, 20, 30)
        assert (c.r, c.g, c.b) == (10, 20, 30)
        c.g = 99
        assert c.y == 99

    def test_index_out_of_bounds(self) -> None:
        """Индекс 3 → IndexError"""
        with pytest.raises(IndexError, match="Index `3` is out of bounds for Vector3."):
            Vector3(1, 2, 3)[3]

    def test_str(self) -> None:
        """Форматирование [x, y, z]"""
        assert str(Vector3(1, 2, 3)) == "[1, 2, 3]"

    def test_not_equal_to_vector2(self) -> None:
        """Векторы разной размерности не равны"""
        assert Vector3(1, 2, 0) != Vector2(1, 2)


# =============================================================================
# ТЕСТЫ ГЕОМЕТРИИ
# =============================================================================


class TestVector3Geometry:
    """Тесты для cross / dot / длины"""

    def test_cross_basis(self) -> None:
        """X × Y = Z (правая тройка)"""
        assert Vector3(1, 0, 0).cross((0, 1, 0)) == (0, 0, 1)
        assert Vector3(0, 1, 0).cross((0, 0, 1)) == (1, 0, 0)
        assert Vector3(0, 0, 1).cross((1, 0, 0)) == (0, 1, 0)

    def test_cross_anticommutative(self) -> None:
        """a × b == -(b × a)"""
        a = Vector3(1, 2, 3)
        b = Vector3(-4, 5, 6)
        assert a.cross(b) == -b.cross(a)
        assert a.cross(b) == (-3, -18, 13)

    def test_cross_orthogonal(self) -> None:
        """a × b ортогонален a и b"""
        a = Vector3(1, 2, 3)
        b = Vector3(-4, 5, 6)
        c = a.cross(b)
        assert c.dot(a) == 0
        assert c.dot(b) == 0

    def test_cross_self_is_zero(self) -> None:
        """a × a == 0"""
        assert Vector3(2, 3, 4).cross(Vector3(2, 3, 4)) == (0, 0, 0)

    def test_dot_and_length(self) -> None:
        """|(2, 3, 6)| == 7"""
        v = Vector3(2, 3, 6)
        assert v.dot((1, 0, 0)) == 2
        assert v.sq_len() == 49
        assert v.length() == 7.0
        assert v.ilen() == 7

    def test_normalized_stays_3d(self) -> None:
        """normalized возвращает Vector3"""
        n = Vector3(0, 3, 4).normalized()
        assert isinstance(n, Vector3)
        assert n.to_tuple() == pytest.approx((0.0, 0.6, 0.8))

    def test_plane_and_angle(self) -> None:
        """Угол к оси"""
        assert Vector3(1, 0, 0).angle_x() == 0.0
        assert Vector3(0, 1, 0).angle_x() == pytest.approx(math.pi / 2)
        assert Vector3(0, 0, 5).angle_z() == 0.0
        assert Vector3(3, 0, 4).plane_y() == (0, 5.0)


class TestVector3Polar:
    """Тесты для сферических координат"""

    def test_polar_x_round_trip(self) -> None:
        """from_polar_x(polar_x(v)) == v"""
        v = Vector3(1.0, 2.0, 3.0)
        assert Vector3.from_polar_x(*v.polar_x()).to_tuple() == pytest.approx(
            v.to_tuple()
        )

    def test_polar_y_round_trip(self) -> None:
        """from_polar_y(polar_y(v)) == v"""
        v = Vector3(-1.0, 2.0, 0.5)
        assert Vector3.from_polar_y(*v.polar_y()).to_tuple() == pytest.approx(
            v.to_tuple()
        )

    def test_polar_z_round_trip(self) -> None:
        """from_polar_z(polar_z(v)) == v"""
        v = Vector3(4.0, -3.0, 2.0)
        assert Vector3.from_polar_z(*v.polar_z()).to_tuple() == pytest.approx(
            v.to_tuple()
        )

    def test_polar_z_components(self) -> None:
        """Единичный вектор вдоль Z: полярный угол 0"""
        length, polar, _ = Vector3(0.0, 0.0, 2.0).polar_z()
        assert length == 2.0
        assert polar == 0.0


# =============================================================================
# ТЕСТЫ ПЕРЕСТАНОВОК
# =============================================================================


class TestVector3Swizzles:
    """Тесты для перестановок"""

    def test_permutations(self) -> None:
        """Все шесть перестановок"""
        v = Vector3(1, 2, 3)
        assert v.xyz() == (1, 2, 3)
        assert v.xzy() == (1, 3, 2)
        assert v.yxz() == (2, 1, 3)
        assert v.yzx() == (2, 3, 1)
        assert v.zxy() == (3, 1, 2)
        assert v.zyx() == (3, 2, 1)

    def test_pairs(self) -> None:
        """Проекции на пары осей"""
        v = Vector3(1, 2, 3)
        assert v.xy() == Vector2(1, 2)
        assert v.yx() == (2, 1)
        assert v.xz() == (1, 3)
        assert v.zx() == (3, 1)
        assert v.yz() == (2, 3)
        assert v.zy() == (3, 2)
        assert isinstance(v.xz(), Vector2)

    def test_splits(self) -> None:
        """Разбиение на скаляр и Vector2"""
        v = Vector3(1, 2, 3)
        assert v.x_yz() == (1, Vector2(2, 3))
        assert v.x_zy() == (1, Vector2(3, 2))
        assert v.y_xz() == (2, Vector2(1, 3))
        assert v.y_zx() == (2, Vector2(3, 1))
        assert v.z_xy() == (3, Vector2(1, 2))
        assert v.z_yx() == (3, Vector2(2, 1))

    def test_sort(self) -> None:
        """Сортировка компонент"""
        v = Vector3(3, 1, 2)
        assert v.sorted() == (1, 2, 3)
        v.sort()
        assert v == (1, 2, 3)


# =============================================================================
# ТЕСТЫ РЕДУКЦИЙ
# =============================================================================


class TestVector3Reductions:
    """Тесты для редукций и предикатов"""

    def test_group_cnt(self) -> None:
        """Количество различных значений"""
        assert Vector3(1, 1, 1).group_cnt() == 1
        assert Vector3(1, 1, 2).group_cnt() == 2
        assert Vector3(1, 2, 1).group_cnt() == 2
        assert Vector3(2, 1, 1).group_cnt() == 2
        assert Vector3(1, 2, 3).group_cnt() == 3

    def test_max_mid_min(self) -> None:
        """Индексы наибольшей, медианной и наименьшей компонент"""
        v = Vector3(3, 1, 2)
        assert v.max_idx() == 0
        assert v.min_idx() == 1
        assert v.mid_idx() == 2
        assert (v.max(), v.mid(), v.min()) == (3, 2, 1)

    def test_ties(self) -> None:
        """При равенстве побеждает наименьший индекс"""
        assert Vector3(5, 5, 1).max_idx() == 0
        assert Vector3(1, 1, 5).min_idx() == 0

    def test_sum_prod(self) -> None:
        """Сумма и произведение"""
        assert Vector3(2, 3, 4).sum() == 9
        assert Vector3(2, 3, 4).prod() == 24

    def test_predicates(self) -> None:
        """are_all / is_any / is_any_not / get_count"""
        v = Vector3(1, 5, 9)
        assert v.are_all(lambda a: a > 0)
        assert v.is_any(lambda a: a > 8)
        assert v.is_any_not(lambda a: a > 3)
        assert v.get_count(lambda a: a > 3) == 2
        assert v.is_none(lambda a: a > 9)

    def test_bool_vector(self) -> None:
        """all / any / none / not_all / count"""
        v = Vector3(True, False, True)
        assert v.any()
        assert v.not_all()
        assert v.count() == 2
        assert Vector3(True, True, True).all()
        assert Vector3(False, False, False).none()


# =============================================================================
# ТЕСТЫ ПЛОСКОГО ХРАНИЛИЩА
# =============================================================================


class TestVector3FlatIndex:
    """Тесты для pos_of_idx / idx_of_pos"""

    def test_inverse(self) -> None:
        """pos_of_idx и idx_of_pos взаимно обратны"""
        size = Vector3(2, 3, 4)
        for i in range(size.prod()):
            assert size.idx_of_pos(size.pos_of_idx(i)) == i

    def test_plane_major_order(self) -> None:
        """x быстрее y, y быстрее z"""
        size = Vector3(2, 3, 4)
        assert size.pos_of_idx(1) == (1, 0, 0)
        assert size.pos_of_idx(2) == (0, 1, 0)
        assert size.pos_of_idx(6) == (0, 0, 1)
        assert size.pos_of_idx(23) == (1, 2, 3)


# =============================================================================
# ТЕСТЫ ЦВЕТА 3-3-2
# =============================================================================


class TestColor332:
    """Тесты для from_332 / to_332"""

    def test_round_trip_all_bytes(self) -> None:
        """Все 256 значений переживают распаковку и упаковку"""
        for c in range(256):
            assert Vector3.from_332(c).to_332() == c

    def test_extremes(self) -> None:
        """0x00 → чёрный, 0xFF → белый"""
        assert Vector3.from_332(0x00) == (0, 0, 0)
        assert Vector3.from_332(0xFF) == (255, 255, 255)

    def test_channels(self) -> None:
        """Каналы расширяются до полного диапазона"""
        assert Vector3.from_332(0b11100000) == (255, 0, 0)
        assert Vector3.from_332(0b00011100) == (0, 255, 0)
        assert Vector3.from_332(0b00000011) == (0, 0, 255)
        assert Vector3.from_332(0b00100001) == (0b00100100, 0, 0b01010101)

    def test_float_destination(self) -> None:
        """Распаковка в f32"""
        assert Vector3.from_332(0xFF, "f32") == (1.0, 1.0, 1.0)
        assert Vector3.from_332(0x00, "f64") == (0.0, 0.0, 0.0)

    def test_pack(self) -> None:
        """Упаковка отбрасывает младшие биты"""
        assert Vector3(255, 0, 255).to_332() == 0b11100011
        assert Vector3(65535, 0, 0).to_332("u16") == 0b11100000
        assert Vector3(1.0, 1.0, 1.0).to_332("f64") == 0xFF

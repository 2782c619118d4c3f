"""
Тесты для RangeIter (перебор точек полуоткрытого бокса)

Проверяет:
1. Порядок обхода: row-major (2D), plane-major (3D)
2. Полноту: ровно prod(end - start) элементов
3. Пустые боксы
4. Принадлежность точки боксу
"""


import pytest

from src.premath.vector import Vector2, Vector2RangeIter, Vector3, Vector3RangeIter

# =============================================================================
# ТЕСТЫ 2D
# =============================================================================


class TestVector2RangeIter:
    """Тесты для Vector2RangeIter"""

    def test_row_major_order(self) -> None:
        """x быстрее y"""
        points = list(Vector2RangeIter(Vector2(0, 0), Vector2(2, 3)))
        assert points == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]
        assert all(isinstance(p, Vector2) for p in points)

    def test_to_shortcut(self) -> None:
        """Vector2.to — тот же перебор"""
        assert list(Vector2(0, 0).to((2, 3))) == list(
            Vector2RangeIter(Vector2(0, 0), (2, 3))
        )

    def test_count_is_product(self) -> None:
        """Количество точек — произведение ширин"""
        assert len(list(Vector2(1, -2).to((4, 1)))) == 9
        assert len(list(Vector2(0, 0).to((5, 1)))) == 5
        assert len(list(Vector2(0, 0).to((1, 5)))) == 5

    def test_offset_start(self) -> None:
        """Начало не в нуле"""
        points = list(Vector2(3, 7).to((5, 9)))
        assert points == [(3, 7), (4, 7), (3, 8), (4, 8)]

    def test_empty_boxes(self) -> None:
        """Ширина <= 0 по любой оси → пусто"""
        assert list(Vector2(0, 0).to((0, 0))) == []
        assert list(Vector2(0, 0).to((0, 5))) == []
        assert list(Vector2(0, 0).to((5, 0))) == []
        assert list(Vector2(2, 2).to((1, 5))) == []

    def test_single_pass(self) -> None:
        """Исчерпанный итератор остаётся исчерпанным"""
        it = Vector2(0, 0).to((1, 1))
        assert list(it) == [(0, 0)]
        with pytest.raises(StopIteration):
            next(it)

    def test_start_not_mutated(self) -> None:
        """Перебор не меняет исходный вектор"""
        start = Vector2(0, 0)
        list(start.to((3, 3)))
        assert start == (0, 0)

    def test_end_owned_by_iterator(self) -> None:
        """Изменение вектора end после создания не меняет бокс"""
        end = Vector2(2, 2)
        it = Vector2(0, 0).to(end)
        next(it)
        end.x = 100
        assert len(list(it)) == 3
        assert not it.contains((2, 0))

    def test_contains(self) -> None:
        """Принадлежность не зависит от курсора"""
        it = Vector2(0, 0).to((2, 3))
        next(it)
        assert it.contains((0, 0))
        assert it.contains((1, 2))
        assert not it.contains((2, 0))
        assert not it.contains((0, -1))

    def test_float_coordinates(self) -> None:
        """Шаг — ONE домена"""
        points = list(Vector2(0.0, 0.0).to((1.5, 1.0)))
        assert points == [(0.0, 0.0), (1.0, 0.0)]


# =============================================================================
# ТЕСТЫ 3D
# =============================================================================


class TestVector3RangeIter:
    """Тесты для Vector3RangeIter"""

    def test_plane_major_order(self) -> None:
        """x, затем y, затем z"""
        points = list(Vector3(0, 0, 0).to((2, 2, 2)))
        assert points == [
            (0, 0, 0),
            (1, 0, 0),
            (0, 1, 0),
            (1, 1, 0),
            (0, 0, 1),
            (1, 0, 1),
            (0, 1, 1),
            (1, 1, 1),
        ]
        assert all(isinstance(p, Vector3) for p in points)

    def test_count_is_product(self) -> None:
        """Количество точек — произведение ширин"""
        assert len(list(Vector3(1, 2, 3).to((3, 5, 4)))) == 6
        assert len(list(Vector3RangeIter(Vector3(0, 0, 0), (3, 4, 5)))) == 60

    def test_matches_flat_index(self) -> None:
        """Порядок совпадает с pos_of_idx"""
        size = Vector3(3, 2, 2)
        points = list(Vector3(0, 0, 0).to(size))
        assert points == [size.pos_of_idx(i) for i in range(size.prod())]

    def test_empty_boxes(self) -> None:
        """Ширина <= 0 по любой оси → пусто"""
        assert list(Vector3(0, 0, 0).to((2, 2, 0))) == []
        assert list(Vector3(0, 0, 0).to((0, 2, 2))) == []
        assert list(Vector3(0, 3, 0).to((2, 2, 2))) == []

    def test_end_owned_by_iterator(self) -> None:
        """Изменение вектора end после создания не меняет бокс"""
        end = Vector3(2, 1, 1)
        it = Vector3(0, 0, 0).to(end)
        end.z = 50
        assert len(list(it)) == 2

    def test_contains(self) -> None:
        """Принадлежность точки боксу"""
        it = Vector3(0, 0, 0).to((2, 2, 2))
        assert it.contains((1, 1, 1))
        assert not it.contains((1, 1, 2))

"""
RangeIter — Перебор целочисленных точек полуоткрытого бокса

Бокс задаётся углами start (включительно) и end (исключительно).
Порядок обхода:
- 2D: row-major (x быстрее всех, затем y)
- 3D: plane-major (x, затем y, затем z)

Курсор стартует в start; каждый шаг увеличивает самую быструю ось на ONE
домена; по достижении end ось сбрасывается в start с переносом в следующую.
Перебор заканчивается, когда перенос уходит за самую медленную ось.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно prod(end - start) элементов
2. Пустой бокс (ширина <= 0 по любой оси) не даёт ни одного элемента
3. Итератор однопроходный; для повторного обхода создаётся новый
"""

from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

from src.premath.scalar import DomainLike, resolve_domain

if TYPE_CHECKING:
    from src.premath.vector.vec2 import Vector2
    from src.premath.vector.vec3 import Vector3

T = TypeVar("T")


class Vector2RangeIter(Generic[T]):
    """Row-major перебор 2D бокса [start, end)."""

    def __init__(
        self,
        start: "Vector2[T]",
        end: Any,
        domain: DomainLike | None = None,
    ):
        """
        Args:
            start: Начальный угол (включительно)
            end: Конечный угол (исключительно), вектор или tuple
            domain: Домен координат (default: выводится из start.x)
        """
        self.start = start.copy()
        self.end = type(start).coerce(end).copy()
        self._one = resolve_domain(domain, start.x).one

        self._x = self.start.x
        self._y = self.start.y
        self._done = self.start.x >= self.end.x or self.start.y >= self.end.y

    def contains(self, point: Any) -> bool:
        """Принадлежность точки боксу (не зависит от курсора)."""
        x, y = type(self.start).coerce(point)
        return self.start.x <= x < self.end.x and self.start.y <= y < self.end.y

    def __iter__(self) -> Iterator["Vector2[T]"]:
        return self

    def __next__(self) -> "Vector2[T]":
        if self._done:
            raise StopIteration

        result = type(self.start)(self._x, self._y)

        self._x += self._one
        if self._x >= self.end.x:
            self._x = self.start.x
            self._y += self._one
            if self._y >= self.end.y:
                self._done = True

        return result


class Vector3RangeIter(Generic[T]):
    """Plane-major перебор 3D бокса [start, end)."""

    def __init__(
        self,
        start: "Vector3[T]",
        end: Any,
        domain: DomainLike | None = None,
    ):
        """
        Args:
            start: Начальный угол (включительно)
            end: Конечный угол (исключительно), вектор или tuple
            domain: Домен координат (default: выводится из start.x)
        """
        self.start = start.copy()
        self.end = type(start).coerce(end).copy()
        self._one = resolve_domain(domain, start.x).one

        self._cursor = [self.start.x, self.start.y, self.start.z]
        self._done = any(s >= e for s, e in zip(self.start, self.end))

    def contains(self, point: Any) -> bool:
        """Принадлежность точки боксу (не зависит от курсора)."""
        p = type(self.start).coerce(point)
        return all(s <= c < e for s, c, e in zip(self.start, p, self.end))

    def __iter__(self) -> Iterator["Vector3[T]"]:
        return self

    def __next__(self) -> "Vector3[T]":
        if self._done:
            raise StopIteration

        result = type(self.start).from_iterable(self._cursor)

        # перенос по осям x → y → z
        for axis in range(3):
            self._cursor[axis] += self._one
            if self._cursor[axis] < self.end[axis]:
                break
            self._cursor[axis] = self.start[axis]
        else:
            self._done = True

        return result

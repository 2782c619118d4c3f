"""
Vector2 — Двумерный вектор

Используется как вектор, точка, размер (w/h), диапазон [x, y)
или любой кортеж из двух значений, где полезна векторная арифметика.
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, TypeVar

from src.premath.scalar import (
    DomainLike,
    Number,
    atan2,
    cos,
    resolve_domain,
    sin,
)
from src.premath.vector.base import VectorAlgebra
from src.premath.vector.range_iter import Vector2RangeIter

T = TypeVar("T")


@dataclass(eq=False)
class Vector2(VectorAlgebra[T]):
    """
    Двумерный вектор (x, y).

    Алиасы: w/h для размера.
    """

    x: T
    y: T

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y")

    # -------------------------------------------------------------------------
    # Алиасы
    # -------------------------------------------------------------------------

    @property
    def w(self) -> T:
        """Ширина (алиас x)."""
        return self.x

    @w.setter
    def w(self, value: T) -> None:
        self.x = value

    @property
    def h(self) -> T:
        """Высота (алиас y)."""
        return self.y

    @h.setter
    def h(self, value: T) -> None:
        self.y = value

    # -------------------------------------------------------------------------
    # Редукции
    # -------------------------------------------------------------------------

    def diff(self) -> T:
        """x - y"""
        return self.x - self.y

    def abs_diff(self) -> T:
        """|x - y| без выхода за нижнюю границу unsigned доменов."""
        if self.x < self.y:
            return self.y - self.x
        return self.x - self.y

    def quot(self) -> Any:
        """x / y"""
        return self.x / self.y

    def quot_rem(self) -> T:
        """x % y"""
        return self.x % self.y

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def are_both(self, f: Callable[[T], bool]) -> bool:
        return self.are_all(f)

    def is_one(self, f: Callable[[T], bool]) -> bool:
        """Ровно одна компонента удовлетворяет f."""
        return bool(f(self.x)) != bool(f(self.y))

    def both(self) -> bool:
        return self.all()

    def one(self) -> bool:
        """Ровно одна компонента истинна."""
        return bool(self.x) != bool(self.y)

    # -------------------------------------------------------------------------
    # Диапазоны и боксы
    # -------------------------------------------------------------------------

    def in_range(self, value: T) -> bool:
        """value в полуоткрытом диапазоне [x, y)."""
        return self.x <= value < self.y

    def clamp(self, value: T) -> T:
        """
        Ограничение value диапазоном из компонент.

        Компоненты сначала сортируются, так что порядок x/y не важен.
        """
        lo, hi = self.sorted()
        if value < lo:
            return lo
        if value > hi:
            return hi
        return value

    def clamped(self, value: T) -> T:
        """Алиас clamp."""
        return self.clamp(value)

    def contains(self, pos: Any, domain: DomainLike | None = None) -> bool:
        """Позиция внутри бокса [0, x) × [0, y)."""
        p = Vector2.coerce(pos)
        zero = resolve_domain(domain, p.x).zero
        return zero <= p.x < self.x and zero <= p.y < self.y

    def to_range(self) -> range:
        return range(self.x, self.y)

    def to(self, end: Any, domain: DomainLike | None = None) -> Vector2RangeIter[T]:
        """Row-major перебор бокса [self, end)."""
        return Vector2RangeIter(self, end, domain)

    # -------------------------------------------------------------------------
    # Перестановки
    # -------------------------------------------------------------------------

    def swap(self) -> None:
        self.x, self.y = self.y, self.x

    def swapped(self) -> "Vector2[T]":
        return Vector2(self.y, self.x)

    def xy(self) -> "Vector2[T]":
        return Vector2(self.x, self.y)

    def yx(self) -> "Vector2[T]":
        return self.swapped()

    def sort(self) -> None:
        if self.x > self.y:
            self.swap()

    def sorted(self) -> "Vector2[T]":
        v = self.copy()
        v.sort()
        return v

    # -------------------------------------------------------------------------
    # Индексы плоского хранилища
    # -------------------------------------------------------------------------

    def pos_of_idx(self, idx: int) -> "Vector2[int]":
        """
        Позиция элемента в 2D пространстве размера self по индексу
        в плоском (row-major) хранилище. Обратная к idx_of_pos.

        Examples:
            >>> Vector2(3, 2).pos_of_idx(4)
            Vector2(x=1, y=1)
        """
        return Vector2(idx % self.x, idx // self.x)

    def idx_of_pos(self, pos: Any) -> int:
        """
        Индекс в плоском (row-major) хранилище по позиции в 2D пространстве
        размера self. Обратная к pos_of_idx.
        """
        p = Vector2.coerce(pos)
        return p.y * self.x + p.x

    # -------------------------------------------------------------------------
    # Полярные координаты
    # -------------------------------------------------------------------------

    def angle(self, domain: DomainLike | None = None) -> float:
        """Угол вектора: atan2(y, x)."""
        return atan2(self.y, self.x, domain)

    def polar(self, domain: DomainLike | None = None) -> tuple[float, float]:
        """(длина, угол)"""
        return (self.length(domain), self.angle(domain))

    @classmethod
    def from_polar(
        cls, length: Number, angle: Number, domain: DomainLike | None = None
    ) -> "Vector2[float]":
        """Вектор из полярных координат (длина, угол в радианах)."""
        return cls(cos(angle, domain), sin(angle, domain)) * length

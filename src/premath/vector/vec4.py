"""
Vector4 — Четырёхмерный вектор как прямоугольник

Интерпретация: (x, y) — позиция, (z, w) — размер (width, height).
"""

from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from src.premath.scalar import DomainLike, resolve_domain, trunc_div
from src.premath.vector.base import VectorBase
from src.premath.vector.vec2 import Vector2

T = TypeVar("T")


@dataclass(eq=False)
class Vector4(VectorBase[T]):
    """Вектор (x, y, z, w); как прямоугольник — позиция + размер."""

    x: T
    y: T
    z: T
    w: T

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    @property
    def width(self) -> T:
        """Ширина прямоугольника (z)."""
        return self.z

    @width.setter
    def width(self, value: T) -> None:
        self.z = value

    @property
    def height(self) -> T:
        """Высота прямоугольника (w)."""
        return self.w

    @height.setter
    def height(self, value: T) -> None:
        self.w = value

    def xy(self) -> Vector2[T]:
        return Vector2(self.x, self.y)

    def zw(self) -> Vector2[T]:
        return Vector2(self.z, self.w)

    def position(self) -> Vector2[T]:
        return self.xy()

    def size(self) -> Vector2[T]:
        return self.zw()

    def xy_zw(self) -> tuple[Vector2[T], Vector2[T]]:
        return (self.xy(), self.zw())

    def rect_center(self, domain: DomainLike | None = None) -> Vector2[Any]:
        """
        Центр прямоугольника: position + size / TWO.

        Для integer доменов деление округляется к нулю.

        Examples:
            >>> Vector4(10, 20, 5, 8).rect_center()
            Vector2(x=12, y=24)
        """
        d = resolve_domain(domain, self.z)
        position, size = self.xy_zw()
        if d.is_integer:
            return position + size.map(lambda a: trunc_div(a, d.two))
        return position + size / d.two

"""
Vector3 — Трёхмерный вектор

Используется как вектор, точка, размер или RGB цвет (r/g/b).

Полярные координаты: для каждой оси X/Y/Z есть пара
polar_* / from_polar_*, где выбранная ось — полярная ось,
а оставшиеся две компоненты задают азимут.
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, TypeVar

from src.premath.scalar import (
    DomainLike,
    Number,
    cos,
    sin,
)
from src.premath.vector.base import VectorAlgebra
from src.premath.vector.range_iter import Vector3RangeIter
from src.premath.vector.vec2 import Vector2

T = TypeVar("T")


# =============================================================================
# 3-3-2 ЦВЕТ
# =============================================================================

# Маски упакованного байта: bits 7-5 = red, 4-2 = green, 1-0 = blue
RED_332_MASK: int = 0b11100000
GREEN_332_MASK: int = 0b00011100
BLUE_332_MASK: int = 0b00000011


def _expand3(c: int) -> int:
    # 3 бита → 8 бит: abc → abcabcab
    return (c << 5) | (c << 2) | (c >> 1)


def _expand2(c: int) -> int:
    # 2 бита → 8 бит: ab → abababab
    c |= c << 2
    return c | (c << 4)


@dataclass(eq=False)
class Vector3(VectorAlgebra[T]):
    """
    Трёхмерный вектор (x, y, z).

    Алиасы: r/g/b для цвета.
    """

    x: T
    y: T
    z: T

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_xy_z(cls, xy: Any, z: T) -> "Vector3[T]":
        """Vector3 из 2D вектора (x, y) и z."""
        x, y = Vector2.coerce(xy)
        return cls(x, y, z)

    @classmethod
    def from_x_yz(cls, x: T, yz: Any) -> "Vector3[T]":
        """Vector3 из x и 2D вектора (y, z)."""
        y, z = Vector2.coerce(yz)
        return cls(x, y, z)

    # -------------------------------------------------------------------------
    # Алиасы цвета
    # -------------------------------------------------------------------------

    @property
    def r(self) -> T:
        return self.x

    @r.setter
    def r(self, value: T) -> None:
        self.x = value

    @property
    def g(self) -> T:
        return self.y

    @g.setter
    def g(self, value: T) -> None:
        self.y = value

    @property
    def b(self) -> T:
        return self.z

    @b.setter
    def b(self, value: T) -> None:
        self.z = value

    # -------------------------------------------------------------------------
    # Редукции
    # -------------------------------------------------------------------------

    def group_cnt(self) -> int:
        """Количество различных значений среди компонент: 1, 2 или 3."""
        if self.x == self.y:
            return 1 if self.x == self.z else 2
        if self.x == self.z or self.y == self.z:
            return 2
        return 3

    def mid_idx(self) -> int:
        """Индекс медианной компоненты."""
        return sorted(range(3), key=self.__getitem__)[1]

    def mid(self) -> T:
        return self[self.mid_idx()]

    def is_any_not(self, f: Callable[[T], bool]) -> bool:
        """Хотя бы одна компонента не удовлетворяет f."""
        return not self.are_all(f)

    def get_count(self, f: Callable[[T], bool]) -> int:
        """Количество компонент, удовлетворяющих f."""
        return sum(1 for c in self if f(c))

    def not_all(self) -> bool:
        return not self.all()

    def count(self) -> int:
        """Количество истинных компонент."""
        return sum(1 for c in self if c)

    # -------------------------------------------------------------------------
    # Перестановки
    # -------------------------------------------------------------------------

    def xyz(self) -> "Vector3[T]":
        return Vector3(self.x, self.y, self.z)

    def xzy(self) -> "Vector3[T]":
        return Vector3(self.x, self.z, self.y)

    def yxz(self) -> "Vector3[T]":
        return Vector3(self.y, self.x, self.z)

    def yzx(self) -> "Vector3[T]":
        return Vector3(self.y, self.z, self.x)

    def zxy(self) -> "Vector3[T]":
        return Vector3(self.z, self.x, self.y)

    def zyx(self) -> "Vector3[T]":
        return Vector3(self.z, self.y, self.x)

    def xy(self) -> Vector2[T]:
        return Vector2(self.x, self.y)

    def yx(self) -> Vector2[T]:
        return Vector2(self.y, self.x)

    def xz(self) -> Vector2[T]:
        return Vector2(self.x, self.z)

    def zx(self) -> Vector2[T]:
        return Vector2(self.z, self.x)

    def yz(self) -> Vector2[T]:
        return Vector2(self.y, self.z)

    def zy(self) -> Vector2[T]:
        return Vector2(self.z, self.y)

    def x_yz(self) -> tuple[T, Vector2[T]]:
        return (self.x, self.yz())

    def x_zy(self) -> tuple[T, Vector2[T]]:
        return (self.x, self.zy())

    def y_xz(self) -> tuple[T, Vector2[T]]:
        return (self.y, self.xz())

    def y_zx(self) -> tuple[T, Vector2[T]]:
        return (self.y, self.zx())

    def z_xy(self) -> tuple[T, Vector2[T]]:
        return (self.z, self.xy())

    def z_yx(self) -> tuple[T, Vector2[T]]:
        return (self.z, self.yx())

    def sort(self) -> None:
        """Сортировка компонент по возрастанию in-place."""
        self.x, self.y, self.z = sorted(self)

    def sorted(self) -> "Vector3[T]":
        return Vector3(*sorted(self))

    def to(self, end: Any, domain: DomainLike | None = None) -> Vector3RangeIter[T]:
        """Plane-major перебор бокса [self, end)."""
        return Vector3RangeIter(self, end, domain)

    # -------------------------------------------------------------------------
    # Индексы плоского хранилища
    # -------------------------------------------------------------------------

    def pos_of_idx(self, idx: int) -> "Vector3[int]":
        """
        Позиция элемента в 3D пространстве размера self по индексу
        в плоском (plane-major) хранилище. Обратная к idx_of_pos.

        Examples:
            >>> Vector3(2, 3, 4).pos_of_idx(7)
            Vector3(x=1, y=0, z=1)
        """
        plane = self.x * self.y
        in_plane = idx % plane
        return Vector3(in_plane % self.x, in_plane // self.x, idx // plane)

    def idx_of_pos(self, pos: Any) -> int:
        """
        Индекс в плоском (plane-major) хранилище по позиции в 3D пространстве
        размера self. Обратная к pos_of_idx.
        """
        p = Vector3.coerce(pos)
        return self.x * self.y * p.z + self.x * p.y + p.x

    # -------------------------------------------------------------------------
    # Геометрия
    # -------------------------------------------------------------------------

    def cross(self, other: Any) -> "Vector3[Any]":
        """
        Векторное произведение (правая тройка).

        Examples:
            >>> Vector3(1, 0, 0).cross((0, 1, 0))
            Vector3(x=0, y=0, z=1)
        """
        x, y, z = Vector3.coerce(other)
        return Vector3(
            self.y * z - self.z * y,
            self.z * x - self.x * z,
            self.x * y - self.y * x,
        )

    def plane_x(self, domain: DomainLike | None = None) -> tuple[T, float]:
        """2D вектор в плоскости, содержащей ось X: (x, |(y, z)|)."""
        return (self.x, self.yz().length(domain))

    def plane_y(self, domain: DomainLike | None = None) -> tuple[T, float]:
        """2D вектор в плоскости, содержащей ось Y: (y, |(z, x)|)."""
        return (self.y, self.zx().length(domain))

    def plane_z(self, domain: DomainLike | None = None) -> tuple[T, float]:
        """2D вектор в плоскости, содержащей ось Z: (z, |(x, y)|)."""
        return (self.z, self.xy().length(domain))

    def angle_x(self, domain: DomainLike | None = None) -> float:
        """Угол к оси X."""
        return Vector2(*self.plane_x(domain)).angle(domain)

    def angle_y(self, domain: DomainLike | None = None) -> float:
        """Угол к оси Y."""
        return Vector2(*self.plane_y(domain)).angle(domain)

    def angle_z(self, domain: DomainLike | None = None) -> float:
        """Угол к оси Z."""
        return Vector2(*self.plane_z(domain)).angle(domain)

    def polar_x(self, domain: DomainLike | None = None) -> tuple[float, float, float]:
        """(длина, полярный угол к X, азимут в плоскости YZ)"""
        return (self.length(domain), self.angle_x(domain), self.yz().angle(domain))

    def polar_y(self, domain: DomainLike | None = None) -> tuple[float, float, float]:
        """(длина, полярный угол к Y, азимут в плоскости ZX)"""
        return (self.length(domain), self.angle_y(domain), self.zx().angle(domain))

    def polar_z(self, domain: DomainLike | None = None) -> tuple[float, float, float]:
        """(длина, полярный угол к Z, азимут в плоскости XY)"""
        return (self.length(domain), self.angle_z(domain), self.xy().angle(domain))

    @classmethod
    def from_polar_x(
        cls,
        length: Number,
        polar: Number,
        azimuth: Number,
        domain: DomainLike | None = None,
    ) -> "Vector3[float]":
        """Вектор из сферических координат с полярной осью X."""
        ps = sin(polar, domain)
        return cls(
            length * cos(polar, domain),
            length * ps * cos(azimuth, domain),
            length * ps * sin(azimuth, domain),
        )

    @classmethod
    def from_polar_y(
        cls,
        length: Number,
        polar: Number,
        azimuth: Number,
        domain: DomainLike | None = None,
    ) -> "Vector3[float]":
        """Вектор из сферических координат с полярной осью Y."""
        ps = sin(polar, domain)
        return cls(
            length * ps * sin(azimuth, domain),
            length * cos(polar, domain),
            length * ps * cos(azimuth, domain),
        )

    @classmethod
    def from_polar_z(
        cls,
        length: Number,
        polar: Number,
        azimuth: Number,
        domain: DomainLike | None = None,
    ) -> "Vector3[float]":
        """Вектор из сферических координат с полярной осью Z."""
        ps = sin(polar, domain)
        return cls(
            length * ps * cos(azimuth, domain),
            length * ps * sin(azimuth, domain),
            length * cos(polar, domain),
        )

    # -------------------------------------------------------------------------
    # Цвет 3-3-2
    # -------------------------------------------------------------------------

    @classmethod
    def from_332(cls, c: int, dst: DomainLike = "u8") -> "Vector3[Number]":
        """
        RGB цвет из упакованного байта 3-3-2.

        Каналы расширяются до 8 бит bit replication, затем scale в dst.

        Examples:
            >>> Vector3.from_332(0xFF)
            Vector3(x=255, y=255, z=255)
        """
        r = _expand3((c & RED_332_MASK) >> 5)
        g = _expand3((c & GREEN_332_MASK) >> 2)
        b = _expand2(c & BLUE_332_MASK)
        return cls(r, g, b).scale("u8", dst)

    def to_332(self, src: DomainLike = "u8") -> int:
        """
        Упаковка RGB цвета в байт 3-3-2.

        Examples:
            >>> Vector3(255, 0, 255).to_332()
            227
        """
        r, g, b = self.scale(src, "u8")
        return (r & RED_332_MASK) | ((g >> 3) & GREEN_332_MASK) | (b >> 6)

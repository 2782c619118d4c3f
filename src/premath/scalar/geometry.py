"""
Geometry — Скалярные геометрические примитивы

Двухуровневая диспетчеризация:
- float домены вычисляют нативно в своей ширине (f32 через numpy.float32)
- integer домены продвигаются в containing float и делегируют float пути

Примитивы:
- isqrt: точный floor квадратного корня, integer → тот же integer домен
- sqrt: квадратный корень в containing float
- sin / cos / atan2: тригонометрия в containing float
"""

import math
from typing import Callable

import numpy

from src.premath.scalar.cast import Number, to_float_domain
from src.premath.scalar.domains import (
    DomainLike,
    ScalarDomain,
    containing_float_of,
    resolve_domain,
)


# =============================================================================
# ПРОДВИЖЕНИЕ В FLOAT
# =============================================================================


def into_float(value: Number, domain: DomainLike | None = None) -> float:
    """
    Продвижение значения в containing float домен.

    Args:
        value: Исходное значение
        domain: Домен значения (default: выводится из значения)

    Returns:
        Значение, округлённое до containing float (f32 для 8/16 бит)

    Examples:
        >>> into_float(3, "u8")
        3.0
        >>> into_float(0.1, "f32")
        0.10000000149011612
    """
    target = containing_float_of(resolve_domain(domain, value))
    return to_float_domain(value, target)


def _native(
    f32_op: Callable[..., numpy.floating],
    f64_op: Callable[..., float],
    target: ScalarDomain,
    *args: float,
) -> float:
    if target.bits == 32:
        with numpy.errstate(all="ignore"):
            return float(f32_op(*(numpy.float32(a) for a in args)))
    return f64_op(*args)


# =============================================================================
# КВАДРАТНЫЕ КОРНИ
# =============================================================================


def isqrt(value: int) -> int:
    """
    Точный floor квадратного корня для integer доменов.

    Raises:
        TypeError: Если value — float
        ValueError: Если value отрицательное

    Examples:
        >>> isqrt(24)
        4
        >>> isqrt(25)
        5
    """
    if isinstance(value, float):
        raise TypeError(f"isqrt is defined for integers only, got {value!r}")

    if value < 0:
        raise ValueError(f"Cannot take integer square root of negative value {value}")

    return math.isqrt(value)


def sqrt(value: Number, domain: DomainLike | None = None) -> float:
    """
    Квадратный корень в containing float домене.

    Raises:
        ValueError: Если value отрицательное

    Examples:
        >>> sqrt(25)
        5.0
        >>> sqrt(2, "u8")
        1.4142135381698608
    """
    if value < 0:
        raise ValueError(f"Cannot take square root of negative value {value}")

    target = containing_float_of(resolve_domain(domain, value))
    return _native(numpy.sqrt, math.sqrt, target, to_float_domain(value, target))


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(value: Number, domain: DomainLike | None = None) -> float:
    """Синус угла в радианах, вычисленный в containing float."""
    target = containing_float_of(resolve_domain(domain, value))
    return _native(numpy.sin, math.sin, target, to_float_domain(value, target))


def cos(value: Number, domain: DomainLike | None = None) -> float:
    """Косинус угла в радианах, вычисленный в containing float."""
    target = containing_float_of(resolve_domain(domain, value))
    return _native(numpy.cos, math.cos, target, to_float_domain(value, target))


def atan2(a: Number, b: Number, domain: DomainLike | None = None) -> float:
    """
    Арктангенс a/b с учётом квадранта (результат в радианах).

    Оба операнда продвигаются в один и тот же containing float.
    Без явного домена он выводится из первого операнда.

    Examples:
        >>> atan2(1, 1)
        0.7853981633974483
    """
    target = containing_float_of(resolve_domain(domain, a))
    return _native(
        numpy.arctan2,
        math.atan2,
        target,
        to_float_domain(a, target),
        to_float_domain(b, target),
    )

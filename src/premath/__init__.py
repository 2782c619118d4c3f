"""
premath — обобщённая алгебра масштабирования скаляров и векторная арифметика.

Модуль содержит фундаментальные числовые строительные блоки:
- scalar: домены, cast / scale / change_range, sqrt и тригонометрия
- vector: Vector2 / Vector3 / Vector4 и перебор боксов
"""

from src.premath.scalar import (
    DegenerateRangeError,
    ScalarDomain,
    ScalarKind,
    UnknownDomainError,
    cast,
    change_range,
    get_domain,
    norm_to_range,
    scale,
    to_norm_range,
)
from src.premath.vector import (
    Vector2,
    Vector2RangeIter,
    Vector3,
    Vector3RangeIter,
    Vector4,
)

__all__ = [
    # Scalar
    "DegenerateRangeError",
    "ScalarDomain",
    "ScalarKind",
    "UnknownDomainError",
    "cast",
    "change_range",
    "get_domain",
    "norm_to_range",
    "scale",
    "to_norm_range",
    # Vector
    "Vector2",
    "Vector2RangeIter",
    "Vector3",
    "Vector3RangeIter",
    "Vector4",
]

"""
Vector algebra для premath

Векторы фиксированной размерности (2/3/4) поверх скалярной алгебры
и перебор целочисленных точек полуоткрытых боксов.
"""

from src.premath.vector.base import VectorAlgebra, VectorBase
from src.premath.vector.range_iter import Vector2RangeIter, Vector3RangeIter
from src.premath.vector.vec2 import Vector2
from src.premath.vector.vec3 import Vector3
from src.premath.vector.vec4 import Vector4

__all__ = [
    # Base
    "VectorBase",
    "VectorAlgebra",
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    # Range iteration
    "Vector2RangeIter",
    "Vector3RangeIter",
]

"""
Scalar algebra для premath

Таблицы возможностей доменов, конверсии (cast / scale / change_range)
и геометрические примитивы с продвижением в containing float.
"""

# Capability tables
from src.premath.scalar.domains import (
    DEFAULT_FLOAT_DOMAIN,
    DEFAULT_INT_DOMAIN,
    DOMAINS,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    POINTER_WIDTH_BITS,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    DomainLike,
    ScalarDomain,
    ScalarKind,
    UnknownDomainError,
    accumulator_of,
    all_domains,
    containing_float_of,
    get_domain,
    infer_domain,
    resolve_domain,
    unsigned_of,
)

# Conversion engine
from src.premath.scalar.cast import Number, cast, trunc_div
from src.premath.scalar.scale import expand_bits, scale
from src.premath.scalar.ranges import (
    DegenerateRangeError,
    change_range,
    norm_to_range,
    to_norm_range,
)

# Geometry
from src.premath.scalar.geometry import atan2, cos, into_float, isqrt, sin, sqrt

__all__ = [
    # Capability tables — Constants
    "DEFAULT_FLOAT_DOMAIN",
    "DEFAULT_INT_DOMAIN",
    "DOMAINS",
    "POINTER_WIDTH_BITS",
    "U8",
    "I8",
    "U16",
    "I16",
    "U32",
    "I32",
    "U64",
    "I64",
    "U128",
    "I128",
    "USIZE",
    "ISIZE",
    "F32",
    "F64",
    # Capability tables — Types
    "DomainLike",
    "Number",
    "ScalarDomain",
    "ScalarKind",
    # Capability tables — Functions
    "accumulator_of",
    "all_domains",
    "containing_float_of",
    "get_domain",
    "infer_domain",
    "resolve_domain",
    "unsigned_of",
    # Conversion — Exceptions
    "DegenerateRangeError",
    "UnknownDomainError",
    # Conversion — Functions
    "cast",
    "change_range",
    "expand_bits",
    "norm_to_range",
    "scale",
    "to_norm_range",
    "trunc_div",
    # Geometry
    "atan2",
    "cos",
    "into_float",
    "isqrt",
    "sin",
    "sqrt",
]

"""
Cast — Нативная конверсия между скалярными доменами

Переинтерпретация значения в другом домене по правилам машинной конверсии:
- int → int: обрезание старших бит (wrap modulo 2^bits, two's complement)
- float → int: отбрасывание дробной части, насыщение на границах, NaN → 0
- * → float: округление до ближайшего в ширине целевого float

Cast НИКОГДА не выбрасывает исключений: потеря информации допустима.
Вызывающий код, которому нужна проверенная конверсия, проверяет сам.
"""

import logging
import math
from typing import Union

import numpy

from src.premath.scalar.domains import DomainLike, ScalarDomain, get_domain

logger = logging.getLogger(__name__)

Number = Union[int, float]


# =============================================================================
# FLOAT ПРИМИТИВЫ
# =============================================================================


def to_f32(value: Number) -> float:
    """
    Округление до ближайшего значения float32.

    Переполнение даёт ±inf, как при машинной конверсии.
    """
    with numpy.errstate(over="ignore"):
        return float(numpy.float32(float(value)))


def to_float_domain(value: Number, domain: ScalarDomain) -> float:
    """Конверсия в float домен (f32 или f64)."""
    if domain.bits == 32:
        return to_f32(value)
    return float(value)


# =============================================================================
# INTEGER ПРИМИТИВЫ
# =============================================================================


def wrap_int(value: int, domain: ScalarDomain) -> int:
    """
    Обрезание integer до ширины домена (wrap modulo 2^bits).

    Examples:
        >>> wrap_int(256, U8)
        0
        >>> wrap_int(128, I8)
        -128
    """
    masked = value & ((1 << domain.bits) - 1)
    if domain.signed and masked > domain.max_value:
        masked -= 1 << domain.bits
    return masked


def saturate_float(value: float, domain: ScalarDomain) -> int:
    """
    Float → integer: отбрасывание дробной части с насыщением.

    NaN → 0, ±inf и значения вне диапазона → MIN/MAX домена.
    """
    if math.isnan(value):
        return 0
    if value <= domain.min_value:
        return domain.min_value
    if value >= domain.max_value:
        return domain.max_value
    return math.trunc(value)


def trunc_div(a: int, b: int) -> int:
    """
    Integer деление с округлением к нулю (а не к -inf, как //).

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# =============================================================================
# CAST
# =============================================================================


def cast(value: Number, dst: DomainLike) -> Number:
    """
    Нативная конверсия значения в домен dst без проверки переполнения.

    Args:
        value: Исходное значение (int, float или bool)
        dst: Целевой домен

    Returns:
        Значение в домене dst (int для integer доменов, float для float)

    Examples:
        >>> cast(300, "u8")
        44
        >>> cast(-1, "u16")
        65535
        >>> cast(1e10, "i32")
        2147483647
        >>> cast(2.9, "u8")
        2
    """
    domain = get_domain(dst)

    if domain.is_float:
        return to_float_domain(value, domain)

    if isinstance(value, (float, numpy.floating)):
        value = float(value)
        result = saturate_float(value, domain)
        if logger.isEnabledFor(logging.DEBUG) and result != value:
            logger.debug("cast %r -> %s saturated/truncated to %r", value, domain, result)
        return result

    result = wrap_int(int(value), domain)
    if logger.isEnabledFor(logging.DEBUG) and result != value:
        logger.debug("cast %r -> %s wrapped to %r", value, domain, result)
    return result

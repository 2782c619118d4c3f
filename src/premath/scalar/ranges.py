"""
Ranges — Аффинное отображение диапазонов через accumulator domain

ФОРМУЛА:
    result = (value - ss) * (de - ds) / (se - ss) + ds

Вычисление целиком выполняется в accumulator domain:
- integer accumulator: точная integer арифметика, деление с округлением к нулю
- float accumulator (u128, i128, f32, f64): арифметика f64
Результат сужается обратно в исходный домен через cast.

norm_to_range / to_norm_range — частные случаи с одной стороной,
зафиксированной на нормальном диапазоне домена.

ПРЕДУСЛОВИЕ:
    se != ss. Вырожденный исходный диапазон → DegenerateRangeError.
"""

import logging

from src.premath.scalar.cast import Number, cast, trunc_div
from src.premath.scalar.domains import DomainLike, accumulator_of, get_domain

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateRangeError(ValueError):
    """
    Исходный диапазон change_range имеет нулевую ширину (se == ss).

    Отображение не определено: деление на ноль в accumulator domain.
    """


# =============================================================================
# CHANGE RANGE
# =============================================================================


def change_range(
    value: Number,
    domain: DomainLike,
    ss: Number,
    se: Number,
    ds: Number,
    de: Number,
) -> Number:
    """
    Отображение value из диапазона [ss, se] в диапазон [ds, de].

    Args:
        value: Значение в домене domain
        domain: Домен значения и всех границ
        ss: Начало исходного диапазона
        se: Конец исходного диапазона
        ds: Начало целевого диапазона
        de: Конец целевого диапазона

    Returns:
        Отображённое значение, суженное в domain

    Raises:
        DegenerateRangeError: Если se == ss

    Examples:
        >>> change_range(5, "u8", 0, 10, 0, 100)
        50
        >>> change_range(0.5, "f64", 0.0, 1.0, -1.0, 1.0)
        0.0
    """
    d = get_domain(domain)
    acc = accumulator_of(d)

    if se == ss:
        logger.debug("change_range rejected degenerate source range [%r, %r]", ss, se)
        raise DegenerateRangeError(
            f"Source range [{ss}, {se}] has zero width in domain {d}"
        )

    if acc.is_integer:
        offset = (int(value) - int(ss)) * (int(de) - int(ds))
        result: Number = trunc_div(offset, int(se) - int(ss)) + int(ds)
    else:
        result = (float(value) - float(ss)) * (float(de) - float(ds)) / (
            float(se) - float(ss)
        ) + float(ds)

    return cast(result, d)


def norm_to_range(value: Number, domain: DomainLike, start: Number, end: Number) -> Number:
    """
    Отображение из нормального диапазона домена в [start, end].

    Examples:
        >>> norm_to_range(255, "u8", 0, 100)
        100
        >>> norm_to_range(0.25, "f32", 10.0, 20.0)
        12.5
    """
    d = get_domain(domain)
    return change_range(value, d, d.norm_min, d.norm_max, start, end)


def to_norm_range(value: Number, domain: DomainLike, start: Number, end: Number) -> Number:
    """
    Отображение из [start, end] в нормальный диапазон домена.

    Examples:
        >>> to_norm_range(50, "u8", 0, 100)
        127
        >>> to_norm_range(15.0, "f64", 10.0, 20.0)
        0.5
    """
    d = get_domain(domain)
    return change_range(value, d, start, end, d.norm_min, d.norm_max)

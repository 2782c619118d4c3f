"""
Scale — Пересчёт значения между нормальными диапазонами доменов

Отображает значение из полного нормального диапазона домена A в полный
нормальный диапазон домена B, сохраняя относительную позицию:

- unsigned → более узкий unsigned: сдвиг вправо на разницу ширин
- unsigned → более широкий unsigned: сдвиг влево + bit replication
  (res |= res >> shift, shift удваивается от исходной ширины)
- unsigned ↔ float: value / MAX и обратно float * MAX с насыщением
- float ↔ float: нативная конверсия
- signed (с любой стороны): через unsigned домен той же ширины
  со смещением на MIN (value - MIN на входе, + MIN на выходе)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale(NORMAL_MIN) == NORMAL_MIN и scale(NORMAL_MAX) == NORMAL_MAX
   для любой пары доменов
2. Монотонность: a <= b ⇒ scale(a) <= scale(b)
3. scale из домена в него же — тождество
4. scale никогда не выбрасывает исключений (потеря точности допустима)
"""

from src.premath.scalar.cast import (
    Number,
    saturate_float,
    to_float_domain,
    wrap_int,
)
from src.premath.scalar.domains import (
    DomainLike,
    ScalarDomain,
    ScalarKind,
    get_domain,
    unsigned_of,
)


# =============================================================================
# UNSIGNED ↔ UNSIGNED
# =============================================================================


def expand_bits(value: int, src_bits: int, dst_bits: int) -> int:
    """
    Расширение unsigned integer методом bit replication.

    Исходный паттерн сдвигается в старшие биты и копируется в освободившиеся
    младшие биты. Точно для 0 и MAX, без деления.

    Examples:
        >>> expand_bits(0xFF, 8, 16)
        65535
        >>> expand_bits(0x80, 8, 16)
        32896
    """
    res = value << (dst_bits - src_bits)
    shift = src_bits
    while shift < dst_bits:
        res |= res >> shift
        shift *= 2
    return res


def _scale_unsigned(value: int, src: ScalarDomain, dst: ScalarDomain) -> int:
    if src.bits >= dst.bits:
        return value >> (src.bits - dst.bits)
    return expand_bits(value, src.bits, dst.bits)


# =============================================================================
# UNSIGNED ↔ FLOAT
# =============================================================================


def _unsigned_to_float(value: int, src: ScalarDomain, dst: ScalarDomain) -> float:
    # Деление в f64: u128::MAX не помещается в f32
    return to_float_domain(float(value) / float(src.max_value), dst)


def _float_to_unsigned(value: float, dst: ScalarDomain) -> int:
    return saturate_float(float(value) * float(dst.max_value), dst)


# =============================================================================
# SCALE
# =============================================================================


def scale(value: Number, src: DomainLike, dst: DomainLike) -> Number:
    """
    Пересчёт значения из нормального диапазона src в нормальный диапазон dst.

    Args:
        value: Значение в домене src
        src: Исходный домен
        dst: Целевой домен

    Returns:
        Значение в домене dst

    Examples:
        >>> scale(255, "u8", "u16")
        65535
        >>> scale(0xABCD, "u16", "u8")
        171
        >>> scale(255, "u8", "f32")
        1.0
        >>> scale(-128, "i8", "u8")
        0
        >>> scale(1.0, "f64", "i16")
        32767
    """
    s = get_domain(src)
    d = get_domain(dst)

    if s == d:
        return value

    # signed на входе: смещение в unsigned той же ширины (wrapping_sub(MIN))
    if s.kind == ScalarKind.SIGNED:
        u = unsigned_of(s)
        return scale(wrap_int(int(value) - s.min_value, u), u, d)

    # signed на выходе: пересчёт в unsigned той же ширины и обратное смещение
    if d.kind == ScalarKind.SIGNED:
        return scale(value, s, unsigned_of(d)) + d.min_value

    if s.is_integer and d.is_integer:
        return _scale_unsigned(int(value), s, d)

    if s.is_integer:
        return _unsigned_to_float(int(value), s, d)

    if d.is_integer:
        return _float_to_unsigned(value, d)

    return to_float_domain(value, d)

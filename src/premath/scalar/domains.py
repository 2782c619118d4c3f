"""
ScalarDomain — Таблицы возможностей скалярных доменов

Статическое описание всех поддерживаемых скалярных представлений:
- unsigned/signed integers: 8, 16, 32, 64, 128 бит (+ usize/isize)
- floats: f32, f64

Для каждого домена известны:
- NORMAL_MIN / NORMAL_MAX (MIN..MAX для integers, 0..1 для floats)
- ZERO / ONE / TWO
- accumulator domain (широкий домен для промежуточных вычислений)
- containing float domain (минимальный float, точно содержащий все значения)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица тотальна: все 14 доменов описаны
2. Все ссылки accumulator/containing_float указывают на домены из таблицы
3. Дескрипторы immutable (frozen=True)
"""

import sys
from enum import Enum
from typing import Any, Final, Union

import numpy
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Ширина usize/isize (64-битная платформа)
POINTER_WIDTH_BITS: Final[int] = 64

# Домен по умолчанию для Python int без явного домена
DEFAULT_INT_DOMAIN: Final[str] = "i64"

# Домен по умолчанию для Python float без явного домена
DEFAULT_FLOAT_DOMAIN: Final[str] = "f64"

# Максимальные конечные значения float доменов
F32_MAX: Final[float] = float(numpy.finfo(numpy.float32).max)
F64_MAX: Final[float] = sys.float_info.max

INTEGER_WIDTHS: Final[frozenset[int]] = frozenset({8, 16, 32, 64, 128})
FLOAT_WIDTHS: Final[frozenset[int]] = frozenset({32, 64})


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownDomainError(ValueError):
    """Запрошен домен, отсутствующий в таблице возможностей."""


# =============================================================================
# ENUMS
# =============================================================================


class ScalarKind(str, Enum):
    """Вид скалярного домена"""

    UNSIGNED = "unsigned"
    SIGNED = "signed"
    FLOAT = "float"


# =============================================================================
# DOMAIN DESCRIPTOR
# =============================================================================


class ScalarDomain(BaseModel):
    """
    Дескриптор скалярного домена.

    Immutable модель (frozen=True): хешируемая, используется как ключ
    в таблицах конверсий.
    """

    name: str = Field(..., min_length=2, description="Имя домена (например, 'u8')")
    kind: ScalarKind = Field(..., description="unsigned / signed / float")
    bits: int = Field(..., gt=0, description="Ширина в битах")
    accumulator: str = Field(..., description="Имя accumulator домена")
    containing_float: str = Field(..., description="Имя containing float домена")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_width(self) -> "ScalarDomain":
        """Ширина должна соответствовать виду домена."""
        allowed = FLOAT_WIDTHS if self.kind == ScalarKind.FLOAT else INTEGER_WIDTHS
        if self.bits not in allowed:
            raise ValueError(
                f"{self.kind.value} domain {self.name} cannot be {self.bits} bits wide"
            )
        return self

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    @property
    def signed(self) -> bool:
        return self.kind != ScalarKind.UNSIGNED

    @property
    def is_integer(self) -> bool:
        return self.kind != ScalarKind.FLOAT

    @property
    def is_float(self) -> bool:
        return self.kind == ScalarKind.FLOAT

    @property
    def unsigned(self) -> str:
        """
        Имя unsigned домена той же ширины.

        Через него проходят все конверсии signed доменов.
        Для unsigned и float возвращает собственное имя.
        """
        if self.kind == ScalarKind.SIGNED:
            return "u" + self.name[1:]
        return self.name

    # -------------------------------------------------------------------------
    # Границы
    # -------------------------------------------------------------------------

    @property
    def min_value(self) -> Union[int, float]:
        """Минимальное представимое значение."""
        if self.kind == ScalarKind.UNSIGNED:
            return 0
        if self.kind == ScalarKind.SIGNED:
            return -(1 << (self.bits - 1))
        return -F32_MAX if self.bits == 32 else -F64_MAX

    @property
    def max_value(self) -> Union[int, float]:
        """Максимальное представимое значение."""
        if self.kind == ScalarKind.UNSIGNED:
            return (1 << self.bits) - 1
        if self.kind == ScalarKind.SIGNED:
            return (1 << (self.bits - 1)) - 1
        return F32_MAX if self.bits == 32 else F64_MAX

    @property
    def norm_min(self) -> Union[int, float]:
        """NORMAL_MIN: MIN для integers, 0.0 для floats."""
        return 0.0 if self.is_float else self.min_value

    @property
    def norm_max(self) -> Union[int, float]:
        """NORMAL_MAX: MAX для integers, 1.0 для floats."""
        return 1.0 if self.is_float else self.max_value

    # -------------------------------------------------------------------------
    # Константы
    # -------------------------------------------------------------------------

    @property
    def zero(self) -> Union[int, float]:
        return 0.0 if self.is_float else 0

    @property
    def one(self) -> Union[int, float]:
        return 1.0 if self.is_float else 1

    @property
    def two(self) -> Union[int, float]:
        return 2.0 if self.is_float else 2

    def __str__(self) -> str:
        return self.name


# =============================================================================
# ТАБЛИЦА ДОМЕНОВ
# =============================================================================


def _integer(name: str, bits: int, accumulator: str) -> ScalarDomain:
    kind = ScalarKind.SIGNED if name.startswith("i") else ScalarKind.UNSIGNED
    return ScalarDomain(
        name=name,
        kind=kind,
        bits=bits,
        accumulator=accumulator,
        containing_float="f32" if bits <= 16 else "f64",
    )


def _float(name: str, bits: int) -> ScalarDomain:
    return ScalarDomain(
        name=name,
        kind=ScalarKind.FLOAT,
        bits=bits,
        accumulator="f64",
        containing_float=name,
    )


DOMAINS: Final[dict[str, ScalarDomain]] = {
    d.name: d
    for d in (
        _integer("u8", 8, "u16"),
        _integer("i8", 8, "i16"),
        _integer("u16", 16, "u32"),
        _integer("i16", 16, "i32"),
        _integer("u32", 32, "u64"),
        _integer("i32", 32, "i64"),
        _integer("u64", 64, "u128"),
        _integer("i64", 64, "i128"),
        # 128-битные integers накапливаются во float: шире integer нет
        _integer("u128", 128, "f64"),
        _integer("i128", 128, "f64"),
        _integer("usize", POINTER_WIDTH_BITS, "u" + str(POINTER_WIDTH_BITS * 2)),
        _integer("isize", POINTER_WIDTH_BITS, "i" + str(POINTER_WIDTH_BITS * 2)),
        _float("f32", 32),
        _float("f64", 64),
    )
}

U8: Final[ScalarDomain] = DOMAINS["u8"]
I8: Final[ScalarDomain] = DOMAINS["i8"]
U16: Final[ScalarDomain] = DOMAINS["u16"]
I16: Final[ScalarDomain] = DOMAINS["i16"]
U32: Final[ScalarDomain] = DOMAINS["u32"]
I32: Final[ScalarDomain] = DOMAINS["i32"]
U64: Final[ScalarDomain] = DOMAINS["u64"]
I64: Final[ScalarDomain] = DOMAINS["i64"]
U128: Final[ScalarDomain] = DOMAINS["u128"]
I128: Final[ScalarDomain] = DOMAINS["i128"]
USIZE: Final[ScalarDomain] = DOMAINS["usize"]
ISIZE: Final[ScalarDomain] = DOMAINS["isize"]
F32: Final[ScalarDomain] = DOMAINS["f32"]
F64: Final[ScalarDomain] = DOMAINS["f64"]

# numpy dtype name → домен
_DTYPE_DOMAINS: Final[dict[str, str]] = {
    "uint8": "u8",
    "int8": "i8",
    "uint16": "u16",
    "int16": "i16",
    "uint32": "u32",
    "int32": "i32",
    "uint64": "u64",
    "int64": "i64",
    "float32": "f32",
    "float64": "f64",
}

DomainLike = Union[ScalarDomain, str]


# =============================================================================
# LOOKUPS
# =============================================================================


def get_domain(domain: DomainLike) -> ScalarDomain:
    """
    Разрешение домена по имени или дескриптору.

    Args:
        domain: ScalarDomain или имя ('u8', 'f32', ...)

    Returns:
        Дескриптор домена из таблицы

    Raises:
        UnknownDomainError: Если домен не описан в таблице

    Examples:
        >>> get_domain("u8").max_value
        255
        >>> get_domain(F32).norm_max
        1.0
    """
    if isinstance(domain, ScalarDomain):
        return domain

    try:
        return DOMAINS[domain]
    except (KeyError, TypeError):
        raise UnknownDomainError(
            f"Unknown scalar domain {domain!r}, expected one of {sorted(DOMAINS)}"
        ) from None


def accumulator_of(domain: DomainLike) -> ScalarDomain:
    """Accumulator domain: операции remap выполняются в нём без переполнения."""
    return DOMAINS[get_domain(domain).accumulator]


def containing_float_of(domain: DomainLike) -> ScalarDomain:
    """Минимальный float домен, точно содержащий все значения домена."""
    return DOMAINS[get_domain(domain).containing_float]


def unsigned_of(domain: DomainLike) -> ScalarDomain:
    """Unsigned домен той же ширины (для unsigned/float — сам домен)."""
    return DOMAINS[get_domain(domain).unsigned]


def all_domains() -> list[ScalarDomain]:
    """Все домены таблицы в порядке объявления."""
    return list(DOMAINS.values())


def infer_domain(value: Any) -> ScalarDomain:
    """
    Определение домена по Python/numpy значению.

    - numpy scalar → домен его dtype
    - bool / int → DEFAULT_INT_DOMAIN
    - float → DEFAULT_FLOAT_DOMAIN

    Raises:
        UnknownDomainError: Если тип значения не числовой
    """
    if isinstance(value, numpy.generic):
        name = _DTYPE_DOMAINS.get(value.dtype.name)
        if name is None:
            raise UnknownDomainError(f"No scalar domain for dtype {value.dtype.name}")
        return DOMAINS[name]

    if isinstance(value, int):
        return DOMAINS[DEFAULT_INT_DOMAIN]

    if isinstance(value, float):
        return DOMAINS[DEFAULT_FLOAT_DOMAIN]

    raise UnknownDomainError(f"Cannot infer scalar domain of {type(value).__name__}")


def resolve_domain(domain: DomainLike | None, value: Any) -> ScalarDomain:
    """Явный домен, если задан, иначе домен, выведенный из значения."""
    if domain is None:
        return infer_domain(value)
    return get_domain(domain)

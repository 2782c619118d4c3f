"""
VectorBase — Общая основа векторов фиксированной размерности

Два уровня:
- VectorBase: контейнерный протокол (индексы, итерация, сравнение,
  форматирование) и покомпонентная арифметика (+ - * / // % и in-place)
- VectorAlgebra: редукции, геометрия и доменные конверсии,
  общие для Vector2 и Vector3

Правый операнд арифметики:
- скаляр → применяется к каждой компоненте
- вектор / tuple / list той же размерности → покомпонентно
- range (только 2D) → (start, stop)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Количество компонент фиксировано классом, не меняется
2. Индексы 0..N-1 — единственные валидные (иначе IndexError)
3. Операции без суффикса in-place возвращают новый вектор
"""

import dataclasses
import operator
from functools import reduce
from numbers import Number as _Number
from typing import Any, Callable, ClassVar, Generic, Iterable, Iterator, TypeVar

from src.premath.scalar import (
    DEFAULT_INT_DOMAIN,
    DomainLike,
    Number,
    cast,
    change_range,
    containing_float_of,
    get_domain,
    isqrt,
    norm_to_range,
    resolve_domain,
    scale,
    sqrt,
    to_norm_range,
)
from src.premath.scalar.cast import to_float_domain

T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V", bound="VectorBase")


# =============================================================================
# VECTOR BASE
# =============================================================================


class VectorBase(Generic[T]):
    """
    Контейнерный протокол и покомпонентная арифметика.

    Подклассы — dataclasses (eq=False) с полями, перечисленными в _FIELDS.
    """

    _FIELDS: ClassVar[tuple[str, ...]] = ()

    # Мутабельный value type: не хешируется
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_iterable(cls: type[V], values: Iterable[Any]) -> V:
        """
        Вектор из последовательности ровно N значений.

        Raises:
            ValueError: Если количество значений не равно N
        """
        items = tuple(values)
        if len(items) != len(cls._FIELDS):
            raise ValueError(
                f"{cls.__name__} needs {len(cls._FIELDS)} components, got {len(items)}"
            )
        return cls(*items)

    @classmethod
    def coerce(cls: type[V], value: Any) -> V:
        """
        Приведение вектора / tuple / list (и range для 2D) к cls.

        Raises:
            TypeError: Если тип значения не поддерживается
            ValueError: Если размерность не совпадает
        """
        if isinstance(value, cls):
            return value
        components = _components(value, len(cls._FIELDS))
        if components is None:
            raise TypeError(f"Cannot convert {type(value).__name__} to {cls.__name__}")
        return cls(*components)

    @classmethod
    def zero(cls: type[V], domain: DomainLike | None = None) -> V:
        """Вектор из ZERO домена (default: integer домен по умолчанию)."""
        d = get_domain(DEFAULT_INT_DOMAIN if domain is None else domain)
        return cls(*([d.zero] * len(cls._FIELDS)))

    def copy(self: V) -> V:
        return dataclasses.replace(self)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self)

    def to_list(self) -> list[T]:
        return list(self)

    # -------------------------------------------------------------------------
    # Контейнерный протокол
    # -------------------------------------------------------------------------

    def _field(self, index: int) -> str:
        if not isinstance(index, int) or not 0 <= index < len(self._FIELDS):
            raise IndexError(
                f"Index `{index}` is out of bounds for {type(self).__name__}."
            )
        return self._FIELDS[index]

    def __getitem__(self, index: int) -> T:
        return getattr(self, self._field(index))

    def __setitem__(self, index: int, value: T) -> None:
        setattr(self, self._field(index), value)

    def __len__(self) -> int:
        return len(self._FIELDS)

    def __iter__(self) -> Iterator[T]:
        for name in self._FIELDS:
            yield getattr(self, name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VectorBase):
            return type(other) is type(self) and tuple(self) == tuple(other)
        if isinstance(other, (tuple, list)):
            return len(other) == len(self) and tuple(self) == tuple(other)
        return NotImplemented

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self) + "]"

    # -------------------------------------------------------------------------
    # Отображения
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[T], R]) -> "VectorBase[R]":
        """Применение f к каждой компоненте."""
        return type(self)(*(f(c) for c in self))

    def cjoin(self, other: Any, f: Callable[[T, Any], R]) -> "VectorBase[R]":
        """Покомпонентное объединение с другим вектором функцией f."""
        rhs = type(self).coerce(other)
        return type(self)(*(f(a, b) for a, b in zip(self, rhs)))

    def cjoin_assign(self, other: Any, f: Callable[[T, Any], T]) -> None:
        """Покомпонентное объединение с записью результата в self."""
        rhs = type(self).coerce(other)
        for name, b in zip(self._FIELDS, rhs):
            setattr(self, name, f(getattr(self, name), b))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _operand(self, other: Any) -> tuple[Any, ...] | None:
        if isinstance(other, _Number):
            return (other,) * len(self._FIELDS)
        return _components(other, len(self._FIELDS))

    def _binary(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(self, rhs)))

    def _reflected(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(lhs, self)))

    def _inplace(self: V, other: Any, op: Callable[[Any, Any], Any]) -> V:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        for name, b in zip(self._FIELDS, rhs):
            setattr(self, name, op(getattr(self, name), b))
        return self

    def __add__(self, other: Any) -> Any:
        return self._binary(other, operator.add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected(other, operator.add)

    def __iadd__(self: V, other: Any) -> V:
        return self._inplace(other, operator.add)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, operator.sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected(other, operator.sub)

    def __isub__(self: V, other: Any) -> V:
        return self._inplace(other, operator.sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, operator.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected(other, operator.mul)

    def __imul__(self: V, other: Any) -> V:
        return self._inplace(other, operator.mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, operator.truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected(other, operator.truediv)

    def __itruediv__(self: V, other: Any) -> V:
        return self._inplace(other, operator.truediv)

    def __floordiv__(self, other: Any) -> Any:
        return self._binary(other, operator.floordiv)

    def __rfloordiv__(self, other: Any) -> Any:
        return self._reflected(other, operator.floordiv)

    def __ifloordiv__(self: V, other: Any) -> V:
        return self._inplace(other, operator.floordiv)

    def __mod__(self, other: Any) -> Any:
        return self._binary(other, operator.mod)

    def __rmod__(self, other: Any) -> Any:
        return self._reflected(other, operator.mod)

    def __imod__(self: V, other: Any) -> V:
        return self._inplace(other, operator.mod)

    def __neg__(self: V) -> V:
        return self.map(operator.neg)

    def __abs__(self: V) -> V:
        return self.map(abs)


def _components(value: Any, n: int) -> tuple[Any, ...] | None:
    """
    Компоненты правого операнда или None, если тип не поддерживается.

    Raises:
        ValueError: Если размерность операнда не равна n
    """
    if isinstance(value, range):
        if n != 2:
            return None
        return (value.start, value.stop)

    if isinstance(value, (VectorBase, tuple, list)):
        items = tuple(value)
        if len(items) != n:
            raise ValueError(f"Operand has {len(items)} components, expected {n}")
        return items

    return None


# =============================================================================
# VECTOR ALGEBRA
# =============================================================================


class VectorAlgebra(VectorBase[T]):
    """Редукции, геометрия и доменные конверсии для Vector2 / Vector3."""

    # -------------------------------------------------------------------------
    # Редукции
    # -------------------------------------------------------------------------

    def sum(self) -> T:
        """Сумма компонент."""
        return reduce(operator.add, self)

    def prod(self) -> T:
        """Произведение компонент."""
        return reduce(operator.mul, self)

    def same(self) -> bool:
        """Все компоненты равны."""
        first = self[0]
        return all(c == first for c in self)

    def different(self) -> bool:
        """Не все компоненты равны."""
        return not self.same()

    def max_idx(self) -> int:
        """Индекс наибольшей компоненты (при равенстве — наименьший индекс)."""
        return max(range(len(self)), key=self.__getitem__)

    def min_idx(self) -> int:
        """Индекс наименьшей компоненты (при равенстве — наименьший индекс)."""
        return min(range(len(self)), key=self.__getitem__)

    def max(self) -> T:
        return self[self.max_idx()]

    def min(self) -> T:
        return self[self.min_idx()]

    def cabs(self: V) -> V:
        """Абсолютное значение каждой компоненты."""
        return abs(self)

    def convert(self, to: Callable[[T], R]) -> "VectorBase[R]":
        """Конверсия компонент конструктором типа (например, float)."""
        return self.map(to)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def are_all(self, f: Callable[[T], bool]) -> bool:
        return all(f(c) for c in self)

    def is_any(self, f: Callable[[T], bool]) -> bool:
        return any(f(c) for c in self)

    def is_none(self, f: Callable[[T], bool]) -> bool:
        return not self.is_any(f)

    # bool векторы

    def all(self) -> bool:
        """Все компоненты истинны."""
        return all(self)

    def any(self) -> bool:
        """Хотя бы одна компонента истинна."""
        return any(self)

    def none(self) -> bool:
        """Ни одна компонента не истинна."""
        return not any(self)

    # -------------------------------------------------------------------------
    # Геометрия
    # -------------------------------------------------------------------------

    def dot(self, other: Any) -> Any:
        """Скалярное произведение."""
        rhs = type(self).coerce(other)
        return reduce(operator.add, (a * b for a, b in zip(self, rhs)))

    def sq_len(self) -> Any:
        """Квадрат длины вектора."""
        return self.dot(self)

    def length(self, domain: DomainLike | None = None) -> float:
        """
        Длина вектора в containing float домена компонент.

        Args:
            domain: Домен компонент (default: выводится из значения)
        """
        return sqrt(self.sq_len(), domain)

    def ilen(self) -> int:
        """Integer длина вектора (floor квадратного корня)."""
        return isqrt(self.sq_len())

    def normalized(self: V, domain: DomainLike | None = None) -> V:
        """
        Вектор единичной длины в containing float домене.

        Raises:
            ZeroDivisionError: Если длина вектора равна нулю
        """
        target = containing_float_of(resolve_domain(domain, self[0]))
        v = self.map(lambda a: to_float_domain(a, target))
        length = v.length(target)
        return v.map(lambda a: to_float_domain(a / length, target))

    def normalize(self, domain: DomainLike | None = None) -> None:
        """Нормализация in-place (компоненты становятся float)."""
        for name, value in zip(self._FIELDS, self.normalized(domain)):
            setattr(self, name, value)

    # -------------------------------------------------------------------------
    # Доменные конверсии
    # -------------------------------------------------------------------------

    def cast(self: V, dst: DomainLike) -> V:
        """cast каждой компоненты в домен dst."""
        return self.map(lambda a: cast(a, dst))

    def scale(self: V, src: DomainLike, dst: DomainLike) -> V:
        """scale каждой компоненты из нормального диапазона src в dst."""
        return self.map(lambda a: scale(a, src, dst))

    def change_range(
        self: V, domain: DomainLike, ss: Number, se: Number, ds: Number, de: Number
    ) -> V:
        """change_range каждой компоненты из [ss, se] в [ds, de]."""
        return self.map(lambda a: change_range(a, domain, ss, se, ds, de))

    def norm_to_range(self: V, domain: DomainLike, start: Number, end: Number) -> V:
        """Из нормального диапазона домена в [start, end]."""
        return self.map(lambda a: norm_to_range(a, domain, start, end))

    def to_norm_range(self: V, domain: DomainLike, start: Number, end: Number) -> V:
        """Из [start, end] в нормальный диапазон домена."""
        return self.map(lambda a: to_norm_range(a, domain, start, end))

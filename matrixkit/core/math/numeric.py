"""
Numeric Capabilities — контракт элементов матрицы

Модуль описывает, какие возможности элемента нужны каким операциям:
- Хранение и доступ: никаких требований
- Заполнение и извлечение строк/столбцов: дублирование (copy.copy)
- Matrix-matrix умножение: сложение, умножение, аддитивная единица (ноль)
- Scalar умножение: умножение на numbers.Number

Встроенные числовые типы Python (int, float, complex, Fraction, Decimal)
удовлетворяют контракту без адаптеров.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аддитивная единица получается как type(sample)() (аналог Default)
2. Размеры матриц — только положительные int (bool отклоняется)
3. Границы random-генерации — только int
"""

import copy
import numbers
from typing import Any, Protocol, TypeVar, runtime_checkable

from matrixkit.core.errors import ShapeError

T = TypeVar("T")


# =============================================================================
# CAPABILITY PROTOCOL
# =============================================================================


@runtime_checkable
class Scalar(Protocol):
    """Элемент, поддерживающий сложение и умножение."""

    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


def supports_arithmetic(value: object) -> bool:
    """True если value поддерживает + и *."""
    return isinstance(value, Scalar)


def is_scalar(value: object) -> bool:
    """
    Проверка, является ли value числовым скаляром.

    Используется для диспетчеризации `matrix * value`: скаляр → scale,
    Matrix → multiply.

    Examples:
        >>> is_scalar(2)
        True
        >>> is_scalar(2.5)
        True
        >>> is_scalar("2")
        False
    """
    return isinstance(value, numbers.Number)


def additive_identity(sample: T) -> T:
    """
    Аддитивная единица (ноль) для типа элемента.

    Стартовое значение аккумулятора при matrix-matrix умножении.

    Args:
        sample: Любой элемент матрицы, определяющий тип

    Returns:
        type(sample)() — 0, 0.0, 0j, Fraction(0), Decimal('0')

    Raises:
        TypeError: если тип не конструируется без аргументов или не
            поддерживает сложение

    Examples:
        >>> additive_identity(7)
        0
        >>> additive_identity(1.5)
        0.0
    """
    element_type = type(sample)
    try:
        zero = element_type()
    except TypeError as e:
        raise TypeError(
            f"Element type {element_type.__name__} has no additive identity "
            f"(zero-argument constructor required)"
        ) from e

    if not supports_arithmetic(zero):
        raise TypeError(
            f"Element type {element_type.__name__} does not support + and *"
        )

    return zero


def duplicate(value: T) -> T:
    """Независимая копия значения (для immutable чисел — то же значение)."""
    return copy.copy(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_dimension(value: object, name: str) -> int:
    """
    Валидация размера матрицы.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        ShapeError: если value не int или value <= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeError(f"{name} must be an int, got {type(value).__name__}")

    if value <= 0:
        raise ShapeError(f"{name} must be positive, got {value}")

    return value


def validate_int_bound(value: object, name: str) -> int:
    """
    Валидация границы диапазона random-генерации.

    Raises:
        TypeError: если value не int (bool отклоняется)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def validate_half_open_range(low: int, high: int) -> None:
    """
    Валидация полуинтервала [low, high).

    Raises:
        ValueError: если low >= high (пустой диапазон)
    """
    if low >= high:
        raise ValueError(f"Empty range: min={low} must be < max={high}")

"""
Numeric Kinds — явные теги числовых типов

Модуль задаёт замкнутое множество числовых kind'ов (signed/unsigned/float),
их разрядность и допустимые диапазоны значений.

Kind всегда фиксируется явно на стороне вызова (тег NumericKind или
именованный NumericType) и никогда не выводится из runtime значения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Множество kind'ов замкнуто: неизвестный тег → UnsupportedType
2. Целочисленные границы проверяются по лимитам kind'а
3. float32 значения всегда точно представимы в float32
"""

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Final, Optional, Union

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное конечное значение float32 (IEEE 754 binary32)
FLOAT32_MAX: Final[float] = 3.4028234663852886e38

# Наибольшее float32 строго меньше 1.0 (1 - 2**-24)
FLOAT32_ONE_BELOW: Final[float] = 1.0 - 2.0**-24


# =============================================================================
# ENUMS
# =============================================================================


class NumericCategory(str, Enum):
    """Категория числового kind'а"""

    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"


class NumericKind(str, Enum):
    """
    Замкнутое множество поддерживаемых числовых kind'ов.

    int/uint: 64-битные, как и int64/uint64.
    """

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def category(self) -> NumericCategory:
        return _KIND_CATEGORY[self]

    @property
    def bits(self) -> int:
        return _KIND_BITS[self]

    @property
    def is_integer(self) -> bool:
        return self.category is not NumericCategory.FLOAT

    @property
    def min_value(self) -> Union[int, float]:
        """
        Минимальное представимое значение kind'а.

        Для float kind'ов: минус наибольшее конечное значение.
        """
        if self.category is NumericCategory.SIGNED:
            return -(1 << (self.bits - 1))
        if self.category is NumericCategory.UNSIGNED:
            return 0
        return -self.max_value

    @property
    def max_value(self) -> Union[int, float]:
        """Максимальное представимое значение kind'а."""
        if self.category is NumericCategory.SIGNED:
            return (1 << (self.bits - 1)) - 1
        if self.category is NumericCategory.UNSIGNED:
            return (1 << self.bits) - 1
        if self.bits == 32:
            return FLOAT32_MAX
        return 1.7976931348623157e308


_KIND_CATEGORY: Final[dict[NumericKind, NumericCategory]] = {
    NumericKind.INT: NumericCategory.SIGNED,
    NumericKind.INT8: NumericCategory.SIGNED,
    NumericKind.INT16: NumericCategory.SIGNED,
    NumericKind.INT32: NumericCategory.SIGNED,
    NumericKind.INT64: NumericCategory.SIGNED,
    NumericKind.UINT: NumericCategory.UNSIGNED,
    NumericKind.UINT8: NumericCategory.UNSIGNED,
    NumericKind.UINT16: NumericCategory.UNSIGNED,
    NumericKind.UINT32: NumericCategory.UNSIGNED,
    NumericKind.UINT64: NumericCategory.UNSIGNED,
    NumericKind.FLOAT32: NumericCategory.FLOAT,
    NumericKind.FLOAT64: NumericCategory.FLOAT,
}

_KIND_BITS: Final[dict[NumericKind, int]] = {
    NumericKind.INT: 64,
    NumericKind.INT8: 8,
    NumericKind.INT16: 16,
    NumericKind.INT32: 32,
    NumericKind.INT64: 64,
    NumericKind.UINT: 64,
    NumericKind.UINT8: 8,
    NumericKind.UINT16: 16,
    NumericKind.UINT32: 32,
    NumericKind.UINT64: 64,
    NumericKind.FLOAT32: 32,
    NumericKind.FLOAT64: 64,
}


# =============================================================================
# ИМЕНОВАННЫЕ ТИПЫ
# =============================================================================


@dataclass(frozen=True)
class NumericType:
    """
    Пользовательский именованный тип поверх числового kind'а.

    Например, `class PlayerLevel(int)` поверх uint8:

        >>> LEVEL = NumericType("PlayerLevel", NumericKind.UINT8, PlayerLevel)

    factory применяется к результату генерации (None → значение без обёртки).
    """

    name: str
    kind: NumericKind
    factory: Optional[Callable[[Any], Any]] = None

    def wrap(self, value: Union[int, float]) -> Any:
        if self.factory is None:
            return value
        return self.factory(value)


KindTag = Union[NumericKind, NumericType, str]


# =============================================================================
# FLOAT32 NARROWING
# =============================================================================


def to_float32(value: float) -> float:
    """
    Округление double до ближайшего float32 (round-half-even).

    Raises:
        OverflowError: Если значение не помещается в float32
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def float32_next_below(value: float) -> float:
    """
    Ближайшее float32 строго меньше value.

    value должно быть точно представимо в float32.

    Examples:
        >>> float32_next_below(1.0) == FLOAT32_ONE_BELOW
        True
    """
    if math.isnan(value):
        return value
    if value == 0.0:
        # Наименьшее отрицательное субнормальное
        return -struct.unpack("<f", struct.pack("<I", 1))[0]

    bits = struct.unpack("<I", struct.pack("<f", value))[0]
    if value > 0:
        bits -= 1
    else:
        bits += 1
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def float64_next_below(value: float) -> float:
    """Ближайшее double строго меньше value."""
    return math.nextafter(value, -math.inf)


def next_below(kind: NumericKind, value: float) -> float:
    """Ближайшее значение kind'а строго меньше value (только float kind'ы)."""
    if kind.bits == 32:
        return float32_next_below(value)
    return float64_next_below(value)


def narrow_float(kind: NumericKind, value: float) -> float:
    """Narrowing double → точность float kind'а."""
    if kind.bits == 32:
        return to_float32(value)
    return value

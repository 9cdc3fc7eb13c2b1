"""
Тесты для модуля Numeric Kinds

Проверяет:
1. Категории и разрядность kind'ов
2. Лимиты integer kind'ов
3. Narrowing до float32 и ближайшее меньшее значение
"""

import math

import pytest

from src.snippets.math.numeric_kinds import (
    FLOAT32_MAX,
    FLOAT32_ONE_BELOW,
    NumericCategory,
    NumericKind,
    NumericType,
    float32_next_below,
    float64_next_below,
    narrow_float,
    next_below,
    to_float32,
)


class TestNumericKind:
    """Тесты для NumericKind"""

    def test_closed_set(self) -> None:
        assert {kind.value for kind in NumericKind} == {
            "int", "int8", "int16", "int32", "int64",
            "uint", "uint8", "uint16", "uint32", "uint64",
            "float32", "float64",
        }

    @pytest.mark.parametrize(
        "kind,category,bits",
        [
            (NumericKind.INT, NumericCategory.SIGNED, 64),
            (NumericKind.INT8, NumericCategory.SIGNED, 8),
            (NumericKind.INT32, NumericCategory.SIGNED, 32),
            (NumericKind.UINT, NumericCategory.UNSIGNED, 64),
            (NumericKind.UINT16, NumericCategory.UNSIGNED, 16),
            (NumericKind.FLOAT32, NumericCategory.FLOAT, 32),
            (NumericKind.FLOAT64, NumericCategory.FLOAT, 64),
        ],
    )
    def test_category_and_bits(self, kind, category, bits) -> None:
        assert kind.category is category
        assert kind.bits == bits

    def test_plain_int_kinds_are_64_bit(self) -> None:
        assert NumericKind.INT.bits == NumericKind.INT64.bits == 64
        assert NumericKind.UINT.max_value == NumericKind.UINT64.max_value == 2**64 - 1

    def test_is_integer(self) -> None:
        assert NumericKind.UINT8.is_integer
        assert not NumericKind.FLOAT64.is_integer

    @pytest.mark.parametrize(
        "kind,low,high",
        [
            (NumericKind.INT8, -128, 127),
            (NumericKind.INT16, -32768, 32767),
            (NumericKind.INT64, -(2**63), 2**63 - 1),
            (NumericKind.UINT8, 0, 255),
            (NumericKind.UINT32, 0, 2**32 - 1),
            (NumericKind.UINT64, 0, 2**64 - 1),
        ],
    )
    def test_integer_limits(self, kind, low, high) -> None:
        assert kind.min_value == low
        assert kind.max_value == high

    def test_float_limits(self) -> None:
        assert NumericKind.FLOAT32.max_value == FLOAT32_MAX
        assert NumericKind.FLOAT32.min_value == -FLOAT32_MAX
        assert NumericKind.FLOAT64.max_value == 1.7976931348623157e308

    def test_kind_from_name(self) -> None:
        assert NumericKind("uint16") is NumericKind.UINT16


class TestNumericType:
    """Тесты для NumericType"""

    def test_wrap_with_factory(self) -> None:
        class Level(int):
            pass

        level_type = NumericType("Level", NumericKind.UINT8, Level)
        wrapped = level_type.wrap(7)
        assert isinstance(wrapped, Level)
        assert wrapped == 7

    def test_wrap_without_factory(self) -> None:
        assert NumericType("Raw", NumericKind.INT).wrap(3) == 3

    def test_immutable(self) -> None:
        named = NumericType("Raw", NumericKind.INT)
        with pytest.raises(AttributeError):
            named.kind = NumericKind.INT8  # type: ignore[misc]


class TestFloat32Narrowing:
    """Тесты для to_float32 и соседних значений"""

    def test_exact_values_unchanged(self) -> None:
        assert to_float32(0.5) == 0.5
        assert to_float32(-2.0) == -2.0
        assert to_float32(FLOAT32_MAX) == FLOAT32_MAX

    def test_rounding(self) -> None:
        assert to_float32(0.1) != 0.1
        assert to_float32(0.1) == pytest.approx(0.1, rel=1e-7)
        assert to_float32(1.0 - 2.0**-30) == 1.0

    def test_overflow(self) -> None:
        with pytest.raises(OverflowError):
            to_float32(1e39)

    def test_next_below_one(self) -> None:
        assert float32_next_below(1.0) == FLOAT32_ONE_BELOW
        assert FLOAT32_ONE_BELOW == 1.0 - 2.0**-24

    def test_next_below_negative(self) -> None:
        value = float32_next_below(-1.0)
        assert value < -1.0
        assert value == -(1.0 + 2.0**-23)

    def test_next_below_zero(self) -> None:
        value = float32_next_below(0.0)
        assert value < 0.0
        assert to_float32(value) == value

    def test_next_below_float64(self) -> None:
        assert float64_next_below(1.0) == math.nextafter(1.0, -math.inf)
        assert float64_next_below(1.0) < 1.0

    def test_dispatch_by_kind(self) -> None:
        assert next_below(NumericKind.FLOAT32, 1.0) == FLOAT32_ONE_BELOW
        assert next_below(NumericKind.FLOAT64, 1.0) == 1.0 - 2.0**-53
        assert narrow_float(NumericKind.FLOAT64, 0.1) == 0.1
        assert narrow_float(NumericKind.FLOAT32, 0.1) == to_float32(0.1)

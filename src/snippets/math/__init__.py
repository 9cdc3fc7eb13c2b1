"""
Math modules для typed-snippets

Числовые kind'ы, источники энтропии и генерация случайных чисел в диапазоне.
"""

# Numeric Kinds
from src.snippets.math.numeric_kinds import (
    FLOAT32_MAX,
    FLOAT32_ONE_BELOW,
    KindTag,
    NumericCategory,
    NumericKind,
    NumericType,
    float32_next_below,
    float64_next_below,
    narrow_float,
    next_below,
    to_float32,
)

# Entropy
from src.snippets.math.entropy import (
    EntropyConfig,
    EntropySource,
    RandomEntropySource,
    SystemEntropySource,
    create_entropy_source,
    get_default_source,
    set_default_source,
)

# RangeRandom
from src.snippets.math.range_random import (
    SUPPORTED_ARITIES,
    Bounds,
    InvalidArity,
    InvalidRange,
    NoArgs,
    OneArg,
    RangeRandomError,
    RangeRandomResult,
    TwoArgs,
    UnrepresentableValue,
    UnsupportedType,
    bounds_from_args,
    coerce_value,
    random_float,
    random_int,
    range_random,
    resolve_bounds,
    resolve_kind,
    sample,
    try_range_random,
    validate_range,
    zero_value,
)

__all__ = [
    # Numeric Kinds — Constants
    "FLOAT32_MAX",
    "FLOAT32_ONE_BELOW",
    # Numeric Kinds — Types
    "KindTag",
    "NumericCategory",
    "NumericKind",
    "NumericType",
    # Numeric Kinds — Narrowing
    "float32_next_below",
    "float64_next_below",
    "narrow_float",
    "next_below",
    "to_float32",
    # Entropy
    "EntropyConfig",
    "EntropySource",
    "RandomEntropySource",
    "SystemEntropySource",
    "create_entropy_source",
    "get_default_source",
    "set_default_source",
    # RangeRandom — Constants
    "SUPPORTED_ARITIES",
    # RangeRandom — Exceptions
    "RangeRandomError",
    "InvalidArity",
    "InvalidRange",
    "UnsupportedType",
    "UnrepresentableValue",
    # RangeRandom — Types
    "Bounds",
    "NoArgs",
    "OneArg",
    "TwoArgs",
    "RangeRandomResult",
    # RangeRandom — Functions
    "bounds_from_args",
    "coerce_value",
    "random_float",
    "random_int",
    "range_random",
    "resolve_bounds",
    "resolve_kind",
    "sample",
    "try_range_random",
    "validate_range",
    "zero_value",
]

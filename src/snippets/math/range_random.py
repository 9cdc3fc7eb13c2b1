"""
RangeRandom — равномерная генерация числа в полуинтервале [min, max)

Модуль генерирует случайное значение заданного числового kind'а:
- 0 аргументов → [0, 1)
- 1 аргумент → [0, max)
- 2 аргумента → [min, max)

Нулевой min в формах с 0 и 1 аргументом: документированное поведение
по умолчанию.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min < max строго; равные или перевёрнутые границы → InvalidRange (без swap)
2. Результат всегда в [min, max), max никогда не возвращается
3. Целочисленная выборка без modulo bias
4. Kind задаётся явным тегом; dispatch через таблицу категорий

АЛГОРИТМ:
    float:    result = min + u * (max - min),  u ~ U[0, 1)
    integer:  result = min + randbelow(max - min)
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Final, Optional, Union

from src.snippets.math.entropy import EntropySource, get_default_source
from src.snippets.math.numeric_kinds import (
    FLOAT32_ONE_BELOW,
    KindTag,
    NumericCategory,
    NumericKind,
    NumericType,
    narrow_float,
    next_below,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Допустимые количества аргументов вариативной формы
SUPPORTED_ARITIES: Final[tuple[int, ...]] = (0, 1, 2)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeRandomError(Exception):
    """Базовая ошибка RangeRandom. Частичных результатов не бывает."""

    pass


class InvalidArity(RangeRandomError, TypeError):
    """Количество аргументов не 0, 1 или 2."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"invalid number of arguments: expected 0, 1, or 2, but got {count}"
        )


class InvalidRange(RangeRandomError, ValueError):
    """Разрешённый min не строго меньше max (или граница NaN/Inf)."""

    def __init__(self, min_value: Any, max_value: Any, reason: Optional[str] = None):
        self.min_value = min_value
        self.max_value = max_value
        self.reason = reason or (
            f"max ({max_value}) must be strictly greater than min ({min_value})"
        )
        super().__init__(f"validation failed: {self.reason}")


class UnsupportedType(RangeRandomError, TypeError):
    """Тег kind'а вне поддерживаемого множества или аргумент чужого типа."""

    def __init__(self, kind: Any, detail: Optional[str] = None):
        self.kind = kind
        message = f"unsupported numeric type {kind!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnrepresentableValue(RangeRandomError, ValueError):
    """Граница не представима в kind'е (например, 300 для uint8)."""

    def __init__(self, value: Any, kind: NumericKind):
        self.value = value
        self.kind = kind
        super().__init__(
            f"value {value!r} is outside the representable range of {kind.value} "
            f"[{kind.min_value}, {kind.max_value}]"
        )


# =============================================================================
# BOUNDS (TAGGED UNION)
# =============================================================================


@dataclass(frozen=True)
class NoArgs:
    """Форма без аргументов: [0, 1)"""

    pass


@dataclass(frozen=True)
class OneArg:
    """Форма с одним аргументом: [0, max)"""

    max: Number


@dataclass(frozen=True)
class TwoArgs:
    """Форма с двумя аргументами: [min, max)"""

    min: Number
    max: Number


Bounds = Union[NoArgs, OneArg, TwoArgs]


def bounds_from_args(*args: Number) -> Bounds:
    """
    Разбор вариативных аргументов в tagged union.

    Raises:
        InvalidArity: Если аргументов не 0, 1 или 2
    """
    count = len(args)
    if count == 0:
        return NoArgs()
    if count == 1:
        return OneArg(args[0])
    if count == 2:
        return TwoArgs(args[0], args[1])

    logger.debug("rejected call with %d arguments", count)
    raise InvalidArity(count)


# =============================================================================
# KIND RESOLUTION & COERCION
# =============================================================================


def resolve_kind(kind: KindTag) -> tuple[NumericKind, Optional[NumericType]]:
    """
    Разрешение тега в (NumericKind, NumericType | None).

    Raises:
        UnsupportedType: Если тег не NumericKind, не NumericType и не имя kind'а
    """
    if isinstance(kind, NumericType):
        return kind.kind, kind
    if isinstance(kind, NumericKind):
        return kind, None
    if isinstance(kind, str):
        try:
            return NumericKind(kind), None
        except ValueError:
            logger.debug("rejected unknown kind name %r", kind)
            raise UnsupportedType(kind) from None

    logger.debug("rejected kind tag of type %s", type(kind).__name__)
    raise UnsupportedType(kind)


def zero_value(kind: KindTag) -> Number:
    """Нулевое значение kind'а (0 или 0.0)."""
    numeric_kind, _ = resolve_kind(kind)
    if numeric_kind.is_integer:
        return 0
    return 0.0


def coerce_value(kind: NumericKind, value: Any) -> Number:
    """
    Приведение границы к kind'у.

    integer kind'ы: только int (bool запрещён), в пределах лимитов kind'а.
    float kind'ы: int или float (bool запрещён); float32 округляется до float32.

    Raises:
        UnsupportedType: Если Python-тип значения не подходит kind'у
        UnrepresentableValue: Если значение вне диапазона kind'а
    """
    if isinstance(value, bool):
        logger.debug("rejected bool bound %r for %s", value, kind.value)
        raise UnsupportedType(kind, f"bool value {value!r} is not a number")

    if kind.is_integer:
        if not isinstance(value, int):
            logger.debug("rejected %s bound %r for %s", type(value).__name__, value, kind.value)
            raise UnsupportedType(
                kind, f"expected an integer, got {type(value).__name__} {value!r}"
            )
        if value < kind.min_value or value > kind.max_value:
            logger.debug("rejected out-of-range bound %r for %s", value, kind.value)
            raise UnrepresentableValue(value, kind)
        return int(value)

    if not isinstance(value, (int, float)):
        logger.debug("rejected %s bound %r for %s", type(value).__name__, value, kind.value)
        raise UnsupportedType(
            kind, f"expected a real number, got {type(value).__name__} {value!r}"
        )

    try:
        number = float(value)
        if not math.isfinite(number):
            # NaN/Inf отвергаются validate_range
            return number
        return narrow_float(kind, number)
    except OverflowError:
        logger.debug("rejected out-of-range bound %r for %s", value, kind.value)
        raise UnrepresentableValue(value, kind) from None


def resolve_bounds(kind: KindTag, bounds: Bounds) -> tuple[Number, Number]:
    """
    Разрешение bounds в (min, max) kind'а.

    | форма       | min     | max     |
    |-------------|---------|---------|
    | NoArgs      | 0       | 1       |
    | OneArg(m)   | 0       | m       |
    | TwoArgs(a,b)| a       | b       |
    """
    numeric_kind, _ = resolve_kind(kind)

    if isinstance(bounds, NoArgs):
        low, high = 0, 1
    elif isinstance(bounds, OneArg):
        low, high = 0, bounds.max
    elif isinstance(bounds, TwoArgs):
        low, high = bounds.min, bounds.max
    else:
        raise TypeError(f"bounds must be NoArgs, OneArg or TwoArgs, got {bounds!r}")

    return coerce_value(numeric_kind, low), coerce_value(numeric_kind, high)


def validate_range(min_value: Number, max_value: Number) -> None:
    """
    Проверка min < max (строго) и конечности границ.

    Raises:
        InvalidRange: Если min >= max или граница NaN/Inf
    """
    for bound in (min_value, max_value):
        if isinstance(bound, float) and not math.isfinite(bound):
            logger.debug("rejected non-finite bound in [%r, %r)", min_value, max_value)
            raise InvalidRange(
                min_value,
                max_value,
                f"bounds must be finite (not NaN/Inf), got min={min_value}, max={max_value}",
            )

    if not min_value < max_value:
        logger.debug("rejected empty or inverted range [%r, %r)", min_value, max_value)
        raise InvalidRange(min_value, max_value)


# =============================================================================
# SAMPLERS
# =============================================================================


def _sample_float(
    kind: NumericKind, min_value: float, max_value: float, source: EntropySource
) -> float:
    u = source.random()
    if kind.bits == 32:
        u = narrow_float(kind, u)
        if u >= 1.0:
            u = FLOAT32_ONE_BELOW

    span = max_value - min_value
    if math.isinf(span):
        # max - min переполнился (например, [-FLOAT64_MAX, FLOAT64_MAX))
        value = min_value * (1.0 - u) + max_value * u
    else:
        value = min_value + u * span

    value = narrow_float(kind, value)

    # Округление может дать ровно max
    if value >= max_value:
        value = next_below(kind, max_value)
    if value < min_value:
        value = min_value
    return value


def _sample_integer(
    kind: NumericKind, min_value: int, max_value: int, source: EntropySource
) -> int:
    # Python int не ограничен: расширение до 64 бит не нужно,
    # span полного int64 (до 2**64 - 1) не переполняется
    return min_value + source.randbelow(max_value - min_value)


_SAMPLERS: Final[dict[NumericCategory, Callable[..., Number]]] = {
    NumericCategory.FLOAT: _sample_float,
    NumericCategory.SIGNED: _sample_integer,
    NumericCategory.UNSIGNED: _sample_integer,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def sample(kind: KindTag, bounds: Bounds, source: Optional[EntropySource] = None) -> Any:
    """
    Равномерное значение kind'а в полуинтервале, заданном bounds.

    Args:
        kind: Тег kind'а (NumericKind, NumericType или имя kind'а)
        bounds: NoArgs() / OneArg(max) / TwoArgs(min, max)
        source: Источник энтропии (default: процессный)

    Returns:
        Значение в [min, max); для NumericType обёрнутое factory

    Raises:
        UnsupportedType: Неизвестный kind или аргумент чужого типа
        UnrepresentableValue: Граница вне диапазона kind'а
        InvalidRange: min >= max или граница NaN/Inf
    """
    numeric_kind, named_type = resolve_kind(kind)
    min_value, max_value = resolve_bounds(numeric_kind, bounds)
    validate_range(min_value, max_value)

    sampler = _SAMPLERS.get(numeric_kind.category)
    if sampler is None:
        raise UnsupportedType(numeric_kind)

    value = sampler(numeric_kind, min_value, max_value, source or get_default_source())

    if named_type is not None:
        return named_type.wrap(value)
    return value


def range_random(kind: KindTag, *args: Number, source: Optional[EntropySource] = None) -> Any:
    """
    Вариативная форма RangeRandom.

    Examples:
        >>> 0.0 <= range_random(NumericKind.FLOAT64) < 1.0
        True
        >>> 10 <= range_random(NumericKind.INT, 10, 20) < 20
        True
        >>> range_random(NumericKind.INT)  # в [0, 1) только 0
        0
        >>> range_random(NumericKind.INT, 10, 5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidRange: validation failed: max (5) must be strictly greater than min (10)

    Raises:
        InvalidArity: Если аргументов больше двух
        (а также всё, что поднимает sample)
    """
    return sample(kind, bounds_from_args(*args), source=source)


def random_int(*args: int, source: Optional[EntropySource] = None) -> int:
    """range_random для kind'а int."""
    return range_random(NumericKind.INT, *args, source=source)


def random_float(*args: float, source: Optional[EntropySource] = None) -> float:
    """range_random для kind'а float64."""
    return range_random(NumericKind.FLOAT64, *args, source=source)


# =============================================================================
# RESULT FORM
# =============================================================================


@dataclass(frozen=True)
class RangeRandomResult:
    """
    Результат RangeRandom в форме (value, error).

    При ошибке value: нулевое значение kind'а, error: исключение.
    """

    value: Any
    error: Optional[RangeRandomError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_range_random(
    kind: KindTag, *args: Number, source: Optional[EntropySource] = None
) -> RangeRandomResult:
    """
    range_random без исключений: ошибки возвращаются в RangeRandomResult.

    Для неизвестного kind'а нулевое значение не определено → value=None.
    """
    try:
        return RangeRandomResult(range_random(kind, *args, source=source))
    except RangeRandomError as exc:
        try:
            placeholder = zero_value(kind)
        except UnsupportedType:
            placeholder = None
        return RangeRandomResult(placeholder, exc)

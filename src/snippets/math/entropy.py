"""
Entropy Sources — внешние источники равномерной случайности

Единственная внешняя зависимость RangeRandom. Источник обязан
предоставлять:
- random(): равномерное float в [0, 1) с двойной точностью
- randbelow(n): равномерное целое в [0, n) без modulo bias

Потокобезопасность: свойство конкретного источника. Процессный
источник по умолчанию заменяется до начала конкурентного использования.
"""

import random
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class EntropySource(Protocol):
    """Контракт источника энтропии"""

    def random(self) -> float:  # [0.0, 1.0)
        ...

    def randbelow(self, n: int) -> int:  # [0, n)
        ...


# =============================================================================
# IMPLEMENTATIONS
# =============================================================================


class RandomEntropySource:
    """
    Источник на базе random.Random (Mersenne Twister).

    Seed задаётся при создании; None → seed из системной энтропии.
    randrange использует rejection sampling по битам, поэтому
    распределение в [0, n) не смещено для любого n.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return self._rng.randrange(n)


class SystemEntropySource(RandomEntropySource):
    """Источник на базе os.urandom (random.SystemRandom). Seed не поддерживается."""

    def __init__(self):
        self._rng = random.SystemRandom()


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EntropyConfig:
    """
    Конфигурация источника энтропии.

    seed игнорируется при use_system=True.
    """

    seed: Optional[int] = None
    use_system: bool = False


def create_entropy_source(config: Optional[EntropyConfig] = None) -> EntropySource:
    """
    Создание источника энтропии по конфигурации.

    Args:
        config: Конфигурация (default: EntropyConfig())

    Returns:
        SystemEntropySource при use_system, иначе RandomEntropySource(seed)
    """
    config = config or EntropyConfig()
    if config.use_system:
        return SystemEntropySource()
    return RandomEntropySource(config.seed)


# =============================================================================
# PROCESS-WIDE DEFAULT
# =============================================================================

_DEFAULT_SOURCE: EntropySource = RandomEntropySource()


def get_default_source() -> EntropySource:
    """Процессный источник, используемый когда вызывающий не передал свой."""
    return _DEFAULT_SOURCE


def set_default_source(source: EntropySource) -> EntropySource:
    """
    Замена процессного источника.

    Returns:
        Предыдущий источник (для восстановления)
    """
    global _DEFAULT_SOURCE

    if not isinstance(source, EntropySource):
        raise TypeError(f"source must implement random() and randbelow(), got {type(source)!r}")

    previous = _DEFAULT_SOURCE
    _DEFAULT_SOURCE = source
    return previous

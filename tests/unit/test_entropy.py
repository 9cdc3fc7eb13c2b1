"""
Тесты для источников энтропии

Проверяет:
1. Диапазоны random() и randbelow()
2. Воспроизводимость при фиксированном seed
3. Конфигурацию и процессный источник по умолчанию
"""

import pytest

from src.snippets.math.entropy import (
    EntropyConfig,
    EntropySource,
    RandomEntropySource,
    SystemEntropySource,
    create_entropy_source,
    get_default_source,
    set_default_source,
)


class TestRandomEntropySource:
    """Тесты для RandomEntropySource"""

    def test_random_in_unit_interval(self) -> None:
        source = RandomEntropySource(seed=1)
        assert all(0.0 <= source.random() < 1.0 for _ in range(1000))

    def test_randbelow_in_range(self) -> None:
        source = RandomEntropySource(seed=2)
        values = {source.randbelow(7) for _ in range(1000)}
        assert values == set(range(7))

    def test_randbelow_one_is_zero(self) -> None:
        source = RandomEntropySource(seed=3)
        assert all(source.randbelow(1) == 0 for _ in range(50))

    def test_randbelow_large_n(self) -> None:
        source = RandomEntropySource(seed=4)
        n = 2**64 - 1
        assert all(0 <= source.randbelow(n) < n for _ in range(100))

    @pytest.mark.parametrize("n", [0, -1])
    def test_randbelow_non_positive_rejected(self, n: int) -> None:
        with pytest.raises(ValueError, match="n must be positive"):
            RandomEntropySource(seed=5).randbelow(n)

    def test_seed_reproducible(self) -> None:
        first = RandomEntropySource(seed=42)
        second = RandomEntropySource(seed=42)
        assert [first.random() for _ in range(10)] == [second.random() for _ in range(10)]
        assert [first.randbelow(100) for _ in range(10)] == [
            second.randbelow(100) for _ in range(10)
        ]

    def test_implements_protocol(self) -> None:
        assert isinstance(RandomEntropySource(), EntropySource)
        assert isinstance(SystemEntropySource(), EntropySource)


class TestSystemEntropySource:
    """Тесты для SystemEntropySource"""

    def test_ranges(self) -> None:
        source = SystemEntropySource()
        assert all(0.0 <= source.random() < 1.0 for _ in range(100))
        assert all(0 <= source.randbelow(10) < 10 for _ in range(100))


class TestCreateEntropySource:
    """Тесты для create_entropy_source"""

    def test_default_config(self) -> None:
        assert isinstance(create_entropy_source(), RandomEntropySource)

    def test_seeded_config(self) -> None:
        config = EntropyConfig(seed=7)
        first = create_entropy_source(config)
        second = create_entropy_source(config)
        assert first.random() == second.random()

    def test_system_config(self) -> None:
        source = create_entropy_source(EntropyConfig(seed=7, use_system=True))
        assert isinstance(source, SystemEntropySource)

    def test_config_immutable(self) -> None:
        config = EntropyConfig()
        with pytest.raises(AttributeError):
            config.seed = 1  # type: ignore[misc]


class TestDefaultSource:
    """Тесты для процессного источника"""

    def test_default_exists(self) -> None:
        assert isinstance(get_default_source(), EntropySource)

    def test_set_and_restore(self) -> None:
        replacement = RandomEntropySource(seed=9)
        previous = set_default_source(replacement)
        try:
            assert get_default_source() is replacement
        finally:
            set_default_source(previous)
        assert get_default_source() is previous

    def test_rejects_non_source(self) -> None:
        with pytest.raises(TypeError):
            set_default_source(object())  # type: ignore[arg-type]

"""
Order Decoder — декодирование JSON документа заказа в модели

Декодирование ограничено базовой проверкой типов (Pydantic).
Ошибки формата JSON и несоответствия типов → pydantic.ValidationError.

Образцы документов лежат в samples/ рядом с модулем.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from src.snippets.domain.order import Order

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DecoderConfig:
    """
    Конфигурация декодера.

    strict=True отключает приведение типов Pydantic (например, "1" → 1).
    """

    strict: bool = False


# =============================================================================
# DECODER
# =============================================================================


class OrderDecoder:
    """
    Декодер документов заказа.

    Находит образцы в samples/ относительно этого файла.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()
        self._sample_dir = Path(__file__).parent / "samples"

    def decode(self, text: Union[str, bytes]) -> Order:
        """
        Декодирование JSON текста.

        Args:
            text: JSON документ (str или bytes)

        Returns:
            Order

        Raises:
            ValidationError: Невалидный JSON или несоответствие типов
        """
        return Order.model_validate_json(text, strict=self.config.strict)

    def load(self, path: Union[str, Path]) -> Order:
        """
        Декодирование JSON файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ValidationError: Невалидный JSON или несоответствие типов
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Order document not found: {path}")

        with open(path, "rb") as f:
            order = self.decode(f.read())

        logger.debug("decoded order %s from %s", order.order_id, path)
        return order

    def load_sample(self, name: str = "order") -> Order:
        """
        Загрузка встроенного образца samples/<name>.json.

        Raises:
            FileNotFoundError: Если образец не найден
        """
        return self.load(self._sample_dir / f"{name}.json")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def decode_order(text: Union[str, bytes]) -> Order:
    """
    Декодирование JSON документа заказа.

    Raises:
        ValidationError: Невалидный JSON или несоответствие типов
    """
    return OrderDecoder().decode(text)


def load_sample_order(name: str = "order") -> Order:
    """Загрузка встроенного образца заказа."""
    return OrderDecoder().load_sample(name)

"""
Contract Decoding Module

Декодирование JSON документа заказа в доменные модели.
"""

from .order_decoder import (
    DecoderConfig,
    OrderDecoder,
    decode_order,
    load_sample_order,
)

__all__ = [
    # Classes
    "DecoderConfig",
    "OrderDecoder",
    # Functions
    "decode_order",
    "load_sample_order",
]

"""
Domain models.

Contains the order document entities: Order, Customer, Item and nested records.
"""

from src.snippets.domain.order import (
    Address,
    Availability,
    Customer,
    Item,
    Order,
    PaymentInfo,
    PhoneNumber,
    ShippingInfo,
)

__all__ = [
    "Order",
    "Customer",
    "PhoneNumber",
    "Address",
    "Item",
    "Availability",
    "PaymentInfo",
    "ShippingInfo",
]

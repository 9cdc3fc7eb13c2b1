"""
Order — Модель заказа (вложенный JSON документ)

Immutable Pydantic модели, соответствующие документу заказа:
Order → Customer (PhoneNumber[], Address), Item[] (Availability),
PaymentInfo, ShippingInfo.

JSON ключи в camelCase (alias), поля модели в snake_case.
Nullable/optional поля имеют default None или пустой список.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


# Общая конфигурация: immutable + заполнение по имени поля и по alias
_MODEL_CONFIG = {"frozen": True, "populate_by_name": True}


# =============================================================================
# CUSTOMER
# =============================================================================


class PhoneNumber(BaseModel):
    """Телефон покупателя (элемент customer.phoneNumbers)"""

    type: str = Field(..., description="Тип номера (home, work, ...)")
    number: str = Field(..., description="Номер в международном формате")

    model_config = _MODEL_CONFIG


class Address(BaseModel):
    """Адрес покупателя"""

    street: str
    city: str
    state: str
    zip_code: str = Field(..., alias="zipCode")
    country: str

    model_config = _MODEL_CONFIG


class Customer(BaseModel):
    """Покупатель"""

    customer_id: str = Field(..., alias="customerId")
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone_numbers: list[PhoneNumber] = Field(default_factory=list, alias="phoneNumbers")
    address: Address

    model_config = _MODEL_CONFIG

    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# =============================================================================
# ITEMS
# =============================================================================


class Availability(BaseModel):
    """
    Наличие товара на складе.

    warehouse_location задан для товара в наличии,
    estimated_restock_date для отсутствующего (если известна).
    """

    in_stock: bool = Field(..., alias="inStock")
    warehouse_location: Optional[str] = Field(None, alias="warehouseLocation")
    estimated_restock_date: Optional[date] = Field(None, alias="estimatedRestockDate")

    model_config = _MODEL_CONFIG

    def describe(self) -> str:
        """Человекочитаемое описание наличия."""
        if self.in_stock:
            return f"In Stock at {self.warehouse_location or ''}"
        if self.estimated_restock_date is not None:
            return (
                "Out of Stock, estimated restock: "
                f"{self.estimated_restock_date.isoformat()}"
            )
        return "Out of Stock, no restock date available"


class Item(BaseModel):
    """Позиция заказа"""

    item_id: str = Field(..., alias="itemId")
    product_name: str = Field(..., alias="productName")
    category: str
    quantity: int
    unit_price: float = Field(..., alias="unitPrice")
    total_price: float = Field(..., alias="totalPrice")
    features: list[str] = Field(default_factory=list)
    availability: Availability

    model_config = _MODEL_CONFIG


# =============================================================================
# PAYMENT & SHIPPING
# =============================================================================


class PaymentInfo(BaseModel):
    """Оплата"""

    method: str
    card_number_last4: str = Field(..., alias="cardNumberLast4")
    transaction_id: str = Field(..., alias="transactionId")
    amount_paid: float = Field(..., alias="amountPaid")
    currency: str

    model_config = _MODEL_CONFIG


class ShippingInfo(BaseModel):
    """Доставка"""

    method: str
    cost: float
    tracking_number: str = Field(..., alias="trackingNumber")
    status: str
    estimated_delivery_date: date = Field(..., alias="estimatedDeliveryDate")

    model_config = _MODEL_CONFIG


# =============================================================================
# ORDER
# =============================================================================


class Order(BaseModel):
    """
    Заказ, корневой объект документа.

    notes nullable (null в JSON → None), is_gift по умолчанию False.
    order_date декодируется как timezone-aware datetime (RFC 3339).
    """

    order_id: str = Field(..., alias="orderId")
    customer: Customer
    items: list[Item] = Field(default_factory=list)
    payment_info: PaymentInfo = Field(..., alias="paymentInfo")
    shipping_info: ShippingInfo = Field(..., alias="shippingInfo")
    order_date: datetime = Field(..., alias="orderDate")
    status: str
    notes: Optional[str] = None
    is_gift: bool = Field(False, alias="isGift")

    model_config = _MODEL_CONFIG

    def item_count(self) -> int:
        return len(self.items)

    def out_of_stock_items(self) -> list[Item]:
        """Позиции, которых нет в наличии."""
        return [item for item in self.items if not item.availability.in_stock]

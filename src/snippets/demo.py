"""
Demo — печать результатов RangeRandom и сводки заказа

Запуск: snippets-demo [random|order] [--seed N] [--order-file PATH] [--verbose]
"""

import argparse
import logging
from datetime import datetime, timedelta
from typing import Optional

from src.snippets.contracts.order_decoder import OrderDecoder
from src.snippets.domain.order import Order
from src.snippets.math.entropy import EntropyConfig, EntropySource, create_entropy_source
from src.snippets.math.numeric_kinds import NumericKind, NumericType
from src.snippets.math.range_random import InvalidRange, range_random


class PlayerLevel(int):
    """Именованный тип уровня игрока поверх uint8"""

    pass


PLAYER_LEVEL = NumericType("PlayerLevel", NumericKind.UINT8, PlayerLevel)


# =============================================================================
# FORMATTING
# =============================================================================


def _format_list(values: list[str]) -> str:
    return "[" + " ".join(values) + "]"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _format_rfc3339(value: datetime) -> str:
    # RFC 3339 с точностью до секунд, UTC как "Z"
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        return value.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
    return value.isoformat(timespec="seconds")


# =============================================================================
# RANDOM DEMO
# =============================================================================


def random_demo_lines(source: Optional[EntropySource] = None) -> list[str]:
    """Строки демонстрации RangeRandom для float64, int, PlayerLevel и ошибки."""
    f64 = NumericKind.FLOAT64
    lines = ["--- Demonstrating RandomNumber function ---", "", "[float64]"]
    lines.append(f"RandomNumber[float64](): {range_random(f64, source=source):f}")
    lines.append(f"RandomNumber[float64](100): {range_random(f64, 100, source=source):f}")
    lines.append(
        f"RandomNumber[float64](-50, 50): {range_random(f64, -50, 50, source=source):f}"
    )

    lines.extend(["", "[int]"])
    lines.append(f"RandomNumber[int](): {range_random(NumericKind.INT, source=source)}")
    lines.append(f"RandomNumber[int](1000): {range_random(NumericKind.INT, 1000, source=source)}")
    lines.append(
        f"RandomNumber[int](10, 20): {range_random(NumericKind.INT, 10, 20, source=source)}"
    )

    lines.extend(["", "[Custom Type: PlayerLevel (underlying uint8)]"])
    level = range_random(PLAYER_LEVEL, 5, 25, source=source)
    lines.append(f"RandomNumber[PlayerLevel](5, 25): {level}")

    lines.extend(["", "[Error Handling]"])
    try:
        range_random(NumericKind.INT, 10, 5, source=source)
    except InvalidRange as exc:
        lines.append(f"Successfully caught expected error: {exc}")
    return lines


# =============================================================================
# ORDER SUMMARY
# =============================================================================


def order_summary_lines(order: Order) -> list[str]:
    """Строки проверки декодированного заказа."""
    customer = order.customer
    lines = [
        f"Order ID: {order.order_id}",
        f"Customer Name: {customer.full_name()}",
        f"Customer Email: {customer.email}",
        f"Number of items: {order.item_count()}",
    ]

    if order.items:
        first = order.items[0]
        lines.append(f"First item name: {first.product_name}")
        lines.append(f"First item quantity: {first.quantity}")
        lines.append(f"{first.product_name} features: {_format_list(first.features)}")
    if len(order.items) > 1:
        second = order.items[1]
        lines.append(
            f"{second.product_name} in stock: {_format_bool(second.availability.in_stock)}"
        )
    if len(order.items) > 2:
        third = order.items[2]
        restock = third.availability.estimated_restock_date
        if not third.availability.in_stock and restock is not None:
            lines.append(f"{third.product_name} estimated restock date: {restock.isoformat()}")

    payment = order.payment_info
    lines.append(f"Payment Method: {payment.method}")
    lines.append(f"Total Amount Paid: {payment.amount_paid:.2f} {payment.currency}")
    lines.append(f"Shipping Status: {order.shipping_info.status}")
    lines.append(f"Order Date: {_format_rfc3339(order.order_date)}")
    lines.append(f"Notes: {order.notes}" if order.notes is not None else "Notes: (null)")

    lines.extend(["", "Customer Phone Numbers:"])
    for phone in customer.phone_numbers:
        lines.append(f"  Type: {phone.type}, Number: {phone.number}")

    lines.extend(["", "Order Items:"])
    for item in order.items:
        lines.append(
            f"  - {item.product_name} (x{item.quantity}) @ {item.unit_price:.2f} each. "
            f"Total: {item.total_price:.2f}"
        )
        lines.append(f"    Features: {_format_list(item.features)}")
        lines.append(f"    Availability: {item.availability.describe()}")
    return lines


# =============================================================================
# CLI
# =============================================================================


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snippets-demo", description=__doc__)
    parser.add_argument(
        "section",
        nargs="?",
        choices=("all", "random", "order"),
        default="all",
        help="Which demo to print (default: all)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the entropy source")
    parser.add_argument(
        "--order-file",
        default=None,
        help="Order JSON document (default: bundled sample)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    lines: list[str] = []
    if args.section in ("all", "random"):
        source = create_entropy_source(EntropyConfig(seed=args.seed))
        lines.extend(random_demo_lines(source))
    if args.section in ("all", "order"):
        decoder = OrderDecoder()
        order = decoder.load(args.order_file) if args.order_file else decoder.load_sample()
        if lines:
            lines.append("")
        lines.extend(order_summary_lines(order))

    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

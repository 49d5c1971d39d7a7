"""Order aggregate, the record of a completed purchase.

An Order is written once, at placement, from a snapshot of the customer's
cart. It never changes afterwards and is independent of later cart activity.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, String

from smartshop.domain import smartshop
from smartshop.order.events import OrderPlaced
from smartshop.shared.money import default_currency, format_money


@smartshop.entity(part_of="Order")
class OrderLine:
    """One purchased unit, copied from a cart entry."""

    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    unit_price = Float(default=0.0, min_value=0.0)


@smartshop.aggregate
class Order:
    order_id = Identifier(identifier=True, required=True)
    customer_id = Identifier(required=True)
    customer_name = String(max_length=255)
    lines = HasMany(OrderLine)
    total = Float(default=0.0)
    currency = String(max_length=3)
    placed_at = DateTime()

    @classmethod
    def place(cls, order_id, customer_id, customer_name, lines, total):
        """Record a new order.

        Args:
            lines: Ordered list of dicts with product_id, product_name, unit_price.
        """
        now = datetime.now(UTC)
        currency = default_currency()
        order = cls(
            order_id=order_id,
            customer_id=customer_id,
            customer_name=customer_name,
            total=total,
            currency=currency,
            placed_at=now,
        )
        for line in lines:
            order.add_lines(OrderLine(**line))

        order.raise_(
            OrderPlaced(
                order_id=str(order_id),
                customer_id=str(customer_id),
                lines=json.dumps(lines),
                line_count=len(lines),
                total=total,
                currency=currency,
                placed_at=now,
            )
        )
        return order

    def __str__(self):
        return (
            f"Order[ID={self.order_id}, Customer={self.customer_id}, "
            f"Items={len(self.lines)}, Total={format_money(self.total, self.currency)}]"
        )

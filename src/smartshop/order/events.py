"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from smartshop.domain import smartshop


@smartshop.event(part_of="Order")
class OrderPlaced:
    """A customer's cart was converted into an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    lines = Text(required=True)  # JSON: list of {product_id, product_name, unit_price}
    line_count = Integer(required=True)
    total = Float()
    currency = String(required=True)
    placed_at = DateTime(required=True)

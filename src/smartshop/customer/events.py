"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from smartshop.domain import smartshop


@smartshop.event(part_of="Customer")
class CustomerRegistered:
    """A new customer with an empty cart."""

    __version__ = 1

    customer_id = Identifier(required=True)
    name = String(required=True)
    registered_at = DateTime(required=True)


@smartshop.event(part_of="Customer")
class CartItemAdded:
    """Units of a product were put in the cart."""

    __version__ = 1

    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_price = Float()
    cart_total = Float()


@smartshop.event(part_of="Customer")
class CartItemRemoved:
    """Units of a product were taken out of the cart."""

    __version__ = 1

    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    cart_total = Float()


@smartshop.event(part_of="Customer")
class CartCleared:
    __version__ = 1

    customer_id = Identifier(required=True)
    entries_cleared = Integer()

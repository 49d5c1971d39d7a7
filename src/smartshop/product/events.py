"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from smartshop.domain import smartshop


@smartshop.event(part_of="Product")
class ProductListed:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float()
    stock_quantity = Integer()
    listed_at = DateTime(required=True)


@smartshop.event(part_of="Product")
class StockReduced:
    """Units left the shelf because an order was placed."""

    __version__ = 1

    product_id = Identifier(required=True)
    amount = Integer(required=True)
    previous_stock = Integer()
    new_stock = Integer()


@smartshop.event(part_of="Product")
class ProductRestocked:
    __version__ = 1

    product_id = Identifier(required=True)
    amount = Integer(required=True)
    previous_stock = Integer()
    new_stock = Integer()


@smartshop.event(part_of="Product")
class ProductPriceChanged:
    __version__ = 1

    product_id = Identifier(required=True)
    previous_price = Float()
    new_price = Float()

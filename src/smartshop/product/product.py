"""Product aggregate: a sellable item with a price and a stock count."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from smartshop.domain import smartshop
from smartshop.product.events import ProductListed, ProductPriceChanged, ProductRestocked, StockReduced


@smartshop.aggregate
class Product:
    """A catalogue item. Stock is only decremented when an order is placed."""

    product_id = Identifier(identifier=True, required=True)
    name = String(required=True, max_length=255)
    price = Float(default=0.0, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)
    listed_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, product_id, name, price, stock_quantity=0):
        now = datetime.now(UTC)
        product = cls(
            product_id=product_id,
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            listed_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=str(product_id),
                name=name,
                price=price,
                stock_quantity=stock_quantity,
                listed_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def reduce_stock(self, amount):
        """Take `amount` units out of stock."""
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})
        if amount > self.stock_quantity:
            raise ValidationError({"stock_quantity": [f"Insufficient stock for {self.name}"]})

        previous = self.stock_quantity
        self.stock_quantity = previous - amount

        self.raise_(
            StockReduced(
                product_id=str(self.product_id),
                amount=amount,
                previous_stock=previous,
                new_stock=self.stock_quantity,
            )
        )

    def restock(self, amount):
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})

        previous = self.stock_quantity
        self.stock_quantity = previous + amount

        self.raise_(
            ProductRestocked(
                product_id=str(self.product_id),
                amount=amount,
                previous_stock=previous,
                new_stock=self.stock_quantity,
            )
        )

    # -------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------
    def change_price(self, new_price):
        """Reprice the product. Carts keep the price each unit was added at."""
        if new_price is None or new_price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        previous = self.price
        self.price = new_price

        self.raise_(
            ProductPriceChanged(
                product_id=str(self.product_id),
                previous_price=previous,
                new_price=new_price,
            )
        )

"""Customer aggregate with the shopping cart.

The cart is a flat, ordered list of entries: a product added with quantity N
occupies N entries. ``cart_total`` is maintained incrementally alongside the
entries rather than recomputed from them.
"""

from datetime import UTC, datetime

from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, String

from smartshop.customer.events import CartCleared, CartItemAdded, CartItemRemoved, CustomerRegistered
from smartshop.domain import smartshop
from smartshop.order.numbering import next_order_id
from smartshop.order.order import Order
from smartshop.shared.money import format_money


@smartshop.entity(part_of="Customer")
class CartEntry:
    """One unit of a product sitting in the cart, priced when it was added."""

    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    unit_price = Float(default=0.0, min_value=0.0)
    added_at = DateTime()


@smartshop.aggregate
class Customer:
    customer_id = Identifier(identifier=True, required=True)
    name = String(required=True, max_length=255)
    cart_entries = HasMany(CartEntry)
    cart_total = Float(default=0.0)
    created_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, customer_id, name):
        now = datetime.now(UTC)
        customer = cls(customer_id=customer_id, name=name, cart_total=0.0, created_at=now)
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer_id),
                name=name,
                registered_at=now,
            )
        )
        return customer

    # -------------------------------------------------------------------
    # Cart queries
    # -------------------------------------------------------------------
    @property
    def cart(self):
        """A copy of the cart entries, in the order they were added."""
        return list(self.cart_entries)

    def quantity_of(self, product_id):
        return sum(1 for entry in self.cart_entries if str(entry.product_id) == str(product_id))

    # -------------------------------------------------------------------
    # Cart management
    # -------------------------------------------------------------------
    def add_to_cart(self, product, quantity):
        """Put `quantity` units of `product` in the cart.

        Stock is checked against the request but not reserved; it is only
        taken when the order is placed.
        """
        if product is None:
            raise ValidationError({"product": ["Product cannot be null"]})
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > product.stock_quantity:
            raise ValidationError({"quantity": [f"Insufficient stock for {product.name}"]})

        now = datetime.now(UTC)
        for _ in range(quantity):
            self.add_cart_entries(
                CartEntry(
                    product_id=product.product_id,
                    product_name=product.name,
                    unit_price=product.price,
                    added_at=now,
                )
            )
        self.cart_total += product.price * quantity

        self.raise_(
            CartItemAdded(
                customer_id=str(self.customer_id),
                product_id=str(product.product_id),
                quantity=quantity,
                unit_price=product.price,
                cart_total=self.cart_total,
            )
        )

    def remove_from_cart(self, product, quantity):
        """Take `quantity` units of `product` out of the cart, earliest entries first.

        The total is reduced by the price of the product passed in, not the
        price stored on the removed entries. If the product was repriced since
        it was added, the total no longer matches the entries.
        """
        if product is None:
            raise ValidationError({"product": ["Product cannot be null"]})
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        matching = [entry for entry in self.cart_entries if str(entry.product_id) == str(product.product_id)]
        if len(matching) < quantity:
            raise ValidationError({"quantity": ["Not enough items in cart"]})

        for entry in matching[:quantity]:
            self.remove_cart_entries(entry)
            self.cart_total -= product.price

        self.raise_(
            CartItemRemoved(
                customer_id=str(self.customer_id),
                product_id=str(product.product_id),
                quantity=quantity,
                cart_total=self.cart_total,
            )
        )

    def clear_cart(self):
        cleared = len(self.cart_entries)
        self._empty_cart()
        self.raise_(CartCleared(customer_id=str(self.customer_id), entries_cleared=cleared))

    def _empty_cart(self):
        for entry in list(self.cart_entries):
            self.remove_cart_entries(entry)
        self.cart_total = 0.0

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def place_order(self, products):
        """Convert the cart into an Order and take the purchased units out of stock.

        Args:
            products: The Product aggregates referenced by the cart.

        Returns:
            The new Order. The cart is empty afterwards.
        """
        if not self.cart_entries:
            raise InvalidOperationError("Cannot place order with empty cart")

        catalogue = {str(product.product_id): product for product in products}
        product_ids = list(dict.fromkeys(str(entry.product_id) for entry in self.cart_entries))

        missing = [product_id for product_id in product_ids if product_id not in catalogue]
        if missing:
            raise ValidationError({"products": [f"Product {product_id} is not available" for product_id in missing]})
        for product_id in product_ids:
            if self.quantity_of(product_id) > catalogue[product_id].stock_quantity:
                raise ValidationError({"stock_quantity": [f"Insufficient stock for {catalogue[product_id].name}"]})

        snapshot = [
            {
                "product_id": str(entry.product_id),
                "product_name": entry.product_name,
                "unit_price": entry.unit_price,
            }
            for entry in self.cart_entries
        ]
        total = self.cart_total
        order_id = next_order_id()

        for line in snapshot:
            catalogue[line["product_id"]].reduce_stock(1)

        order = Order.place(
            order_id=order_id,
            customer_id=str(self.customer_id),
            customer_name=self.name,
            lines=snapshot,
            total=total,
        )

        self._empty_cart()
        return order

    def __str__(self):
        return f"Customer[ID={self.customer_id}, Name={self.name}, CartTotal={format_money(self.cart_total)}]"

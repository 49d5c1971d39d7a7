"""Application tests for the PlaceOrder command."""

import pytest
import structlog
from protean import current_domain
from protean.exceptions import InvalidOperationError, ValidationError
from smartshop.customer.cart import AddToCart, RemoveFromCart
from smartshop.customer.customer import Customer
from smartshop.customer.registration import RegisterCustomer
from smartshop.order import placement
from smartshop.order.order import Order
from smartshop.order.placement import PlaceOrder
from smartshop.product.management import ListProduct
from smartshop.product.product import Product


@pytest.fixture()
def shopper():
    current_domain.process(RegisterCustomer(customer_id="cust-001", name="Amina"), asynchronous=False)
    for product_id, price, stock in [("prod-001", 1000.0, 5), ("prod-002", 250.0, 10)]:
        current_domain.process(
            ListProduct(product_id=product_id, name=f"Product {product_id}", price=price, stock_quantity=stock),
            asynchronous=False,
        )
    return "cust-001"


def _add(customer_id, product_id, quantity):
    current_domain.process(
        AddToCart(customer_id=customer_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


class TestPlaceOrderCommand:
    def test_order_is_persisted(self, shopper):
        _add(shopper, "prod-001", 2)
        _add(shopper, "prod-002", 1)

        order_id = current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.customer_id == shopper
        assert len(order.lines) == 3
        assert order.total == 2250.0

    def test_stock_is_reduced(self, shopper):
        _add(shopper, "prod-001", 2)
        _add(shopper, "prod-002", 1)

        current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)

        products = current_domain.repository_for(Product)
        assert products.get("prod-001").stock_quantity == 3
        assert products.get("prod-002").stock_quantity == 9

    def test_cart_is_emptied(self, shopper):
        _add(shopper, "prod-001", 1)

        current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)

        customer = current_domain.repository_for(Customer).get(shopper)
        assert len(customer.cart_entries) == 0
        assert customer.cart_total == 0.0

    def test_empty_cart_is_rejected(self, shopper):
        with pytest.raises(InvalidOperationError):
            current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)

    def test_rejected_order_leaves_saved_state_alone(self, shopper):
        current_domain.process(RegisterCustomer(customer_id="cust-002", name="Brian"), asynchronous=False)
        _add(shopper, "prod-001", 3)
        _add("cust-002", "prod-001", 3)

        current_domain.process(PlaceOrder(customer_id="cust-002"), asynchronous=False)

        with pytest.raises(ValidationError) as exc:
            current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)
        assert "stock_quantity" in exc.value.messages

        assert current_domain.repository_for(Product).get("prod-001").stock_quantity == 2
        customer = current_domain.repository_for(Customer).get(shopper)
        assert len(customer.cart_entries) == 3
        assert customer.cart_total == 3000.0

    def test_removal_after_reload_keeps_remaining_order(self, shopper):
        current_domain.process(
            ListProduct(product_id="prod-003", name="Product prod-003", price=50.0, stock_quantity=4),
            asynchronous=False,
        )
        for product_id in ["prod-001", "prod-002", "prod-001", "prod-003"]:
            _add(shopper, product_id, 1)

        current_domain.process(
            RemoveFromCart(customer_id=shopper, product_id="prod-001", quantity=1),
            asynchronous=False,
        )

        customer = current_domain.repository_for(Customer).get(shopper)
        assert [str(entry.product_id) for entry in customer.cart_entries] == ["prod-002", "prod-001", "prod-003"]
        assert customer.cart_total == 1300.0

        order_id = current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)
        order = current_domain.repository_for(Order).get(order_id)
        assert [str(line.product_id) for line in order.lines] == ["prod-002", "prod-001", "prod-003"]


class _RecordingLogger:
    def __init__(self):
        self.calls = []

    def info(self, event, **kwargs):
        self.calls.append((event, dict(structlog.contextvars.get_contextvars())))


class TestPlaceOrderLogging:
    def test_customer_is_bound_while_logging(self, shopper, monkeypatch):
        recorder = _RecordingLogger()
        monkeypatch.setattr(placement, "logger", recorder)
        _add(shopper, "prod-001", 1)

        current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)

        assert recorder.calls == [("Order placed", {"customer_id": shopper})]
        assert structlog.contextvars.get_contextvars() == {}

    def test_context_is_cleared_when_placement_fails(self, shopper):
        with pytest.raises(InvalidOperationError):
            current_domain.process(PlaceOrder(customer_id=shopper), asynchronous=False)

        assert structlog.contextvars.get_contextvars() == {}

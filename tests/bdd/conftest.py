"""Shared BDD fixtures and step definitions for the shopping cart."""

import pytest
from protean.exceptions import InvalidOperationError, ValidationError
from pytest_bdd import given, parsers, then
from smartshop.customer.customer import Customer
from smartshop.product.product import Product


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def placed():
    """Container for the order produced by a When step."""
    return {"order": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer", target_fixture="customer")
def registered_customer():
    customer = Customer.register(customer_id="cust-001", name="Amina")
    customer._events.clear()
    return customer


@given(parsers.cfparse("a product priced {price:d} with {stock:d} in stock"), target_fixture="product")
def product_in_stock(price, stock):
    return Product.create(product_id="prod-001", name="Ceramic Mug", price=float(price), stock_quantity=stock)


@given(parsers.cfparse("the customer has {qty:d} unit in the cart"))
@given(parsers.cfparse("the customer has {qty:d} units in the cart"))
def customer_has_units(customer, product, qty):
    customer.add_to_cart(product, qty)
    customer._events.clear()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart holds {count:d} entry"))
@then(parsers.cfparse("the cart holds {count:d} entries"))
def cart_holds(customer, count):
    assert len(customer.cart_entries) == count


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total_is(customer, total):
    assert customer.cart_total == pytest.approx(total)


@then("the cart action fails with a validation error")
def cart_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then("the order is rejected because the cart is empty")
def order_rejected(error, placed):
    assert isinstance(error["exc"], InvalidOperationError)
    assert placed["order"] is None

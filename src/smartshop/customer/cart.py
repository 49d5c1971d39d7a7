"""Cart management — commands and handler.

Products are loaded from the catalogue so that the cart always prices and
stock-checks against the current Product state.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from smartshop.customer.customer import Customer
from smartshop.domain import smartshop
from smartshop.product.product import Product


@smartshop.command(part_of="Customer")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@smartshop.command(part_of="Customer")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@smartshop.command(part_of="Customer")
class ClearCart:
    customer_id = Identifier(required=True)


@smartshop.command_handler(part_of=Customer)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        product = current_domain.repository_for(Product).get(command.product_id)
        customer.add_to_cart(product, command.quantity)
        repo.add(customer)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        product = current_domain.repository_for(Product).get(command.product_id)
        customer.remove_from_cart(product, command.quantity)
        repo.add(customer)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.clear_cart()
        repo.add(customer)

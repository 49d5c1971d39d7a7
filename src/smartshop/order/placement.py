"""Order placement — command and handler.

Placing an order touches three aggregates: the Order is created, every
Product in the cart loses stock, and the Customer's cart is emptied. All
three are written in the handler's unit of work.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from smartshop.customer.customer import Customer
from smartshop.domain import smartshop
from smartshop.order.order import Order
from smartshop.product.product import Product
from smartshop.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


@smartshop.command(part_of="Customer")
class PlaceOrder:
    customer_id = Identifier(required=True)


@smartshop.command_handler(part_of=Customer)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        customer_repo = current_domain.repository_for(Customer)
        product_repo = current_domain.repository_for(Product)

        add_context(customer_id=str(command.customer_id))
        try:
            customer = customer_repo.get(command.customer_id)
            product_ids = list(dict.fromkeys(str(entry.product_id) for entry in customer.cart_entries))
            products = [product_repo.get(product_id) for product_id in product_ids]

            order = customer.place_order(products)

            current_domain.repository_for(Order).add(order)
            for product in products:
                product_repo.add(product)
            customer_repo.add(customer)

            logger.info(
                "Order placed",
                order_id=str(order.order_id),
                line_count=len(order.lines),
                total=order.total,
            )
        finally:
            clear_context()
        return str(order.order_id)

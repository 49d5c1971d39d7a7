"""Product catalogue management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from smartshop.domain import smartshop
from smartshop.product.product import Product

logger = structlog.get_logger(__name__)


@smartshop.command(part_of="Product")
class ListProduct:
    """Put a new product on sale with an initial stock count."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)


@smartshop.command(part_of="Product")
class RestockProduct:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@smartshop.command(part_of="Product")
class ChangeProductPrice:
    product_id = Identifier(required=True)
    price = Float(required=True, min_value=0.0)


@smartshop.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(ListProduct)
    def list_product(self, command):
        product = Product.create(
            product_id=command.product_id,
            name=command.name,
            price=command.price,
            stock_quantity=command.stock_quantity or 0,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product listed", product_id=str(product.product_id), stock=product.stock_quantity)
        return str(product.product_id)

    @handle(RestockProduct)
    def restock_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.restock(command.quantity)
        repo.add(product)

    @handle(ChangeProductPrice)
    def change_product_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_price(command.price)
        repo.add(product)

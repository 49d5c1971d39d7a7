"""SmartShop domain: products, customer carts and order placement.

Customers collect products in a cart (one entry per unit) and convert it
into an Order, which decrements product stock.
"""

from protean.domain import Domain

from smartshop.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
smartshop = Domain(name="smartshop")

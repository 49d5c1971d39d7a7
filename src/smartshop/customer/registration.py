"""Customer registration — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from smartshop.customer.customer import Customer
from smartshop.domain import smartshop

logger = structlog.get_logger(__name__)


@smartshop.command(part_of="Customer")
class RegisterCustomer:
    customer_id = Identifier(required=True)
    name = String(required=True, max_length=255)


@smartshop.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(customer_id=command.customer_id, name=command.name)
        current_domain.repository_for(Customer).add(customer)
        logger.info("Customer registered", customer_id=str(customer.customer_id))
        return str(customer.customer_id)

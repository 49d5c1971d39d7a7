"""FastAPI routes for SmartShop: products, customer carts and orders."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from smartshop.api.schemas import (
    CartEntrySchema,
    CartItemRequest,
    CartResponse,
    ChangePriceRequest,
    CustomerIdResponse,
    ListProductRequest,
    OrderIdResponse,
    OrderLineSchema,
    OrderResponse,
    ProductIdResponse,
    ProductResponse,
    RegisterCustomerRequest,
    RestockRequest,
    StatusResponse,
)
from smartshop.customer.cart import AddToCart, ClearCart, RemoveFromCart
from smartshop.customer.customer import Customer
from smartshop.customer.registration import RegisterCustomer
from smartshop.order.order import Order
from smartshop.order.placement import PlaceOrder
from smartshop.product.management import ChangeProductPrice, ListProduct, RestockProduct
from smartshop.product.product import Product

# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def list_product(body: ListProductRequest) -> ProductIdResponse:
    command = ListProduct(
        product_id=body.product_id,
        name=body.name,
        price=body.price,
        stock_quantity=body.stock_quantity,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse(
        product_id=str(product.product_id),
        name=product.name,
        price=product.price,
        stock_quantity=product.stock_quantity,
    )


@product_router.put("/{product_id}/stock", response_model=StatusResponse)
async def restock_product(product_id: str, body: RestockRequest) -> StatusResponse:
    command = RestockProduct(product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def change_product_price(product_id: str, body: ChangePriceRequest) -> StatusResponse:
    command = ChangeProductPrice(product_id=product_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
customer_router = APIRouter(prefix="/customers", tags=["customers"])


@customer_router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(customer_id=body.customer_id, name=body.name)
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@customer_router.get("/{customer_id}/cart", response_model=CartResponse)
async def get_cart(customer_id: str) -> CartResponse:
    customer = current_domain.repository_for(Customer).get(customer_id)
    return CartResponse(
        customer_id=str(customer.customer_id),
        name=customer.name,
        entries=[
            CartEntrySchema(
                product_id=str(entry.product_id),
                product_name=entry.product_name,
                unit_price=entry.unit_price,
            )
            for entry in customer.cart_entries
        ],
        cart_total=customer.cart_total,
    )


@customer_router.post("/{customer_id}/cart/items", response_model=StatusResponse)
async def add_to_cart(customer_id: str, body: CartItemRequest) -> StatusResponse:
    command = AddToCart(
        customer_id=customer_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@customer_router.post("/{customer_id}/cart/removals", response_model=StatusResponse)
async def remove_from_cart(customer_id: str, body: CartItemRequest) -> StatusResponse:
    command = RemoveFromCart(
        customer_id=customer_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@customer_router.delete("/{customer_id}/cart", response_model=StatusResponse)
async def clear_cart(customer_id: str) -> StatusResponse:
    command = ClearCart(customer_id=customer_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@customer_router.post("/{customer_id}/orders", status_code=201, response_model=OrderIdResponse)
async def place_order(customer_id: str) -> OrderIdResponse:
    command = PlaceOrder(customer_id=customer_id)
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(
        order_id=str(order.order_id),
        customer_id=str(order.customer_id),
        customer_name=order.customer_name,
        lines=[
            OrderLineSchema(
                product_id=str(line.product_id),
                product_name=line.product_name,
                unit_price=line.unit_price,
            )
            for line in order.lines
        ],
        total=order.total,
        currency=order.currency,
    )

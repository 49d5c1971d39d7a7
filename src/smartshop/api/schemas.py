"""Pydantic request/response schemas for the SmartShop API.

These are external contracts, separate from internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------
class ListProductRequest(BaseModel):
    product_id: str
    name: str
    price: float = Field(ge=0)
    stock_quantity: int = Field(ge=0, default=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "name": "Ceramic Mug",
                    "price": 1000.0,
                    "stock_quantity": 5,
                }
            ]
        }
    }


class RestockRequest(BaseModel):
    quantity: int = Field(ge=1)


class ChangePriceRequest(BaseModel):
    price: float = Field(ge=0)


class ProductResponse(BaseModel):
    product_id: str
    name: str
    price: float
    stock_quantity: int


# ---------------------------------------------------------------------------
# Customer & cart
# ---------------------------------------------------------------------------
class RegisterCustomerRequest(BaseModel):
    customer_id: str
    name: str


class CartItemRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class CartEntrySchema(BaseModel):
    product_id: str
    product_name: str | None = None
    unit_price: float


class CartResponse(BaseModel):
    customer_id: str
    name: str
    entries: list[CartEntrySchema]
    cart_total: float


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: str
    product_name: str | None = None
    unit_price: float


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str
    customer_name: str | None = None
    lines: list[OrderLineSchema]
    total: float
    currency: str | None = None


# ---------------------------------------------------------------------------
# Generic responses
# ---------------------------------------------------------------------------
class CustomerIdResponse(BaseModel):
    customer_id: str


class ProductIdResponse(BaseModel):
    product_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"

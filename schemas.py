"""
Data Contracts for Orders & Product Catalog

Each Pydantic model is the shape of a record exchanged between a client and the
order/catalog services. Python attributes are snake_case; on the wire every
field uses its camelCase name (userId, stockQuantity, ...). Both spellings are
accepted on input.

These are plain records: nothing here computes totals, checks stock or guards
status transitions. Consumers own those rules.
"""

from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContractModel(BaseModel):
    """Base for every contract record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# -----------------
# Order Status
# -----------------

class OrderStatus(IntEnum):
    """Order lifecycle status. The ordinals are part of the wire format.

    Usual progression is Pending -> Confirmed -> Processing -> Shipped ->
    Delivered, with Cancelled as the alternate end state. Nothing in this
    module enforces it.
    """

    PENDING = 0
    CONFIRMED = 1
    PROCESSING = 2
    SHIPPED = 3
    DELIVERED = 4
    CANCELLED = 5

    @classmethod
    def parse(cls, value: Any) -> "OrderStatus":
        """Resolve an ordinal (3, "3") or a member name ("Shipped") to a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"{value!r} is not a valid {cls.__name__}") from None
        return cls(value)


def _coerce_status(value: Any) -> Any:
    # Names are resolved here; anything else is left to the enum validator
    if isinstance(value, str):
        return OrderStatus.parse(value)
    return value


StatusField = Annotated[OrderStatus, BeforeValidator(_coerce_status)]


# ------------
# Order Models
# ------------

class OrderItemDto(ContractModel):
    id: int = Field(..., description="Order item id")
    product_id: int = Field(..., description="Referenced product id")
    product_name: str = Field("", description="Product name snapshot")
    quantity: int = Field(..., description="Quantity ordered")
    price: Decimal = Field(..., description="Unit price at time of order")
    total: Decimal = Field(..., description="Line total as reported by the producer")


class OrderDto(ContractModel):
    id: int = Field(..., description="Order id")
    user_id: int = Field(..., description="Id of the ordering user")
    order_date: datetime = Field(..., description="When the order was placed")
    status: StatusField = Field(..., description="Current order status")
    total_amount: Decimal = Field(..., description="Order total as reported by the producer")
    shipping_address: str = Field("", description="Delivery address")
    items: List[OrderItemDto] = Field(default_factory=list, description="Order lines, in order")


class CreateOrderItemDto(ContractModel):
    product_id: int = Field(..., description="Product to order")
    quantity: int = Field(..., description="Quantity to order")


class CreateOrderDto(ContractModel):
    user_id: int = Field(..., description="Id of the ordering user")
    shipping_address: str = Field("", description="Delivery address")
    items: List[CreateOrderItemDto] = Field(default_factory=list, description="Requested order lines")


class UpdateOrderStatusDto(ContractModel):
    status: StatusField = Field(..., description="Requested order status")


# ---------------
# Product Models
# ---------------

class ProductDto(ContractModel):
    id: int = Field(..., description="Product id")
    name: str = Field("", description="Product name")
    description: str = Field("", description="Marketing description")
    price: Decimal = Field(..., description="Unit price")
    category: str = Field("", description="Category name")
    stock_quantity: int = Field(..., description="Units in stock")
    image_url: str = Field("", description="Primary product image URL")
    created_at: datetime = Field(..., description="When the product was created")
    is_active: bool = Field(..., description="Whether the product is listed")


class CreateProductDto(ContractModel):
    name: str = Field("", description="Product name")
    description: str = Field("", description="Marketing description")
    price: Decimal = Field(..., description="Unit price")
    category: str = Field("", description="Category name")
    stock_quantity: int = Field(..., description="Initial units in stock")
    image_url: str = Field("", description="Primary product image URL")


class UpdateProductDto(ContractModel):
    """Partial product update. A field left unset means "leave unchanged"."""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None
    stock_quantity: Optional[int] = None
    image_url: Optional[str] = None


class ProductSearchDto(ContractModel):
    name: Optional[str] = Field(None, description="Name substring to match")
    category: Optional[str] = Field(None, description="Category to match")
    min_price: Optional[Decimal] = Field(None, description="Lower price bound")
    max_price: Optional[Decimal] = Field(None, description="Upper price bound")
    page: int = Field(1, description="1-based page number")
    page_size: int = Field(10, description="Results per page")

"""Order and cart schemas."""

from typing import Any, Literal, Optional

from commerce_client.schemas.base import Address, CustomFields, DateTime, Money, PlatformModel, Reference, VersionedResource

OrderState = Literal["Open", "Confirmed", "Complete", "Cancelled"]
CartState = Literal["Active", "Merged", "Ordered", "Frozen"]


class LineItem(PlatformModel):
    id: str
    product_id: str
    name: dict[str, str]
    variant: dict[str, Any]
    quantity: int
    price: Optional[dict[str, Any]] = None
    total_price: Optional[Money] = None
    supply_channel: Optional[Reference] = None


class Order(VersionedResource):
    order_number: Optional[str] = None
    customer_id: Optional[str] = None
    customer_email: Optional[str] = None
    line_items: list[LineItem] = []
    total_price: Money
    order_state: OrderState
    shipment_state: Optional[str] = None
    payment_state: Optional[str] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    completed_at: Optional[DateTime] = None
    custom: Optional[CustomFields] = None


class Cart(VersionedResource):
    customer_id: Optional[str] = None
    anonymous_id: Optional[str] = None
    line_items: list[LineItem] = []
    total_price: Money
    cart_state: CartState
    custom: Optional[CustomFields] = None


class ChangeOrderStateAction(PlatformModel):
    action: Literal["changeOrderState"] = "changeOrderState"
    order_state: OrderState

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict

# Fixed values written on every new order
ORDER_STATUS_CONFIRMED = "confirmed"
ORDER_TYPE_PHONE_ONLY = "phone_only"
UNKNOWN_PHONE = "unknown"

# Line item statuses counted by the stats endpoint
ITEM_STATUS_CONFIRMED = "confirmed"
ITEM_STATUS_DELIVERED = "delivered"

# Where the stored phone number came from
PHONE_SOURCE_CALL = "extracted_from_call"
PHONE_SOURCE_CUSTOMER = "provided_by_customer"


class CreateOrderRequest(BaseModel):
    """Body of POST /api/orders. Every field is optional and stored as sent, no type checks."""
    model_config = ConfigDict(extra="ignore")

    phone: Optional[Any] = None
    items: Optional[Any] = None
    name: Optional[Any] = None
    address: Optional[Any] = None
    caller_phone: Optional[Any] = None


class OrderStats(BaseModel):
    total_orders: int
    confirmed_orders: int
    delivered_orders: int
    revenue: Union[int, float]

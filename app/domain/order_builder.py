from datetime import datetime, timezone
from typing import Any, Callable, Dict

from app.domain.models import (
    ORDER_STATUS_CONFIRMED,
    ORDER_TYPE_PHONE_ONLY,
    PHONE_SOURCE_CALL,
    PHONE_SOURCE_CUSTOMER,
    UNKNOWN_PHONE,
    CreateOrderRequest,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_phone(phone: Any, now: datetime) -> Any:
    """
    Use the caller's phone as-is, unless it is missing or "unknown".
    Anonymous callers get a placeholder like 'call_1760778902123' (unix millis).
    """
    if phone and phone != UNKNOWN_PHONE:
        return phone
    return f"call_{int(now.timestamp() * 1000)}"


def to_iso(now: datetime) -> str:
    # e.g. 2026-10-18T09:15:02.123Z
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderBuilder:
    """
    Builds the document stored for a new phone order.

    Starts from the fields every order has, then optional fields are
    switched on one step at a time. Falsy values are skipped so the stored
    document never carries empty name/address/caller_phone keys.
    """

    def __init__(self, phone: Any, items: Any, created_at: datetime):
        self._order: Dict[str, Any] = {
            "phone": phone,
            "items": items or [],
            "status": ORDER_STATUS_CONFIRMED,
            "created_at": to_iso(created_at),
            "order_type": ORDER_TYPE_PHONE_ONLY,
            "phone_source": PHONE_SOURCE_CUSTOMER,
        }

    def with_name(self, name: Any) -> "OrderBuilder":
        if name:
            self._order["name"] = name
        return self

    def with_address(self, address: Any) -> "OrderBuilder":
        if address:
            self._order["address"] = address
        return self

    def with_caller_phone(self, caller_phone: Any) -> "OrderBuilder":
        if caller_phone:
            self._order["caller_phone"] = caller_phone
            self._order["phone_source"] = PHONE_SOURCE_CALL
        else:
            self._order.pop("caller_phone", None)
            self._order["phone_source"] = PHONE_SOURCE_CUSTOMER
        return self

    def build(self) -> Dict[str, Any]:
        return dict(self._order)


def build_order(request: CreateOrderRequest, clock: Callable[[], datetime] = utc_now) -> Dict[str, Any]:
    now = clock()
    return (
        OrderBuilder(resolve_phone(request.phone, now), request.items, now)
        .with_name(request.name)
        .with_address(request.address)
        .with_caller_phone(request.caller_phone)
        .build()
    )

"""
Revenue math for the stats endpoint.

Revenue is recomputed from every order on each call. That is fine for a
single restaurant; a bigger dataset would want a running counter or a
server-side aggregation pipeline instead.

Items are stored exactly as the caller sent them, so price and quantity may
be numbers, numeric strings or junk. Numeric strings are parsed, anything
else that is not a finite number counts as 0.
"""
import math
from typing import Any, Iterable, Mapping, Union

Number = Union[int, float]


def to_number(value: Any) -> Number:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return number if math.isfinite(number) else 0
    return 0


def item_total(item: Any) -> Number:
    if not isinstance(item, Mapping):
        return 0
    # Falsy price counts as 0 and falsy quantity as 1 (so quantity 0 still counts once)
    price = to_number(item.get("price") or 0)
    quantity = to_number(item.get("quantity") or 1)
    return price * quantity


def order_total(order: Mapping[str, Any]) -> Number:
    items = order.get("items")
    if not isinstance(items, list):
        return 0
    return sum((item_total(item) for item in items), 0)


def total_revenue(orders: Iterable[Mapping[str, Any]]) -> Number:
    return sum((order_total(order) for order in orders), 0)

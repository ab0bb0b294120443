"""Dashboard figures derived from the products and orders collections."""
import math
from typing import Any, Dict, Iterable


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _number(value) -> float:
    """Numbers and numeric strings as a finite float, anything else as 0."""
    try:
        if isinstance(value, (int, float)):
            return _finite(float(value))
        return _finite(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return 0.0


def order_total(order: Dict[str, Any]) -> float:
    """Stored ``total`` when set, else the sum of ``price * qty`` over ``items``."""
    total = _number(order.get("total"))
    if total:
        return total
    items = order.get("items")
    if isinstance(items, list):
        return _finite(sum(_number(i.get("price")) * _number(i.get("qty")) for i in items if isinstance(i, dict)))
    return 0.0


def compute_statistics(products: Iterable[Dict[str, Any]], orders: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    products = [p for p in products if isinstance(p, dict)]
    orders = [o for o in orders if isinstance(o, dict)]

    # a sum of finite totals can still overflow to inf
    total_sales = _finite(sum(order_total(o) for o in orders))

    return {
        "totalProducts": len(products),
        "totalOrders": len(orders),
        "totalSales": round_half_up(total_sales),
        "pendingOrders": sum(1 for o in orders if o.get("status") == "pending"),
        "completedOrders": sum(1 for o in orders if o.get("status") == "completed"),
        "averageOrderValue": round_half_up(total_sales / len(orders)) if orders else 0,
        "productsWithDiscount": sum(1 for p in products if _number(p.get("discount")) > 0),
    }

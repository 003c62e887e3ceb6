from .backends.delimited_backend import DelimitedOrderSource, load_orders
from .interface import OrderSource
from .models import Order, OrderRecord
from .util import get_order_source, orders_frame

__all__ = [
    "DelimitedOrderSource",
    "OrderSource",
    "Order",
    "OrderRecord",
    "get_order_source",
    "load_orders",
    "orders_frame",
]

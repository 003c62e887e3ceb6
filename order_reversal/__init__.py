from .data import DelimitedOrderSource, Order, OrderRecord, OrderSource, get_order_source, load_orders, orders_frame
from .errors import NullInputError, OrderError, OrderParseError
from .reverse import reverse_indexed, reverse_orders, reverse_streamed

__version__ = "0.1.0"

__all__ = [
    "DelimitedOrderSource",
    "NullInputError",
    "Order",
    "OrderError",
    "OrderParseError",
    "OrderRecord",
    "OrderSource",
    "get_order_source",
    "load_orders",
    "orders_frame",
    "reverse_indexed",
    "reverse_orders",
    "reverse_streamed",
]

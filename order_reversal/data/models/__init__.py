from .orders import OrderRecord

# Short alias used throughout the library and by callers
Order = OrderRecord

__all__ = [
    "OrderRecord",
    "Order",
]

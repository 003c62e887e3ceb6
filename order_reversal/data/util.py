from __future__ import annotations

from pathlib import Path
from typing import Iterable, Literal

import pandas as pd

from .backends.delimited_backend import DelimitedOrderSource
from .interface import OrderSource
from .models import OrderRecord


ORDER_COLUMNS = ["id", "customer_name", "amount"]


def get_order_source(kind: Literal["delimited"] = "delimited", path: str | Path = None) -> OrderSource:
    if kind == "delimited":
        # Reads from the configured order file unless a path is given
        return DelimitedOrderSource(path)
    raise ValueError(f"Unknown order source kind: {kind}")


def orders_frame(orders: Iterable[OrderRecord]) -> pd.DataFrame:
    """Materialise orders into a DataFrame, one row per order in iteration order."""
    rows = [order.model_dump() for order in orders]
    return pd.DataFrame(rows, columns=ORDER_COLUMNS)

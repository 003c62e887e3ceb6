from __future__ import annotations

from typing import Iterator, Protocol

from .models import OrderRecord


# ---- Order source protocol ----

class OrderSource(Protocol):
    """
    Contract for anything that yields order records.

    Implementations MUST produce records lazily: calling load_orders() does no
    I/O, and failures surface while the returned iterator is being consumed.
    """

    def load_orders(self) -> Iterator[OrderRecord]:
        """Yield orders in source order."""
        ...

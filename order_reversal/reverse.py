"""
Reverse a finite sequence of orders, lazily.

Two variants produce the same output:
- reverse_indexed walks a list-like input from the last position to the first
  without copying it.
- reverse_streamed accepts any forward-only iterable; it has to buffer the
  whole input on a stack before the first element can come out.

reverse_orders picks one of them based on what the input supports.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .data.models import OrderRecord
from .errors import NullInputError
from .logging import get_logger


def reverse_indexed(orders: Sequence[OrderRecord]) -> Iterator[OrderRecord]:
    """Yield `orders` from the last index to the first.

    Raises:
        NullInputError: if `orders` is None (raised by this call, not on iteration).
    """
    if orders is None:
        raise NullInputError("orders")
    return _walk_backwards(orders)


def _walk_backwards(orders: Sequence[OrderRecord]) -> Iterator[OrderRecord]:
    for i in range(len(orders) - 1, -1, -1):
        yield orders[i]


def reverse_streamed(orders: Iterable[OrderRecord]) -> Iterator[OrderRecord]:
    """Yield the elements of a forward-only iterable in reverse.

    The input is consumed exactly once, in full, before the first element is
    produced.

    Raises:
        NullInputError: if `orders` is None (raised by this call, not on iteration).
    """
    if orders is None:
        raise NullInputError("orders")
    return _drain_stack(orders)


def _drain_stack(orders: Iterable[OrderRecord]) -> Iterator[OrderRecord]:
    stack = []
    for order in orders:
        stack.append(order)

    while stack:
        yield stack.pop()


def reverse_orders(orders: Iterable[OrderRecord]) -> Iterator[OrderRecord]:
    """Reverse `orders`, indexing into it when it is a Sequence and buffering otherwise."""
    if orders is None:
        raise NullInputError("orders")

    if isinstance(orders, Sequence):
        get_logger(__name__).debug(f"Reversing {type(orders).__name__} of {len(orders)} orders by index")
        return reverse_indexed(orders)

    get_logger(__name__).debug(f"Reversing {type(orders).__name__} through a stack")
    return reverse_streamed(orders)

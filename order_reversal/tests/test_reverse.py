from collections.abc import Sequence
from decimal import Decimal

import pytest
from order_reversal.data import Order
from order_reversal.errors import NullInputError
from order_reversal.reverse import reverse_indexed, reverse_orders, reverse_streamed

WIDGET = Order(id=1, customer_name="Widget", amount=Decimal("19.99"))
GADGET = Order(id=2, customer_name="Gadget", amount=Decimal("5.00"))

def make_orders(n):
    return [Order(id=i, customer_name=f"Item {i}", amount=Decimal(i) / 4) for i in range(n)]

class RecordingSequence(Sequence):
    """List wrapper that remembers which positions were read."""
    def __init__(self, items):
        self._items = list(items)
        self.reads = []

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        self.reads.append(index)
        return self._items[index]

def recording_stream(items, seen):
    for item in items:
        seen.append(item)
        yield item

REVERSERS = [reverse_indexed, reverse_streamed, reverse_orders]

@pytest.mark.parametrize("reverse", REVERSERS)
def test_reverses_two_orders(reverse):
    assert list(reverse([WIDGET, GADGET])) == [GADGET, WIDGET]

@pytest.mark.parametrize("reverse", REVERSERS)
@pytest.mark.parametrize("n", [0, 1, 2, 7])
def test_double_reversal_is_identity(reverse, n):
    orders = make_orders(n)
    assert list(reverse(list(reverse(orders)))) == orders

@pytest.mark.parametrize("reverse", REVERSERS)
@pytest.mark.parametrize("n", [0, 1, 5, 100])
def test_length_is_preserved(reverse, n):
    assert len(list(reverse(make_orders(n)))) == n

@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_variants_agree(n):
    orders = make_orders(n)
    assert list(reverse_indexed(orders)) == list(reverse_streamed(orders)) == list(reverse_orders(orders))

@pytest.mark.parametrize("reverse", REVERSERS)
def test_none_is_rejected_before_iteration(reverse):
    """The error comes from the call itself, not from the first next()."""
    with pytest.raises(NullInputError) as exc_info:
        reverse(None)
    assert exc_info.value.argument == "orders"
    assert isinstance(exc_info.value, TypeError)

@pytest.mark.parametrize("reverse", REVERSERS)
def test_input_is_not_mutated(reverse):
    orders = make_orders(4)
    snapshot = list(orders)
    result = list(reverse(orders))
    assert orders == snapshot
    assert all(a is b for a, b in zip(result, reversed(orders)))

def test_indexed_is_lazy():
    orders = RecordingSequence(make_orders(5))
    it = reverse_indexed(orders)
    assert orders.reads == []
    assert next(it).id == 4
    assert orders.reads == [4]
    assert next(it).id == 3
    assert orders.reads == [4, 3]

def test_streamed_drains_input_before_first_output():
    orders = make_orders(5)
    seen = []
    it = reverse_streamed(recording_stream(orders, seen))
    assert seen == []
    assert next(it) == orders[-1]
    assert seen == orders

def test_streamed_accepts_forward_only_input():
    orders = make_orders(3)
    assert list(reverse_streamed(iter(orders))) == orders[::-1]

def test_each_call_returns_fresh_iterator():
    orders = make_orders(3)
    first = reverse_indexed(orders)
    second = reverse_indexed(orders)
    assert list(first) == list(second) == orders[::-1]
    assert list(first) == []

def test_dispatch_uses_indexing_for_sequences():
    orders = RecordingSequence(make_orders(3))
    assert [o.id for o in reverse_orders(orders)] == [2, 1, 0]
    assert orders.reads == [2, 1, 0]

def test_dispatch_buffers_generators():
    orders = make_orders(3)
    seen = []
    assert list(reverse_orders(recording_stream(orders, seen))) == orders[::-1]
    assert seen == orders

def test_tuple_input():
    assert list(reverse_orders((WIDGET, GADGET))) == [GADGET, WIDGET]

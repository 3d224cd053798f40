import math
from datetime import date, timedelta

import pytest

from stocktics.exceptions import DeliveryNotFound, InvalidDeliveryTransition, RestockNotNeeded
from stocktics.models import DeliveryPriority, DeliveryStatus
from stocktics.services.delivery_tracker import DeliveryTracker
from stocktics.simulator.data_generator import initial_deliveries
from tests.conftest import make_item


@pytest.fixture
def tracker():
    return DeliveryTracker(initial_deliveries())


def test_tabs(tracker):
    assert [d.id for d in tracker.by_tab("pending")] == [1, 2]
    assert [d.id for d in tracker.by_tab("completed")] == [3]
    assert tracker.by_tab("cancelled") == []
    with pytest.raises(ValueError):
        tracker.by_tab("archived")


def test_full_progression():
    tracker = DeliveryTracker()
    item = make_item(1, stock=2, capacity=20)
    d = tracker.create_auto_order(item, today=date(2024, 3, 1))
    assert d.status == DeliveryStatus.ORDERED and d.progress == 25
    assert tracker.advance(d.id).status == DeliveryStatus.PROCESSING
    assert tracker.advance(d.id).status == DeliveryStatus.SHIPPED
    delivered = tracker.mark_delivered(d.id, today=date(2024, 3, 3))
    assert delivered.status == DeliveryStatus.DELIVERED
    assert delivered.progress == 100
    with pytest.raises(InvalidDeliveryTransition):
        tracker.advance(d.id)
    with pytest.raises(InvalidDeliveryTransition):
        tracker.cancel(d.id)


def test_cancel_any_pending_state(tracker):
    assert tracker.cancel(1).status == DeliveryStatus.CANCELLED  # shipped
    assert tracker.cancel(2).status == DeliveryStatus.CANCELLED  # processing
    with pytest.raises(InvalidDeliveryTransition):
        tracker.cancel(1)
    with pytest.raises(InvalidDeliveryTransition):
        tracker.mark_delivered(1)


def test_shipped_cannot_advance(tracker):
    with pytest.raises(InvalidDeliveryTransition):
        tracker.advance(1)


def test_delayed_is_never_reached(tracker):
    d = tracker.create_auto_order(make_item(9, stock=1, capacity=10))
    seen = {d.status}
    seen.add(tracker.advance(d.id).status)
    seen.add(tracker.advance(d.id).status)
    seen.add(tracker.mark_delivered(d.id).status)
    assert DeliveryStatus.DELAYED not in seen


def test_auto_order_fields():
    tracker = DeliveryTracker(initial_deliveries())
    today = date(2024, 5, 10)
    critical = make_item(4, stock=1, capacity=30, name="Coca Cola 12pk")
    d = tracker.create_auto_order(critical, today=today)

    assert d.id == 4
    assert d.item_id == 4
    assert d.quantity == math.ceil(30 * 0.8)
    assert d.supplier == "Coca Cola Distributor"
    assert d.estimated_delivery == today + timedelta(days=2)
    assert d.priority == DeliveryPriority.HIGH
    assert d.auto_ordered
    assert tracker.snapshot()[0] == d  # 목록 맨 앞

    low = tracker.create_auto_order(make_item(5, stock=3, capacity=10, name="Unknown"), today=today)
    assert low.priority == DeliveryPriority.MEDIUM
    assert low.supplier == "Generic Supplier"
    assert low.id == 5


def test_auto_order_rejects_good_item():
    with pytest.raises(RestockNotNeeded):
        DeliveryTracker().create_auto_order(make_item(1, stock=10, capacity=10))


def test_unknown_delivery(tracker):
    with pytest.raises(DeliveryNotFound):
        tracker.get(77)

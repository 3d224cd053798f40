import random

import pytest

from stocktics.models import classify_status
from stocktics.simulator.data_generator import PREDICTIONS, initial_items
from stocktics.simulator.stock_simulator import TICK_LABEL, StockSimulator
from tests.conftest import make_item


def test_ticks_preserve_stock_and_status_invariants():
    sim = StockSimulator(rng=random.Random(123))
    items = initial_items()
    for _ in range(200):
        items = sim.tick(items)
        for item in items:
            assert 0 <= item.current_stock <= item.max_capacity
            assert item.status == classify_status(item.current_stock, item.max_capacity)


def test_tick_keeps_ids_and_order():
    sim = StockSimulator(rng=random.Random(5))
    items = initial_items()
    ticked = sim.tick(items)
    assert [i.id for i in ticked] == [i.id for i in items]
    assert [i.name for i in ticked] == [i.name for i in items]


def test_negative_delta_on_empty_shelf_clamps_to_zero():
    sim = StockSimulator(rng=random.Random(0), delta_min=-3, delta_max=-3)
    item = sim.step_item(make_item(stock=0, capacity=20))
    assert item.current_stock == 0


def test_delta_stays_within_bounds():
    sim = StockSimulator(rng=random.Random(99))
    item = make_item(stock=20, capacity=40)
    for _ in range(500):
        delta = sim.step_item(item).current_stock - item.current_stock
        assert -3 <= delta <= 2


def test_tick_sets_label_and_prediction_from_pool():
    sim = StockSimulator(rng=random.Random(3))
    for item in sim.tick(initial_items()):
        assert item.last_update == TICK_LABEL
        assert item.prediction in PREDICTIONS


def test_sensor_switch_probability_extremes():
    item = make_item()
    always = StockSimulator(rng=random.Random(1), sensor_switch_probability=1.0)
    never = StockSimulator(rng=random.Random(1), sensor_switch_probability=0.0)
    assert always.step_item(item).sensor is item.sensor.alternate
    assert never.step_item(item).sensor is item.sensor


def test_same_seed_is_deterministic():
    a = StockSimulator(rng=random.Random(42)).tick(initial_items())
    b = StockSimulator(rng=random.Random(42)).tick(initial_items())
    assert a == b


def test_invalid_configuration():
    with pytest.raises(ValueError):
        StockSimulator(delta_min=3, delta_max=-3)
    with pytest.raises(ValueError):
        StockSimulator(predictions=[])

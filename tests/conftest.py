import random

import pytest
from fastapi.testclient import TestClient

from stocktics.dependencies import get_controller, get_event_bus, get_notifier, get_simulation
from stocktics.events.event_bus import AsyncEventBus
from stocktics.main import app
from stocktics.models import Item, SensorType
from stocktics.services.inventory_controller import InventoryController
from stocktics.services.notifier import EmailNotifier
from stocktics.simulator.simulation_manager import SimulationManager
from stocktics.simulator.stock_simulator import StockSimulator


def make_item(item_id=1, stock=12, capacity=48, name=None, **kwargs) -> Item:
    return Item(
        id=item_id,
        name=name or f"Product {item_id}",
        shelf=kwargs.pop("shelf", f"Z{item_id}"),
        current_stock=stock,
        max_capacity=capacity,
        sensor=kwargs.pop("sensor", SensorType.RFID),
        last_update=kwargs.pop("last_update", "1 min ago"),
        prediction=kwargs.pop("prediction", "Stable inventory"),
    )


@pytest.fixture
def event_bus():
    # 시작하지 않은 버스: publish는 최근 이벤트에만 기록된다
    return AsyncEventBus("redis://localhost:1")


@pytest.fixture
def controller(event_bus):
    return InventoryController(
        simulator=StockSimulator(rng=random.Random(7)),
        event_bus=event_bus,
    )


@pytest.fixture
def notifier(event_bus):
    return EmailNotifier(rng=random.Random(1), success_rate=1.0, delay_seconds=0, event_bus=event_bus)


@pytest.fixture
def failing_notifier(event_bus):
    return EmailNotifier(rng=random.Random(1), success_rate=0.0, delay_seconds=0, event_bus=event_bus)


@pytest.fixture
def simulation(controller):
    return SimulationManager(controller, tick_interval=60, clock_interval=1)


@pytest.fixture
def client(controller, notifier, simulation, event_bus):
    # lifespan을 실행하지 않도록 컨텍스트 매니저 없이 생성
    app.dependency_overrides[get_controller] = lambda: controller
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_simulation] = lambda: simulation
    app.dependency_overrides[get_event_bus] = lambda: event_bus
    yield TestClient(app)
    app.dependency_overrides.clear()

"""
런타임 싱글턴과 FastAPI Depends 제공자
- 이벤트 버스, 인벤토리 컨트롤러, 이메일 스텁, 시뮬레이션 매니저
- 테스트에서는 app.dependency_overrides로 교체한다.
"""

import random

from stocktics.config import settings
from stocktics.events.event_bus import AsyncEventBus
from stocktics.services.inventory_controller import InventoryController, build_controller
from stocktics.services.notifier import EmailNotifier
from stocktics.simulator.simulation_manager import SimulationManager

event_bus = AsyncEventBus(settings.REDIS_URL)
inventory_controller = build_controller(seed=settings.RANDOM_SEED, event_bus=event_bus)
email_notifier = EmailNotifier(rng=random.Random(settings.RANDOM_SEED), event_bus=event_bus)
simulation_manager = SimulationManager(inventory_controller)


def get_event_bus() -> AsyncEventBus:
    return event_bus


def get_controller() -> InventoryController:
    return inventory_controller


def get_notifier() -> EmailNotifier:
    return email_notifier


def get_simulation() -> SimulationManager:
    return simulation_manager

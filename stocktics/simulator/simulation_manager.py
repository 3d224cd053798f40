"""
시뮬레이션 매니저 — 백그라운드 태스크로 시계 갱신과 재고 틱을 관리한다.
- 두 타이머는 서로 독립 (겹침 방지 불필요: 틱 처리는 동기적으로 즉시 끝남)
- 속도 조절 (1x, 5x, 10x)은 재고 틱에만 적용, 시계는 실제 시간 기준
- FastAPI lifespan에서 시작/중지
"""

import asyncio
import logging
from datetime import datetime, timezone

from stocktics.config import settings
from stocktics.services.inventory_controller import InventoryController

logger = logging.getLogger(__name__)

ALLOWED_SPEEDS = (1, 5, 10)


class SimulationManager:
    """시뮬레이션 전체 라이프사이클 관리"""

    def __init__(
        self,
        controller: InventoryController,
        tick_interval: float = settings.STOCK_TICK_INTERVAL_SECONDS,
        clock_interval: float = settings.CLOCK_INTERVAL_SECONDS,
        speed: int = settings.SIMULATION_DEFAULT_SPEED,
    ):
        self.controller = controller
        self.tick_interval = tick_interval
        self.clock_interval = clock_interval
        self.speed = speed

        self.current_time: datetime = datetime.now(timezone.utc)
        self.tick_count: int = 0
        self._running: bool = False
        self._tasks: list[asyncio.Task] = []

    @property
    def speed(self) -> int:
        return self._speed

    @speed.setter
    def speed(self, value: int):
        if value not in ALLOWED_SPEEDS:
            raise ValueError("속도는 1, 5, 10 중 하나여야 합니다")
        self._speed = value
        logger.info(f"시뮬레이션 속도 변경: {value}x")

    @property
    def is_running(self) -> bool:
        return self._running

    def _effective_interval(self, base_seconds: float) -> float:
        """속도 배율을 적용한 실제 대기 시간 (초)"""
        return base_seconds / self._speed

    async def tick(self) -> int:
        """재고 틱 1회 수행 후 이벤트 발행. 누적 틱 수 반환."""
        items = self.controller.apply_tick()
        self.tick_count += 1
        await self.controller.publish("inventory.ticked", {
            "tick": self.tick_count,
            "items": len(items),
            "by_status": self.controller.status_counts(),
        })
        return self.tick_count

    async def _stock_loop(self):
        logger.info("재고 틱 루프 시작")
        while self._running:
            try:
                await asyncio.sleep(self._effective_interval(self.tick_interval))
                if self._running:
                    await self.tick()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"재고 틱 루프 에러: {e}")
                await asyncio.sleep(5)

    async def _clock_loop(self):
        """화면 시계 갱신 — WebSocket으로 현재 시각 push"""
        from stocktics.api.websocket import broadcast_event

        while self._running:
            try:
                await asyncio.sleep(self.clock_interval)
                self.current_time = datetime.now(timezone.utc)
                await broadcast_event("clock", {"now": self.current_time.isoformat()})
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"시계 루프 에러: {e}")
                await asyncio.sleep(1)

    async def start(self):
        if self._running:
            logger.warning("시뮬레이션이 이미 실행 중입니다")
            return

        self._running = True
        self._tasks = [
            asyncio.create_task(self._stock_loop()),
            asyncio.create_task(self._clock_loop()),
        ]
        logger.info(f"시뮬레이션 시작 (속도: {self._speed}x, 틱 간격: {self.tick_interval}s)")

    async def stop(self):
        self._running = False
        for task in self._tasks:
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        logger.info("시뮬레이션 중지")

    async def reset(self):
        """시뮬레이션을 멈추고 초기 데이터로 되돌린 뒤 재시작"""
        was_running = self._running
        await self.stop()
        self.controller.reset()
        self.tick_count = 0
        await self.controller.publish("inventory.updated", {"action": "reset"})
        if was_running:
            await self.start()

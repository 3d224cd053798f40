"""
재고 시뮬레이터 — 틱마다 전체 상품의 재고를 무작위로 변동시킨다.
- 변동폭: STOCK_DELTA_MIN ~ STOCK_DELTA_MAX (정수, 균등분포)
- [0, max_capacity]로 clamp 후 상태 재판정
- 일정 확률로 센서 방식 전환
- 예측 문구를 고정 풀에서 무작위 선택
"""

import logging
import random
from collections.abc import Sequence
from dataclasses import replace

from stocktics.config import settings
from stocktics.models import Item
from stocktics.simulator.data_generator import PREDICTIONS

logger = logging.getLogger(__name__)

TICK_LABEL = "Just now"


class StockSimulator:
    """재고 변동 시뮬레이터 — 난수원을 주입받아 테스트에서 결정적으로 동작"""

    def __init__(
        self,
        rng: random.Random | None = None,
        predictions: Sequence[str] = PREDICTIONS,
        delta_min: int = settings.STOCK_DELTA_MIN,
        delta_max: int = settings.STOCK_DELTA_MAX,
        sensor_switch_probability: float = settings.SENSOR_SWITCH_PROBABILITY,
    ):
        if delta_min > delta_max:
            raise ValueError("delta_min은 delta_max 이하여야 합니다")
        if not predictions:
            raise ValueError("예측 문구 풀이 비어 있습니다")
        self.rng = rng or random.Random()
        self.predictions = list(predictions)
        self.delta_min = delta_min
        self.delta_max = delta_max
        self.sensor_switch_probability = sensor_switch_probability

    def step_item(self, item: Item) -> Item:
        """상품 1개에 대한 한 틱의 변동"""
        delta = self.rng.randint(self.delta_min, self.delta_max)
        switch_sensor = self.rng.random() < self.sensor_switch_probability
        prediction = self.rng.choice(self.predictions)

        return replace(
            item,
            current_stock=item.current_stock + delta,
            sensor=item.sensor.alternate if switch_sensor else item.sensor,
            last_update=TICK_LABEL,
            prediction=prediction,
        )

    def tick(self, items: Sequence[Item]) -> list[Item]:
        """전체 상품 목록을 한 틱 진행한 새 목록 반환 (순서와 id 유지)"""
        updated = [self.step_item(item) for item in items]
        changed = sum(1 for old, new in zip(items, updated) if old.status != new.status)
        logger.debug(f"재고 틱: 상품 {len(updated)}개, 상태 변경 {changed}개")
        return updated

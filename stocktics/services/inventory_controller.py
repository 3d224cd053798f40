"""
인벤토리 컨트롤러 — 상품/알림/배송 컬렉션의 단일 소유자

- 읽기는 스냅샷(리스트 복사본)으로 제공한다.
- 상품 변경은 항상 목록 전체를 새 값으로 교체하고, 알림 집합을 다시 파생한다.
- 이벤트 발행은 호출자가 변경 후 publish()로 수행한다 (동기 변경 → 비동기 통지).
"""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import date

from stocktics.events.event_bus import AsyncEventBus
from stocktics.exceptions import AlertNotFound, ItemNotFound
from stocktics.models import Alert, Delivery, Item, StockStatus
from stocktics.services.alert_deriver import alert_stats, derive_alerts, filter_alerts
from stocktics.services.delivery_tracker import DeliveryTracker
from stocktics.simulator.data_generator import initial_deliveries, initial_items
from stocktics.simulator.stock_simulator import StockSimulator

logger = logging.getLogger(__name__)

RESOLVE_BOOST_RATIO = 0.7


class InventoryController:
    """매장 재고 상태 컨트롤러 (단일 스레드/단일 이벤트 루프 전제, 락 없음)"""

    def __init__(
        self,
        items: Sequence[Item] | None = None,
        deliveries: Sequence[Delivery] | None = None,
        simulator: StockSimulator | None = None,
        event_bus: AsyncEventBus | None = None,
        seed_items: Callable[[], list[Item]] = initial_items,
        seed_deliveries: Callable[[], list[Delivery]] = initial_deliveries,
    ):
        self.simulator = simulator or StockSimulator()
        self.event_bus = event_bus
        self._seed_items = seed_items
        self._seed_deliveries = seed_deliveries

        self._items: list[Item] = []
        self._alerts: list[Alert] = []
        self._set_items(list(items) if items is not None else seed_items())
        self.tracker = DeliveryTracker(
            deliveries if deliveries is not None else seed_deliveries()
        )
        self._published_alerts = self._alert_key()

    def set_event_bus(self, bus: AsyncEventBus):
        self.event_bus = bus

    # ── 읽기 ─────────────────────────────────────────────

    def items(self) -> list[Item]:
        return list(self._items)

    def alerts(self) -> list[Alert]:
        return list(self._alerts)

    def deliveries(self) -> list[Delivery]:
        return self.tracker.snapshot()

    def get_item(self, item_id: int) -> Item:
        for item in self._items:
            if item.id == item_id:
                return item
        raise ItemNotFound(item_id)

    def get_alert(self, alert_id: int) -> Alert:
        for alert in self._alerts:
            if alert.id == alert_id:
                return alert
        raise AlertNotFound(alert_id)

    def filter_items(self, status: str = "all") -> list[Item]:
        if status == "all":
            return self.items()
        wanted = StockStatus(status)
        return [item for item in self._items if item.status == wanted]

    def filter_alerts(self, urgency: str = "all") -> list[Alert]:
        return filter_alerts(self._alerts, urgency)

    def status_counts(self) -> dict[str, int]:
        counts = {s.value: 0 for s in StockStatus}
        for item in self._items:
            counts[item.status.value] += 1
        return counts

    def alert_stats(self) -> dict[str, int]:
        return alert_stats(self._alerts)

    # ── 상품 변경 ─────────────────────────────────────────

    def _set_items(self, items: list[Item]):
        """상품 목록 교체 + 알림 재파생"""
        self._items = items
        self._alerts = derive_alerts(items)

    def _replace_item(self, updated: Item) -> Item:
        self._set_items([updated if i.id == updated.id else i for i in self._items])
        return updated

    def apply_tick(self) -> list[Item]:
        """재고 시뮬레이터 한 틱 적용"""
        self._set_items(self.simulator.tick(self._items))
        logger.info(
            f"재고 틱 적용: 상품 {len(self._items)}개, 활성 알림 {len(self._alerts)}건"
        )
        return self.items()

    def resolve_alert(self, alert_id: int) -> Item:
        """
        알림 해결 — 알림 자체를 지우지 않고 상품을 보충한다.
        재고 += floor(용량 × 0.7) (최소 1), 용량 상한. 다음 파생에서 알림이 빠진다.
        """
        self.get_alert(alert_id)
        item = self.get_item(alert_id)
        boost = max(1, int(item.max_capacity * RESOLVE_BOOST_RATIO))
        updated = self._replace_item(item.with_stock(
            item.current_stock + boost,
            last_update="Just resolved",
            prediction="Recently restocked",
        ))
        logger.info(
            f"알림 해결: {updated.name} {item.current_stock} → {updated.current_stock}"
            f"/{updated.max_capacity} ({updated.status.value})"
        )
        return updated

    def set_stock(
        self, item_id: int, stock: int,
        last_update: str = "Just updated",
        prediction: str = "Stock updated from delivery",
    ) -> Item:
        """재고 직접 설정 (clamp + 상태 재판정)"""
        item = self.get_item(item_id)
        return self._replace_item(item.with_stock(
            stock, last_update=last_update, prediction=prediction,
        ))

    def annotate_item(self, item_id: int, last_update: str, prediction: str) -> Item:
        """표시용 문구만 변경 (재고/상태 불변)"""
        item = self.get_item(item_id)
        return self._replace_item(replace(item, last_update=last_update, prediction=prediction))

    def schedule_restock(self, item_id: int, date_label: str, time_label: str) -> Item:
        return self.annotate_item(
            item_id,
            last_update="Scheduled for restock",
            prediction=f"Restock scheduled for {date_label} at {time_label}",
        )

    # ── 배송 ─────────────────────────────────────────────

    def restock_recommendations(self, limit: int = 3) -> list[Item]:
        """자동 주문 추천 대상 (critical/low 상품, 상품 순서)"""
        return [item for item in self._items if item.needs_restock][:limit]

    def auto_order(self, item_id: int, today: date | None = None) -> Delivery:
        return self.tracker.create_auto_order(self.get_item(item_id), today=today)

    def advance_delivery(self, delivery_id: int) -> Delivery:
        return self.tracker.advance(delivery_id)

    def cancel_delivery(self, delivery_id: int) -> Delivery:
        return self.tracker.cancel(delivery_id)

    def mark_delivered(
        self, delivery_id: int, today: date | None = None,
    ) -> tuple[Delivery, Item | None]:
        """
        배송완료 처리. 배송이 상품 id를 가지고 그 상품이 존재하면
        재고를 min(수량, 용량 - 현재 재고)만큼 올린다. 연결 상품이 없으면 재고 변경 없음.
        """
        delivery = self.tracker.mark_delivered(delivery_id, today=today)
        if delivery.item_id is None:
            return delivery, None
        try:
            item = self.get_item(delivery.item_id)
        except ItemNotFound:
            logger.warning(f"배송 #{delivery_id}: 연결 상품 {delivery.item_id} 없음, 재고 반영 생략")
            return delivery, None
        updated = self.set_stock(item.id, item.current_stock + delivery.quantity)
        logger.info(
            f"배송 재고 반영: {updated.name} {updated.current_stock}/{updated.max_capacity}"
        )
        return delivery, updated

    def reset(self):
        """초기 상태로 되돌림"""
        self._set_items(self._seed_items())
        self.tracker = DeliveryTracker(self._seed_deliveries())
        logger.info("[Reset] 인벤토리 초기화 완료")

    # ── 이벤트 ───────────────────────────────────────────

    def _alert_key(self) -> tuple:
        return tuple((a.id, a.urgency.value) for a in self._alerts)

    async def publish(self, topic: str, data: dict):
        """변경 이벤트 발행. 알림 집합이 마지막 발행 이후 바뀌었으면 alerts.changed도 발행."""
        if self.event_bus is None:
            return
        await self.event_bus.publish(topic, data)

        key = self._alert_key()
        if key != self._published_alerts:
            self._published_alerts = key
            await self.event_bus.publish("alerts.changed", {
                **self.alert_stats(),
                "alert_ids": [a.id for a in self._alerts],
            })


def build_controller(seed: int | None = None, event_bus: AsyncEventBus | None = None) -> InventoryController:
    """설정된 시드로 난수원을 만들어 컨트롤러 생성"""
    simulator = StockSimulator(rng=random.Random(seed))
    return InventoryController(simulator=simulator, event_bus=event_bus)

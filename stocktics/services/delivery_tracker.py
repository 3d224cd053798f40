"""
배송 트래커 — 배송 목록과 상태 전이 규칙

상태 전이:
  ordered → processing → shipped → delivered (종료)
  delivered/cancelled 외 모든 상태 → cancelled (종료)
  delayed는 타입에만 존재하며 이 버전의 전이로는 도달하지 않는다.

상품 재고 반영(배송완료 시)은 InventoryController가 담당한다.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import replace
from datetime import date, timedelta

from stocktics.exceptions import DeliveryNotFound, InvalidDeliveryTransition, RestockNotNeeded
from stocktics.models import Delivery, DeliveryPriority, DeliveryStatus, Item, StockStatus
from stocktics.models.delivery import NEXT_STATUS, TERMINAL_STATUSES
from stocktics.simulator.data_generator import supplier_for

logger = logging.getLogger(__name__)

AUTO_ORDER_RATIO = 0.8
AUTO_ORDER_LEAD_DAYS = 2

TABS = ("pending", "completed", "cancelled")


class DeliveryTracker:
    """배송 목록 소유자. 모든 변경은 목록 전체를 새 값으로 교체한다."""

    def __init__(self, deliveries: Iterable[Delivery] = ()):
        self._deliveries: list[Delivery] = list(deliveries)
        self._next_id = max((d.id for d in self._deliveries), default=0) + 1

    def snapshot(self) -> list[Delivery]:
        return list(self._deliveries)

    def by_tab(self, tab: str) -> list[Delivery]:
        if tab == "pending":
            return [d for d in self._deliveries if d.is_pending]
        if tab == "completed":
            return [d for d in self._deliveries if d.status == DeliveryStatus.DELIVERED]
        if tab == "cancelled":
            return [d for d in self._deliveries if d.status == DeliveryStatus.CANCELLED]
        raise ValueError(f"알 수 없는 탭: {tab}")

    def get(self, delivery_id: int) -> Delivery:
        for d in self._deliveries:
            if d.id == delivery_id:
                return d
        raise DeliveryNotFound(delivery_id)

    def _replace(self, updated: Delivery) -> Delivery:
        self._deliveries = [updated if d.id == updated.id else d for d in self._deliveries]
        return updated

    def create_auto_order(self, item: Item, today: date | None = None) -> Delivery:
        """critical/low 상품에 대해 용량의 80% 자동 주문 생성 (목록 맨 앞에 추가)"""
        if not item.needs_restock:
            raise RestockNotNeeded(item.id, item.status.value)

        today = today or date.today()
        delivery = Delivery(
            id=self._next_id,
            item_id=item.id,
            product_name=item.name,
            shelf=item.shelf,
            quantity=math.ceil(item.max_capacity * AUTO_ORDER_RATIO),
            supplier=supplier_for(item.name),
            order_date=today,
            estimated_delivery=today + timedelta(days=AUTO_ORDER_LEAD_DAYS),
            status=DeliveryStatus.ORDERED,
            priority=(
                DeliveryPriority.HIGH if item.status == StockStatus.CRITICAL
                else DeliveryPriority.MEDIUM
            ),
            auto_ordered=True,
        )
        self._next_id += 1
        self._deliveries = [delivery, *self._deliveries]
        logger.info(
            f"자동 주문 생성: #{delivery.id} {delivery.product_name} "
            f"| 수량 {delivery.quantity} | 공급사 {delivery.supplier}"
        )
        return delivery

    def advance(self, delivery_id: int) -> Delivery:
        """정상 경로로 한 단계 전진 (ordered → processing → shipped)"""
        delivery = self.get(delivery_id)
        target = NEXT_STATUS.get(delivery.status)
        if target is None:
            raise InvalidDeliveryTransition(delivery_id, delivery.status.value, "next")
        logger.info(f"배송 #{delivery_id}: {delivery.status.value} → {target.value}")
        return self._replace(replace(delivery, status=target))

    def mark_delivered(self, delivery_id: int, today: date | None = None) -> Delivery:
        delivery = self.get(delivery_id)
        if delivery.status != DeliveryStatus.SHIPPED:
            raise InvalidDeliveryTransition(
                delivery_id, delivery.status.value, DeliveryStatus.DELIVERED.value
            )
        logger.info(f"배송 #{delivery_id} 배송완료: {delivery.product_name} {delivery.quantity}개")
        return self._replace(replace(
            delivery,
            status=DeliveryStatus.DELIVERED,
            actual_delivery=today or date.today(),
        ))

    def cancel(self, delivery_id: int) -> Delivery:
        delivery = self.get(delivery_id)
        if delivery.status in TERMINAL_STATUSES:
            raise InvalidDeliveryTransition(
                delivery_id, delivery.status.value, DeliveryStatus.CANCELLED.value
            )
        logger.info(f"배송 #{delivery_id} 취소: {delivery.product_name}")
        return self._replace(replace(delivery, status=DeliveryStatus.CANCELLED))

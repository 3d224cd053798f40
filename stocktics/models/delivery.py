"""
재입고 배송(Delivery) — 주문 → 처리 → 출고 → 배송완료 상태 전이
"""

import enum
from dataclasses import dataclass
from datetime import date


class DeliveryStatus(str, enum.Enum):
    ORDERED = "ordered"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    DELAYED = "delayed"  # 타입에는 있으나 도달하는 전이가 없음
    CANCELLED = "cancelled"


class DeliveryPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# 정상 진행 경로: 한 단계씩 전진
NEXT_STATUS = {
    DeliveryStatus.ORDERED: DeliveryStatus.PROCESSING,
    DeliveryStatus.PROCESSING: DeliveryStatus.SHIPPED,
}

TERMINAL_STATUSES = frozenset({DeliveryStatus.DELIVERED, DeliveryStatus.CANCELLED})

# 진행률 표시 (%)
STATUS_PROGRESS = {
    DeliveryStatus.ORDERED: 25,
    DeliveryStatus.PROCESSING: 50,
    DeliveryStatus.SHIPPED: 75,
    DeliveryStatus.DELIVERED: 100,
    DeliveryStatus.DELAYED: 40,
    DeliveryStatus.CANCELLED: 0,
}


@dataclass(frozen=True)
class Delivery:
    id: int
    item_id: int | None  # 추적 상품과 연결되지 않은 주문이면 None
    product_name: str
    shelf: str
    quantity: int
    supplier: str
    order_date: date
    estimated_delivery: date
    status: DeliveryStatus
    priority: DeliveryPriority
    actual_delivery: date | None = None
    tracking_number: str | None = None
    auto_ordered: bool = False

    @property
    def progress(self) -> int:
        return STATUS_PROGRESS[self.status]

    @property
    def is_pending(self) -> bool:
        return self.status not in TERMINAL_STATUSES

"""
재고 알림(Alert) — 상품 상태에서 파생되는 값. 독립적으로 저장/삭제하지 않는다.
"""

import enum
from dataclasses import dataclass

from stocktics.models.item import StockStatus


class Urgency(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# 상품 상태 → 알림 긴급도 (good은 알림 없음)
URGENCY_BY_STATUS = {
    StockStatus.CRITICAL: Urgency.HIGH,
    StockStatus.LOW: Urgency.MEDIUM,
}


@dataclass(frozen=True)
class Alert:
    id: int  # 상품 id와 동일
    product: str
    shelf: str
    urgency: Urgency
    prediction: str
    product_id: int

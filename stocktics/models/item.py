"""
진열대 상품(Item) — 선반별 재고와 용량, 센서 방식, 파생 상태
"""

import enum
from dataclasses import dataclass, replace

# 재고 비율 임계값 (이하)
CRITICAL_RATIO = 0.2
LOW_RATIO = 0.4


class SensorType(str, enum.Enum):
    RFID = "RFID"
    CAMERA = "Camera"

    @property
    def alternate(self) -> "SensorType":
        return SensorType.CAMERA if self is SensorType.RFID else SensorType.RFID


class StockStatus(str, enum.Enum):
    CRITICAL = "critical"
    LOW = "low"
    GOOD = "good"


def clamp_stock(stock: int, max_capacity: int) -> int:
    return max(0, min(max_capacity, stock))


def classify_status(current_stock: int, max_capacity: int) -> StockStatus:
    """재고 비율로 상태 판정: ≤20% critical, ≤40% low, 그 외 good"""
    ratio = current_stock / max_capacity
    if ratio <= CRITICAL_RATIO:
        return StockStatus.CRITICAL
    if ratio <= LOW_RATIO:
        return StockStatus.LOW
    return StockStatus.GOOD


@dataclass(frozen=True)
class Item:
    """
    추적 중인 선반 상품.
    값 객체. 변경 시 with_stock()/replace()로 새 인스턴스를 만든다.
    status는 항상 current_stock/max_capacity에서 파생된다.
    """
    id: int
    name: str
    shelf: str
    current_stock: int
    max_capacity: int
    sensor: SensorType
    last_update: str
    prediction: str
    status: StockStatus = StockStatus.GOOD

    def __post_init__(self):
        if self.max_capacity <= 0:
            raise ValueError(f"max_capacity는 양수여야 합니다: {self.max_capacity}")
        # 생성 시점에도 불변식 보장 (clamp + 상태 파생)
        stock = clamp_stock(self.current_stock, self.max_capacity)
        object.__setattr__(self, "current_stock", stock)
        object.__setattr__(self, "status", classify_status(stock, self.max_capacity))

    @property
    def stock_percentage(self) -> float:
        return self.current_stock / self.max_capacity * 100

    @property
    def needs_restock(self) -> bool:
        return self.status in (StockStatus.CRITICAL, StockStatus.LOW)

    def with_stock(self, stock: int, **changes) -> "Item":
        """재고를 바꾼 새 Item 반환 (clamp/상태 재계산은 __post_init__에서)"""
        return replace(self, current_stock=stock, **changes)

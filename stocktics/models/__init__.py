"""
도메인 모델 패키지
- 모든 상태는 인메모리 값 객체(frozen dataclass)로 표현한다.
"""

from stocktics.models.item import Item, SensorType, StockStatus, classify_status
from stocktics.models.alert import Alert, Urgency
from stocktics.models.delivery import Delivery, DeliveryStatus, DeliveryPriority
from stocktics.models.notification import EmailMessage, NotificationType, NotificationResult

__all__ = [
    "Item",
    "SensorType",
    "StockStatus",
    "classify_status",
    "Alert",
    "Urgency",
    "Delivery",
    "DeliveryStatus",
    "DeliveryPriority",
    "EmailMessage",
    "NotificationType",
    "NotificationResult",
]

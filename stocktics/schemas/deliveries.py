"""
배송 관련 Pydantic 스키마
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel

from stocktics.models import DeliveryPriority, DeliveryStatus
from stocktics.schemas.common import NotificationResultResponse
from stocktics.schemas.inventory import ItemResponse


class DeliveryResponse(BaseModel):
    id: int
    item_id: int | None
    product_name: str
    shelf: str
    quantity: int
    supplier: str
    order_date: date
    estimated_delivery: date
    actual_delivery: date | None = None
    status: DeliveryStatus
    progress: int
    tracking_number: str | None = None
    priority: DeliveryPriority
    auto_ordered: bool

    model_config = {"from_attributes": True}


class DeliveryListResponse(BaseModel):
    tab: Literal["all", "pending", "completed", "cancelled"]
    counts: dict[str, int]
    deliveries: list[DeliveryResponse]


class AutoOrderRequest(BaseModel):
    item_id: int


class AutoOrderResponse(BaseModel):
    delivery: DeliveryResponse
    notification: NotificationResultResponse


class DeliveredResponse(BaseModel):
    delivery: DeliveryResponse
    item: ItemResponse | None = None  # 연결 상품이 없으면 재고 반영 없음
    message: str

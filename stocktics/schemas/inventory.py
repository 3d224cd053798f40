"""
상품 관련 Pydantic 스키마
"""

from typing import Literal

from pydantic import BaseModel, Field

from stocktics.models import SensorType, StockStatus
from stocktics.schemas.common import NotificationResultResponse


class ItemResponse(BaseModel):
    id: int
    name: str
    shelf: str
    current_stock: int
    max_capacity: int
    stock_percentage: float
    sensor: SensorType
    status: StockStatus
    last_update: str
    prediction: str

    model_config = {"from_attributes": True}


class ItemListResponse(BaseModel):
    total: int
    by_status: dict[str, int]
    items: list[ItemResponse]


class StockUpdateRequest(BaseModel):
    current_stock: int = Field(ge=0)


class ScheduleRestockRequest(BaseModel):
    date: str
    time: str
    priority: Literal["low", "normal", "high", "urgent"] = "normal"
    assigned_to: str = ""
    notes: str = ""


class ScheduleRestockResponse(BaseModel):
    item: ItemResponse
    notification: NotificationResultResponse

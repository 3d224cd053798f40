"""
알림 관련 Pydantic 스키마
"""

from pydantic import BaseModel

from stocktics.models import Urgency
from stocktics.schemas.common import NotificationResultResponse
from stocktics.schemas.inventory import ItemResponse


class AlertResponse(BaseModel):
    id: int
    product: str
    shelf: str
    urgency: Urgency
    prediction: str
    product_id: int

    model_config = {"from_attributes": True}


class AlertListResponse(BaseModel):
    total: int
    alerts: list[AlertResponse]


class AlertStatsResponse(BaseModel):
    total: int
    high: int
    medium: int
    low: int


class ResolveAlertResponse(BaseModel):
    message: str
    item: ItemResponse
    active_alerts: int


class ContactVendorRequest(BaseModel):
    vendor: str  # 공급사 선택 키 (예: "amul")
    message: str = ""


class ContactVendorResponse(BaseModel):
    alert_id: int
    notification: NotificationResultResponse

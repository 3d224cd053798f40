"""
공통 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    redis_connected: bool
    simulation_running: bool
    timestamp: datetime


class MessageResponse(BaseModel):
    message: str
    detail: str | None = None


class NotificationResultResponse(BaseModel):
    """워크플로 결과 메시지 (토스트에 해당)"""
    delivered: bool
    title: str
    description: str

    model_config = {"from_attributes": True}

"""
시뮬레이션 관련 Pydantic 스키마
"""

from typing import Literal
from pydantic import BaseModel


class SpeedRequest(BaseModel):
    speed: Literal[1, 5, 10]


class SpeedResponse(BaseModel):
    message: str
    speed: int


class TickResponse(BaseModel):
    tick: int
    active_alerts: int
    by_status: dict[str, int]
